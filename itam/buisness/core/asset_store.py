"""
Asset Store
Record store for hardware and software assets, plus tag lookup and dashboard counts.
"""

from typing import Any, Dict, Optional

from sqlalchemy import case, func

from itam.buisness.core.field_types import BooleanField, DecimalField, TextField
from itam.buisness.core.record_store import RecordStore
from itam.data.core.asset_info.asset import Asset

STATUS_IN_USE = 'In Use'
STATUS_RETIRED = 'Retired'


class AssetStore(RecordStore):
    model = Asset
    label = 'Asset'
    fields = (
        TextField('asset_tag', required=True),
        TextField('asset_type', required=True, max_length=50),
        TextField('manufacturer'),
        TextField('model'),
        TextField('serial_number'),
        TextField('assigned_user_name'),
        TextField('status', default=STATUS_IN_USE, max_length=50),
        DecimalField('cost', default=0),
        BooleanField('discovered', default=False),
    )
    search_columns = ('asset_tag', 'manufacturer', 'model', 'assigned_user_name')

    def get_by_tag(self, asset_tag: str) -> Optional[Dict[str, Any]]:
        """Look up an asset by its unique tag; None when no asset carries it"""
        with self._unit_of_work('fetching'):
            record = self.session.query(Asset).filter(Asset.asset_tag == asset_tag).first()
            return record.to_dict() if record is not None else None

    def stats(self) -> Dict[str, int]:
        """
        Asset counts for the dashboard, computed in a single aggregate query.

        Returns:
            dict with total_assets, in_use, discovered and retired
        """
        with self._unit_of_work('counting'):
            row = self.session.query(
                func.count(Asset.id).label('total_assets'),
                func.count(case((Asset.status == STATUS_IN_USE, 1))).label('in_use'),
                func.count(case((Asset.discovered.is_(True), 1))).label('discovered'),
                func.count(case((Asset.status == STATUS_RETIRED, 1))).label('retired'),
            ).one()

        return {
            'total_assets': int(row.total_assets or 0),
            'in_use': int(row.in_use or 0),
            'discovered': int(row.discovered or 0),
            'retired': int(row.retired or 0),
        }
