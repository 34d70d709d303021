from itam.buisness.core.field_types import DateField, DecimalField, IntegerField, TextField
from itam.buisness.core.record_store import RecordStore
from itam.data.core.license_info.license import License


class LicenseStore(RecordStore):
    """Software licenses; the key is unique only when one is recorded"""
    model = License
    label = 'License'
    fields = (
        TextField('license_name', required=True),
        TextField('license_type', max_length=50),
        TextField('license_key'),
        TextField('software_name'),
        TextField('vendor'),
        DateField('expiration_date'),
        IntegerField('quantity', default=1),
        TextField('status', default='Active', max_length=50),
        DecimalField('cost', default=0),
    )
    search_columns = ('license_name', 'software_name', 'vendor', 'license_key')
