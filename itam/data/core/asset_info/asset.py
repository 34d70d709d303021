from itam.data.core.record_base import RecordBase
from itam import db


class Asset(RecordBase):
    __tablename__ = 'assets'
    __table_args__ = (
        db.Index('idx_assets_asset_tag', 'asset_tag'),
        db.Index('idx_assets_status', 'status'),
        {'sqlite_autoincrement': True},
    )

    asset_tag = db.Column(db.String(255), unique=True, nullable=False)
    asset_type = db.Column(db.String(50), nullable=False)
    manufacturer = db.Column(db.String(255), nullable=True)
    model = db.Column(db.String(255), nullable=True)
    serial_number = db.Column(db.String(255), unique=True, nullable=True)
    # Free-text name, not a reference to the users table
    assigned_user_name = db.Column(db.String(255), nullable=True)
    status = db.Column(db.String(50), nullable=False, default='In Use')
    cost = db.Column(db.Numeric(10, 2, asdecimal=False), nullable=False, default=0)
    discovered = db.Column(db.Boolean, nullable=False, default=False)

    def __repr__(self):
        return f'<Asset {self.asset_tag} ({self.serial_number})>'
