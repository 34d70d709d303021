from itam.data.core.record_base import RecordBase
from itam import db


class License(RecordBase):
    __tablename__ = 'licenses'
    __table_args__ = (
        db.Index('idx_licenses_license_name', 'license_name'),
        db.Index('idx_licenses_status', 'status'),
        {'sqlite_autoincrement': True},
    )

    license_name = db.Column(db.String(255), nullable=False)
    license_type = db.Column(db.String(50), nullable=True)
    # Unique when present; NULLs never collide
    license_key = db.Column(db.String(255), unique=True, nullable=True)
    software_name = db.Column(db.String(255), nullable=True)
    vendor = db.Column(db.String(255), nullable=True)
    expiration_date = db.Column(db.Date, nullable=True)
    quantity = db.Column(db.Integer, nullable=False, default=1)
    status = db.Column(db.String(50), nullable=False, default='Active')
    cost = db.Column(db.Numeric(10, 2, asdecimal=False), nullable=False, default=0)

    def __repr__(self):
        return f'<License {self.license_name}>'
