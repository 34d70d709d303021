from itam.data.core.record_base import RecordBase
from itam import db


class Contract(RecordBase):
    __tablename__ = 'contracts'
    __table_args__ = (
        db.Index('idx_contracts_contract_name', 'contract_name'),
        db.Index('idx_contracts_status', 'status'),
        {'sqlite_autoincrement': True},
    )

    contract_name = db.Column(db.String(255), nullable=False)
    vendor = db.Column(db.String(255), nullable=True)
    contract_type = db.Column(db.String(50), nullable=True)
    start_date = db.Column(db.Date, nullable=True)
    end_date = db.Column(db.Date, nullable=True)
    contract_value = db.Column(db.Numeric(12, 2, asdecimal=False), nullable=False, default=0)
    status = db.Column(db.String(50), nullable=False, default='Active')
    renewal_date = db.Column(db.Date, nullable=True)
    contact_person = db.Column(db.String(255), nullable=True)
    contact_email = db.Column(db.String(255), nullable=True)

    def __repr__(self):
        return f'<Contract {self.contract_name}>'
