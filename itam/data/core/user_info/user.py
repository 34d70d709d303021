from itam.data.core.record_base import RecordBase
from itam import db


class User(RecordBase):
    """Person who can hold assets; not an application login"""
    __tablename__ = 'users'
    __table_args__ = (
        db.Index('idx_users_user_name', 'user_name'),
        db.Index('idx_users_status', 'status'),
        {'sqlite_autoincrement': True},
    )

    user_name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=True)
    department = db.Column(db.String(255), nullable=True)
    phone = db.Column(db.String(50), nullable=True)
    role = db.Column(db.String(100), nullable=True)
    status = db.Column(db.String(50), nullable=False, default='Active')
    assigned_assets = db.Column(db.Integer, nullable=False, default=0)

    def __repr__(self):
        return f'<User {self.user_name}>'
