from itam import db
from datetime import datetime, timezone
from itam.buisness.core.data_insertion_mixin import DataInsertionMixin


def utc_now():
    return datetime.now(timezone.utc)


class RecordBase(db.Model, DataInsertionMixin):
    """Abstract base class for all tracked records with generated id and audit timestamps"""

    __abstract__ = True

    id = db.Column(db.Integer, primary_key=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utc_now)

    def __repr__(self):
        return f'<{type(self).__name__} {self.id}>'
