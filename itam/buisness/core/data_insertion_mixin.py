"""
Generic data insertion mixin for SQLAlchemy models
Provides from_dict, apply_dict and to_dict for record stores

Values handed to these methods have already been filtered through an entity's
field builders; the mixin only checks that every key is a mapped column so a
stray key can never reach an INSERT or UPDATE.
"""

from datetime import date, datetime, timezone
from sqlalchemy import inspect
from itam.utils.logger import get_logger

logger = get_logger("itam.buisness.core.data_insertion")


class DataInsertionMixin:
    """
    Mixin that provides data insertion capabilities for SQLAlchemy models

    This mixin adds:
    - column_names(): Names of the mapped columns
    - from_dict(): Create an instance stamped with creation/update timestamps
    - apply_dict(): Apply a partial update and refresh the update timestamp
    - to_dict(): Convert an instance into a JSON-ready dictionary
    """

    @classmethod
    def column_names(cls):
        return [column.key for column in inspect(cls).columns]

    @classmethod
    def _check_columns(cls, data_dict):
        unknown = set(data_dict) - set(cls.column_names())
        if unknown:
            raise KeyError(f"{cls.__name__} has no column(s): {', '.join(sorted(unknown))}")

    @classmethod
    def from_dict(cls, data_dict, timestamp=None):
        """
        Create a model instance from a dictionary of column values

        Args:
            data_dict (dict): Column values, already validated
            timestamp (datetime, optional): Value for both created_at and updated_at

        Returns:
            Model instance (not saved to database)
        """
        cls._check_columns(data_dict)
        timestamp = timestamp or datetime.now(timezone.utc)
        instance = cls(**data_dict)
        instance.created_at = timestamp
        instance.updated_at = timestamp
        return instance

    def apply_dict(self, data_dict, timestamp=None):
        """
        Apply a partial update to this instance

        Args:
            data_dict (dict): Column values to change, already validated
            timestamp (datetime, optional): New updated_at value
        """
        self._check_columns(data_dict)
        for key, value in data_dict.items():
            setattr(self, key, value)
        self.updated_at = timestamp or datetime.now(timezone.utc)

    def to_dict(self):
        """
        Convert model instance to dictionary

        Timestamps are rendered as ISO 8601 in UTC; naive values read back
        from backends without time zone support are taken to be UTC.

        Returns:
            dict: Dictionary representation of the model
        """
        result = {}
        for column in inspect(self.__class__).columns:
            value = getattr(self, column.key)
            if isinstance(value, datetime):
                if value.tzinfo is None:
                    value = value.replace(tzinfo=timezone.utc)
                result[column.key] = value.astimezone(timezone.utc).isoformat()
            elif isinstance(value, date):
                result[column.key] = value.isoformat()
            else:
                result[column.key] = value
        return result
