"""
Record Store (Core)
Provides the CRUD + search contract shared by every tracked entity.

Handles:
- Listing and searching, newest records first
- Lookups that return None when nothing matches
- Creation with per-entity defaults and required fields
- Partial updates restricted to an allow-list of typed fields
- Deletion returning the removed row

Stores receive the database session at construction; they never reach for
a global connection themselves.
"""

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError

from itam.buisness.core.errors import (
    ConflictError,
    InfrastructureError,
    RecordStoreError,
    ValidationError,
)
from itam.buisness.core.field_types import Field, is_blank
from itam.utils.logger import get_logger

logger = get_logger("itam.buisness.core.record_store")

READ_ONLY_FIELDS = frozenset({'id', 'created_at', 'updated_at'})


def escape_like(term: str, escape_char: str = '\\') -> str:
    """Escape LIKE wildcards so user input only ever matches literally"""
    return (
        term.replace(escape_char, escape_char * 2)
            .replace('%', escape_char + '%')
            .replace('_', escape_char + '_')
    )


class RecordStore:
    """
    Base store for one entity.

    Subclasses set:
    - model: the SQLAlchemy model class
    - fields: tuple of Field builders a caller may write
    - search_columns: text columns matched by search()
    - label: human readable entity name used in messages
    """

    model = None
    fields: Tuple[Field, ...] = ()
    search_columns: Tuple[str, ...] = ()
    label = 'Record'

    def __init__(self, session):
        self.session = session
        self._fields_by_name = {field.name: field for field in self.fields}

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def _ordered(self, query):
        return query.order_by(self.model.created_at.desc(), self.model.id.desc())

    def list_all(self) -> List[Dict[str, Any]]:
        with self._unit_of_work('listing'):
            records = self._ordered(self.session.query(self.model)).all()
            return [record.to_dict() for record in records]

    def get(self, record_id: int) -> Optional[Dict[str, Any]]:
        with self._unit_of_work('fetching'):
            record = self.session.get(self.model, record_id)
            return record.to_dict() if record is not None else None

    def search(self, term: str) -> List[Dict[str, Any]]:
        """
        Case-insensitive substring match over the entity's search columns.

        Args:
            term: Text to look for; blank returns every row

        Returns:
            Matching rows, newest first
        """
        if is_blank(term):
            return self.list_all()

        pattern = f"%{escape_like(term.strip())}%"
        criteria = [
            getattr(self.model, column).ilike(pattern, escape='\\')
            for column in self.search_columns
        ]
        with self._unit_of_work('searching'):
            query = self.session.query(self.model).filter(or_(*criteria))
            return [record.to_dict() for record in self._ordered(query).all()]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a record from a field bag, applying defaults for omitted fields.

        Raises:
            ValidationError: Malformed bag, unknown keys or missing required fields
            ConflictError: A unique column already holds the value
        """
        values = self.build_create_values(data)
        with self._unit_of_work('creating'):
            record = self.model.from_dict(values, timestamp=datetime.now(timezone.utc))
            self.session.add(record)
            self.session.commit()
            logger.info(f"Created {self.label} {record.id}")
            return record.to_dict()

    def update(self, record_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Apply the non-null fields of a bag to an existing record.

        The bag is validated before the database is touched, so an empty or
        malformed bag never results in a write.

        Returns:
            The updated row, or None when no record has this id
        """
        values = self.build_update_values(data)
        with self._unit_of_work('updating'):
            record = self.session.get(self.model, record_id)
            if record is None:
                return None
            record.apply_dict(values, timestamp=datetime.now(timezone.utc))
            self.session.commit()
            logger.info(f"Updated {self.label} {record_id}: {', '.join(sorted(values))}")
            return record.to_dict()

    def delete(self, record_id: int) -> Optional[Dict[str, Any]]:
        """Remove a record; returns the deleted row, or None when it did not exist"""
        with self._unit_of_work('deleting'):
            record = self.session.get(self.model, record_id)
            if record is None:
                return None
            row = record.to_dict()
            self.session.delete(record)
            self.session.commit()
            logger.info(f"Deleted {self.label} {record_id}")
            return row

    # ------------------------------------------------------------------
    # Field bag validation
    # ------------------------------------------------------------------

    def _writable_items(self, data: Any) -> Dict[str, Any]:
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")

        unknown = sorted(
            str(key) for key in data
            if key not in self._fields_by_name and key not in READ_ONLY_FIELDS
        )
        if unknown:
            raise ValidationError(f"Unknown {self.label.lower()} field(s): {', '.join(unknown)}")

        return {key: value for key, value in data.items() if key in self._fields_by_name}

    def build_create_values(self, data: Any) -> Dict[str, Any]:
        bag = self._writable_items(data)
        values = {}
        missing = []

        for field in self.fields:
            raw = bag.get(field.name)
            if is_blank(raw):
                if field.required:
                    missing.append(field.name)
                elif field.has_default:
                    values[field.name] = field.default
                else:
                    values[field.name] = None
                continue
            values[field.name] = field.build(raw)

        if missing:
            raise ValidationError(f"Missing required field(s): {', '.join(missing)}")
        return values

    def build_update_values(self, data: Any) -> Dict[str, Any]:
        bag = self._writable_items(data)
        values = {}

        for name, raw in bag.items():
            if raw is None:
                continue
            field = self._fields_by_name[name]
            if is_blank(raw):
                if field.required or field.has_default:
                    raise ValidationError(f"{name} cannot be empty")
                values[name] = None
                continue
            values[name] = field.build(raw)

        if not values:
            raise ValidationError("No fields to update")
        return values

    # ------------------------------------------------------------------
    # Error translation
    # ------------------------------------------------------------------

    def _conflict_message(self, error: IntegrityError) -> str:
        detail = str(getattr(error, 'orig', error)).lower()
        for column in self.model.__table__.columns:
            if column.unique and column.name in detail:
                return f"{self.label} with this {column.name} already exists"
        return f"{self.label} violates a uniqueness constraint"

    @contextmanager
    def _unit_of_work(self, action: str):
        try:
            yield
        except RecordStoreError:
            self.session.rollback()
            raise
        except IntegrityError as e:
            self.session.rollback()
            logger.warning(f"Conflict while {action} {self.label}: {e.orig}")
            raise ConflictError(self._conflict_message(e)) from e
        except DataError as e:
            self.session.rollback()
            logger.warning(f"Rejected value while {action} {self.label}: {e.orig}")
            raise ValidationError(f"Invalid value for {self.label.lower()}") from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Database error while {action} {self.label}: {e}", exc_info=True)
            raise InfrastructureError(f"Database error while {action} {self.label.lower()}") from e
        except Exception:
            self.session.rollback()
            raise
