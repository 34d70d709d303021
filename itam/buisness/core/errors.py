"""
Domain exceptions for the record stores

Every failure a store can report is one of a closed set of kinds. Callers
branch on ``error.kind`` rather than on message text; the HTTP layer maps
each kind to a status code in one place.
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of store failure kinds"""
    NOT_FOUND = 'not_found'
    VALIDATION = 'validation'
    CONFLICT = 'conflict'
    INFRASTRUCTURE = 'infrastructure'


HTTP_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INFRASTRUCTURE: 500,
}


class RecordStoreError(Exception):
    """Base exception for all record store errors"""
    kind = ErrorKind.INFRASTRUCTURE

    def __init__(self, message, kind=None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind

    @property
    def http_status(self):
        return HTTP_STATUS_BY_KIND[self.kind]

    def to_dict(self):
        return {'error': self.message, 'code': self.kind.value}


class NotFoundError(RecordStoreError):
    """Raised when a record must exist but does not (lookups return None instead)"""
    kind = ErrorKind.NOT_FOUND


class ValidationError(RecordStoreError):
    """Raised when a field bag or identifier is malformed"""
    kind = ErrorKind.VALIDATION


class ConflictError(RecordStoreError):
    """Raised when a write violates a uniqueness constraint"""
    kind = ErrorKind.CONFLICT


class InfrastructureError(RecordStoreError):
    """Raised when the database is unreachable or misbehaves"""
    kind = ErrorKind.INFRASTRUCTURE


class SchemaInitializationError(InfrastructureError):
    """Raised when tables or indexes are missing after schema creation"""
    pass
