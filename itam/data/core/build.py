"""
Core models build module for the IT asset tracker
Creates the record tables and their indexes, then verifies them against the catalog
"""

from sqlalchemy import inspect
from itam import db
from itam.buisness.core.errors import SchemaInitializationError
from itam.utils.logger import get_logger

logger = get_logger("itam.models.core")


def expected_schema():
    """
    Tables and index names the models declare

    Returns:
        dict: table name -> set of index names
    """
    from itam.data.core import RECORD_MODELS

    return {
        model.__table__.name: {index.name for index in model.__table__.indexes}
        for model in RECORD_MODELS
    }


def build_models():
    """
    Create every record table and index that does not exist yet.
    Each statement checks the catalog first, so repeated calls are no-ops.
    """
    from itam.data.core import RECORD_MODELS

    tables = [model.__table__ for model in RECORD_MODELS]
    for table in tables:
        logger.debug(f"Creating table {table.name} if not exists")
    db.metadata.create_all(bind=db.engine, tables=tables, checkfirst=True)
    logger.info("Core models build completed")


def describe_schema():
    """
    Read the live catalog for the record tables

    Returns:
        dict: table name -> set of index names, for record tables that exist
    """
    inspector = inspect(db.engine)
    existing = set(inspector.get_table_names())
    return {
        table: {index['name'] for index in inspector.get_indexes(table)}
        for table in expected_schema()
        if table in existing
    }


def verify_schema():
    """
    Confirm that all record tables and their indexes exist

    Raises:
        SchemaInitializationError: If any table or index is missing
    """
    expected = expected_schema()
    actual = describe_schema()

    missing_tables = sorted(set(expected) - set(actual))
    if missing_tables:
        raise SchemaInitializationError(f"Table verification failed, missing: {', '.join(missing_tables)}")

    missing_indexes = sorted(
        name
        for table, indexes in expected.items()
        for name in indexes - actual[table]
    )
    if missing_indexes:
        raise SchemaInitializationError(f"Index verification failed, missing: {', '.join(missing_indexes)}")

    logger.info("Database tables initialized successfully")
