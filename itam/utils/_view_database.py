#!/usr/bin/env python3
"""
Database Viewer for the IT asset tracker
Prints every record table (schema and rows) of the configured database
"""

from datetime import date, datetime
from sqlalchemy import inspect, select
from tabulate import tabulate
from itam.utils.logger import get_logger

logger = get_logger("itam.utils.view_database")


def format_data_for_display(rows):
    """Convert every value to a display string"""
    formatted_rows = []
    for row in rows:
        formatted_row = []
        for value in row:
            if value is None:
                formatted_row.append("NULL")
            elif isinstance(value, bool):
                formatted_row.append("True" if value else "False")
            elif isinstance(value, (datetime, date)):
                formatted_row.append(value.isoformat())
            else:
                formatted_row.append(str(value))
        formatted_rows.append(formatted_row)
    return formatted_rows


def render_table(table, connection):
    """
    Render one table's schema and data as text

    Args:
        table: SQLAlchemy Table
        connection: Open SQLAlchemy connection

    Returns:
        str: Schema grid followed by data grid
    """
    schema_rows = [
        [
            column.name,
            str(column.type),
            "YES" if column.nullable else "NO",
            "YES" if column.primary_key else "NO",
            "YES" if column.unique else "NO",
        ]
        for column in table.columns
    ]
    schema = tabulate(schema_rows, headers=["Column", "Type", "Nullable", "Primary Key", "Unique"], tablefmt="grid")

    rows = connection.execute(select(table).order_by(table.c.id)).fetchall()
    if rows:
        data = tabulate(format_data_for_display(rows), headers=[c.name for c in table.columns], tablefmt="grid")
    else:
        data = "(No data)"

    return (
        f"{'=' * 80}\nTABLE: {table.name.upper()}\n{'=' * 80}\n"
        f"SCHEMA:\n{schema}\n\nDATA ({len(rows)} rows):\n{data}"
    )


def show_database(app):
    """Log every record table of the app's database"""
    from itam import db
    from itam.data.core import RECORD_MODELS

    with app.app_context():
        existing = set(inspect(db.engine).get_table_names())
        logger.info(f"Database: {db.engine.url.render_as_string(hide_password=True)}")
        with db.engine.connect() as connection:
            for model in RECORD_MODELS:
                table = model.__table__
                if table.name not in existing:
                    logger.info(f"TABLE: {table.name.upper()} (missing)")
                    continue
                logger.info("\n" + render_table(table, connection))
