"""
Test the database viewer's formatting and table rendering
"""

from datetime import date, datetime

from itam import db
from itam.data.core import Asset, License
from itam.utils._view_database import format_data_for_display, render_table


def test_format_data_for_display():
    rows = [(1, None, True, False, date(2027, 3, 31), datetime(2026, 1, 2, 3, 4, 5), 12.5)]

    assert format_data_for_display(rows) == [
        ['1', 'NULL', 'True', 'False', '2027-03-31', '2026-01-02T03:04:05', '12.5']
    ]


def test_render_empty_table(app):
    with db.engine.connect() as connection:
        text = render_table(License.__table__, connection)

    assert 'TABLE: LICENSES' in text
    assert 'SCHEMA:' in text
    assert 'license_key' in text
    assert 'DATA (0 rows):' in text
    assert '(No data)' in text


def test_render_table_with_rows(app, stores):
    stores['assets'].create({'asset_tag': 'A-1', 'asset_type': 'hardware', 'manufacturer': 'Dell Inc'})
    stores['assets'].create({'asset_tag': 'A-2', 'asset_type': 'software'})

    with db.engine.connect() as connection:
        text = render_table(Asset.__table__, connection)

    assert 'TABLE: ASSETS' in text
    assert 'DATA (2 rows):' in text
    assert 'Dell Inc' in text
    assert 'NULL' in text, "Missing manufacturer should render as NULL"
