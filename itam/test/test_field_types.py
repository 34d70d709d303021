"""
Test the typed field builders used to validate field bags.
"""

from datetime import date

import pytest

from itam.buisness.core.errors import ValidationError
from itam.buisness.core.field_types import (
    BooleanField,
    DateField,
    DecimalField,
    INTEGER_MAX,
    IntegerField,
    TextField,
    is_blank,
)


def test_text_field():
    field = TextField('model', max_length=5)
    assert field.build('XPS') == 'XPS'
    assert field.build(13) == '13', "Numbers are stored as their text"

    with pytest.raises(ValidationError):
        field.build('Latitude')
    with pytest.raises(ValidationError):
        field.build(True)
    with pytest.raises(ValidationError):
        field.build({'name': 'XPS'})


def test_integer_field():
    field = IntegerField('quantity')
    assert field.build(3) == 3
    assert field.build('12') == 12
    assert field.build(4.0) == 4

    for bad in (4.5, -1, 'many', True, [1]):
        with pytest.raises(ValidationError):
            field.build(bad)


def test_decimal_field():
    field = DecimalField('cost')
    assert field.build(1299) == 1299.0
    assert field.build('19.999') == 20.0
    assert field.build(0.1) == 0.1

    for bad in ('free', float('nan'), float('inf'), -5, False):
        with pytest.raises(ValidationError):
            field.build(bad)


def test_boolean_field():
    field = BooleanField('discovered', default=False)
    assert field.has_default, "False is still a default"

    for truthy in (True, 1, 'true', 'YES', ' on '):
        assert field.build(truthy) is True
    for falsy in (False, 0, 'false', 'No', 'off'):
        assert field.build(falsy) is False

    for bad in (2, 'maybe', [True]):
        with pytest.raises(ValidationError):
            field.build(bad)


def test_date_field():
    field = DateField('expiration_date')
    assert field.build('2027-03-31') == date(2027, 3, 31)
    assert field.build('2027-03-31T12:30:00') == date(2027, 3, 31)
    assert field.build(date(2026, 1, 1)) == date(2026, 1, 1)

    for bad in ('31/03/2027', 'soon', 20270331):
        with pytest.raises(ValidationError) as exc_info:
            field.build(bad)
        assert 'expiration_date' in exc_info.value.message


def test_defaults_and_required_flags():
    assert TextField('status', default='Active').has_default
    assert not TextField('vendor').has_default
    assert TextField('asset_tag', required=True).required


def test_is_blank():
    assert is_blank(None)
    assert is_blank('')
    assert is_blank('   ')
    assert not is_blank('x')
    assert not is_blank(0)
    assert not is_blank(False)


def test_integer_field_upper_bound():
    field = IntegerField('quantity')
    assert field.build(INTEGER_MAX) == INTEGER_MAX

    for bad in (INTEGER_MAX + 1, 10 ** 20, '99999999999999999999'):
        with pytest.raises(ValidationError) as exc_info:
            field.build(bad)
        assert 'at most' in exc_info.value.message


def test_decimal_field_respects_column_precision():
    cost = DecimalField('cost')
    assert cost.build(99999999.99) == 99999999.99
    for bad in (100000000, 123456789012.5, '1e12', 10 ** 400):
        with pytest.raises(ValidationError):
            cost.build(bad)

    contract_value = DecimalField('contract_value', precision=12)
    assert contract_value.build(123456789.5) == 123456789.5
    with pytest.raises(ValidationError):
        contract_value.build(10 ** 10)
