"""
Typed field builders for record field bags

Each entity declares the fields a caller may write as a tuple of these
builders. A builder knows its column name, whether it is required on create,
its default, and how to coerce an incoming JSON value into the Python type
the column expects. Anything that cannot be coerced raises ValidationError.
"""

import math
from datetime import date, datetime
from typing import Any, Optional

from itam.buisness.core.errors import ValidationError

# Largest value a 32-bit signed INTEGER column holds
INTEGER_MAX = 2 ** 31 - 1


class Field:
    """Base builder: subclasses implement coerce()"""

    type_label = 'value'

    def __init__(self, name: str, required: bool = False, default: Any = None):
        self.name = name
        self.required = required
        self.default = default

    @property
    def has_default(self) -> bool:
        return self.default is not None

    def build(self, value: Any) -> Any:
        """Coerce a non-null value, raising ValidationError on failure"""
        try:
            return self.coerce(value)
        except (TypeError, ValueError, ArithmeticError):
            raise ValidationError(f"Invalid value for {self.name}: expected {self.type_label}")

    def coerce(self, value: Any) -> Any:
        raise NotImplementedError

    def __repr__(self):
        return f'<{type(self).__name__} {self.name}>'


class TextField(Field):
    type_label = 'text'

    def __init__(self, name: str, required: bool = False, default: Optional[str] = None,
                 max_length: int = 255):
        super().__init__(name, required=required, default=default)
        self.max_length = max_length

    def coerce(self, value):
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise TypeError(value)
        text = value if isinstance(value, str) else str(value)
        if self.max_length and len(text) > self.max_length:
            raise ValidationError(f"{self.name} must be at most {self.max_length} characters")
        return text


class IntegerField(Field):
    type_label = 'an integer'

    def __init__(self, name: str, required: bool = False, default: Optional[int] = None,
                 min_value: Optional[int] = 0, max_value: int = INTEGER_MAX):
        super().__init__(name, required=required, default=default)
        self.min_value = min_value
        self.max_value = max_value

    def coerce(self, value):
        if isinstance(value, bool):
            raise TypeError(value)
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(value)
            value = int(value)
        elif isinstance(value, str):
            value = int(value.strip())
        elif not isinstance(value, int):
            raise TypeError(value)
        if self.min_value is not None and value < self.min_value:
            raise ValidationError(f"{self.name} must be at least {self.min_value}")
        if value > self.max_value:
            raise ValidationError(f"{self.name} must be at most {self.max_value}")
        return value


class DecimalField(Field):
    """Money-style column; ``precision`` matches the column's Numeric(precision, 2)"""
    type_label = 'a number'

    def __init__(self, name: str, required: bool = False, default: Optional[float] = None,
                 min_value: Optional[float] = 0, precision: int = 10):
        super().__init__(name, required=required, default=default)
        self.min_value = min_value
        # Exclusive bound: precision digits, two of them after the point
        self.limit = 10 ** (precision - 2)

    def coerce(self, value):
        if isinstance(value, bool):
            raise TypeError(value)
        if isinstance(value, str):
            value = float(value.strip())
        elif isinstance(value, (int, float)):
            value = float(value)
        else:
            raise TypeError(value)
        if math.isnan(value) or math.isinf(value):
            raise ValueError(value)
        if self.min_value is not None and value < self.min_value:
            raise ValidationError(f"{self.name} must be at least {self.min_value}")
        value = round(value, 2)
        if abs(value) >= self.limit:
            raise ValidationError(f"{self.name} must be less than {self.limit}")
        return value


class BooleanField(Field):
    type_label = 'a boolean'

    TRUE_STRINGS = {'true', '1', 'yes', 'on'}
    FALSE_STRINGS = {'false', '0', 'no', 'off'}

    def coerce(self, value):
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in self.TRUE_STRINGS:
                return True
            if lowered in self.FALSE_STRINGS:
                return False
        raise ValueError(value)


class DateField(Field):
    """Calendar date, accepted as YYYY-MM-DD (a full ISO timestamp is truncated)"""
    type_label = 'an ISO date (YYYY-MM-DD)'

    def coerce(self, value):
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if not isinstance(value, str):
            raise TypeError(value)
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            return datetime.fromisoformat(text).date()


def is_blank(value: Any) -> bool:
    """True for values a caller leaves out: None or an all-whitespace string"""
    return value is None or (isinstance(value, str) and not value.strip())
