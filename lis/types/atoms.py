"""Literal values: Integer, Real and Bool.

Each wraps one immutable host value and evaluates to itself. They compare by
variant and value, so Integer(5) and Real(5.0) are different values; numeric
equality across the two is the business of the primitive library.
"""

from __future__ import annotations

from decimal import Decimal


class Integer:
    __slots__ = ("value",)

    def __init__(self, value: int):
        self.value = int(value)

    def __eq__(self, other) -> bool:
        return isinstance(other, Integer) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Integer, self.value))

    def __repr__(self):
        return f"Integer({self})"

    def __str__(self):
        try:
            return str(self.value)
        except ValueError:
            # past sys.get_int_max_str_digits(); Decimal converts from the
            # binary digits directly and is not bound by that limit
            return format(Decimal(self.value), "f")


class Real:
    __slots__ = ("value",)

    def __init__(self, value: float):
        self.value = float(value)

    def __eq__(self, other) -> bool:
        return isinstance(other, Real) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Real, self.value))

    def __repr__(self):
        return f"Real({self.value!r})"

    def __str__(self):
        # repr keeps the decimal point, so a rendered Real reads back as a Real
        return repr(self.value)


class Bool:
    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = bool(value)

    @staticmethod
    def of(value: bool) -> Bool:
        return TRUE if value else FALSE

    def __eq__(self, other) -> bool:
        return isinstance(other, Bool) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Bool, self.value))

    def __repr__(self):
        return f"Bool({self.value!r})"

    def __str__(self):
        return "true" if self.value else "false"


TRUE = Bool(True)
FALSE = Bool(False)
