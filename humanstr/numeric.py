"""
Numeric kinds accepted by the humanstr formatters.

Formatting operations are generic over a closed family of kinds: Integer,
Ordered, Signed, Unsigned and String. Python has no compile-time constraints,
so every kind is a runtime coercion that converts an accepted value to a
common representation (int, float, str or bytes) and raises TypeError for
anything outside the kind.

Values from Python stdlib and third-party libraries (NumPy scalars, 0-d arrays
and tensors, Decimal, Fraction) are normalized through the same duck-typing
protocols: __index__, .item(), __int__ and __float__.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from collections.abc import Sequence
from enum import StrEnum, unique
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class NumericKind(StrEnum):
    """
    Kinds of values accepted by the formatting operations.

    Attributes:
        INTEGER (str)  : Signed or Unsigned integer - append_size()
        ORDERED (str)  : Integer or floating point - append_cardinal(), Ratio
        SIGNED (str)   : Any integer - append_int()
        UNSIGNED (str) : Non-negative integer - append_uint()
        STRING (str)   : str, bytes-like, a code point or a sequence of code points - append_quote()
    """
    INTEGER = "integer"
    ORDERED = "ordered"
    SIGNED = "signed"
    UNSIGNED = "unsigned"
    STRING = "string"


# Methods --------------------------------------------------------------------------------------------------------------

def as_integer(value: Any) -> int:
    """
    Convert a value of the Integer kind to Python int.

    Accepts int, types implementing __index__ (NumPy integers), array scalars
    whose .item() is an int, and integer-valued Decimal or Fraction.

    Raises:
        TypeError: If value is a bool, a float or any other non-integer type.

    Examples:
        >>> as_integer(42)
        42
        >>> from decimal import Decimal
        >>> as_integer(Decimal("42.0"))
        42
        >>> as_integer(4.2)
        Traceback (most recent call last):
            ...
        TypeError: integer value required, got <type: float>
    """
    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported, got {value}")

    # Fast path, Python int has arbitrary precision
    if isinstance(value, int):
        return value

    # NumPy integer types implement __index__, floats do not
    if hasattr(value, "__index__"):
        try:
            return operator.index(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e

    # Array/tensor scalars
    if hasattr(value, "item") and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, int) and not isinstance(result, bool):
            return result

    # Integer-valued Decimal and Fraction
    if type(value).__name__ in ("Decimal", "Fraction") and hasattr(value, "__int__"):
        try:
            as_int = int(value)
        except (TypeError, ValueError, OverflowError):
            as_int = None
        if as_int is not None and value == type(value)(as_int):
            return as_int

    raise TypeError(f"integer value required, got {fmt_type(value)}")


def as_signed(value: Any) -> int:
    """Convert a value of the Signed kind to int, see as_integer()."""
    return as_integer(value)


def as_unsigned(value: Any) -> int:
    """
    Convert a value of the Unsigned kind to int.

    Raises:
        TypeError: If value is not of the Integer kind.
        ValueError: If value is negative.
    """
    value = as_integer(value)
    if value < 0:
        raise ValueError(f"unsigned value must be >= 0, got {value}")
    return value


def as_ordered(value: Any) -> int | float:
    """
    Convert a value of the Ordered kind to Python int or float.

    Integer inputs stay int so that precision is not lost before the final
    float conversion, other real-number-like inputs become float.

    Detection priority:
        1. bool → TypeError
        2. int, float → unchanged
        3. __index__ → int (NumPy integers)
        4. .item() → int or float (array scalars, tensors), bool → TypeError
        5. integer-valued Decimal/Fraction → int
        6. __float__ → float (Decimal, Fraction, NumPy floats)

    Raises:
        TypeError: If value is not real-number-like.

    Examples:
        >>> as_ordered(3.5)
        3.5
        >>> from fractions import Fraction
        >>> as_ordered(Fraction(1, 4))
        0.25
        >>> as_ordered("3.5")
        Traceback (most recent call last):
            ...
        TypeError: ordered numeric value required, got <type: str>
    """
    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported, got {value}")

    if isinstance(value, (int, float)):
        return value

    try:
        return as_integer(value)
    except TypeError:
        pass

    if hasattr(value, "item") and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, bool):
            raise TypeError(f"boolean values not supported (from .item()), got {fmt_type(value)}")
        if isinstance(result, float):
            return result

    if hasattr(value, "__float__"):
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e

    raise TypeError(f"ordered numeric value required, got {fmt_type(value)}")


def as_string(value: Any) -> str | bytes:
    """
    Convert a value of the String kind to str or bytes.

    - str is returned unchanged
    - bytes, bytearray and memoryview become bytes, they may hold invalid UTF-8
    - a single code point (byte or rune given as int) becomes a one-character str
    - a sequence of code points becomes a str

    Code points outside the Unicode range and surrogates are replaced by U+FFFD.

    Raises:
        TypeError: If value is not of the String kind.

    Examples:
        >>> as_string(0x263A)
        '☺'
        >>> as_string([0x48, 0x69])
        'Hi'
        >>> as_string(bytearray(b"\\xff"))
        b'\\xff'
    """
    if isinstance(value, str):
        return value

    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)

    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported, got {value}")

    if isinstance(value, int) or hasattr(value, "__index__"):
        return _rune(as_integer(value))

    if isinstance(value, Sequence):
        try:
            return "".join(_rune(as_integer(r)) for r in value)
        except TypeError as e:
            raise TypeError(f"sequence of code points required: {e}") from e

    raise TypeError(f"string value required, got {fmt_type(value)}")


def as_kind(value: Any, kind: NumericKind | str) -> int | float | str | bytes:
    """Convert value to the common representation of the given NumericKind."""
    converters = {
        NumericKind.INTEGER: as_integer,
        NumericKind.ORDERED: as_ordered,
        NumericKind.SIGNED: as_signed,
        NumericKind.UNSIGNED: as_unsigned,
        NumericKind.STRING: as_string,
    }
    return converters[NumericKind(kind)](value)


def to_float(value: int | float) -> float:
    """
    Convert an int or float to float, ints beyond the float range become signed infinity.

    Examples:
        >>> to_float(3)
        3.0
        >>> to_float(-10**400)
        -inf
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _rune(code_point: int) -> str:
    if 0 <= code_point <= 0x10FFFF and not 0xD800 <= code_point <= 0xDFFF:
        return chr(code_point)
    return "\ufffd"
