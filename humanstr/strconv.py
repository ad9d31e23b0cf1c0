"""
Human-readable conversions of numbers to text appended to byte buffers.

Every append_* operation takes a buffer and returns the extended buffer:
a bytearray is extended in place and returned, bytes yield a new bytes
object holding the original content followed by the rendered text.
The fmt_* counterparts return the rendered text as str.

Scaled values pick the largest unit of a unit table in which the value stays
below UnitsConf.THRESHOLD, and render with 0 decimal digits in the base unit,
2 decimal digits in any other unit:

    >>> fmt_cardinal(42)
    '42'
    >>> fmt_cardinal(1500)
    '1.50 thousand'
    >>> fmt_size(0)
    '0 byte'
    >>> Ratio(50, 200).fmt_percent()
    '25.00%'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from collections.abc import Iterable
from dataclasses import InitVar, dataclass, field
from typing import Any, Iterator, TypeVar

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import as_integer, as_ordered, as_signed, as_string, as_unsigned, to_float
from .units import CARDINAL_UNITS, PERCENT_UNITS, RATE_UNITS, SIZE_UNITS, Unit, as_units, select_unit
from .utils import fmt_type

# Constants ------------------------------------------------------------------------------------------------------------

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_ESCAPES = {
    "\a": "\\a", "\b": "\\b", "\f": "\\f", "\n": "\\n",
    "\r": "\\r", "\t": "\\t", "\v": "\\v",
    '"': '\\"', "\\": "\\\\",
}

Buffer = TypeVar("Buffer", bytes, bytearray)


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Ratio:
    """
    A dimensionless value/total quotient rendered as a percentage or a byte rate.

    The ratio is 0 when total is 0, otherwise value / total as float. It is not
    clamped to [0, 1]. A single argument wraps an already computed ratio.

    Examples:
        >>> Ratio(1, 4).ratio
        0.25
        >>> Ratio(5, 0).fmt_percent()
        '0.00%'
        >>> Ratio(3_000_000, 2).fmt_rate()
        '1.50 megabyte/s'
    """

    value: InitVar[Any]
    total: InitVar[Any] = 1
    ratio: float = field(init=False, default=0.0)

    def __post_init__(self, value: Any, total: Any):
        value = as_ordered(value)
        total = as_ordered(total)
        ratio = 0.0 if total == 0 else to_float(value) / to_float(total)
        object.__setattr__(self, 'ratio', ratio)

    def __float__(self) -> float:
        return self.ratio

    def append_percent(self, b: Buffer) -> Buffer:
        """Append the ratio as a percentage with 2 decimal digits, e.g. '25.00%'."""
        return _append(b, _label(self.ratio, PERCENT_UNITS[0]))

    def append_rate(self, b: Buffer) -> Buffer:
        """Append the ratio as a byte rate scaled from byte/s up to terabyte/s."""
        return _append(b, _scale(self.ratio, RATE_UNITS))

    def fmt_percent(self) -> str:
        return _label(self.ratio, PERCENT_UNITS[0])

    def fmt_rate(self) -> str:
        return _scale(self.ratio, RATE_UNITS)


# Methods --------------------------------------------------------------------------------------------------------------

def append_cardinal(b: Buffer, value: Any) -> Buffer:
    """
    Append a cardinal count scaled to thousand, million, billion or trillion.

    Args:
        b: Output buffer.
        value: Value of the Ordered numeric kind (int, float, Decimal, NumPy scalar...).

    Returns:
        The extended buffer.

    Raises:
        TypeError: If b is not bytes or bytearray, or value is not real-number-like.

    Examples:
        >>> append_cardinal(b"count: ", 1_234_567)
        b'count: 1.23 million'
    """
    return _append(b, _scale(to_float(as_ordered(value)), CARDINAL_UNITS))


def append_size(b: Buffer, value: Any) -> Buffer:
    """
    Append a size in bytes scaled from byte up to terabyte (decimal prefixes).

    Args:
        b: Output buffer.
        value: Value of the Integer numeric kind.

    Raises:
        TypeError: If b is not bytes or bytearray, or value is not an integer.

    Examples:
        >>> append_size(bytearray(), 1_000_000)
        bytearray(b'1.00 megabyte')

    Note:
        Negative values always render in the base unit: -5000 gives '-5000 byte'.
    """
    return _append(b, _scale(to_float(as_integer(value)), SIZE_UNITS))


def append_scaled(b: Buffer, value: Any, units: Iterable[Unit | tuple[float, str]]) -> Buffer:
    """
    Append a value scaled with a caller-supplied unit table.

    Args:
        b: Output buffer.
        value: Value of the Ordered numeric kind.
        units: Unit items or (factor, name) pairs ordered by ascending scale,
               the most granular unit first.

    Raises:
        TypeError: If b, value or a unit table item has an unsupported type.
        ValueError: If the unit table is empty.

    Examples:
        >>> append_scaled(b"", 2500, [(1, " op/s"), (1e-3, " kop/s")])
        b'2.50 kop/s'
    """
    return _append(b, _scale(to_float(as_ordered(value)), as_units(units)))


def append_int(b: Buffer, value: Any, base: int = 10) -> Buffer:
    """
    Append an integer of the Signed kind in the given base.

    Digits above 9 are lowercase letters, negative values get a leading '-'.

    Raises:
        TypeError: If value is not an integer.
        ValueError: If base is not in 2..36.

    Examples:
        >>> append_int(b"", -255, 16)
        b'-ff'
    """
    return _append(b, _format_int(as_signed(value), base))


def append_uint(b: Buffer, value: Any, base: int = 10) -> Buffer:
    """
    Append a non-negative integer of the Unsigned kind in the given base.

    Raises:
        TypeError: If value is not an integer.
        ValueError: If value is negative or base is not in 2..36.
    """
    return _append(b, _format_int(as_unsigned(value), base))


def append_quote(b: Buffer, value: Any) -> Buffer:
    """
    Append a double-quoted literal of a String kind value.

    Quotes and backslashes are escaped, printable characters are kept, control
    characters use \\a \\b \\f \\n \\r \\t \\v or \\xNN, other non-printable
    characters use \\uNNNN or \\UNNNNNNNN. Bytes that are not valid UTF-8 are
    rendered one by one as \\xNN.

    Examples:
        >>> append_quote(b"", 'say "hi"\\n')
        b'"say \\\\"hi\\\\"\\\\n"'
        >>> fmt_quote(b"\\xffok")
        '"\\\\xffok"'
    """
    return _append(b, _quote(as_string(value)))


def fmt_cardinal(value: Any) -> str:
    return _scale(to_float(as_ordered(value)), CARDINAL_UNITS)


def fmt_size(value: Any) -> str:
    return _scale(to_float(as_integer(value)), SIZE_UNITS)


def fmt_scaled(value: Any, units: Iterable[Unit | tuple[float, str]]) -> str:
    return _scale(to_float(as_ordered(value)), as_units(units))


def fmt_int(value: Any, base: int = 10) -> str:
    return _format_int(as_signed(value), base)


def fmt_uint(value: Any, base: int = 10) -> str:
    return _format_int(as_unsigned(value), base)


def fmt_quote(value: Any) -> str:
    return _quote(as_string(value))


# Private Methods ------------------------------------------------------------------------------------------------------

def _append(b: Buffer, text: str) -> Buffer:
    """Extend a bytearray in place, or concatenate to bytes, with UTF-8 encoded text."""
    data = text.encode("utf-8")
    if isinstance(b, bytearray):
        b.extend(data)
        return b
    if isinstance(b, bytes):
        return b + data
    raise TypeError(f"output buffer must be bytes | bytearray, got {fmt_type(b)}")


def _label(value: float, unit: Unit) -> str:
    scaled = unit.factor * value
    if math.isnan(scaled):
        return f"NaN{unit.name}"
    if math.isinf(scaled):
        return f"{'+' if scaled > 0 else '-'}Inf{unit.name}"
    return f"{scaled:.{unit.precision}f}{unit.name}"


def _scale(value: float, units: tuple[Unit, ...]) -> str:
    return _label(value, select_unit(value, units))


def _format_int(value: int, base: int) -> str:
    if isinstance(base, bool) or not isinstance(base, int):
        raise TypeError(f"base must be int, got {fmt_type(base)}")
    if not 2 <= base <= 36:
        raise ValueError(f"base must be in 2..36, got {base}")

    if base == 10:
        return str(value)

    sign, value = ("-", -value) if value < 0 else ("", value)
    digits = []
    while True:
        value, rem = divmod(value, base)
        digits.append(DIGITS[rem])
        if not value:
            break
    return sign + "".join(reversed(digits))


def _iter_runes(data: bytes) -> Iterator[str | int]:
    """Yield decoded characters, and the int value of every byte that is not valid UTF-8."""
    # surrogateescape maps each undecodable byte to a lone surrogate U+DC80..U+DCFF,
    # which valid UTF-8 never decodes to
    for char in data.decode("utf-8", "surrogateescape"):
        code = ord(char)
        yield code - 0xDC00 if 0xDC80 <= code <= 0xDCFF else char


def _quote(text: str | bytes) -> str:
    runes = _iter_runes(text) if isinstance(text, bytes) else text
    out = ['"']
    for r in runes:
        if isinstance(r, int):
            out.append(f"\\x{r:02x}")
        elif r in _ESCAPES:
            out.append(_ESCAPES[r])
        elif r.isprintable():
            out.append(r)
        elif ord(r) < 0x20 or ord(r) == 0x7F:
            out.append(f"\\x{ord(r):02x}")
        elif ord(r) < 0x10000:
            out.append(f"\\u{ord(r):04x}")
        else:
            out.append(f"\\U{ord(r):08x}")
    out.append('"')
    return "".join(out)
