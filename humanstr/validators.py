"""
Humanstr Data Validators

Checks the **content** of byte sequences: whether data is displayable text
or binary, following the binary data byte definition of the WHATWG MIME
sniffing standard (mimesniff.spec.whatwg.org#binary-data-byte) plus UTF-8
well-formedness.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import TypeVar

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type

# Constants ------------------------------------------------------------------------------------------------------------

T = TypeVar("T", bytes, bytearray, memoryview)

# C0 control codes except TAB, LF, FF, CR and ESC
BINARY_DATA_BYTES = frozenset(
    [*range(0x00, 0x09), 0x0B, *range(0x0E, 0x1B), *range(0x1C, 0x20)]
)


# Methods --------------------------------------------------------------------------------------------------------------

def valid(data: bytes | bytearray | memoryview) -> bool:
    """
    Return True if data is displayable text, False if it is binary.

    Data is binary if it contains any binary data byte (0x00-0x08, 0x0B,
    0x0E-0x1A, 0x1C-0x1F) or is not well-formed UTF-8. The scan stops at the
    first binary data byte. Empty data is valid.

    Raises:
        TypeError: If data is not bytes, bytearray or memoryview.

    Examples:
        >>> valid(b"\\t\\nA")
        True
        >>> valid(b"\\x1b[0m")
        True
        >>> valid(b"\\x07")
        False
        >>> valid("café".encode("latin-1"))
        False
    """
    if isinstance(data, memoryview):
        data = data.tobytes()
    elif not isinstance(data, (bytes, bytearray)):
        raise TypeError(f"data must be bytes | bytearray | memoryview, got {fmt_type(data)}")

    if any(byte in BINARY_DATA_BYTES for byte in data):
        return False

    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def validate_text(data: T, *, name: str = "data") -> T:
    """
    Validate that data is displayable text.

    Args:
        data: The bytes-like object to check, see valid().
        name: Optional name used in error messages. Defaults to "data".

    Returns:
        The original data unchanged if valid.

    Raises:
        TypeError: If data is not bytes, bytearray or memoryview.
        ValueError: If data is binary.

    Examples:
        >>> validate_text(b"plain text")
        b'plain text'

        >>> validate_text(b"\\x00\\x01", name="payload")
        Traceback (most recent call last):
            ...
        ValueError: payload must be text, got binary data of 2 bytes
    """
    if not valid(data):
        raise ValueError(f"{name} must be text, got binary data of {len(data)} bytes")
    return data
