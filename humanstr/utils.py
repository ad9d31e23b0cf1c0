"""
Humanstr utilities shared across the package.

Contains helpers used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def fmt_type(obj: Any, fully_qualified: bool = False) -> str:
    """
    Format the type of an object or a class for exception messages.

    Builtin types are never module-qualified, so both `fmt_type(10)` and
    `fmt_type(int)` return '<type: int>'.

    Parameters:
        obj (Any): An object or a class.
        fully_qualified (bool): If true, include the module name for non-builtin types.

    Returns:
        str: The formatted type, e.g. '<type: Decimal>' or '<type: decimal.Decimal>'.

    Examples:
        >>> fmt_type(10)
        '<type: int>'
        >>> fmt_type(b"abc")
        '<type: bytes>'
        >>> from decimal import Decimal
        >>> fmt_type(Decimal(1), fully_qualified=True)
        '<type: decimal.Decimal>'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    name = getattr(cls, "__qualname__", None) or getattr(cls, "__name__", "?")
    module = getattr(cls, "__module__", None)

    if fully_qualified and module and module != "builtins":
        name = f"{module}.{name}"
    return f"<type: {name}>"
