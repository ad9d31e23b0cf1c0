#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Fixtures -------------------------------------------------------------------------------------------------------------


@pytest.fixture(params=[bytes, bytearray], ids=["bytes", "bytearray"])
def buffer(request):
    """Output buffer factory, parametrized over immutable and mutable buffers."""

    def _create_buffer(content: bytes = b""):
        return request.param(content)

    return _create_buffer


@pytest.fixture
def text_sample() -> bytes:
    """UTF-8 text with every allowed C0 control code: TAB, LF, FF, CR and ESC."""
    return "Grüße\tfrom\n\x0cthe\r\n\x1b[1mterminal\x1b[0m ☺".encode("utf-8")
