#
# Humanstr - Validators Tests
#

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from humanstr.validators import BINARY_DATA_BYTES, valid, validate_text


# Tests ----------------------------------------------------------------------------------------------------------------


class TestValid:
    @pytest.mark.parametrize(
        "data",
        [
            pytest.param(b"", id="empty"),
            pytest.param(b"\t\nA", id="tab-lf-letter"),
            pytest.param(b"\x1bA", id="esc"),
            pytest.param(b"\x0c\r\n", id="ff-cr"),
            pytest.param(b"\x7f", id="del"),
            pytest.param(b" ~", id="printable-ascii"),
            pytest.param("Grüße ☺ 𝄞".encode(), id="multi-byte-utf8"),
        ],
    )
    def test_text(self, data):
        assert valid(data) is True

    def test_text_sample(self, text_sample):
        assert valid(text_sample) is True
        assert valid(bytearray(text_sample)) is True
        assert valid(memoryview(text_sample)) is True

    @pytest.mark.parametrize(
        "byte",
        sorted(BINARY_DATA_BYTES),
    )
    def test_binary_data_byte(self, byte):
        """Reject every C0 control code except TAB, LF, FF, CR and ESC."""
        assert valid(b"text" + bytes([byte]) + b"text") is False

    def test_binary_data_bytes(self):
        allowed = {0x09, 0x0A, 0x0C, 0x0D, 0x1B}
        assert BINARY_DATA_BYTES == set(range(0x20)) - allowed

    @pytest.mark.parametrize(
        "data",
        [
            pytest.param(b"\x07", id="bell"),
            pytest.param(b"\x00", id="nul"),
            pytest.param(b"\x0b", id="vertical-tab"),
            pytest.param(b"\x1a", id="substitute"),
            pytest.param(b"\x1f", id="unit-separator"),
            pytest.param(b"\x89PNG\r\n\x1a\n", id="png-header"),
        ],
    )
    def test_binary(self, data):
        assert valid(data) is False

    @pytest.mark.parametrize(
        "data",
        [
            pytest.param(b"\x80", id="lone-continuation"),
            pytest.param(b"abc\xc3", id="truncated-sequence"),
            pytest.param(b"\xc0\xaf", id="overlong"),
            pytest.param(b"\xed\xa0\x80", id="surrogate"),
            pytest.param(b"\xf4\x90\x80\x80", id="beyond-unicode"),
            pytest.param("café".encode("latin-1"), id="latin-1"),
        ],
    )
    def test_invalid_utf8(self, data):
        """Classify malformed UTF-8 as binary even without control bytes."""
        assert valid(data) is False

    @pytest.mark.parametrize(
        "data",
        [
            pytest.param("text", id="str"),
            pytest.param(None, id="none"),
            pytest.param([0x41], id="list"),
        ],
    )
    def test_invalid_type(self, data):
        with pytest.raises(TypeError):
            valid(data)


class TestValidateText:
    def test_returns_data(self, text_sample):
        assert validate_text(text_sample) is text_sample

    def test_binary(self):
        with pytest.raises(ValueError, match=r"payload must be text"):
            validate_text(b"\x00\x01", name="payload")

    def test_default_name(self):
        with pytest.raises(ValueError, match=r"data must be text"):
            validate_text(b"\xff")
