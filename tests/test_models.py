import pytest

from zsa_keymapp.models import ClientSettings, Color, Switch

"""
Value type tests: color parsing and channel splitting.
"""


@pytest.mark.parametrize("text, expected", [
    ("#ff8000", (255, 128, 0)),
    ("FF8000", (255, 128, 0)),
    ("#0f0", (0, 255, 0)),
    ("  #000000 ", (0, 0, 0)),
])
def test_from_hex(text, expected):
    assert Color.from_hex(text).channels() == expected


@pytest.mark.parametrize("text", [
    "", "#12", "#1234567", "#gg0000", "red",
    "-00001", "0x0f00", "#0_ff00", "+fff", "# fff", "#-1f",
])
def test_from_hex_rejects_garbage(text):
    with pytest.raises(ValueError):
        Color.from_hex(text)


def test_channel_range_is_enforced():
    with pytest.raises(ValueError):
        Color(0, 256, 0)
    with pytest.raises(ValueError):
        Color(-1, 0, 0)
    with pytest.raises(TypeError):
        Color(1.5, 0, 0)
    with pytest.raises(TypeError):
        Color(True, 0, 0)


def test_coerce_accepts_common_shapes():
    color = Color(1, 2, 3)
    assert Color.coerce(color) is color
    assert Color.coerce([1, 2, 3]) == color
    assert Color.coerce((1, 2, 3)) == color
    assert Color.coerce("#010203") == color

    with pytest.raises(ValueError):
        Color.coerce((1, 2))


def test_to_hex():
    assert Color(255, 128, 0).to_hex() == "#ff8000"


def test_switch():
    assert Switch("on").enabled is True
    assert Switch("off").enabled is False


def test_client_settings_defaults():
    settings = ClientSettings()
    assert settings.address is None
    assert settings.timeout is None
    assert settings.log_level == "INFO"
