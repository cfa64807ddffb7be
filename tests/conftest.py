"""
Pytest Configuration and Fixtures for the zsa_keymapp project.

Most tests never open a channel: they hand the client a fake stub whose
RPC methods are AsyncMocks, so replies and failures can be scripted per test.
"""

import sys
from unittest.mock import AsyncMock, MagicMock
import pytest
import logging

from zsa_keymapp import api
from zsa_keymapp.client import KeymappClient

RPC_METHODS = [
    "GetStatus",
    "GetKeyboards",
    "ConnectKeyboard",
    "ConnectAnyKeyboard",
    "DisconnectKeyboard",
    "SetLayer",
    "UnsetLayer",
    "SetRGBLed",
    "SetRGBAll",
    "SetStatusLed",
    "IncreaseBrightness",
    "DecreaseBrightness",
]

# Reply type per RPC, used to build default successful answers
REPLY_TYPES = {
    "ConnectKeyboard": api.ConnectKeyboardReply,
    "ConnectAnyKeyboard": api.ConnectKeyboardReply,
    "DisconnectKeyboard": api.DisconnectKeyboardReply,
    "SetLayer": api.SetLayerReply,
    "UnsetLayer": api.SetLayerReply,
    "SetRGBLed": api.SetRGBLedReply,
    "SetRGBAll": api.SetRGBAllReply,
    "SetStatusLed": api.SetStatusLedReply,
    "IncreaseBrightness": api.IncreaseBrightnessReply,
    "DecreaseBrightness": api.DecreaseBrightnessReply,
}


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """
    Configures the Python logging framework globally for all tests.
    Because tests bypass main.py, this ensures our logs are formatted
    and visible during test runs.
    """
    formatter = logging.Formatter(fmt="%(levelname)-8s %(message)s - %(funcName)s:%(lineno)d ")
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(formatter)
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)


@pytest.fixture
def fake_stub():
    """A stand-in for KeyboardServiceStub; every mutating RPC succeeds by default."""
    stub = MagicMock()
    for name in RPC_METHODS:
        reply_type = REPLY_TYPES.get(name)
        reply = reply_type(success=True) if reply_type else None
        setattr(stub, name, AsyncMock(return_value=reply))
    stub.GetStatus.return_value = api.GetStatusReply(keymapp_version="1.3.0")
    stub.GetKeyboards.return_value = api.GetKeyboardsReply()
    return stub


@pytest.fixture
def fake_channel():
    channel = MagicMock()
    channel.close = AsyncMock()
    return channel


@pytest.fixture
def client(fake_channel, fake_stub):
    return KeymappClient(fake_channel, stub=fake_stub)
