"""
zsa_keymapp

An asyncio client for the gRPC API of ZSA's Keymapp, allowing scripts
to select keyboards, switch layers and drive the keyboard's LEDs.
"""
__version__ = "0.1.0"

from zsa_keymapp.client import KeymappClient
from zsa_keymapp.errors import ConfigError, KeymappError, MissingEnvironmentError, UnsuccessfulResponseError
from zsa_keymapp.models import ClientSettings, Color

__all__ = [
    "ClientSettings",
    "Color",
    "ConfigError",
    "KeymappClient",
    "KeymappError",
    "MissingEnvironmentError",
    "UnsuccessfulResponseError",
    "__version__",
]
