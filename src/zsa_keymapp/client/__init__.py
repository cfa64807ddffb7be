"""
Client-side components for talking to a running Keymapp instance.
This package wraps Keymapp's gRPC service in an asyncio client that
reports daemon-side failures as exceptions.
"""
from zsa_keymapp.client.connection import default_address, normalize_target
from zsa_keymapp.client.keyboard import KeymappClient
from zsa_keymapp.client.responses import wrap_success_to_error

__all__ = ["KeymappClient", "default_address", "normalize_target", "wrap_success_to_error"]
