"""
Keymapp Endpoint Discovery and Channel Management.

This module provides:
- The platform default endpoint: a fixed TCP port on Windows, the
  `$CONFIG_DIR/.keymapp/keymapp.sock` unix socket everywhere else
  (see https://github.com/zsa/kontroll#prerequisites).
- Normalization of bare socket paths into gRPC `unix:` targets.
- Opening the insecure `grpc.aio` channel the client owns.
"""
import logging
import os
import sys
from pathlib import PurePath
from typing import Mapping

import grpc

from zsa_keymapp.errors import MissingEnvironmentError

logger = logging.getLogger(__name__)

WINDOWS_ADDRESS = "localhost:50051"
CONFIG_DIR_ENV = "CONFIG_DIR"
SOCKET_DIR = ".keymapp"
SOCKET_NAME = "keymapp.sock"

UNIX_SCHEME = "unix:"


def default_address(platform: str = sys.platform, environ: Mapping[str, str] = os.environ) -> str:
    """
    Returns the gRPC target Keymapp listens on for this platform.

    Raises MissingEnvironmentError off Windows when CONFIG_DIR is unset,
    before anything touches the network.
    """
    if platform.startswith("win"):
        return WINDOWS_ADDRESS

    config_dir = environ.get(CONFIG_DIR_ENV)
    if not config_dir:
        raise MissingEnvironmentError(CONFIG_DIR_ENV)

    socket_path = os.path.join(config_dir, SOCKET_DIR, SOCKET_NAME)
    return UNIX_SCHEME + socket_path


def normalize_target(address: str) -> str:
    """
    Bare socket paths become `unix:` targets; host:port and already
    schemed targets are left alone.

    Only absolute paths and names ending in `.sock` are recognized as
    sockets. A relative path like `./keymapp` is passed through and gRPC
    resolves it as a DNS name; use an absolute path or `unix:` for those.
    """
    if address.startswith(UNIX_SCHEME) or "://" in address:
        return address
    if os.path.isabs(address) or PurePath(address).suffix == ".sock":
        return UNIX_SCHEME + address
    return address


def open_channel(address: str) -> grpc.aio.Channel:
    target = normalize_target(address)
    logger.info(f"Opening Keymapp channel to {target}")
    return grpc.aio.insecure_channel(target)
