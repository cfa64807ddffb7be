"""
Keymapp Client.

`KeymappClient` turns high-level calls (connect a keyboard, color an LED,
switch a layer) into single Keymapp RPCs. Mutating calls go through
`wrap_success_to_error`; a few of them additionally ignore errors that only
say the requested state already holds.
"""
import logging
import os
import sys
from typing import List, Mapping, Optional, Tuple

import grpc

from zsa_keymapp import api
from zsa_keymapp.client.connection import default_address, open_channel
from zsa_keymapp.client.responses import Metadata, error_matches, wrap_success_to_error
from zsa_keymapp.models import ClientSettings, Color, ColorLike

logger = logging.getLogger(__name__)

ALREADY_CONNECTED = "keyboard already connected"
NOT_CONNECTED = "no keyboard is connected"

# Keymapp does not document what `sustain` does (zsa/kontroll#9); it is forwarded as is.
DEFAULT_SUSTAIN = 0


class KeymappClient:
    """
    Connection to the Keymapp keyboard service.

    The client owns its gRPC channel; release it with `close()` or by
    using the client as an async context manager.
    """
    _channel: grpc.aio.Channel
    _stub: api.KeyboardServiceStub
    timeout: Optional[float]

    def __init__(self, channel: grpc.aio.Channel, stub=None, timeout: Optional[float] = None):
        self._channel = channel
        self._stub = stub if stub is not None else api.KeyboardServiceStub(channel)
        self.timeout = timeout

    # --- Connection lifecycle ---

    @classmethod
    def connect(cls, address: str, timeout: Optional[float] = None) -> "KeymappClient":
        """Connects to Keymapp at a `host:port` address or socket path."""
        return cls(open_channel(address), timeout=timeout)

    @classmethod
    def connect_default(
        cls,
        timeout: Optional[float] = None,
        platform: str = sys.platform,
        environ: Mapping[str, str] = os.environ,
    ) -> "KeymappClient":
        """
        Connects using the platform default: localhost:50051 on Windows,
        `$CONFIG_DIR/.keymapp/keymapp.sock` elsewhere.
        """
        return cls.connect(default_address(platform, environ), timeout=timeout)

    @classmethod
    def connect_from_settings(cls, settings: ClientSettings, **kwargs) -> "KeymappClient":
        if settings.address:
            return cls.connect(settings.address, timeout=settings.timeout)
        return cls.connect_default(timeout=settings.timeout, **kwargs)

    async def close(self):
        """Closes the channel. Calling this more than once is not supported."""
        logger.debug("Closing Keymapp channel")
        await self._channel.close()

    async def __aenter__(self) -> "KeymappClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    def _options(self, timeout: Optional[float], metadata: Optional[Metadata]) -> dict:
        """Per-call gRPC options; an explicit timeout overrides the client default."""
        return {"timeout": self.timeout if timeout is None else timeout, "metadata": metadata}

    # --- Queries ---

    async def get_status(
        self, *, timeout: Optional[float] = None, metadata: Optional[Metadata] = None
    ) -> Tuple[str, Optional[api.ConnectedKeyboard]]:
        """
        Returns the Keymapp version and the connected keyboard,
        which is None when no keyboard is connected.
        """
        res = await self._stub.GetStatus(api.GetStatusRequest(), **self._options(timeout, metadata))
        keyboard = res.connected_keyboard if res.HasField("connected_keyboard") else None
        return res.keymapp_version, keyboard

    async def get_keyboards(
        self, *, timeout: Optional[float] = None, metadata: Optional[Metadata] = None
    ) -> List[api.Keyboard]:
        """Lists all keyboards Keymapp has detected."""
        res = await self._stub.GetKeyboards(api.GetKeyboardsRequest(), **self._options(timeout, metadata))
        return list(res.keyboards)

    # --- Keyboard selection ---

    async def connect_any_keyboard(self, *, timeout: Optional[float] = None, metadata: Optional[Metadata] = None):
        try:
            await wrap_success_to_error(
                self._stub.ConnectAnyKeyboard, api.ConnectAnyKeyboardRequest(), **self._options(timeout, metadata)
            )
        except Exception as e:
            if not error_matches(e, ALREADY_CONNECTED):
                raise
            logger.debug("Keyboard was already connected")

    async def connect_keyboard_index(
        self, index: int, *, timeout: Optional[float] = None, metadata: Optional[Metadata] = None
    ):
        try:
            await wrap_success_to_error(
                self._stub.ConnectKeyboard, api.ConnectKeyboardRequest(id=index), **self._options(timeout, metadata)
            )
        except Exception as e:
            if not error_matches(e, ALREADY_CONNECTED):
                raise
            logger.debug(f"Keyboard {index} was already connected")

    async def connect_keyboard(
        self, keyboard: api.Keyboard, *, timeout: Optional[float] = None, metadata: Optional[Metadata] = None
    ):
        await self.connect_keyboard_index(keyboard.id, timeout=timeout, metadata=metadata)

    async def disconnect_keyboard(self, *, timeout: Optional[float] = None, metadata: Optional[Metadata] = None):
        try:
            await wrap_success_to_error(
                self._stub.DisconnectKeyboard, api.DisconnectKeyboardRequest(), **self._options(timeout, metadata)
            )
        except Exception as e:
            if not error_matches(e, NOT_CONNECTED):
                raise
            logger.debug("No keyboard was connected")

    # --- Layers ---

    async def set_layer(self, layer: int, *, timeout: Optional[float] = None, metadata: Optional[Metadata] = None):
        request = api.SetLayerRequest(layer=layer)
        await wrap_success_to_error(self._stub.SetLayer, request, **self._options(timeout, metadata))

    async def unset_layer(self, layer: int, *, timeout: Optional[float] = None, metadata: Optional[Metadata] = None):
        request = api.SetLayerRequest(layer=layer)
        await wrap_success_to_error(self._stub.UnsetLayer, request, **self._options(timeout, metadata))

    # --- LEDs and brightness ---

    async def set_rgb_led(
        self,
        color: ColorLike,
        *leds: int,
        sustain: int = DEFAULT_SUSTAIN,
        timeout: Optional[float] = None,
        metadata: Optional[Metadata] = None,
    ):
        """
        Sets the color of one or more LEDs.

        Channels go on the wire as 8-bit values (0..255), not the 16-bit
        range some color libraries use.

        Each LED is a separate request; every LED is attempted even when
        earlier ones fail, and all failures are raised together as an
        ExceptionGroup. Use `set_rgb_all` to change every LED at once.
        """
        red, green, blue = Color.coerce(color).channels()
        errors = []
        for led in leds:
            request = api.SetRGBLedRequest(led=led, red=red, green=green, blue=blue, sustain=sustain)
            try:
                await wrap_success_to_error(self._stub.SetRGBLed, request, **self._options(timeout, metadata))
            except Exception as e:
                logger.error(f"Failed to set LED {led}: {e}")
                errors.append(e)

        if errors:
            raise ExceptionGroup(f"failed to set {len(errors)} of {len(leds)} LEDs", errors)

    async def set_rgb_all(
        self,
        color: ColorLike,
        *,
        sustain: int = DEFAULT_SUSTAIN,
        timeout: Optional[float] = None,
        metadata: Optional[Metadata] = None,
    ):
        """Sets every LED to one color (8-bit channels, as in `set_rgb_led`)."""
        red, green, blue = Color.coerce(color).channels()
        request = api.SetRGBAllRequest(red=red, green=green, blue=blue, sustain=sustain)
        await wrap_success_to_error(self._stub.SetRGBAll, request, **self._options(timeout, metadata))

    async def set_status_led(
        self,
        led: int,
        on: bool,
        *,
        sustain: int = DEFAULT_SUSTAIN,
        timeout: Optional[float] = None,
        metadata: Optional[Metadata] = None,
    ):
        request = api.SetStatusLedRequest(led=led, on=on, sustain=sustain)
        await wrap_success_to_error(self._stub.SetStatusLed, request, **self._options(timeout, metadata))

    async def increase_brightness(self, *, timeout: Optional[float] = None, metadata: Optional[Metadata] = None):
        request = api.IncreaseBrightnessRequest()
        await wrap_success_to_error(self._stub.IncreaseBrightness, request, **self._options(timeout, metadata))

    async def decrease_brightness(self, *, timeout: Optional[float] = None, metadata: Optional[Metadata] = None):
        request = api.DecreaseBrightnessRequest()
        await wrap_success_to_error(self._stub.DecreaseBrightness, request, **self._options(timeout, metadata))
