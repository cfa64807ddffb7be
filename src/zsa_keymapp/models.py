"""
Value Types used around the Keymapp RPC messages.

The RPC messages themselves come from the Keymapp schema and are passed
through untouched. These dataclasses only cover what callers hand *to*
the client (colors, settings) before it is flattened into a request.
"""
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple, Union

ColorLike = Union["Color", str, Sequence[int]]

HEX_DIGITS = re.compile(r"[0-9a-fA-F]{3}|[0-9a-fA-F]{6}")


class Switch(str, Enum):
    ON = "on"
    OFF = "off"

    @property
    def enabled(self) -> bool:
        return self is Switch.ON


@dataclass(frozen=True)
class Color:
    """An RGB color with 8-bit channels."""
    red: int
    green: int
    blue: int

    def __post_init__(self):
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} channel must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"{name} channel out of range 0..255: {value}")

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parses '#rrggbb', 'rrggbb' or the short '#rgb' form."""
        digits = text.strip().removeprefix("#")
        if not HEX_DIGITS.fullmatch(digits):
            raise ValueError(f"not a hex color: {text!r}")
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        value = int(digits, 16)
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def coerce(cls, value: ColorLike) -> "Color":
        """Accepts a Color, a hex string or an (r, g, b) sequence."""
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        channels = tuple(value)
        if len(channels) != 3:
            raise ValueError(f"expected 3 color channels, got {len(channels)}")
        return cls(*channels)

    def channels(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self.channels())


@dataclass(frozen=True, kw_only=True)
class ClientSettings:
    """Resolved client configuration (config file merged with CLI flags)."""
    address: Optional[str] = None  # None means platform discovery
    timeout: Optional[float] = None  # per-call deadline in seconds
    log_level: str = field(default="INFO")
