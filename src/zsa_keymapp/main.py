"""
Command-line entry point for the Keymapp client.

This module is responsible for:
- Parsing command-line arguments and the optional YAML config file.
- Configuring logging for the process.
- Opening a `KeymappClient` and running a single command against it.
- The `blink` demo: connect any keyboard, then alternate all LEDs
  between two colors.
"""
import argparse
import asyncio
import dataclasses
import logging
import sys
from typing import List, Optional

import grpc

from zsa_keymapp import __version__
from zsa_keymapp.client import KeymappClient
from zsa_keymapp.config_loader import default_config_path, load_settings
from zsa_keymapp.errors import KeymappError
from zsa_keymapp.models import ClientSettings, Color, Switch


def setup_logging(level: str = "INFO"):
    """
    Configures the global logging settings for the entire application.
    This should be called as early as possible during startup.
    """
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)-8s] %(name)s.%(funcName)s: %(message)s'
    )

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zsa-keymapp", description="Control ZSA keyboards through Keymapp.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--address", help="Keymapp address (host:port or socket path); default is platform discovery")
    parser.add_argument("--config", help="path to a YAML config file")
    parser.add_argument("--timeout", type=float, help="per-call deadline in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("status", help="show Keymapp version and the connected keyboard")
    commands.add_parser("keyboards", help="list detected keyboards")

    connect = commands.add_parser("connect", help="connect a keyboard")
    connect.add_argument("--index", type=int, help="keyboard id from 'keyboards' (default: any)")

    commands.add_parser("disconnect", help="disconnect the current keyboard")

    layer = commands.add_parser("layer", help="activate a layer")
    layer.add_argument("layer", type=int)
    unset_layer = commands.add_parser("unset-layer", help="deactivate a layer")
    unset_layer.add_argument("layer", type=int)

    rgb = commands.add_parser("rgb", help="color individual LEDs")
    rgb.add_argument("color", type=Color.from_hex)
    rgb.add_argument("leds", type=int, nargs="+")

    rgb_all = commands.add_parser("rgb-all", help="color every LED")
    rgb_all.add_argument("color", type=Color.from_hex)

    status_led = commands.add_parser("status-led", help="switch a status LED")
    status_led.add_argument("led", type=int)
    status_led.add_argument("state", choices=[s.value for s in Switch])

    brightness = commands.add_parser("brightness", help="step the LED brightness")
    brightness.add_argument("direction", choices=["up", "down"])

    blink = commands.add_parser("blink", help="alternate all LEDs between two colors")
    blink.add_argument("first", type=Color.from_hex)
    blink.add_argument("second", type=Color.from_hex)
    blink.add_argument("--interval", type=float, default=1.0, help="seconds per color")
    blink.add_argument("--count", type=int, default=0, help="number of cycles, 0 runs until interrupted")
    return parser


def resolve_settings(args: argparse.Namespace) -> ClientSettings:
    """Config file values, overridden by whatever was given on the command line."""
    config_path = args.config
    if config_path is None:
        default_path = default_config_path()
        if default_path is not None and default_path.exists():
            config_path = default_path
    settings = load_settings(config_path)

    overrides = {}
    if args.address:
        overrides["address"] = args.address
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return dataclasses.replace(settings, **overrides)


async def blink(client: KeymappClient, first: Color, second: Color, interval: float = 1.0, count: int = 0):
    """Connects any keyboard and alternates all LEDs between two colors."""
    await client.connect_any_keyboard()
    logger.info("successful connection")

    cycle = 0
    while count <= 0 or cycle < count:
        await client.set_rgb_all(first)
        await asyncio.sleep(interval)
        await client.set_rgb_all(second)
        await asyncio.sleep(interval)
        cycle += 1


async def run_command(client: KeymappClient, args: argparse.Namespace):
    command = args.command
    if command == "status":
        version, keyboard = await client.get_status()
        print(f"Keymapp {version}")
        if keyboard is None:
            print("no keyboard connected")
        else:
            print(f"{keyboard.friendly_name} (firmware {keyboard.firmware_version}, layer {keyboard.current_layer})")
    elif command == "keyboards":
        for keyboard in await client.get_keyboards():
            marker = "*" if keyboard.is_connected else " "
            print(f"{marker} {keyboard.id}: {keyboard.friendly_name}")
    elif command == "connect":
        if args.index is None:
            await client.connect_any_keyboard()
        else:
            await client.connect_keyboard_index(args.index)
    elif command == "disconnect":
        await client.disconnect_keyboard()
    elif command == "layer":
        await client.set_layer(args.layer)
    elif command == "unset-layer":
        await client.unset_layer(args.layer)
    elif command == "rgb":
        await client.set_rgb_led(args.color, *args.leds)
    elif command == "rgb-all":
        await client.set_rgb_all(args.color)
    elif command == "status-led":
        await client.set_status_led(args.led, Switch(args.state).enabled)
    elif command == "brightness":
        if args.direction == "up":
            await client.increase_brightness()
        else:
            await client.decrease_brightness()
    elif command == "blink":
        await blink(client, args.first, args.second, interval=args.interval, count=args.count)
    else:
        raise ValueError(f"unknown command {command!r}")


async def main_application_runner(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = resolve_settings(args)
    except KeymappError as e:
        setup_logging()
        logger.error(f"{e}")
        return 1
    setup_logging(settings.log_level)

    try:
        async with KeymappClient.connect_from_settings(settings) as client:
            await run_command(client, args)
    except (KeymappError, grpc.aio.AioRpcError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    except ExceptionGroup as group:
        for e in group.exceptions:
            logger.error(f"{args.command} failed: {e}")
        return 1
    return 0


def run():
    try:
        sys.exit(asyncio.run(main_application_runner()))
    except KeyboardInterrupt:
        # Ctrl+C ends the blink demo
        sys.exit(130)


if __name__ == "__main__":
    run()
