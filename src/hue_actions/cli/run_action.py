"""Run an action file against a Hue bridge.

Usage:
    hue-action show.yaml --config config.yaml --lights 1,2
    hue-action show.yaml --dry-run -v
"""

import argparse
import logging
from pathlib import Path

from ..actions import compile_action, load_action
from ..config import HueActionsConfig, load_config
from ..errors import ConfigurationError, DispatchError
from ..lights import HueBridge, MockSetter
from ..tasks import start

EXIT_OK = 0
EXIT_DISPATCH_FAILED = 1
EXIT_BAD_CONFIG = 2


def parse_lights(value: str) -> list[int]:
    """Parse a comma separated list of light ids such as '1,2,5'."""
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid light list: {value}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a light action file against a Hue bridge"
    )
    parser.add_argument(
        "action_file",
        type=Path,
        help="YAML file describing the action tree",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("config.yaml"),
        help="Bridge configuration file (default: config.yaml)",
    )
    parser.add_argument(
        "--lights",
        type=parse_lights,
        default=None,
        help="Default light ids, comma separated (default: from config, else all lights)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log patches instead of sending them to the bridge",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Load, compile and run an action file. Returns the exit status."""
    args = build_parser().parse_args(argv)

    try:
        if args.config.exists():
            config = load_config(args.config)
        elif args.dry_run:
            config = HueActionsConfig()
        else:
            print(f"Error: Config not found: {args.config}")
            return EXIT_BAD_CONFIG

        logging.basicConfig(
            level=logging.DEBUG if args.verbose else config.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        if args.dry_run:
            setter = MockSetter()
        elif config.bridge is None:
            print(f"Error: No bridge section in {args.config}")
            return EXIT_BAD_CONFIG
        else:
            setter = HueBridge(
                config.bridge.bridge_ip,
                config.bridge.username,
                timeout=config.bridge.timeout,
            )

        action = load_action(args.action_file)
        lights = args.lights if args.lights is not None else config.default_lights
        task = compile_action(action, setter, lights)
    except (ConfigurationError, OSError) as e:
        print(f"Error: {e}")
        return EXIT_BAD_CONFIG

    print("=" * 60)
    print(f"  Running {args.action_file}" + ("  (dry run)" if args.dry_run else ""))
    print(f"  Lights: {', '.join(map(str, lights)) if lights else 'all'}")
    print("=" * 60)

    execution = start(task)
    try:
        while not execution.wait(0.2):
            pass
    except KeyboardInterrupt:
        print("\nStopping...")
        execution.end()
        execution.wait()

    error = execution.error
    if isinstance(error, DispatchError):
        print(f"Error: light {error.light_id}: {type(error).__name__}: {error}")
        return EXIT_DISPATCH_FAILED
    if error is not None:
        raise error
    print("Done.")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
