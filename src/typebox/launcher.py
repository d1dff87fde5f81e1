from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from typebox.config import ConfigError, TextboxSettings, _deep_merge, load_config
from typebox.logging_config import setup_logging
from typebox.paths import get_data_root, log_file_path

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typebox",
        description="Type the reference text as fast as you can; WPM is shown at the end.",
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML config file.")
    parser.add_argument("--columns", type=int, default=None, help="Textbox width in characters.")
    parser.add_argument("--rows", type=int, default=None, help="Textbox height in lines.")
    parser.add_argument(
        "--show-typed",
        action="store_true",
        default=None,
        help="Display the typed character instead of the expected one.",
    )
    parser.add_argument("--window", action="store_true", help="Run in a pygame window instead of the terminal.")
    parser.add_argument("--log-level", default=None, help="Log level (DEBUG, INFO, ...).")
    return parser


def _cli_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    textbox: Dict[str, Any] = {}
    if args.columns is not None:
        textbox["columns"] = args.columns
    if args.rows is not None:
        textbox["rows"] = args.rows
    if args.show_typed is not None:
        textbox["show_typed"] = args.show_typed
    overrides: Dict[str, Any] = {}
    if textbox:
        overrides["textbox"] = textbox
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return overrides


def _resolve_settings(argv: Optional[List[str]] = None) -> tuple[argparse.Namespace, Dict[str, Any], TextboxSettings]:
    args = _build_parser().parse_args(argv)
    config = _deep_merge(load_config(args.config), _cli_overrides(args))
    return args, config, TextboxSettings.from_config(config)


def main(argv: Optional[List[str]] = None) -> None:
    try:
        args, config, settings = _resolve_settings(argv)
    except ConfigError as exc:
        print(f"typebox: {exc}", file=sys.stderr)
        sys.exit(2)

    log_file = log_file_path(get_data_root(config))
    setup_logging(config.get("log_level", "INFO"), log_file, console=False)

    try:
        if args.window:
            from typebox.window.app import run_window

            run_window(settings)
        else:
            from typebox.terminal.app import run_terminal

            run_terminal(settings)
    except EOFError:
        logger.exception("Keyboard input closed")
        sys.exit(1)
    except Exception:
        logger.exception("Unhandled error, terminal restored")
        raise


if __name__ == "__main__":
    main()
