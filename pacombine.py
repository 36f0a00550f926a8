# pacombine.py
from __future__ import annotations

import argparse
import configparser
import logging
import sys
from pathlib import Path
from typing import List, Optional

from app_meta import APP_NAME, detect_version
from backend import CombinedSinkBackend
from errors import CombineError
from log import log_init
from pactl_cli import PactlClient
from prompts import ConsolePrompter, Prompter
from store_config import ConfigStore, Settings


log = logging.getLogger(__name__)

ACTIONS = ("create", "volume", "remove")
MENU = (
    "Create combined sink",
    "Change volume of slave devices",
    "Remove combined sink",
)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pacombine",
        description="Combine several PulseAudio sinks into one \"Combined\" sink.",
    )
    p.add_argument("--version", action="version", version=f"{APP_NAME} {detect_version()}")
    p.add_argument("--cli", action="store_true", help="use terminal prompts instead of the window")
    p.add_argument("--action", choices=ACTIONS, help="skip the menu (implies --cli)")
    p.add_argument("--config", type=Path, help="settings file to read")
    p.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    return p


def _setup_logging(settings: Settings, override: Optional[str]) -> None:
    level = settings.log_level
    if override:
        level = logging.getLevelName(override.strip().upper())
        if not isinstance(level, int):
            raise SystemExit(f"Unknown log level: {override}")
    log_init("console", level)
    if settings.log_file:
        log_init(settings.log_file, level)


def run_console(backend: CombinedSinkBackend, prompter: Prompter, action: Optional[str]) -> int:
    if action is None:
        action = ACTIONS[prompter.choose("What to do?", MENU, default=0)]

    try:
        if action == "create":
            if backend.create() is None:
                prompter.notify("\nNothing selected, no sink created.")
            else:
                prompter.notify("\nSuccessfully created combined sink!")
        elif action == "volume":
            backend.adjust_volumes()
        else:
            backend.remove()
            prompter.notify("\nSuccessfully removed combined sink!")
    except CombineError as e:
        log.error("%s failed: %s", action, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def run_gui(settings: Settings) -> int:
    from PySide6.QtWidgets import QApplication

    from main_window import MainWindow
    from theme import apply_dark_theme

    app = QApplication(sys.argv[:1])
    app.setApplicationName(APP_NAME)
    apply_dark_theme(app)
    win = MainWindow(PactlClient(settings.pactl_binary))
    win.show()
    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = ConfigStore(path_override=args.config).settings()
    except (OSError, ValueError, configparser.Error) as e:
        print(f"Error: could not read settings: {e}", file=sys.stderr)
        return 1

    _setup_logging(settings, args.log_level)
    log.debug("settings: %s", settings)

    if args.cli or args.action:
        prompter = ConsolePrompter()
        backend = CombinedSinkBackend(prompter, PactlClient(settings.pactl_binary))
        return run_console(backend, prompter, args.action)

    return run_gui(settings)


if __name__ == "__main__":
    sys.exit(main())
