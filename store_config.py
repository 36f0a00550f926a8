# store_config.py
from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from app_meta import APP_NAME


DEFAULT_CONFIG_TEXT = """\
[pactl]
binary = pactl

[Logging]
level = WARNING
file =
"""


def _linux_xdg_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def user_config_dir(app_name: str) -> Path:
    return _linux_xdg_config_dir() / app_name


@dataclass(frozen=True)
class Settings:
    pactl_binary: str = "pactl"
    log_level: int = logging.WARNING
    log_file: str = ""


def _level(name: str) -> int:
    v = logging.getLevelName((name or "").strip().upper())
    if isinstance(v, int):
        return v
    raise ValueError(f"Unknown log level: {name!r}")


def _log_file(path: str) -> str:
    # log_init only rotates files it recognises by the .log suffix.
    p = (path or "").strip()
    if p and not p.endswith(".log"):
        raise ValueError(f"Log file must end in .log: {p!r}")
    return p


@dataclass(frozen=True)
class ConfigStore:
    """
    Read-only settings file. A missing file or key means the default; the
    file is never created or written.
    """

    app_name: str = APP_NAME
    filename: str = "pacombine.cfg"
    path_override: Optional[Path] = None

    @property
    def dir_path(self) -> Path:
        return user_config_dir(self.app_name)

    @property
    def file_path(self) -> Path:
        if self.path_override is not None:
            return Path(self.path_override).expanduser()
        return self.dir_path / self.filename

    def load(self) -> configparser.ConfigParser:
        cfg = configparser.ConfigParser()
        cfg.read_string(DEFAULT_CONFIG_TEXT)
        if self.file_path.exists():
            cfg.read(self.file_path, encoding="utf-8")
        return cfg

    def settings(self) -> Settings:
        cfg = self.load()
        return Settings(
            pactl_binary=cfg.get("pactl", "binary", fallback="pactl").strip() or "pactl",
            log_level=_level(cfg.get("Logging", "level", fallback="WARNING")),
            log_file=_log_file(cfg.get("Logging", "file", fallback="")),
        )
