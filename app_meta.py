# app_meta.py
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version


APP_NAME = "paCombine"
DIST_NAME = "pacombine"


def detect_version() -> str:
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0"
