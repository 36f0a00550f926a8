# models.py
from __future__ import annotations

from dataclasses import dataclass


COMBINED_SINK_NAME = "Combined"


@dataclass(frozen=True)
class Sink:
    name: str
    description: str
    owner_module: int
    volume: int   # raw value after the "/  " marker, 0..255


@dataclass(frozen=True)
class VolumeChange:
    sink_name: str
    old: int
    new: int
