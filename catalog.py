# catalog.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from errors import NotFound
from models import COMBINED_SINK_NAME, Sink
from pactl_parse import parse_sinks


@dataclass(frozen=True)
class SinkCatalog:
    """Snapshot of the sinks listed by one ``pactl list sinks`` call."""

    sinks: Tuple[Sink, ...]

    @classmethod
    def from_text(cls, text: str) -> "SinkCatalog":
        return cls(sinks=tuple(parse_sinks(text)))

    def __iter__(self) -> Iterator[Sink]:
        return iter(self.sinks)

    def __len__(self) -> int:
        return len(self.sinks)

    def descriptions(self) -> List[str]:
        return [s.description for s in self.sinks]

    def by_name(self, name: str) -> Sink:
        for s in self.sinks:
            if s.name == name:
                return s
        raise NotFound(f"No sink named \"{name}\"")

    def has(self, name: str) -> bool:
        return any(s.name == name for s in self.sinks)

    def combined(self) -> Sink:
        return self.by_name(COMBINED_SINK_NAME)
