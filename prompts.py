# prompts.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence

from errors import ValidationFailure


VOLUME_HINT = "Enter values between 0 and 100. The default is the current volume percentage."


def _is_number(s: str) -> bool:
    # str.isdigit also accepts superscripts and other digits int() rejects.
    return s.isascii() and s.isdigit()


def validate_volume(text: str) -> int:
    s = (text or "").strip()
    if not _is_number(s):
        raise ValidationFailure("Volume has to be a number between 0 and 100")
    n = int(s)
    if n > 100:
        raise ValidationFailure("Volume has to be a number between 0 and 100")
    return n


class Prompter(ABC):
    """
    The interactive capability the workflows need from a front end:
    pick one entry, pick several entries, and ask for a bounded integer.
    """

    @abstractmethod
    def choose(self, prompt: str, options: Sequence[str], default: int = 0) -> int:
        ...

    @abstractmethod
    def select_many(self, prompt: str, options: Sequence[str]) -> List[int]:
        ...

    @abstractmethod
    def ask_volume(self, label: str, default: int) -> int:
        ...

    def notify(self, message: str) -> None:
        pass


class ConsolePrompter(Prompter):
    def __init__(
        self,
        read: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._read = read or input
        self._write = write or print

    def choose(self, prompt: str, options: Sequence[str], default: int = 0) -> int:
        self._write(prompt)
        for i, opt in enumerate(options, start=1):
            mark = "*" if i - 1 == default else " "
            self._write(f" {mark} {i}) {opt}")

        while True:
            s = self._read(f"Choice [{default + 1}]: ").strip()
            if not s:
                return default
            if _is_number(s) and 1 <= int(s) <= len(options):
                return int(s) - 1
            self._write(f"Enter a number between 1 and {len(options)}")

    def select_many(self, prompt: str, options: Sequence[str]) -> List[int]:
        self._write(prompt)
        for i, opt in enumerate(options, start=1):
            self._write(f"   {i}) {opt}")

        while True:
            s = self._read("Numbers separated by spaces or commas: ")
            parts = [p for p in s.replace(",", " ").split() if p]
            if all(_is_number(p) and 1 <= int(p) <= len(options) for p in parts):
                picked: List[int] = []
                for p in parts:
                    idx = int(p) - 1
                    if idx not in picked:
                        picked.append(idx)
                return sorted(picked)
            self._write(f"Only numbers between 1 and {len(options)} are allowed")

    def ask_volume(self, label: str, default: int) -> int:
        while True:
            s = self._read(f"{label} [{default}]: ")
            if not s.strip():
                s = str(default)
            try:
                return validate_volume(s)
            except ValidationFailure as e:
                self._write(str(e))

    def notify(self, message: str) -> None:
        self._write(message)
