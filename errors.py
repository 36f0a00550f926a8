# errors.py
from __future__ import annotations

from typing import Sequence


class CombineError(RuntimeError):
    """Base for every failure that aborts an operation."""


class ParseFailure(CombineError):
    def __init__(self, field: str, remaining: str) -> None:
        self.field = field
        self.remaining = remaining
        super().__init__(
            f"Could not parse pactl output: expected {field} ({len(remaining)} characters left)"
        )


class NotFound(CombineError):
    pass


class ExternalCommandFailure(CombineError):
    def __init__(self, argv: Sequence[str], message: str) -> None:
        self.argv = list(argv)
        super().__init__(f"{' '.join(self.argv)} failed: {message}")


class ValidationFailure(ValueError):
    # Raised by input validation only; the prompt layer re-asks on it.
    pass
