# pactl_parse.py
"""
Grammar for the human-readable output of ``pactl list sinks`` and
``pactl list modules``.

Both listings are free-form text with tab-indented ``Label: value`` lines.
Each parser walks the text with a cursor, skipping forward to the labels it
needs and ignoring everything in between. Any label that cannot be found
aborts the whole parse with a ParseFailure.
"""
from __future__ import annotations

import re
from typing import Iterator, List, Optional, Tuple

from errors import ParseFailure
from models import Sink


SINK_MARK = "Sink #"
MODULE_MARK = "Module #"
SLAVES_LABEL = "slaves="

_DIGITS = re.compile(r"\d+")
_VOLUME_MARK = re.compile(r"/ +(?=\d)")
_BLOCK_START = {
    SINK_MARK: re.compile(r"^" + re.escape(SINK_MARK), re.M),
    MODULE_MARK: re.compile(r"^[ \t]*" + re.escape(MODULE_MARK), re.M),
}


def _skip_past(text: str, pos: int, end: int, label: str, field: Optional[str] = None) -> int:
    i = text.find(label, pos, end)
    if i < 0:
        raise ParseFailure(field or label, text[pos:])
    return i + len(label)


def _rest_of_line(text: str, pos: int, end: int) -> Tuple[str, int]:
    stop = end
    for eol in ("\n", "\r"):
        i = text.find(eol, pos, stop)
        if i >= 0:
            stop = i
    return text[pos:stop], stop


def _line_value(text: str, pos: int, end: int, field: str) -> Tuple[str, int]:
    value, stop = _rest_of_line(text, pos, end)
    if not value:
        raise ParseFailure(field, text[pos:])
    return value, stop


def _integer(text: str, pos: int, end: int, field: str, maximum: Optional[int] = None) -> Tuple[int, int]:
    m = _DIGITS.match(text, pos, end)
    if m is None:
        raise ParseFailure(field, text[pos:])
    value = int(m.group())
    if maximum is not None and value > maximum:
        raise ParseFailure(field, text[pos:])
    return value, m.end()


def _block_end(text: str, pos: int, mark: str) -> int:
    # Only a header at the start of a line opens a new block.
    m = _BLOCK_START[mark].search(text, pos + len(mark))
    return m.start() if m is not None else len(text)


def _parse_sink_block(text: str, pos: int) -> Tuple[Sink, int]:
    if not text.startswith(SINK_MARK, pos):
        raise ParseFailure(SINK_MARK, text[pos:])
    end = _block_end(text, pos, SINK_MARK)
    pos += len(SINK_MARK)

    pos = _skip_past(text, pos, end, "Name: ")
    name, pos = _line_value(text, pos, end, "Name")

    pos = _skip_past(text, pos, end, "Description: ")
    description, pos = _line_value(text, pos, end, "Description")

    pos = _skip_past(text, pos, end, "Owner Module: ")
    owner_module, pos = _integer(text, pos, end, "Owner Module")

    m = _VOLUME_MARK.search(text, pos, end)
    if m is None:
        raise ParseFailure("volume", text[pos:])
    volume, pos = _integer(text, m.end(), end, "volume", maximum=255)

    sink = Sink(
        name=name,
        description=description,
        owner_module=owner_module,
        volume=volume,
    )
    return sink, end


def iter_sinks(text: str) -> Iterator[Sink]:
    """
    Lazily yield one Sink per ``Sink #`` block of ``pactl list sinks`` output.

    Blank lines before the first block are skipped. A listing without any
    block is a parse failure, not an empty result.
    """
    pos = len(text) - len(text.lstrip())
    if pos >= len(text):
        raise ParseFailure(SINK_MARK, text)

    while pos < len(text):
        sink, pos = _parse_sink_block(text, pos)
        yield sink


def parse_sinks(text: str) -> List[Sink]:
    # All or nothing: a failure in any block discards the earlier ones.
    return list(iter_sinks(text))


def parse_slaves(text: str, module_id: object, anchored: bool = False) -> List[str]:
    """
    Return the ``slaves=`` list of the module block containing ``module_id``.

    Unanchored, the id is matched as a bare substring anywhere in the text and
    ``slaves=`` may follow at any later point. Anchored, the id must be the
    ``Module #<id>`` header of a block and ``slaves=`` must appear inside that
    block.
    """
    mid = str(module_id)
    field = f"module {mid}"

    if anchored:
        m = re.search(r"^[ \t]*" + re.escape(MODULE_MARK + mid) + r"(?!\d)", text, re.M)
        if m is None:
            raise ParseFailure(field, text)
        pos = m.end()
        end = _block_end(text, m.start(), MODULE_MARK)
    else:
        i = text.find(mid) if mid else -1
        if i < 0:
            raise ParseFailure(field, text)
        pos = i + len(mid)
        end = len(text)

    pos = _skip_past(text, pos, end, SLAVES_LABEL)
    slaves, _ = _rest_of_line(text, pos, end)
    return slaves.split(",")
