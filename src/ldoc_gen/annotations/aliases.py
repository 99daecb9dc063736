# src/ldoc_gen/annotations/aliases.py

"""Pull multi-line ``@alias`` blocks out of the source before it is parsed.

A block is a header line followed by any number of variant lines::

    ---@alias Mode "read" | "write"
    ---| "append" # open at the end
    ---| nil

Blocks are removed whole, line endings included, so the lines around them
close up and nothing left behind matches the alias grammar.
"""

import logging
import re
from dataclasses import dataclass

from .attributes import Alias
from .grammar import match_alias_continuation, match_alias_header
from .types import strip_whitespace

logger = logging.getLogger(__name__)

_LINE = re.compile(r"[^\n]*\n|[^\n]+\Z")


@dataclass(frozen=True)
class _Edit:
    start: int
    end: int
    replacement: str


class TextEditor:
    """Collects range replacements against one text and applies them together.

    Offsets always refer to the original text. Edits are applied from the
    highest offset down so earlier offsets stay valid while editing.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._edits: list[_Edit] = []

    @property
    def text(self) -> str:
        return self._text

    def replace(self, start: int, end: int, replacement: str) -> None:
        if not 0 <= start <= end <= len(self._text):
            raise ValueError(f"invalid range {start}:{end}")
        for edit in self._edits:
            if start < edit.end and edit.start < end:
                raise ValueError(
                    f"range {start}:{end} overlaps {edit.start}:{edit.end}"
                )
        self._edits.append(_Edit(start, end, replacement))

    def remove(self, start: int, end: int) -> None:
        self.replace(start, end, "")

    def apply(self) -> str:
        text = self._text
        for edit in sorted(self._edits, key=lambda e: e.start, reverse=True):
            text = text[: edit.start] + edit.replacement + text[edit.end :]
        self._text = text
        self._edits.clear()
        return text


def _lines_with_offsets(text: str) -> list[tuple[int, int, str]]:
    """(start, end, content) per line; ``end`` includes the line ending.

    Lines break on newline characters only, the same as the parser.
    """
    lines = []
    offset = 0
    for raw in _LINE.findall(text):
        content = raw.removesuffix("\n").removesuffix("\r")
        lines.append((offset, offset + len(raw), content))
        offset += len(raw)
    return lines


def extract_aliases(source: str) -> tuple[str, list[Alias]]:
    """Remove every alias block from ``source``.

    Returns the remaining text and one ``Alias`` per block, in source order,
    its variants unioned in declaration order. A header whose type does not
    parse is left in place and not reported. A bare header with no variants
    is removed but not reported either.
    """
    lines = _lines_with_offsets(source)
    editor = TextEditor(source)
    aliases: list[Alias] = []

    index = 0
    while index < len(lines):
        start, end, content = lines[index]
        header = match_alias_header(content)
        if header is None:
            index += 1
            continue

        name, first_type = header
        type_exprs = [strip_whitespace(first_type)] if first_type else []

        index += 1
        while index < len(lines):
            variant = match_alias_continuation(lines[index][2])
            if variant is None:
                break
            type_exprs.append(strip_whitespace(variant))
            end = lines[index][1]
            index += 1

        editor.remove(start, end)
        if not type_exprs:
            logger.debug("Dropped @alias %s with no types", name)
            continue

        aliases.append(Alias(name=name, type_exprs=tuple(type_exprs)))
        logger.debug("Extracted @alias %s = %s", name, "|".join(type_exprs))

    return editor.apply(), aliases
