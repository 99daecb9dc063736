# src/ldoc_gen/parsers/lua_parser.py

import logging
from typing import Any

import tree_sitter
import tree_sitter_lua

from ldoc_gen.errors import SourceParseError

from .base import SourceParser
from .models import ParsedSource

logger = logging.getLogger(__name__)


class LuaParser(SourceParser):
    """
    Lua parser backed by tree-sitter.
    - One parser instance per converter, reused across files
    - strict mode rejects trees containing ERROR or MISSING nodes
    """

    def __init__(self, *, strict: bool = True) -> None:
        language = tree_sitter.Language(tree_sitter_lua.language())
        self._parser = tree_sitter.Parser(language)
        self._strict = strict

    def parse(self, source: str) -> ParsedSource:
        data = source.encode("utf-8")
        tree = self._parser.parse(data)
        if tree is None:
            raise SourceParseError("parser returned no tree")

        if self._strict and tree.root_node.has_error:
            line = _first_error_line(tree.root_node)
            raise SourceParseError(f"syntax error on line {line + 1}", line=line)

        logger.debug(
            "Parsed %d bytes into %d top-level nodes",
            len(data),
            tree.root_node.child_count,
        )
        return ParsedSource(source=data, tree=tree)


def _first_error_line(root: Any) -> int:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node.start_point[0]
        stack.extend(reversed(node.children))
    return root.start_point[0]
