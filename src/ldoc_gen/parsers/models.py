# src/ldoc_gen/parsers/models.py

from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True)
class SourceSpan:
    start_byte: int
    end_byte: int
    start_line: int  # zero-based, like the syntax tree
    end_line: int


@dataclass(frozen=True)
class CommentLine:
    text: str
    span: SourceSpan

    @property
    def line(self) -> int:
        return self.span.start_line


@dataclass(frozen=True)
class FunctionDecl:
    name: str | None  # None when the target cannot be resolved
    span: SourceSpan
    text: str  # signature only, the body is left out


@dataclass(frozen=True)
class VariableDecl:
    name: str
    span: SourceSpan
    text: str


@dataclass(frozen=True)
class OtherDecl:
    span: SourceSpan
    text: str


Declaration: TypeAlias = FunctionDecl | VariableDecl | OtherDecl


def declaration_name(decl: Declaration) -> str | None:
    if isinstance(decl, (FunctionDecl, VariableDecl)):
        return decl.name
    return None


@dataclass(frozen=True)
class ParsedSource:
    """A syntax tree together with the exact bytes it was parsed from.

    The tree is read-only; all text comes from ``text_of``.
    """

    source: bytes
    tree: Any  # tree_sitter.Tree

    @property
    def root(self) -> Any:
        return self.tree.root_node

    def text_of(self, node: Any) -> str:
        return self.text_between(node.start_byte, node.end_byte)

    def text_between(self, start_byte: int, end_byte: int) -> str:
        return self.source[start_byte:end_byte].decode("utf-8")

    def span_of(self, node: Any) -> SourceSpan:
        return SourceSpan(
            start_byte=node.start_byte,
            end_byte=node.end_byte,
            start_line=node.start_point[0],
            end_line=node.end_point[0],
        )
