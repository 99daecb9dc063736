import logging
import re
from dataclasses import dataclass
from typing import Any

from ldoc_gen.annotations.attributes import Alias, Attribute, Class, ClassMod, NoDoc
from ldoc_gen.annotations.grammar import split_comments
from ldoc_gen.parsers.models import (
    CommentLine,
    Declaration,
    FunctionDecl,
    OtherDecl,
    ParsedSource,
    VariableDecl,
    declaration_name,
)

logger = logging.getLogger(__name__)

_NAME_LISTS = ("variable_list", "attribute_name_list")
_INDEX_EXPRESSIONS = (
    "dot_index_expression",
    "method_index_expression",
    "bracket_index_expression",
)
_TYPE_TAG = re.compile(r"^([ \t]*---[ \t]*)@type\b")


@dataclass(frozen=True)
class Chunk:
    """A run of doc comments and the one declaration right below it."""

    body: tuple[CommentLine, ...]
    attributes: tuple[Attribute, ...]
    decl: Declaration

    @property
    def name(self) -> str | None:
        return declaration_name(self.decl)

    def has(self, kind: type) -> bool:
        return any(isinstance(attribute, kind) for attribute in self.attributes)

    @property
    def is_owner(self) -> bool:
        return self.has(Class)

    def to_ldoc(self) -> str:
        lines = [""]
        lines.extend(_TYPE_TAG.sub(r"\1", comment.text) for comment in self.body)

        classmod = self.has(ClassMod)
        for attribute in self.attributes:
            if isinstance(attribute, (ClassMod, NoDoc, Alias)):
                continue
            if isinstance(attribute, Class):
                lines.append(attribute.to_ldoc(classmod=classmod))
            else:
                lines.append(attribute.to_ldoc())

        lines.append(self.decl.text)
        return "\n".join(lines) + "\n"


def assemble_chunks(parsed: ParsedSource) -> list[Chunk]:
    """Pair each contiguous doc comment run with the declaration under it.

    A run only counts when the declaration starts on the line right after
    its last comment. Runs followed by a gap or by nothing are dropped.
    """
    chunks: list[Chunk] = []
    comments: list[CommentLine] = []
    prev_line: int | None = None
    last_code_line: int | None = None

    for node in parsed.root.children:
        start_line = node.start_point[0]

        if node.type == "comment":
            if start_line == last_code_line:
                # trailing comment after code on the same line
                continue
            if prev_line is not None and start_line != prev_line + 1:
                comments.clear()
            comments.append(
                CommentLine(text=parsed.text_of(node), span=parsed.span_of(node))
            )
            prev_line = node.end_point[0]
            continue

        if comments and prev_line is not None and start_line == prev_line + 1:
            body, attributes = split_comments(comments)
            chunk = Chunk(
                body=tuple(body),
                attributes=tuple(attributes),
                decl=classify_declaration(node, parsed),
            )
            chunks.append(chunk)
            logger.debug(
                "Chunk on line %d: %s (%d body lines, %d attributes)",
                start_line + 1,
                type(chunk.decl).__name__,
                len(body),
                len(attributes),
            )

        comments = []
        prev_line = None
        last_code_line = node.end_point[0]

    return chunks


def classify_declaration(node: Any, parsed: ParsedSource) -> Declaration:
    span = parsed.span_of(node)

    if node.type == "variable_declaration":
        assignment = _child_of_type(node, "assignment_statement")
        if assignment is not None:
            return _classify_assignment(node, assignment, parsed)
        name = _target_name(_first_name(node), parsed)
        if name is None:
            return OtherDecl(span=span, text=parsed.text_of(node))
        return VariableDecl(name=name, span=span, text=parsed.text_of(node))

    if node.type == "assignment_statement":
        return _classify_assignment(node, node, parsed)

    if node.type == "function_declaration":
        name = _target_name(node.child_by_field_name("name"), parsed)
        text = _without_body(node, node, parsed)
        return FunctionDecl(name=name, span=span, text=text)

    return OtherDecl(span=span, text=parsed.text_of(node))


def _classify_assignment(
    node: Any, assignment: Any, parsed: ParsedSource
) -> Declaration:
    span = parsed.span_of(node)
    name = _target_name(_first_name(assignment), parsed)

    function = _function_value(assignment)
    if function is not None:
        text = _without_body(node, function, parsed)
        return FunctionDecl(name=name, span=span, text=text)
    if name is None:
        return OtherDecl(span=span, text=parsed.text_of(node))
    return VariableDecl(name=name, span=span, text=parsed.text_of(node))


def _child_of_type(node: Any, *types: str) -> Any | None:
    for child in node.children:
        if child.type in types:
            return child
    return None


def _first_name(node: Any) -> Any | None:
    names = _child_of_type(node, *_NAME_LISTS)
    if names is None:
        return None
    return names.child_by_field_name("name")


def _target_name(target: Any | None, parsed: ParsedSource) -> str | None:
    """Name a declaration is filed under: the identifier, or the table of `M.f`."""
    if target is None:
        return None
    if target.type == "identifier":
        return parsed.text_of(target)
    if target.type in _INDEX_EXPRESSIONS:
        table = target.child_by_field_name("table")
        if table is not None:
            return parsed.text_of(table)
    return None


def _function_value(assignment: Any) -> Any | None:
    expressions = _child_of_type(assignment, "expression_list")
    if expressions is None:
        return None
    value = expressions.child_by_field_name("value")
    if value is not None and value.type == "function_definition":
        return value
    return None


def _without_body(node: Any, function: Any, parsed: ParsedSource) -> str:
    body = function.child_by_field_name("body")
    if body is None:
        return parsed.text_of(node)
    head = parsed.text_between(node.start_byte, body.start_byte).rstrip()
    tail = parsed.text_between(body.end_byte, node.end_byte).strip()
    return f"{head} {tail}"
