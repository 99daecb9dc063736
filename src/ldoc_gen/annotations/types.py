# src/ldoc_gen/annotations/types.py

"""Type expressions embedded in ``@param``, ``@return`` and ``@alias`` lines.

Grammar (whitespace is allowed around ``|``, ``,`` and ``:``)::

    TypeExpr     := UnionMember ('|' UnionMember)*
    UnionMember  := (Primary | '(' TypeExpr ')') '[]'* '?'?
    Primary      := TableLiteral | GenericTable | FunctionType
                  | QuotedString | Identifier
    TableLiteral := '{' balanced content '}'
    GenericTable := 'table' '<' TypeExpr ',' TypeExpr '>'
    FunctionType := 'fun' '(' (Param (',' Param)*)? ')' (':' TypeExpr)?
    Param        := Identifier '?'? ':' TypeExpr
    Identifier   := '...' | Word ('.' Word)*

On ``@param`` and ``@return`` lines a function type standing alone may
also list several return types: ``fun(): boolean, string``.

Expressions are kept as source text. Matching only decides where an
expression ends, the text itself is what gets emitted.
"""

import re
from dataclasses import dataclass

_BLANKS = " \t"
_IDENTIFIER = re.compile(r"\.\.\.|[A-Za-z0-9_]+(?:\.[A-Za-z0-9_]+)*")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class TypeMatch:
    """A type expression found inside a line of text."""

    text: str
    start: int
    end: int


def match_type_expr(
    text: str, pos: int = 0, *, return_list: bool = False
) -> TypeMatch | None:
    """Match the longest type expression starting exactly at ``pos``.

    With ``return_list``, a function type that makes up the whole match may
    list several return types (``fun(): boolean, string``). Nested function
    types never do, since the comma belongs to the enclosing construct there.
    """
    parser = _TypeExprParser(text)
    end = parser.type_expr(pos)
    if end is None:
        return None
    if return_list and parser.returns_end.get(pos) == end:
        end = parser.return_list(end)
    return TypeMatch(text=text[pos:end], start=pos, end=end)


def simplify_type(type_expr: str) -> str:
    """Re-serialize a type expression for the target dialect.

    Function and table literal types collapse to ``function`` and ``table``.
    Everything else loses its whitespace and spells optional types as
    ``|nil``.
    """
    type_expr = type_expr.strip()
    if type_expr.startswith("fun("):
        return "function"
    if type_expr.startswith("{"):
        return "table"
    return _WHITESPACE.sub("", type_expr.replace("?", "|nil"))


def strip_whitespace(type_expr: str) -> str:
    return _WHITESPACE.sub("", type_expr)


class _TypeExprParser:
    """Recursive descent over the grammar above.

    Every rule takes a start offset and returns the offset just past what it
    consumed, or None when the rule does not match there.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        # function type start -> end of its return type
        self.returns_end: dict[int, int] = {}

    def skip_blanks(self, pos: int) -> int:
        while pos < len(self.text) and self.text[pos] in _BLANKS:
            pos += 1
        return pos

    def type_expr(self, pos: int) -> int | None:
        end = self.union_member(pos)
        if end is None:
            return None

        while True:
            bar = self.skip_blanks(end)
            if not self.text.startswith("|", bar):
                return end
            member_end = self.union_member(self.skip_blanks(bar + 1))
            if member_end is None:
                # "string |" with nothing usable after the bar
                return end
            end = member_end

    def union_member(self, pos: int) -> int | None:
        if self.text.startswith("(", pos):
            inner = self.type_expr(self.skip_blanks(pos + 1))
            if inner is None:
                return None
            close = self.skip_blanks(inner)
            if not self.text.startswith(")", close):
                return None
            end = close + 1
        else:
            end = self.primary(pos)
            if end is None:
                return None

        while self.text.startswith("[]", end):
            end += 2
        if self.text.startswith("?", end):
            end += 1
        return end

    def primary(self, pos: int) -> int | None:
        if pos >= len(self.text):
            return None

        char = self.text[pos]
        if char == "{":
            return self.table_literal(pos)
        if char in "\"'":
            return self.quoted_string(pos)
        if self.text.startswith("table<", pos):
            end = self.generic_table(pos)
            if end is not None:
                return end
        if self.text.startswith("fun(", pos):
            end = self.function_type(pos)
            if end is not None:
                return end
        return self.identifier(pos)

    def table_literal(self, pos: int) -> int | None:
        depth = 0
        for index in range(pos, len(self.text)):
            char = self.text[index]
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return index + 1
        return None

    def generic_table(self, pos: int) -> int | None:
        key_end = self.type_expr(self.skip_blanks(pos + len("table<")))
        if key_end is None:
            return None

        comma = self.skip_blanks(key_end)
        if not self.text.startswith(",", comma):
            return None

        value_end = self.type_expr(self.skip_blanks(comma + 1))
        if value_end is None:
            return None

        close = self.skip_blanks(value_end)
        if not self.text.startswith(">", close):
            return None
        return close + 1

    def function_type(self, pos: int) -> int | None:
        cursor = self.skip_blanks(pos + len("fun("))

        if not self.text.startswith(")", cursor):
            while True:
                cursor = self.function_param(cursor)
                if cursor is None:
                    return None
                cursor = self.skip_blanks(cursor)
                if self.text.startswith(",", cursor):
                    cursor = self.skip_blanks(cursor + 1)
                    continue
                if self.text.startswith(")", cursor):
                    break
                return None

        end = cursor + 1
        colon = self.skip_blanks(end)
        if self.text.startswith(":", colon):
            returns_end = self.type_expr(self.skip_blanks(colon + 1))
            if returns_end is not None:
                end = returns_end
                self.returns_end[pos] = end
        return end

    def return_list(self, end: int) -> int:
        while True:
            comma = self.skip_blanks(end)
            if not self.text.startswith(",", comma):
                return end
            next_end = self.type_expr(self.skip_blanks(comma + 1))
            if next_end is None:
                return end
            end = next_end

    def function_param(self, pos: int) -> int | None:
        name_end = self.identifier(pos)
        if name_end is None:
            return None
        if self.text.startswith("?", name_end):
            name_end += 1

        colon = self.skip_blanks(name_end)
        if not self.text.startswith(":", colon):
            return None
        return self.type_expr(self.skip_blanks(colon + 1))

    def quoted_string(self, pos: int) -> int | None:
        close = self.text.find(self.text[pos], pos + 1)
        if close == -1:
            return None
        return close + 1

    def identifier(self, pos: int) -> int | None:
        match = _IDENTIFIER.match(self.text, pos)
        if match is None:
            return None
        return match.end()
