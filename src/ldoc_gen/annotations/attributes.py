# src/ldoc_gen/annotations/attributes.py

from dataclasses import dataclass
from typing import TypeAlias

from .types import simplify_type


def _with_description(line: str, *words: str | None) -> str:
    parts = [line, *(word for word in words if word)]
    return " ".join(parts)


@dataclass(frozen=True)
class Param:
    name: str
    type_expr: str
    description: str | None = None
    optional: bool = False  # written as `name?` in the source

    def to_ldoc(self) -> str:
        ty = simplify_type(self.type_expr)
        if self.optional and not ty.endswith("|nil"):
            ty = f"{ty}|nil"
        return _with_description(f"---@tparam {ty} {self.name}", self.description)


@dataclass(frozen=True)
class Return:
    type_expr: str
    name: str | None = None
    description: str | None = None

    def to_ldoc(self) -> str:
        # the target tag has no name slot, so the name leads the description
        return _with_description(
            f"---@treturn {simplify_type(self.type_expr)}",
            self.name,
            self.description,
        )


@dataclass(frozen=True)
class Class:
    type_name: str

    def to_ldoc(self, *, classmod: bool = False) -> str:
        name = simplify_type(self.type_name)
        if classmod:
            return f"---@classmod {name}"
        return f"---\n---@module {name}"


@dataclass(frozen=True)
class ClassMod:
    """Turns the chunk's ``Class`` into a ``@classmod`` section. Never emitted."""


@dataclass(frozen=True)
class See:
    link: str
    description: str | None = None

    def to_ldoc(self) -> str:
        return f"---@see {self.link}"


@dataclass(frozen=True)
class Alias:
    """A named union of type expressions, whitespace already stripped."""

    name: str
    type_exprs: tuple[str, ...]

    @property
    def type_expr(self) -> str:
        return "|".join(self.type_exprs)


@dataclass(frozen=True)
class NoDoc:
    """Keeps the chunk out of the generated output."""


Attribute: TypeAlias = Param | Return | Class | ClassMod | See | Alias | NoDoc
