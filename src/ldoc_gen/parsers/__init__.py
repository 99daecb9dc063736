from .base import SourceParser
from .lua_parser import LuaParser
from .models import (
    CommentLine,
    Declaration,
    FunctionDecl,
    OtherDecl,
    ParsedSource,
    SourceSpan,
    VariableDecl,
    declaration_name,
)

__all__ = [
    "CommentLine",
    "Declaration",
    "FunctionDecl",
    "LuaParser",
    "OtherDecl",
    "ParsedSource",
    "SourceParser",
    "SourceSpan",
    "VariableDecl",
    "declaration_name",
]
