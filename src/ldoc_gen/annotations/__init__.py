from .aliases import TextEditor, extract_aliases
from .attributes import Alias, Attribute, Class, ClassMod, NoDoc, Param, Return, See
from .grammar import parse_attribute, split_comments
from .types import TypeMatch, match_type_expr, simplify_type

__all__ = [
    "Alias",
    "Attribute",
    "Class",
    "ClassMod",
    "NoDoc",
    "Param",
    "Return",
    "See",
    "TextEditor",
    "TypeMatch",
    "extract_aliases",
    "match_type_expr",
    "parse_attribute",
    "simplify_type",
    "split_comments",
]
