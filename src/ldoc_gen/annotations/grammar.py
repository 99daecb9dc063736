# src/ldoc_gen/annotations/grammar.py

import logging
import re
from collections.abc import Sequence

from ldoc_gen.errors import AliasOrderError
from ldoc_gen.parsers.models import CommentLine

from .attributes import Attribute, Class, ClassMod, NoDoc, Param, Return, See
from .types import match_type_expr

logger = logging.getLogger(__name__)

_PREFIX = r"^[ \t]*---[ \t]*"

_DOC_COMMENT = re.compile(r"^[ \t]*---")
_PARAM = re.compile(
    _PREFIX + r"@param[ \t]+(?P<name>\w+|\.\.\.)(?P<optional>\?)?[ \t]+"
)
_RETURN = re.compile(_PREFIX + r"@return[ \t]+")
_RETURN_NAME = re.compile(r"(?P<name>\w+)(?:[ \t]+(?P<description>.*))?$")
_SEE = re.compile(
    _PREFIX + r"@see[ \t]+(?P<link>\w+(?:[.:]\w+)*)(?:[ \t]+(?P<description>.*))?"
)
_CLASS = re.compile(_PREFIX + r"@class[ \t]+(?:\(\w+\)[ \t]*)?(?P<name>\w+)")
_CLASSMOD = re.compile(_PREFIX + r"@classmod\b")
_NODOC = re.compile(_PREFIX + r"@nodoc\b")
_ALIAS = re.compile(_PREFIX + r"@alias[ \t]+(?P<name>\w+)(?P<rest>.*)$")
_CONTINUATION = re.compile(_PREFIX + r"\|>?[ \t]*")


def is_doc_comment(text: str) -> bool:
    return _DOC_COMMENT.match(text) is not None


def _type_and_rest(
    line: str, pos: int, *, return_list: bool = False
) -> tuple[str, str] | None:
    """Type expression at ``pos`` plus the stripped text after it.

    The type must be followed by whitespace or the end of the line.
    """
    match = match_type_expr(line, pos, return_list=return_list)
    if match is None:
        return None
    rest = line[match.end :]
    if rest and not rest[0].isspace():
        return None
    return match.text, rest.strip()


def _parse_param(line: str) -> Param | None:
    head = _PARAM.match(line)
    if head is None:
        return None
    typed = _type_and_rest(line, head.end(), return_list=True)
    if typed is None:
        return None
    type_expr, rest = typed
    return Param(
        name=head["name"],
        type_expr=type_expr,
        description=rest or None,
        optional=head["optional"] is not None,
    )


def _parse_return(line: str) -> Return | None:
    head = _RETURN.match(line)
    if head is None:
        return None
    typed = _type_and_rest(line, head.end(), return_list=True)
    if typed is None:
        return None
    type_expr, rest = typed

    name = description = None
    if rest:
        named = _RETURN_NAME.match(rest)
        if named is not None:
            name, description = named["name"], named["description"] or None
        else:
            description = rest
    return Return(type_expr=type_expr, name=name, description=description)


def _parse_see(line: str) -> See | None:
    match = _SEE.match(line)
    if match is None:
        return None
    description = (match["description"] or "").strip()
    return See(link=match["link"], description=description or None)


def _parse_class(line: str) -> Class | None:
    match = _CLASS.match(line)
    if match is None:
        return None
    return Class(type_name=match["name"])


def _parse_classmod(line: str) -> ClassMod | None:
    return ClassMod() if _CLASSMOD.match(line) else None


def _parse_nodoc(line: str) -> NoDoc | None:
    return NoDoc() if _NODOC.match(line) else None


# first match wins
_GRAMMARS = (
    _parse_param,
    _parse_return,
    _parse_see,
    _parse_class,
    _parse_classmod,
    _parse_nodoc,
)


def match_alias_header(line: str) -> tuple[str, str | None] | None:
    """Match ``---@alias Name [type]``, returning the name and the type text.

    The type may be left out when the variants follow on ``---|`` lines.
    """
    match = _ALIAS.match(line)
    if match is None:
        return None

    rest = match["rest"]
    if not rest.strip():
        return match["name"], None
    if not rest[0].isspace():
        return None

    typed = _type_and_rest(line, match.start("rest") + len(rest) - len(rest.lstrip()))
    if typed is None:
        return None
    return match["name"], typed[0]


def match_alias_continuation(line: str) -> str | None:
    """Match a ``---| type [comment]`` line, returning the type text."""
    match = _CONTINUATION.match(line)
    if match is None:
        return None
    typed = _type_and_rest(line, match.end())
    if typed is None:
        return None
    return typed[0]


def parse_attribute(line: str) -> Attribute | None:
    """Parse one comment line into an attribute, or None for body text."""
    for grammar in _GRAMMARS:
        attribute = grammar(line)
        if attribute is not None:
            return attribute

    if match_alias_header(line) is not None:
        raise AliasOrderError(f"@alias reached the attribute parser: {line!r}")
    return None


def split_comments(
    comments: Sequence[CommentLine],
) -> tuple[list[CommentLine], list[Attribute]]:
    """Partition a comment run into body lines and attributes.

    Only doc comments (``---``) take part; plain ``--`` comments in the run
    are left out of the generated output.
    """
    body: list[CommentLine] = []
    attributes: list[Attribute] = []

    for comment in comments:
        if not is_doc_comment(comment.text):
            logger.debug("Skipping non-doc comment on line %d", comment.line + 1)
            continue

        attribute = parse_attribute(comment.text)
        if attribute is None:
            body.append(comment)
        else:
            attributes.append(attribute)

    return body, attributes
