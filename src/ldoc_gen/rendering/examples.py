# src/ldoc_gen/rendering/examples.py

import re

# A markdown heading mentioning "example(s)" directly above a fenced block,
# every line a doc comment. Blank doc lines may sit between the two. The
# fence must close before the comment run ends.
_EXAMPLE_BLOCK = re.compile(
    r"^[ \t]*---[ \t]*#{1,5}(?!#)[^\n]*?\bexamples?\b[^\n]*\n"
    r"(?:[ \t]*---[ \t]*\n)*"
    r"[ \t]*---[ \t]*```[^\n]*\n"
    r"(?P<content>(?:[ \t]*---[^\n]*\n)*?)"
    r"^[ \t]*---[ \t]*```[ \t]*(?:\n|\Z)",
    re.IGNORECASE | re.MULTILINE | re.DOTALL,
)

USAGE_TAG = "---@usage"


def rewrite_examples(text: str) -> str:
    """Turn every example heading plus fence into a ``@usage`` block.

    The fenced lines are kept verbatim; the heading and both fence lines go.
    """
    return _EXAMPLE_BLOCK.sub(lambda m: f"{USAGE_TAG}\n{m['content']}", text)
