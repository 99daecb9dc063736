from .examples import rewrite_examples
from .regroup import Section, regroup_chunks, render_chunks

__all__ = ["Section", "regroup_chunks", "render_chunks", "rewrite_examples"]
