# src/ldoc_gen/rendering/regroup.py

"""Reorder chunks into module sections.

The target dialect documents a module or class once and expects all of its
members right after it. Source files interleave them freely, so chunks are
regrouped before rendering:

- chunks marked ``@nodoc`` are dropped
- owners (chunks with ``@class``) keep their file order
- each member follows the owner whose declaration name it was filed under,
  in file order
- members with no matching owner come last, in file order
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ldoc_gen.annotations.attributes import NoDoc
from ldoc_gen.chunking.chunking import Chunk

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Section:
    owner: Chunk | None  # None for the fallback section
    members: tuple[Chunk, ...]

    def __iter__(self) -> Iterator[Chunk]:
        if self.owner is not None:
            yield self.owner
        yield from self.members


def regroup_chunks(chunks: Iterable[Chunk]) -> list[Section]:
    documented = [chunk for chunk in chunks if not chunk.has(NoDoc)]
    owners = [chunk for chunk in documented if chunk.is_owner]
    members = [chunk for chunk in documented if not chunk.is_owner]

    buckets: dict[str, list[Chunk]] = {}
    for owner in owners:
        if owner.name is None:
            continue
        if owner.name in buckets:
            logger.warning(
                "Duplicate module name %r on line %d; members stay with the first one",
                owner.name,
                owner.decl.span.start_line + 1,
            )
            continue
        buckets[owner.name] = []

    fallback: list[Chunk] = []
    for member in members:
        if member.name is not None and member.name in buckets:
            buckets[member.name].append(member)
        else:
            fallback.append(member)
    logger.debug(
        "Regrouped %d owners, %d members, %d unattached",
        len(owners),
        len(members) - len(fallback),
        len(fallback),
    )

    sections: list[Section] = []
    claimed: set[str] = set()
    for owner in owners:
        if owner.name is None or owner.name in claimed:
            sections.append(Section(owner=owner, members=()))
            continue
        claimed.add(owner.name)
        sections.append(Section(owner=owner, members=tuple(buckets[owner.name])))

    sections.append(Section(owner=None, members=tuple(fallback)))
    return sections


def render_chunks(chunks: Iterable[Chunk]) -> str:
    return "".join(
        chunk.to_ldoc() for section in regroup_chunks(chunks) for chunk in section
    )
