import logging

import pytest

from ldoc_gen.annotations.attributes import Attribute, Class, ClassMod, NoDoc
from ldoc_gen.chunking.chunking import Chunk
from ldoc_gen.parsers.models import (
    CommentLine,
    FunctionDecl,
    OtherDecl,
    SourceSpan,
    VariableDecl,
)
from ldoc_gen.rendering.regroup import regroup_chunks, render_chunks

_line = 0


def _span() -> SourceSpan:
    global _line
    _line += 2
    return SourceSpan(start_byte=0, end_byte=0, start_line=_line, end_line=_line)


def owner(name: str | None, *extra: Attribute) -> Chunk:
    decl = (
        VariableDecl(name=name, span=_span(), text=f"local {name} = {{}}")
        if name
        else OtherDecl(span=_span(), text="setmetatable({}, {})")
    )
    return Chunk(body=(), attributes=(Class(name or "Anon"), *extra), decl=decl)


def member(name: str | None, text: str, *attributes: Attribute) -> Chunk:
    decl = FunctionDecl(name=name, span=_span(), text=text)
    body = (CommentLine(f"---{text}", decl.span),)
    return Chunk(body=body, attributes=attributes, decl=decl)


def flatten(chunks: list[Chunk]) -> list[str]:
    return [chunk.decl.text for section in regroup_chunks(chunks) for chunk in section]


class TestRegroupChunks:
    def test_members_follow_their_owner(self) -> None:
        chunks = [
            member("Foo", "function Foo.a() end"),
            owner("Foo"),
            member("Bar", "function Bar.b() end"),
            member(None, "local x = function() end"),
            owner("Bar"),
            member("Foo", "function Foo.c() end"),
        ]

        assert flatten(chunks) == [
            "local Foo = {}",
            "function Foo.a() end",
            "function Foo.c() end",
            "local Bar = {}",
            "function Bar.b() end",
            "local x = function() end",
        ]

    def test_unmatched_members_keep_file_order_after_modules(self) -> None:
        chunks = [
            member("Foo", "function Foo.a() end"),
            member("Bar", "function Bar.b() end"),
            owner("Baz"),
        ]

        assert flatten(chunks) == [
            "local Baz = {}",
            "function Foo.a() end",
            "function Bar.b() end",
        ]

    def test_nodoc_chunks_are_dropped(self) -> None:
        chunks = [
            owner("Foo"),
            member("Foo", "function Foo.hidden() end", NoDoc()),
            owner("Gone", NoDoc()),
            member("Foo", "function Foo.shown() end"),
        ]

        assert flatten(chunks) == ["local Foo = {}", "function Foo.shown() end"]

    def test_owner_without_members_still_renders(self) -> None:
        sections = regroup_chunks([owner("Lonely")])

        assert sections[0].owner is not None
        assert sections[0].members == ()
        assert sections[-1].owner is None

    def test_owner_without_name_renders_in_place(self) -> None:
        chunks = [owner(None), member("X", "function X.a() end")]

        assert flatten(chunks) == ["setmetatable({}, {})", "function X.a() end"]

    def test_duplicate_owner_keeps_members_with_the_first(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        first = owner("Foo")
        second = owner("Foo", ClassMod())
        chunks = [first, second, member("Foo", "function Foo.a() end")]

        with caplog.at_level(logging.WARNING, logger="ldoc_gen.rendering.regroup"):
            sections = regroup_chunks(chunks)

        assert sections[0].owner is first
        assert [m.decl.text for m in sections[0].members] == ["function Foo.a() end"]
        assert sections[1].owner is second
        assert sections[1].members == ()
        assert "Duplicate module name 'Foo'" in caplog.text

    def test_every_chunk_rendered_exactly_once(self) -> None:
        chunks = [
            owner("A"),
            member("A", "function A.one() end"),
            owner("A"),
            member("B", "function B.two() end"),
            member(None, "return A"),
            owner("B"),
            member("A", "function A.three() end"),
        ]

        rendered = [chunk for section in regroup_chunks(chunks) for chunk in section]

        assert len(rendered) == len(chunks)
        assert {id(chunk) for chunk in rendered} == {id(chunk) for chunk in chunks}


class TestRenderChunks:
    def test_renders_sections_in_order(self) -> None:
        chunks = [
            member(None, "function helper() end"),
            owner("Foo", ClassMod()),
            member("Foo", "function Foo.bar() end"),
        ]

        assert render_chunks(chunks) == (
            "\n---@classmod Foo\nlocal Foo = {}\n"
            "\n---function Foo.bar() end\nfunction Foo.bar() end\n"
            "\n---function helper() end\nfunction helper() end\n"
        )

    def test_no_chunks_renders_nothing(self) -> None:
        assert render_chunks([]) == ""
