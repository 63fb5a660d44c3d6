"""Explanation trees: structured diagnostic text and its indented rendering.

An explanation tree is built bottom-up (usually by matchers) and rendered once
into a single string. Indentation is never stored in the leaves; it is threaded
through the recursive write so that the same ``Text`` node renders differently
depending on how deeply it is nested.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Annotated, Any, Iterator, Literal, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field


class BulletStyle(BaseModel, ABC):
    """Strategy producing the bullet for the child at a zero-based index."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @abstractmethod
    def bullet_for(self, index: int) -> str:
        ...


class NumberedBullet(BulletStyle):
    def bullet_for(self, index: int) -> str:
        return f"{index}:"


class FixedBullet(BulletStyle):
    symbol: str = "*"

    def bullet_for(self, index: int) -> str:
        return self.symbol


class _TreeWriter:
    """Accumulates rendered output while tracking the current indentation."""

    def __init__(self) -> None:
        self._chunks: list[str] = []
        self._indentation = 0

    @contextmanager
    def indented(self, width: int) -> Iterator[_TreeWriter]:
        self._indentation += width
        try:
            yield self
        finally:
            self._indentation -= width

    def new_line(self) -> None:
        self._chunks.append("\n" + " " * self._indentation)

    def write_str(self, text: str) -> None:
        first, *rest = text.split("\n")
        self._chunks.append(first)
        for segment in rest:
            self.new_line()
            self._chunks.append(segment)

    def getvalue(self) -> str:
        return "".join(self._chunks)


class _Node(BaseModel, ABC):
    model_config = ConfigDict(frozen=True, extra="forbid")

    def render(self) -> str:
        writer = _TreeWriter()
        self.write_to(writer)
        return writer.getvalue()

    @abstractmethod
    def write_to(self, writer: _TreeWriter) -> None:
        ...

    def __str__(self) -> str:
        return self.render()


class Text(_Node):
    kind: Literal["text"] = "text"
    text: str

    def write_to(self, writer: _TreeWriter) -> None:
        writer.write_str(self.text)


class Concat(_Node):
    kind: Literal["concat"] = "concat"
    parts: tuple[ExprTree, ...]

    def write_to(self, writer: _TreeWriter) -> None:
        for part in self.parts:
            part.write_to(writer)


class Lines(_Node):
    kind: Literal["lines"] = "lines"
    items: tuple[ExprTree, ...]

    def write_to(self, writer: _TreeWriter) -> None:
        for index, item in enumerate(self.items):
            if index > 0:
                writer.new_line()
            item.write_to(writer)


class Nested(_Node):
    """``outer:`` followed by ``inner`` two columns further in, on a new line."""

    kind: Literal["nested"] = "nested"
    outer: ExprTree
    inner: ExprTree

    def write_to(self, writer: _TreeWriter) -> None:
        self.outer.write_to(writer)
        writer.write_str(":")
        with writer.indented(2):
            writer.new_line()
            self.inner.write_to(writer)


class BulletList(_Node):
    """``heading:`` followed by one bulleted line per child.

    Each child is indented by the width of its own ``" {bullet} "`` prefix, so
    continuation lines line up under the first character of the child. Bullets
    are sized per child, not padded to the widest one in the list.
    """

    kind: Literal["list"] = "list"
    heading: str
    bullet: BulletStyle
    children: tuple[ExprTree, ...]

    def write_to(self, writer: _TreeWriter) -> None:
        writer.write_str(self.heading)
        writer.write_str(":")
        for index, child in enumerate(self.children):
            writer.new_line()
            prefix = f" {self.bullet.bullet_for(index)} "
            writer.write_str(prefix)
            with writer.indented(len(prefix)):
                child.write_to(writer)


ExprTree = Annotated[
    Union[Text, Concat, Lines, Nested, BulletList],
    Field(discriminator="kind"),
]

for _model in (Concat, Lines, Nested, BulletList):
    _model.model_rebuild()


def text(value: str) -> Text:
    return Text(text=value)


def debug(value: Any) -> Text:
    """Capture the ``repr`` of *value* as a text leaf."""
    return Text(text=repr(value))


def concat(parts: Sequence[ExprTree]) -> Concat:
    return Concat(parts=tuple(parts))


def lines(items: Sequence[ExprTree]) -> Lines:
    return Lines(items=tuple(items))


def nested(outer: ExprTree, inner: ExprTree) -> Nested:
    return Nested(outer=outer, inner=inner)


def ordered_list(heading: str, children: Sequence[ExprTree]) -> BulletList:
    return BulletList(heading=heading, bullet=NumberedBullet(), children=tuple(children))


def unordered_list(heading: str, children: Sequence[ExprTree]) -> BulletList:
    return BulletList(heading=heading, bullet=FixedBullet(), children=tuple(children))
