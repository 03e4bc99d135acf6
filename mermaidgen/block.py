"""Block diagrams: blocks, spaces, arrows and the links between them."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

INDENT = "    "

_DIAGRAM_TYPE = "block-beta\n"


class _IdSequence:
    """Hands out consecutive string identifiers for new blocks."""

    def __init__(self) -> None:
        self._counter = itertools.count()

    def next(self) -> str:
        return str(next(self._counter))

    def reset(self) -> None:
        self._counter = itertools.count()


_ids = _IdSequence()


def reset_ids() -> None:
    """Restart block identifiers from "0"."""
    _ids.reset()


class BlockShape(str, Enum):
    """Visual shape of a block; each value is a template for the block text."""

    DEFAULT = '["%s"]'
    ROUND_EDGES = '("%s")'
    STADIUM = '(["%s"])'
    SUBROUTINE = '[["%s"]]'
    CYLINDRICAL = '[("%s")]'
    CIRCLE = '(("%s"))'
    ASYMMETRIC = '>"%s"]'
    RHOMBUS = '{"%s"}'
    HEXAGON = '{{"%s"}}'
    PARALLELOGRAM = '[/"%s"/]'
    TRAPEZOID = r'[/"%s"\]'
    TRAPEZOID_ALT = r'[\"%s"/]'
    DOUBLE_CIRCLE = '((("%s")))'

    def render(self, text: str) -> str:
        return self.value % text


class ArrowDirection(str, Enum):
    """Direction a block arrow points in."""

    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"
    X = "x"
    Y = "y"


def block_arrow_shape(text: str, *directions: ArrowDirection | str) -> str:
    """Format a block arrow with the given text and directions."""
    joined = ", ".join(ArrowDirection(d).value for d in directions)
    return f'<["{text}"]>({joined})'


@dataclass
class Block:
    """A node in a block diagram, possibly holding nested blocks."""

    id: str
    text: str
    style: str = field(default="", init=False)
    shape: BlockShape = field(default=BlockShape.DEFAULT, init=False)
    children: list[Block] = field(default_factory=list, init=False)
    is_space: bool = field(default=False, init=False)
    width: int = field(default=1, init=False)
    columns: int = field(default=0, init=False)
    _is_arrow: bool = field(default=False, init=False, repr=False)
    _directions: tuple[ArrowDirection, ...] = field(
        default=(), init=False, repr=False
    )

    @classmethod
    def space(cls, width: int = 0) -> Block:
        """Create an empty spacer block; a width of 0 means one column."""
        blk = cls("", "")
        blk.is_space = True
        blk.width = width
        return blk

    def set_width(self, width: int) -> Block:
        self.width = width
        return self

    def set_style(self, style: str) -> Block:
        self.style = style
        return self

    def set_shape(self, shape: BlockShape) -> Block:
        self.shape = BlockShape(shape)
        return self

    def add_block(self, text: str) -> Block:
        """Create a nested block with a fresh identifier and return it."""
        child = Block(_ids.next(), text)
        self.children.append(child)
        return child

    def set_arrow(self, *directions: ArrowDirection | str) -> Block:
        """Draw this block as an arrow pointing in the given directions."""
        self._is_arrow = True
        self._directions = tuple(ArrowDirection(d) for d in directions)
        return self

    def set_columns(self, count: int) -> Block:
        self.columns = count
        return self

    def add_column(self) -> Block:
        self.columns += 1
        return self

    def remove_column(self) -> Block:
        self.columns -= 1
        return self

    def _body(self) -> str:
        if self._is_arrow:
            return block_arrow_shape(self.text, *self._directions)
        return self.shape.render(self.text)

    def __str__(self) -> str:
        if self.is_space:
            if self.width > 0:
                return f"{INDENT}space:{self.width}\n"
            return f"{INDENT}space\n"

        lines: list[str] = []
        if self.children:
            if self.width > 0:
                lines.append(f"{INDENT}block:{self.id}:{self.width}\n")
            else:
                lines.append(f"{INDENT}block:{self.id}\n")
            if self.columns > 0:
                lines.append(f"{INDENT}columns {self.columns}\n")
            for child in self.children:
                if child.text:
                    lines.append(f"{INDENT}{child.id}{child._body()}\n")
                else:
                    lines.append(f"{INDENT}{child.id}\n")
            lines.append(f"{INDENT}end\n")
        elif self.text:
            if self.width > 1:
                lines.append(f"{INDENT}{self.id}{self._body()}:{self.width}\n")
            else:
                lines.append(f"{INDENT}{self.id}{self._body()}\n")
        elif self.width > 1:
            lines.append(f"{INDENT}{self.id}:{self.width}\n")
        else:
            lines.append(f"{INDENT}{self.id}\n")

        if self.style:
            lines.append(f"{INDENT}style {self.id} {self.style}\n")
        return "".join(lines)


@dataclass
class Link:
    """A connection between two blocks, optionally labelled."""

    source: Block
    target: Block
    text: str = field(default="", init=False)

    def set_text(self, text: str) -> Link:
        self.text = text
        return self

    def __str__(self) -> str:
        if self.text:
            return f'{INDENT}{self.source.id} -- "{self.text}" --> {self.target.id}\n'
        return f"{INDENT}{self.source.id} --> {self.target.id}\n"


class BlockDiagram:
    """A block diagram made of blocks, spaces and links."""

    def __init__(self) -> None:
        self.blocks: list[Block] = []
        self.links: list[Link] = []
        self.columns = 0

    def set_columns(self, count: int) -> BlockDiagram:
        self.columns = count
        return self

    def add_column(self) -> BlockDiagram:
        self.columns += 1
        return self

    def remove_column(self) -> BlockDiagram:
        self.columns -= 1
        return self

    def add_block(self, text: str) -> Block:
        """Create a top-level block with a fresh identifier and return it."""
        blk = Block(_ids.next(), text)
        self.blocks.append(blk)
        return blk

    def add_space(self, width: int = 0) -> None:
        """Add a spacer; a width of 0 means one column."""
        self.blocks.append(Block.space(width))

    def add_link(self, source: Block, target: Block) -> Link:
        link = Link(source, target)
        self.links.append(link)
        return link

    def __str__(self) -> str:
        parts = [_DIAGRAM_TYPE]
        if self.columns > 0:
            parts.append(f"{INDENT}columns {self.columns}\n")
        parts.extend(str(b) for b in self.blocks)
        parts.extend(str(link) for link in self.links)
        return "".join(parts)

    def render_to_file(self, path: str | Path) -> None:
        """Write the diagram text to the given path."""
        Path(path).write_text(str(self), encoding="utf-8")