"""Tree of nuclides and decays offered for selection, with a binary cache form."""

from __future__ import annotations

import struct
from enum import IntEnum
from typing import Any, BinaryIO

from .nuclide_id import NuclideId

_TAG_NONE = 0
_TAG_BOOL = 1
_TAG_INT = 2
_TAG_FLOAT = 3
_TAG_STR = 4


class ItemType(IntEnum):
    """What a tree item stands for."""

    UNKNOWN = 0
    ROOT = 1
    DAUGHTER = 2
    DECAY = 3
    CASCADE = 4


def _read(stream: BinaryIO, fmt: str) -> Any:
    size = struct.calcsize(fmt)
    raw = stream.read(size)
    if len(raw) != size:
        raise ValueError("truncated tree item stream")
    return struct.unpack(fmt, raw)[0]


def _write_value(stream: BinaryIO, value: Any) -> None:
    if value is None:
        stream.write(struct.pack(">B", _TAG_NONE))
    elif isinstance(value, bool):
        stream.write(struct.pack(">B?", _TAG_BOOL, value))
    elif isinstance(value, int):
        stream.write(struct.pack(">Bq", _TAG_INT, value))
    elif isinstance(value, float):
        stream.write(struct.pack(">Bd", _TAG_FLOAT, value))
    elif isinstance(value, str):
        encoded = value.encode("utf-8")
        stream.write(struct.pack(">BI", _TAG_STR, len(encoded)))
        stream.write(encoded)
    else:
        raise TypeError(f"cannot store item data of type {type(value).__name__}")


def _read_value(stream: BinaryIO) -> Any:
    tag = _read(stream, ">B")
    if tag == _TAG_NONE:
        return None
    if tag == _TAG_BOOL:
        return _read(stream, ">?")
    if tag == _TAG_INT:
        return _read(stream, ">q")
    if tag == _TAG_FLOAT:
        return _read(stream, ">d")
    if tag == _TAG_STR:
        length = _read(stream, ">I")
        raw = stream.read(length)
        if len(raw) != length:
            raise ValueError("truncated tree item stream")
        return raw.decode("utf-8")
    raise ValueError(f"unknown item data tag {tag}")


class TreeItem:
    """A node holding display data for one column per entry of ``data``."""

    def __init__(
        self,
        kind: ItemType = ItemType.UNKNOWN,
        nid: NuclideId | None = None,
        data: list[Any] | None = None,
        selectable: bool = False,
        parent: TreeItem | None = None,
    ) -> None:
        self.kind = ItemType(kind)
        self.nid = NuclideId() if nid is None else nid
        self.data: list[Any] = [None] if data is None else list(data)
        self.selectable = selectable
        self.children: list[TreeItem] = []
        self.parent: TreeItem | None = None
        self.set_parent(parent)

    def __repr__(self) -> str:
        return (
            f"TreeItem(kind={self.kind.name}, data={self.data!r}, "
            f"children={len(self.children)})"
        )

    def set_parent(self, parent: TreeItem | None) -> None:
        """Link to ``parent`` and append this item to its children."""
        self.parent = parent
        if parent is not None:
            parent.children.append(self)

    def child(self, row: int) -> TreeItem | None:
        """The child at ``row``, or None when out of range."""
        if 0 <= row < len(self.children):
            return self.children[row]
        return None

    def child_count(self) -> int:
        return len(self.children)

    def column_count(self) -> int:
        return len(self.data)

    def has_parent(self) -> bool:
        return self.parent is not None

    def data_at(self, column: int) -> Any:
        """The data in ``column``, or None when out of range."""
        if 0 <= column < len(self.data):
            return self.data[column]
        return None

    def row(self) -> int:
        """Position among the parent's children; 0 without a parent."""
        if self.parent is None:
            return 0
        for position, sibling in enumerate(self.parent.children):
            if sibling is self:
                return position
        return -1

    def detached_copy(self) -> TreeItem:
        """A copy without links to parent or children."""
        return TreeItem(
            self.kind,
            NuclideId(self.nid.z, self.nid.n, self.nid.mass_only),
            list(self.data),
            self.selectable,
        )

    def dump(self, stream: BinaryIO) -> None:
        """Write this item and its subtree to a binary stream."""
        stream.write(struct.pack(">I", len(self.data)))
        for value in self.data:
            _write_value(stream, value)
        stream.write(struct.pack(">HH", self.nid.a & 0xFFFF, self.nid.z & 0xFFFF))
        stream.write(struct.pack(">?i", self.selectable, int(self.kind)))
        stream.write(struct.pack(">I", len(self.children)))
        for child in self.children:
            child.dump(stream)

    @classmethod
    def load(cls, stream: BinaryIO, parent: TreeItem | None = None) -> TreeItem:
        """Read an item and its subtree written by :meth:`dump`."""
        count = _read(stream, ">I")
        data = [_read_value(stream) for _ in range(count)]
        a = _read(stream, ">H")
        z = _read(stream, ">H")
        selectable = _read(stream, ">?")
        kind = ItemType(_read(stream, ">i"))
        item = cls(kind, NuclideId.from_az(a, z), data, selectable, parent)
        for _ in range(_read(stream, ">I")):
            cls.load(stream, item)
        return item