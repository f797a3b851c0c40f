from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .errors import OutOfRange

# The only positional convention honored: a bare dash names standard input.
STDIN_MARKER = "-"


@dataclass(frozen=True, slots=True)
class NamedFile:
    # A filesystem path, kept exactly as the caller spelled it.
    path: str

    @property
    def name(self) -> str:
        return self.path


@dataclass(frozen=True, slots=True)
class StandardInput:
    # The process's standard input; reports the marker as its name.
    @property
    def name(self) -> str:
        return STDIN_MARKER


SourceDescriptor = NamedFile | StandardInput


def descriptor_for(name: str | os.PathLike[str]) -> SourceDescriptor:
    # Map one caller-supplied name to its descriptor kind.
    text = os.fspath(name)
    if text == STDIN_MARKER:
        return StandardInput()
    return NamedFile(text)


class SourceList:
    """Ordered, immutable sequence of source descriptors.

    Never empty: building it from no names yields a single StandardInput
    entry. Owns no open handles, so one instance can be shared by any
    number of readers.
    """

    __slots__ = ("_items",)

    def __init__(self, descriptors: Iterable[SourceDescriptor]) -> None:
        items = tuple(descriptors)
        if not items:
            items = (StandardInput(),)
        self._items: tuple[SourceDescriptor, ...] = items

    @classmethod
    def from_names(cls, names: Iterable[str | os.PathLike[str]]) -> SourceList:
        return cls(descriptor_for(name) for name in names)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[SourceDescriptor]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SourceList):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"SourceList({list(self._items)!r})"

    def at(self, index: int) -> SourceDescriptor:
        # Negative indexes are misuse too; no Python-style wraparound.
        if index < 0 or index >= len(self._items):
            raise OutOfRange(index, len(self._items))
        return self._items[index]

    def names(self) -> list[str]:
        return [item.name for item in self._items]
