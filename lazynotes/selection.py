"""Ordered list with a cursor, shared by the file list and the note pane.

The model owns a copy of its items and is swapped wholesale when the source
data changes. The cursor is either ``Unselected`` or ``Selected(index)``:
unselected means "nothing highlighted" for rendering but "first item" for
``current()``, and the first ``next()``/``previous()`` from it lands on 0.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class EmptySelectionError(IndexError):
    """Navigation or read on a model without items."""


@dataclass(frozen=True)
class Unselected:
    pass


@dataclass(frozen=True)
class Selected:
    index: int


CursorState = Union[Unselected, Selected]


class SelectionModel(Generic[T]):
    def __init__(self, items: Iterable[T] = (), select_first: bool = False) -> None:
        self._items: tuple[T, ...] = tuple(items)
        self._cursor: CursorState = Unselected()
        if select_first and self._items:
            self._cursor = Selected(0)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"SelectionModel(items={list(self._items)!r}, cursor={self._cursor!r})"

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    @property
    def cursor(self) -> CursorState:
        return self._cursor

    @property
    def is_empty(self) -> bool:
        return not self._items

    def _require_items(self) -> None:
        if not self._items:
            raise EmptySelectionError("selection model has no items")

    def _check_index(self, index: int, items: tuple[T, ...]) -> None:
        if not 0 <= index < len(items):
            raise IndexError(f"index {index} out of range for {len(items)} items")

    def replace_items(self, items: Iterable[T]) -> None:
        """Swap in new items and drop the selection."""
        self._items = tuple(items)
        self._cursor = Unselected()

    def replace_items_keeping_index(self, items: Iterable[T], index: int) -> None:
        """Swap in new items and select ``index`` in them.

        Used after an edit commit so the edited line stays highlighted.
        Raises ``IndexError`` when ``index`` does not fit the new items.
        """
        new_items = tuple(items)
        self._check_index(index, new_items)
        self._items = new_items
        self._cursor = Selected(index)

    def select(self, index: int) -> None:
        self._check_index(index, self._items)
        self._cursor = Selected(index)

    def unselect(self) -> None:
        self._cursor = Unselected()

    def next(self) -> None:
        """Advance the cursor, wrapping from the last item to the first."""
        self._require_items()
        cursor = self._cursor
        if isinstance(cursor, Selected):
            self._cursor = Selected((cursor.index + 1) % len(self._items))
        else:
            self._cursor = Selected(0)

    def previous(self) -> None:
        """Move the cursor back, wrapping from the first item to the last.

        From ``Unselected`` this selects index 0, matching ``next()``.
        """
        self._require_items()
        cursor = self._cursor
        if isinstance(cursor, Selected):
            self._cursor = Selected((cursor.index - 1) % len(self._items))
        else:
            self._cursor = Selected(0)

    def current(self) -> T:
        self._require_items()
        cursor = self._cursor
        if isinstance(cursor, Selected):
            return self._items[cursor.index]
        return self._items[0]

    def current_index(self) -> int | None:
        cursor = self._cursor
        if isinstance(cursor, Selected):
            return cursor.index
        return None
