"""A two-dimensional array whose rows may have different lengths."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class RowView(Sequence, Generic[T]):
    """A live view of one row of a :class:`JaggedArray`.

    Writing through the view changes the array it came from.
    """

    __slots__ = ("_items",)

    def __init__(self, items: list[T]) -> None:
        self._items = items

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._items[index]
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RowView):
            return self._items == other._items
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RowView({self._items!r})"


class JaggedArray(Generic[T]):
    """Rows of elements, each row with its own length."""

    def __init__(self, rows: Iterable[Iterable[T]] | None = None) -> None:
        self._rows: list[list[T]] = [list(row) for row in rows] if rows is not None else []

    @classmethod
    def with_rows(cls, num_rows: int) -> "JaggedArray[T]":
        """Create an array of ``num_rows`` empty rows."""
        count = operator.index(num_rows)
        if count < 0:
            raise ValueError(f"Number of rows must be non-negative, got {count}.")
        return cls([] for _ in range(count))

    def _check_row(self, r_idx: int, func_name: str) -> int:
        r_idx = operator.index(r_idx)
        if not 0 <= r_idx < len(self._rows):
            raise IndexError(
                f"{func_name} - Row index ({r_idx}) out of bounds for "
                f"{len(self._rows)} rows."
            )
        return r_idx

    def _check_column(self, r_idx: int, c_idx: int) -> int:
        c_idx = operator.index(c_idx)
        row_len = len(self._rows[r_idx])
        if not 0 <= c_idx < row_len:
            raise IndexError(
                f"JaggedArray.at - Column index ({c_idx}) out of bounds for row "
                f"{r_idx} with length {row_len}."
            )
        return c_idx

    def num_rows(self) -> int:
        return len(self._rows)

    def num_cols(self, r_idx: int) -> int:
        r_idx = self._check_row(r_idx, "num_cols")
        return len(self._rows[r_idx])

    def total_elements(self) -> int:
        return sum(len(row) for row in self._rows)

    def at(self, r_idx: int, c_idx: int) -> T:
        r_idx = self._check_row(r_idx, "at (row)")
        c_idx = self._check_column(r_idx, c_idx)
        return self._rows[r_idx][c_idx]

    def set(self, r_idx: int, c_idx: int, value: T) -> None:
        """Replace the element at ``(r_idx, c_idx)``."""
        r_idx = self._check_row(r_idx, "at (row)")
        c_idx = self._check_column(r_idx, c_idx)
        self._rows[r_idx][c_idx] = value

    def __getitem__(self, r_idx: int) -> RowView[T]:
        r_idx = operator.index(r_idx)
        if not 0 <= r_idx < len(self._rows):
            raise IndexError(f"JaggedArray[] - Row index ({r_idx}) out of bounds.")
        return RowView(self._rows[r_idx])

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[RowView[T]]:
        for row in self._rows:
            yield RowView(row)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JaggedArray):
            return self._rows == other._rows
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"JaggedArray({self._rows!r})"

    def __str__(self) -> str:
        lines = [
            f"JaggedArray ({self.num_rows()} rows, {self.total_elements()} total elements):"
        ]
        if self.is_empty():
            lines.append("  (empty)")
        else:
            for i, row in enumerate(self._rows):
                body = ", ".join(str(value) for value in row)
                lines.append(f"  [{i}] ({len(row)} elements): {{{body}}}")
        return "\n".join(lines) + "\n"

    def copy(self) -> "JaggedArray[T]":
        return type(self)(self._rows)

    def add_row(self, row: Iterable[T]) -> None:
        self._rows.append(list(row))

    def insert_row(self, r_idx: int, row: Iterable[T]) -> None:
        r_idx = operator.index(r_idx)
        if not 0 <= r_idx <= len(self._rows):
            raise IndexError(
                f"insert_row - Row index for insertion ({r_idx}) out of bounds for "
                f"{len(self._rows)} rows."
            )
        self._rows.insert(r_idx, list(row))

    def remove_row(self, r_idx: int) -> None:
        r_idx = self._check_row(r_idx, "remove_row")
        del self._rows[r_idx]

    def add_element(self, r_idx: int, value: T) -> None:
        r_idx = self._check_row(r_idx, "add_element")
        self._rows[r_idx].append(value)

    def clear(self) -> None:
        self._rows.clear()

    def is_empty(self) -> bool:
        return not self._rows

    def to_lists(self) -> list[list[Any]]:
        """Return the rows as independent lists."""
        return [list(row) for row in self._rows]