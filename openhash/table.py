from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

from .cell import Cell, CellState
from .hashable import Hasher, hash_key
from .shared import printf_err


K = TypeVar("K")
V = TypeVar("V")


INIT_CAPACITY = 11


_debug_trace_growth = False


def set_debug_trace_growth(b: bool):
    global _debug_trace_growth
    _debug_trace_growth = b


@dataclass
class NotFound:
    pass


def new_cells(capacity: int) -> list[Cell]:
    return [Cell.empty() for _ in range(capacity)]


# open addressing with linear probing; removed cells stay as tombstones until
# the next growth
@dataclass(eq=False)
class HashTable(Generic[K, V]):
    cells: list[Cell[K, V]]
    taken_count: int
    hasher: Hasher

    def __init__(self, hasher: Hasher = hash_key) -> None:
        self.cells = new_cells(INIT_CAPACITY)
        self.taken_count = 0
        self.hasher = hasher

    @classmethod
    def new(cls, hasher: Hasher = hash_key) -> "HashTable[K, V]":
        return cls(hasher)

    def extend(self):
        old_len = len(self.cells)

        new_self: HashTable[K, V] = HashTable(self.hasher)
        new_self.cells = new_cells(old_len * 2 + 1)

        for cell in self.cells:
            if cell.occupied:
                new_self.insert(cell.key, cell.value)

        if _debug_trace_growth:
            printf_err(
                "grow {0:d} -> {1:d} ({2:d} entries)\n",
                old_len,
                len(new_self.cells),
                new_self.taken_count,
            )

        assert new_self.taken_count == self.taken_count
        self.cells = new_self.cells
        self.taken_count = new_self.taken_count

    def len(self) -> int:
        return len(self.cells)

    def len_of_used(self) -> int:
        return self.taken_count

    def insert(self, key: K, value: V):
        index = self.get_index(key)
        if index is not None:
            self.cells[index].value = value
            return

        if self.taken_count >= len(self.cells):
            self.extend()

        cells_len = len(self.cells)
        index = self.hasher(key) % cells_len

        while self.cells[index].occupied:
            index = (index + 1) % cells_len

        self.cells[index].fill(key, value)
        self.taken_count += 1
        assert self.taken_count <= len(self.cells)

    def get_index(self, key: K) -> int | None:
        cells_len = len(self.cells)
        index = self.hasher(key) % cells_len

        for _ in range(cells_len):
            cell = self.cells[index]
            if cell.state is CellState.EMPTY:
                return None
            if cell.occupied and cell.key == key:
                return index

            index = (index + 1) % cells_len

        return None

    def get(self, key: K) -> V | NotFound:
        index = self.get_index(key)
        if index is None:
            return NotFound()
        return self.cells[index].value

    def get_mutable(self, key: K) -> "ValueRef[K, V] | NotFound":
        index = self.get_index(key)
        if index is None:
            return NotFound()
        return ValueRef(self, key, index, self.cells[index])

    def remove(self, key: K) -> V | NotFound:
        index = self.get_index(key)
        if index is None:
            return NotFound()

        cell = self.cells[index]
        value = cell.value
        cell.clear()
        self.taken_count -= 1
        assert self.taken_count >= 0
        return value

    def entry(self, key: K):
        raise NotImplementedError("entry() is not supported", key)

    def add_all(self, from_t: "HashTable[K, V]"):
        for key, value in from_t.items():
            self.insert(key, value)

    def keys(self) -> Iterator[K]:
        for cell in self.cells:
            if cell.occupied:
                yield cell.key

    def values(self) -> Iterator[V]:
        for cell in self.cells:
            if cell.occupied:
                yield cell.value

    def items(self) -> Iterator[tuple[K, V]]:
        for cell in self.cells:
            if cell.occupied:
                yield cell.key, cell.value

    def __len__(self) -> int:
        return self.taken_count

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __contains__(self, key: K) -> bool:
        return self.get_index(key) is not None

    def __getitem__(self, key: K) -> V:
        index = self.get_index(key)
        if index is None:
            raise KeyError(key)
        return self.cells[index].value

    def __setitem__(self, key: K, value: V):
        self.insert(key, value)

    def __delitem__(self, key: K):
        if key not in self:
            raise KeyError(key)
        self.remove(key)

    def __repr__(self) -> str:
        pairs = ", ".join(repr(cell) for cell in self.cells if cell.occupied)
        return "HashTable({" + pairs + "})"


class StaleRefError(LookupError):
    pass


# valid until the key is removed or the table grows
@dataclass(eq=False)
class ValueRef(Generic[K, V]):
    table: HashTable[K, V]
    key: K
    index: int
    cell: Cell[K, V]

    def _checked_cell(self) -> Cell[K, V]:
        cells = self.table.cells
        if (
            self.index >= len(cells)
            or cells[self.index] is not self.cell
            or not self.cell.occupied
            or self.cell.key != self.key
        ):
            raise StaleRefError(self.key)
        return self.cell

    @property
    def value(self) -> V:
        return self._checked_cell().value

    @value.setter
    def value(self, value: V):
        self._checked_cell().value = value
