from dataclasses import dataclass
import enum
from typing import Generic, TypeVar


K = TypeVar("K")
V = TypeVar("V")


class CellState(enum.Enum):
    EMPTY = enum.auto()
    OCCUPIED = enum.auto()
    DELETED = enum.auto()


@dataclass
class Cell(Generic[K, V]):
    key: K | None
    value: V | None
    state: CellState

    @classmethod
    def empty(cls) -> "Cell[K, V]":
        return cls(None, None, CellState.EMPTY)

    @property
    def occupied(self) -> bool:
        return self.state is CellState.OCCUPIED

    @property
    def deleted(self) -> bool:
        return self.state is CellState.DELETED

    def fill(self, key: K, value: V):
        self.key = key
        self.value = value
        self.state = CellState.OCCUPIED

    def clear(self):
        # tombstone
        self.key = None
        self.value = None
        self.state = CellState.DELETED

    def __repr__(self) -> str:
        match self.state:
            case CellState.OCCUPIED:
                return "{0!r}: {1!r}".format(self.key, self.value)
            case CellState.DELETED:
                return "<deleted>"
        return "<empty>"

