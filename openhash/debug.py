from .shared import printf
from .table import HashTable


def dump_table(table: HashTable, name: str):
    printf("== {0:s} ==\n", name)
    printf("capacity {0:d}, used {1:d}\n", table.len(), table.len_of_used())

    for index in range(table.len()):
        dump_cell(table, index)


def dump_cell(table: HashTable, index: int):
    cell = table.cells[index]
    printf("{0:04d} {1!r}", index, cell)

    if cell.occupied:
        # entries pushed along by a collision show the slot they hashed to
        home = table.hasher(cell.key) % table.len()
        if home != index:
            printf("  (home {0:04d})", home)

    printf("\n")
