import sys

from .debug import dump_table
from .shared import printf
from .table import HashTable, set_debug_trace_growth


def demo(dump: bool = False) -> HashTable[str, int]:
    ht: HashTable[str, int] = HashTable.new()
    ht.insert("a", 12)
    ht.insert("b", 12)
    ht.insert("c", 12)

    printf("{0!r}\n", ht)
    if dump:
        dump_table(ht, "demo")
    return ht


def main(argv: list[str] | None = None):
    args = sys.argv[1:] if argv is None else argv

    dump = False
    for arg in args:
        match arg:
            case "--trace":
                set_debug_trace_growth(True)
            case "--dump":
                dump = True
            case _:
                printf("Usage: openhash [--trace] [--dump]\n")
                sys.exit(64)

    demo(dump)
