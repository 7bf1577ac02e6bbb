from typing import Any, Callable, Protocol, runtime_checkable


USIZE_MASK = (1 << 64) - 1
DJB2_SEED = 5381


@runtime_checkable
class HashAble(Protocol):
    def hash_key(self) -> int:
        ...


Hasher = Callable[[Any], int]


def hash_int(value: int) -> int:
    return value & USIZE_MASK


def hash_char(c: str) -> int:
    if len(c) != 1:
        raise ValueError("expected a single character, got {0!r}".format(c))
    hash = DJB2_SEED
    return (((hash << 5) + hash) + ord(c)) & USIZE_MASK


def hash_bytes(data: bytes | bytearray) -> int:
    hash = DJB2_SEED
    for b in data:
        hash = (((hash << 5) + hash) + b) & USIZE_MASK
    return hash


def hash_str(s: str) -> int:
    return hash_bytes(s.encode("utf-8", "surrogatepass"))


def hash_key(key: Any) -> int:
    # a one-character str is treated as a char, not as text
    match key:
        case HashAble():
            return key.hash_key() & USIZE_MASK
        case int():
            return hash_int(key)
        case str() if len(key) == 1:
            return hash_char(key)
        case str():
            return hash_str(key)
        case bytes() | bytearray():
            return hash_bytes(key)

    raise TypeError(
        "key of type {0:s} does not support hash_key".format(type(key).__name__)
    )
