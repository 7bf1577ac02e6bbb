import sys
from typing import Any, TextIO


def _emit(stream: TextIO, format: str, args: tuple[Any, ...]):
    stream.write(format.format(*args))


def printf(format: str, *args: Any):
    _emit(sys.stdout, format, args)


def printf_err(format: str, *args: Any):
    _emit(sys.stderr, format, args)
