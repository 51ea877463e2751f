import sys


def check_size(name: str, size: int) -> int:
    if size < 0:
        msg = f"{name} must be non-negative, got {size}"
        raise ValueError(msg)
    return size


def clamp_hint(hint: int) -> int:
    # `list()` and `tuple()` reject hints that do not fit in a Py_ssize_t
    return min(hint, sys.maxsize)
