from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from ._format import seq_repr


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide display settings.

    Args:
        max_repr_items (int): Number of items shown by `Seq` reprs before truncating with `...`. Defaults to 20.
    """

    max_repr_items: int = 20

    def iter_repr(self, data: Iterable[object]) -> str:
        """Render the content of a wrapper, without the enclosing class name.

        Materialized tuples are shown item by item, anything else (lazy iterators) falls back to its own repr.
        """
        match data:
            case tuple():
                return seq_repr(data, max_items=self.max_repr_items)
            case _:
                return repr(data)


_CONFIG = Config()


def get_config() -> Config:
    """Return the current `Config`.

    Example:
    ```python
    >>> import pyomore as pm
    >>> pm.get_config().max_repr_items
    20

    ```
    """
    return _CONFIG


def set_config(**changes: int) -> Config:
    """Replace fields of the current `Config` and return the new one.

    Args:
        **changes (int): Fields to replace, by name.

    Returns:
        Config: The new process-wide configuration.

    Example:
    ```python
    >>> import pyomore as pm
    >>> _ = pm.set_config(max_repr_items=3)
    >>> pm.Iter(range(10)).collect()
    Seq(0, 1, 2, ...)
    >>> _ = pm.set_config(max_repr_items=20)

    ```
    """
    global _CONFIG
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG
