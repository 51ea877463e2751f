from ._chunks import ArrayChunks, RevArrayChunks
from ._combinations import Combinations, CombinationsWithReps, PowerSet
from ._product import CartesianProduct, flatten_tuple
from ._windows import ArrayWindows, CircularArrayWindows, RevArrayWindows

__all__ = [
    "ArrayChunks",
    "ArrayWindows",
    "CartesianProduct",
    "CircularArrayWindows",
    "Combinations",
    "CombinationsWithReps",
    "PowerSet",
    "RevArrayChunks",
    "RevArrayWindows",
    "flatten_tuple",
]
