import logging

from ._adaptors import (
    ArrayChunks,
    ArrayWindows,
    CartesianProduct,
    CircularArrayWindows,
    Combinations,
    CombinationsWithReps,
    PowerSet,
    RevArrayChunks,
    RevArrayWindows,
    flatten_tuple,
)
from ._array import (
    ArrayCapacityError,
    ArrayLengthError,
    SlotArray,
    collect_array,
    next_array,
)
from ._core import Config, get_config, set_config
from ._eager import Seq
from ._lazy import Iter
from ._results import (
    NONE,
    Err,
    NoneOption,
    Ok,
    Option,
    OptionUnwrapError,
    Result,
    ResultUnwrapError,
    Some,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "ArrayCapacityError",
    "ArrayChunks",
    "ArrayLengthError",
    "ArrayWindows",
    "CartesianProduct",
    "CircularArrayWindows",
    "Combinations",
    "CombinationsWithReps",
    "Config",
    "Err",
    "Iter",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "PowerSet",
    "Result",
    "ResultUnwrapError",
    "RevArrayChunks",
    "RevArrayWindows",
    "Seq",
    "SlotArray",
    "Some",
    "collect_array",
    "flatten_tuple",
    "get_config",
    "next_array",
    "set_config",
]
