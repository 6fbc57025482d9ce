# MIT License © 2025 Motohiro Suzuki
"""
Symbol lookup + ctypes signature binding.

The signature must match what the binary exports exactly; ctypes cannot
check it. Return values are converted through restype, so an int32 result
wraps the same way the native addition does.
"""

from __future__ import annotations

import ctypes
from dataclasses import dataclass
from typing import Any, Tuple

from .errors import SymbolNotFoundError


@dataclass(frozen=True)
class FunctionSignature:
    name: str
    restype: Any
    argtypes: Tuple[Any, ...]


# int32_t add(int32_t a, int32_t b)
ADD_SIGNATURE = FunctionSignature("add", ctypes.c_int32, (ctypes.c_int32, ctypes.c_int32))


def bind_function(lib: ctypes.CDLL, sig: FunctionSignature) -> Any:
    try:
        fn = getattr(lib, sig.name)
    except AttributeError as e:
        raise SymbolNotFoundError(sig.name) from e

    fn.argtypes = list(sig.argtypes)
    fn.restype = sig.restype
    return fn
