# MIT License © 2025 Motohiro Suzuki
"""
native_math: ctypes binding for the single-function simple_math C library.

    from native_math import add
    add(5, 7)  # -> 12, computed by the native library
"""

from __future__ import annotations

from .binding import NativeBinding, SimpleMath, add, simple_math
from .config import BindingConfig
from .dylib_loader import load_native_library
from .errors import DylibLoadError, NativeBindingError, SymbolNotFoundError, UnsupportedPlatformError
from .platforms import TargetPlatform, detect_platform
from .symbols import ADD_SIGNATURE, FunctionSignature

__all__ = [
    "ADD_SIGNATURE",
    "BindingConfig",
    "DylibLoadError",
    "FunctionSignature",
    "NativeBinding",
    "NativeBindingError",
    "SimpleMath",
    "SymbolNotFoundError",
    "TargetPlatform",
    "UnsupportedPlatformError",
    "add",
    "detect_platform",
    "load_native_library",
    "simple_math",
]
