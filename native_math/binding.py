# MIT License © 2025 Motohiro Suzuki
"""
native_math/binding.py

Process-wide, resolve-once binding to a native function.

- The handle and the bound function are resolved together on first use
  and never change afterwards (no teardown; lifetime = process).
- First use is guarded by a lock (double-checked), so concurrent callers
  see either nothing or the fully resolved pair.
- A failed resolution stores nothing and re-raises.
"""

from __future__ import annotations

import ctypes
import logging
import threading
from typing import Any, Callable, Optional, Tuple

from .config import BindingConfig
from .dylib_loader import load_native_library
from .symbols import ADD_SIGNATURE, FunctionSignature, bind_function

log = logging.getLogger(__name__)

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

Loader = Callable[[BindingConfig], ctypes.CDLL]


class NativeBinding:
    def __init__(
        self,
        signature: FunctionSignature,
        config: Optional[BindingConfig] = None,
        loader: Loader = load_native_library,
    ) -> None:
        self.signature = signature
        self._config = config
        self._loader = loader
        self._lock = threading.Lock()
        self._resolved: Optional[Tuple[ctypes.CDLL, Any]] = None

    @property
    def is_resolved(self) -> bool:
        return self._resolved is not None

    def _resolve(self) -> Tuple[ctypes.CDLL, Any]:
        r = self._resolved
        if r is not None:
            return r

        with self._lock:
            if self._resolved is None:
                cfg = self._config if self._config is not None else BindingConfig.from_env()
                lib = self._loader(cfg)
                fn = bind_function(lib, self.signature)
                # publish both at once
                self._resolved = (lib, fn)
                log.debug("bound %s", self.signature.name)
            return self._resolved

    def handle(self) -> ctypes.CDLL:
        return self._resolve()[0]

    def function(self) -> Any:
        return self._resolve()[1]


def _check_int32(name: str, v: int) -> int:
    if isinstance(v, bool) or not isinstance(v, int):
        raise TypeError(f"{name} must be int, got {type(v).__name__}")
    if v < INT32_MIN or v > INT32_MAX:
        raise ValueError(f"{name} out of int32 range: {v}")
    return v


class SimpleMath:
    """
    Application-facing wrapper around the native `add` symbol.

    The default instance (`simple_math`) reads its configuration from the
    environment on first use.
    """

    def __init__(self, config: Optional[BindingConfig] = None, loader: Loader = load_native_library) -> None:
        self._binding = NativeBinding(ADD_SIGNATURE, config=config, loader=loader)

    @property
    def binding(self) -> NativeBinding:
        return self._binding

    def ensure_loaded(self) -> None:
        """Resolve now so a missing library or symbol fails at start-up."""
        self._binding.function()

    def add(self, a: int, b: int) -> int:
        x = _check_int32("a", a)
        y = _check_int32("b", b)
        fn = self._binding.function()
        return int(fn(x, y))


simple_math = SimpleMath()


def add(a: int, b: int) -> int:
    return simple_math.add(a, b)
