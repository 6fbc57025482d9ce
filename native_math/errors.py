# MIT License © 2025 Motohiro Suzuki
from __future__ import annotations

from typing import Optional, Sequence


class NativeBindingError(RuntimeError):
    pass


class UnsupportedPlatformError(NativeBindingError):
    def __init__(self, identity: str) -> None:
        self.identity = identity
        super().__init__(f"This platform is not supported: {identity!r}")


class DylibLoadError(NativeBindingError):
    def __init__(self, message: str, candidates: Optional[Sequence[str]] = None) -> None:
        self.candidates = list(candidates or [])
        if self.candidates:
            message = message + "\nTried:\n" + "\n".join(f" - {c}" for c in self.candidates)
        super().__init__(message)


class SymbolNotFoundError(NativeBindingError):
    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"required symbol not found: {symbol!r}")
