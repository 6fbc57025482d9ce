# MIT License © 2025 Motohiro Suzuki
"""
native_math/dylib_loader.py

Platform-aware native library resolver.

Strategy:
1) detect the target platform (closed set; anything else -> UnsupportedPlatformError)
2) ANDROID: open libsimple_math.so by name
   - explicit path (config / env)
   - <lib_dir>/<abi>/libsimple_math.so when present
   - bare filename, leaving the search to the system dynamic linker
3) IOS: the symbol is statically linked into the app, so take a handle to
   the current process image (dlopen(NULL))
"""

from __future__ import annotations

import ctypes
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .config import BindingConfig
from .errors import DylibLoadError
from .platforms import TargetPlatform, android_abi, detect_platform

log = logging.getLogger(__name__)


def _iter_candidates(cfg: BindingConfig, abi: Optional[str]) -> Iterable[str]:
    """
    Library candidates for the named-binary strategy (in priority order).
    """
    if cfg.lib_path is not None:
        yield str(cfg.lib_path)

    if abi is not None:
        cand = cfg.lib_dir / abi / cfg.lib_filename
        if cand.is_file():
            yield str(cand)

    yield cfg.lib_filename


def load_dylib(path: str, *, mode: int = ctypes.DEFAULT_MODE) -> ctypes.CDLL:
    """
    Open a single shared library and return ctypes.CDLL.
    """
    p = Path(path).expanduser()
    # A bare filename goes to dlopen unchanged so the linker search path applies.
    if p.parent == Path("."):
        target = path
    else:
        if not p.is_file():
            raise DylibLoadError(f"shared library not found: {p}")
        target = str(p.resolve())

    try:
        return ctypes.CDLL(target, mode=mode)
    except OSError as e:
        raise DylibLoadError(f"failed to load shared library: {target}\n{e}") from e


def open_named_library(cfg: BindingConfig, *, machine: Optional[str] = None) -> ctypes.CDLL:
    abi = android_abi(machine)
    tried: List[str] = []
    last_err: Optional[DylibLoadError] = None

    for cand in _iter_candidates(cfg, abi):
        tried.append(cand)
        log.debug("trying %s (abi=%s)", cand, abi)
        try:
            lib = load_dylib(cand)
        except DylibLoadError as e:
            last_err = e
            continue
        log.info("loaded %s", cand)
        return lib

    raise DylibLoadError(f"could not open {cfg.lib_filename}", tried) from last_err


def open_process_image() -> ctypes.CDLL:
    log.info("using symbols linked into the current process image")
    return ctypes.CDLL(None)


def load_native_library(cfg: Optional[BindingConfig] = None) -> ctypes.CDLL:
    """
    Resolve the handle for the running platform.
    Raises UnsupportedPlatformError before anything is loaded.
    """
    c = cfg if cfg is not None else BindingConfig.from_env()
    target = detect_platform(c.platform_identity)

    if target is TargetPlatform.ANDROID:
        return open_named_library(c)
    elif target is TargetPlatform.IOS:
        return open_process_image()
    raise AssertionError(f"unhandled platform: {target}")
