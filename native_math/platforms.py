# MIT License © 2025 Motohiro Suzuki
"""
native_math/platforms.py

Supported target platforms and how each one ships the native code.

- ANDROID: separate loadable binary (libsimple_math.so) under an ABI-keyed tree
- IOS:     statically linked into the app binary, found via the process image

CPython reports sys.platform == "android" / "ios" on those systems.
Anything else is rejected before any library is touched.
"""

from __future__ import annotations

import platform as _platform
import sys
from enum import Enum
from typing import Optional

from .errors import UnsupportedPlatformError


class TargetPlatform(Enum):
    ANDROID = "android"
    IOS = "ios"


# platform.machine() -> Android ABI directory name
_ANDROID_ABIS = {
    "aarch64": "arm64-v8a",
    "arm64": "arm64-v8a",
    "armv7l": "armeabi-v7a",
    "armv8l": "armeabi-v7a",
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "i686": "x86",
    "i386": "x86",
}


def detect_platform(identity: Optional[str] = None) -> TargetPlatform:
    """
    Map a platform identity (default: sys.platform) onto a TargetPlatform.
    Raises UnsupportedPlatformError for anything outside the closed set.
    """
    ident = sys.platform if identity is None else identity
    key = ident.strip().lower()

    if key == TargetPlatform.ANDROID.value:
        return TargetPlatform.ANDROID
    elif key == TargetPlatform.IOS.value:
        return TargetPlatform.IOS
    else:
        raise UnsupportedPlatformError(ident)


def android_abi(machine: Optional[str] = None) -> Optional[str]:
    m = _platform.machine() if machine is None else machine
    return _ANDROID_ABIS.get(m.strip().lower())
