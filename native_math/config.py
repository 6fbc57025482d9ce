# MIT License © 2025 Motohiro Suzuki
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

LIB_NAME = "simple_math"

ENV_PLATFORM = "NATIVE_MATH_PLATFORM"
ENV_LIB_PATH = "NATIVE_MATH_LIB_PATH"
ENV_LIB_DIR = "NATIVE_MATH_LIB_DIR"
ENV_LOG_LEVEL = "NATIVE_MATH_LOG_LEVEL"


def default_lib_dir() -> Path:
    # native_math/config.py -> native_math/jniLibs/<abi>/libsimple_math.so
    return Path(__file__).resolve().parent / "jniLibs"


def _get_env(env: Mapping[str, str], key: str) -> Optional[str]:
    v = env.get(key, "")
    v = v.strip()
    return v or None


@dataclass(frozen=True)
class BindingConfig:
    """
    Where and how to find the native library.

    platform_identity=None means "use sys.platform".
    """
    platform_identity: Optional[str] = None
    lib_path: Optional[Path] = None
    lib_dir: Path = default_lib_dir()
    lib_name: str = LIB_NAME
    log_level: str = "INFO"

    @property
    def lib_filename(self) -> str:
        return f"lib{self.lib_name}.so"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "BindingConfig":
        e = os.environ if env is None else env

        lib_path = _get_env(e, ENV_LIB_PATH)
        lib_dir = _get_env(e, ENV_LIB_DIR)
        return cls(
            platform_identity=_get_env(e, ENV_PLATFORM),
            lib_path=Path(lib_path).expanduser() if lib_path else None,
            lib_dir=Path(lib_dir).expanduser() if lib_dir else default_lib_dir(),
            log_level=(_get_env(e, ENV_LOG_LEVEL) or "INFO").upper(),
        )

    def with_overrides(
        self,
        *,
        platform_identity: Optional[str] = None,
        lib_path: Optional[str] = None,
        lib_dir: Optional[str] = None,
    ) -> "BindingConfig":
        cfg = self
        if platform_identity:
            cfg = replace(cfg, platform_identity=platform_identity)
        if lib_path:
            cfg = replace(cfg, lib_path=Path(lib_path).expanduser())
        if lib_dir:
            cfg = replace(cfg, lib_dir=Path(lib_dir).expanduser())
        return cfg
