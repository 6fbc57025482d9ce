# MIT License © 2025 Motohiro Suzuki
from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
NATIVE_SRC = ROOT / "native" / "simple_math.c"


def _find_cc() -> str:
    for name in ("cc", "gcc", "clang"):
        cc = shutil.which(name)
        if cc:
            return cc
    pytest.skip("no C compiler available to build libsimple_math.so")


@pytest.fixture(scope="session")
def simple_math_lib(tmp_path_factory: pytest.TempPathFactory) -> Path:
    cc = _find_cc()
    out = tmp_path_factory.mktemp("native") / "libsimple_math.so"
    proc = subprocess.run(
        [cc, "-shared", "-fPIC", "-O2", "-o", str(out), str(NATIVE_SRC)],
        capture_output=True,
        text=True,
    )
    if proc.returncode != 0:
        pytest.fail(f"failed to build {out.name}:\n{proc.stderr}")
    return out
