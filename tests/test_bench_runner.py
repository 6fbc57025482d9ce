# MIT License © 2025 Motohiro Suzuki
from __future__ import annotations

from pathlib import Path

from diagnostics.bench_runner import bench_native_add, bench_python_add, bench_raw_foreign_call
from native_math import BindingConfig, SimpleMath


def test_bench_results(simple_math_lib: Path) -> None:
    m = SimpleMath(config=BindingConfig(platform_identity="android", lib_path=simple_math_lib))

    for r in (bench_native_add(m, ops=100), bench_raw_foreign_call(m, ops=100), bench_python_add(ops=100)):
        assert r.ops == 100
        assert r.seconds >= 0
        assert r.ops_per_sec >= 0
