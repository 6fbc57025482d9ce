# MIT License © 2025 Motohiro Suzuki
"""
diagnostics/bench_runner.py

FFI call overhead benchmark (ALWAYS prints results)

What it measures:
- native `add` through the ctypes binding (ops/sec)
- the same addition in pure Python, as a baseline

The library is located through the usual NATIVE_MATH_* environment variables.

Run:
  NATIVE_MATH_PLATFORM=android NATIVE_MATH_LIB_PATH=./libsimple_math.so python3 -m diagnostics.bench_runner
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from native_math import NativeBindingError, SimpleMath


@dataclass(frozen=True)
class BenchResult:
    name: str
    ops: int
    seconds: float

    @property
    def ops_per_sec(self) -> float:
        return self.ops / self.seconds if self.seconds > 0 else 0.0

    @property
    def ns_per_op(self) -> float:
        return (self.seconds * 1e9) / self.ops if self.ops > 0 else 0.0


def _now() -> float:
    return time.perf_counter()


def _bench_loop(name: str, ops: int, fn: Callable[[int, int], int]) -> BenchResult:
    t0 = _now()
    for i in range(ops):
        fn(i, 1)
    t1 = _now()
    return BenchResult(name=name, ops=ops, seconds=(t1 - t0))


def bench_native_add(math: SimpleMath, ops: int = 200_000) -> BenchResult:
    math.ensure_loaded()
    return _bench_loop("SimpleMath.add (ctypes)", ops=ops, fn=math.add)


def bench_raw_foreign_call(math: SimpleMath, ops: int = 200_000) -> BenchResult:
    fn = math.binding.function()
    return _bench_loop("add (raw foreign function)", ops=ops, fn=fn)


def bench_python_add(ops: int = 200_000) -> BenchResult:
    def _add(a: int, b: int) -> int:
        return a + b

    return _bench_loop("python a + b", ops=ops, fn=_add)


def _print(r: BenchResult) -> None:
    print(f"  {r.name}: ops={r.ops} time={r.seconds:.4f}s ops/s={r.ops_per_sec:,.0f} ns/op={r.ns_per_op:,.1f}")


def main() -> None:
    print("=== native_math Bench Runner ===")
    print("")

    math = SimpleMath()
    try:
        print("[FFI]")
        _print(bench_native_add(math))
        _print(bench_raw_foreign_call(math))
    except NativeBindingError as e:
        print(f"[FFI] bench failed: {e!r}")

    print("")
    print("[BASELINE]")
    _print(bench_python_add())

    print("")
    print("=== DONE ===")


if __name__ == "__main__":
    main()
