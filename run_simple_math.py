# MIT License © 2025 Motohiro Suzuki
"""
Demo runner: call the native `add` and print the result.

  python3 run_simple_math.py                      # 5 + 7 on android/ios
  python3 run_simple_math.py --platform android --lib ./libsimple_math.so 40 2
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from diagnostics.logging_config import LEVEL_NAMES, setup_logging
from native_math import BindingConfig, NativeBindingError, SimpleMath

log = logging.getLogger("run_simple_math")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Call add(a, b) from the simple_math native library.")
    p.add_argument("a", nargs="?", type=int, default=5)
    p.add_argument("b", nargs="?", type=int, default=7)
    p.add_argument("--platform", default=None, help="platform identity override (android / ios)")
    p.add_argument("--lib", default=None, help="explicit path to libsimple_math.so")
    p.add_argument("--lib-dir", default=None, help="root of the <abi>/libsimple_math.so tree")
    p.add_argument("--log-level", type=str.upper, choices=LEVEL_NAMES, default=None)
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    cfg = BindingConfig.from_env().with_overrides(
        platform_identity=args.platform,
        lib_path=args.lib,
        lib_dir=args.lib_dir,
    )
    try:
        setup_logging(args.log_level or cfg.log_level)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    math = SimpleMath(config=cfg)
    try:
        result = math.add(args.a, args.b)
    except NativeBindingError as e:
        log.error("native binding failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except (TypeError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"Result from native .so: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
