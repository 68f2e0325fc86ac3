"""Minimal environment check entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a greeting, wait for Enter and exit successfully."""
    parser = argparse.ArgumentParser(prog="stockdash", description="Environment check.")
    parser.parse_args(argv)
    print("=== MINIMAL TEST PROGRAM ===")
    print("If you see this message, your environment is working.")
    print("Press Enter to exit...", flush=True)
    sys.stdin.readline()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())