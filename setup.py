"""
Build script for htmltext with optional mypyc compilation.

Usage:
    # Pure Python build (default)
    pip install .

    # Compiled with mypyc
    HTMLTEXT_USE_MYPYC=1 pip install .
"""

import os
import sys
from pathlib import Path

from setuptools import setup

# Determine if we should use mypyc
USE_MYPYC = os.environ.get("HTMLTEXT_USE_MYPYC", "0") == "1"

# The scanning hot path. extractor.py stays interpreted because it assigns
# metadata fields through setattr on a slotted class.
MYPYC_MODULES = [
    "src/htmltext/scan.py",
    "src/htmltext/locator.py",
    "src/htmltext/entities.py",
    "src/htmltext/decoder.py",
]


def build_with_mypyc() -> list:
    """Build extension modules using mypyc."""
    try:
        from mypyc.build import mypycify
    except ImportError:
        print(
            "ERROR: mypyc is not installed. Install with: pip install mypy",
            file=sys.stderr,
        )
        print("Or install with mypyc support: pip install htmltext[mypyc]", file=sys.stderr)
        sys.exit(1)

    for module_path in MYPYC_MODULES:
        if not Path(module_path).exists():
            print(f"ERROR: Module not found: {module_path}", file=sys.stderr)
            sys.exit(1)

    print("=" * 70)
    print("Building htmltext with mypyc compilation")
    print("=" * 70)
    print(f"Compiling {len(MYPYC_MODULES)} modules:")
    for module in MYPYC_MODULES:
        print(f"  - {module}")
    print("=" * 70)

    opt_level = os.environ.get("MYPYC_OPT_LEVEL", "3")
    debug_level = os.environ.get("MYPYC_DEBUG_LEVEL", "0")

    return mypycify(
        MYPYC_MODULES,
        opt_level=opt_level,
        debug_level=debug_level,
        verbose=True,
        separate=False,
        multi_file=False,
    )


if __name__ == "__main__":
    ext_modules = []

    if USE_MYPYC:
        ext_modules = build_with_mypyc()

    setup(
        name="htmltext",
        version="0.1.0",
        description="Plain text, metadata and links from real-world (often broken) HTML",
        python_requires=">=3.10",
        package_dir={"": "src"},
        packages=["htmltext"],
        extras_require={
            "mypyc": ["mypy"],
            "test": ["pytest"],
        },
        entry_points={"console_scripts": ["htmltext = htmltext.__main__:main"]},
        ext_modules=ext_modules,
    )
