#!/usr/bin/env python3
"""
Generate Android launcher icons (square + round) only - no splash screens.
Usage: python -m icongen.generate_logo
"""
import os
import sys

from icongen.errors import IconGenerationError
from icongen.icon_gen import generate_android_icons

DEFAULT_SOURCE = "assets/logo.jfif"
DEFAULT_RES_DIR = "android/app/src/main/res"


def main() -> int:
    input_path = os.environ.get("ICON_SOURCE", DEFAULT_SOURCE)
    res_dir = os.environ.get("ANDROID_RES_DIR", DEFAULT_RES_DIR)

    print("[ANDROID] Generating Android app icons...", flush=True)
    try:
        written = generate_android_icons(input_path, res_dir)
    except IconGenerationError as e:
        print(f"[ERROR] Error generating Android icons: {e}", file=sys.stderr, flush=True)
        return 1

    print("[ANDROID] Android app icons generated successfully!", flush=True)
    print(f"[ANDROID] Total files generated: {len(written)}", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
