#!/usr/bin/env python3
"""
Generate iOS app icons (logos) only - no splash screens.
Usage: python -m icongen.generate_ios_logo
"""
import os
import sys

from icongen.errors import IconGenerationError
from icongen.icon_gen import generate_ios_icons

DEFAULT_SOURCE = "assets/logo.jfif"
DEFAULT_OUTPUT_DIR = "ios/Runner/Assets.xcassets/AppIcon.appiconset"


def main() -> int:
    input_path = os.environ.get("ICON_SOURCE", DEFAULT_SOURCE)
    out_dir = os.environ.get("IOS_ICON_DIR", DEFAULT_OUTPUT_DIR)

    print("[IOS] Generating iOS app icons...", flush=True)
    try:
        written = generate_ios_icons(input_path, out_dir)
    except IconGenerationError as e:
        print(f"[ERROR] Error generating iOS icons: {e}", file=sys.stderr, flush=True)
        return 1

    print("[IOS] iOS app icons generated successfully!", flush=True)
    print(f"[IOS] Total files generated: {len(written)}", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
