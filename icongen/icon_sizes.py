# icongen/icon_sizes.py
from typing import NamedTuple


class SizeEntry(NamedTuple):
    identifier: str
    width: int
    height: int


def _table(*entries: SizeEntry) -> tuple[SizeEntry, ...]:
    seen = set()
    for entry in entries:
        if entry.identifier in seen:
            raise ValueError(f"Duplicate icon identifier: {entry.identifier}")
        if entry.width <= 0 or entry.height <= 0:
            raise ValueError(f"Invalid icon size for {entry.identifier}: {entry.width}x{entry.height}")
        seen.add(entry.identifier)
    return tuple(entries)


# =========================
# iOS (AppIcon.appiconset 文件名 -> 像素尺寸)
# =========================
IOS_ICON_SIZES = _table(
    SizeEntry("Icon-App-20x20@1x", 20, 20),
    SizeEntry("Icon-App-20x20@2x", 40, 40),
    SizeEntry("Icon-App-20x20@3x", 60, 60),
    SizeEntry("Icon-App-29x29@1x", 29, 29),
    SizeEntry("Icon-App-29x29@2x", 58, 58),
    SizeEntry("Icon-App-29x29@3x", 87, 87),
    SizeEntry("Icon-App-40x40@1x", 40, 40),
    SizeEntry("Icon-App-40x40@2x", 80, 80),
    SizeEntry("Icon-App-40x40@3x", 120, 120),
    SizeEntry("Icon-App-60x60@2x", 120, 120),
    SizeEntry("Icon-App-60x60@3x", 180, 180),
    SizeEntry("Icon-App-76x76@1x", 76, 76),
    SizeEntry("Icon-App-76x76@2x", 152, 152),
    SizeEntry("Icon-App-83.5x83.5@2x", 167, 167),
    SizeEntry("Icon-App-1024x1024@1x", 1024, 1024),
)

# =========================
# Android (mipmap 密度目录 -> 像素尺寸)
# =========================
ANDROID_ICON_SIZES = _table(
    SizeEntry("mipmap-mdpi", 32, 32),
    SizeEntry("mipmap-hdpi", 48, 48),
    SizeEntry("mipmap-xhdpi", 72, 72),
    SizeEntry("mipmap-xxhdpi", 96, 96),
    SizeEntry("mipmap-xxxhdpi", 144, 144),
)

ANDROID_LAUNCHER = "ic_launcher.png"
ANDROID_LAUNCHER_ROUND = "ic_launcher_round.png"
