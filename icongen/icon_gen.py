# icongen/icon_gen.py
import os

from PIL import Image, ImageOps, UnidentifiedImageError

from .errors import (
    DecodeFailure,
    DirectoryCreateFailure,
    ResizeFailure,
    SourceNotFound,
    WriteFailure,
)
from .icon_sizes import (
    ANDROID_ICON_SIZES,
    ANDROID_LAUNCHER,
    ANDROID_LAUNCHER_ROUND,
    IOS_ICON_SIZES,
)

# PNG 无损，只影响 zlib 压缩力度
PNG_COMPRESS_LEVEL = 9


# =========================
# 基础操作
# =========================
def _has_alpha(img: Image.Image) -> bool:
    if img.mode in ("RGBA", "LA", "PA", "RGBa", "La"):
        return True
    return img.mode == "P" and "transparency" in img.info


def load_source(input_path: str) -> Image.Image:
    """
    读取源图，统一为 RGB（带透明通道时为 RGBA）
    """
    if not os.path.isfile(input_path):
        raise SourceNotFound(f"Source image not found: {input_path}", path=input_path)

    try:
        with Image.open(input_path) as img:
            img.load()
            return img.convert("RGBA" if _has_alpha(img) else "RGB")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise DecodeFailure(f"Cannot decode source image {input_path}: {e}", path=input_path) from e


def ensure_dir(path: str):
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateFailure(f"Cannot create directory {path}: {e}", path=path) from e


def cover_fit(img: Image.Image, width: int, height: int) -> Image.Image:
    """
    cover + center：等比缩放至完全覆盖目标尺寸，再以中心裁剪
    """
    if width <= 0 or height <= 0:
        raise ResizeFailure(f"Invalid target size {width}x{height}")
    try:
        return ImageOps.fit(img, (width, height), method=Image.LANCZOS, centering=(0.5, 0.5))
    except (ValueError, OSError) as e:
        raise ResizeFailure(f"Resize to {width}x{height} failed: {e}") from e


def round_mask(width: int, height: int) -> Image.Image:
    """
    圆形 alpha 遮罩，圆内切于较短边
    """
    cx = width / 2
    cy = height / 2
    r2 = (min(width, height) / 2) ** 2
    data = [
        255 if (x - cx) ** 2 + (y - cy) ** 2 <= r2 else 0
        for y in range(height)
        for x in range(width)
    ]
    mask = Image.new("L", (width, height), 0)
    mask.putdata(data)
    return mask


def apply_round_mask(square: Image.Image, mask: Image.Image) -> Image.Image:
    # dest-in：遮罩内保留原色且完全不透明，遮罩外完全透明
    opaque = square.convert("RGB").convert("RGBA")
    clear = Image.new("RGBA", square.size, (0, 0, 0, 0))
    return Image.composite(opaque, clear, mask)


def save_png(img: Image.Image, path: str):
    try:
        img.save(path, format="PNG", compress_level=PNG_COMPRESS_LEVEL)
    except OSError as e:
        raise WriteFailure(f"Cannot write {path}: {e}", path=path) from e


# =========================
# 批量生成
# =========================
def generate_ios_icons(input_path: str, out_dir: str) -> list[str]:
    img = load_source(input_path)
    ensure_dir(out_dir)

    written = []
    for entry in IOS_ICON_SIZES:
        out = os.path.join(out_dir, entry.identifier + ".png")
        save_png(cover_fit(img, entry.width, entry.height), out)
        written.append(out)
        print(f"[IOS] ✓ Generated {entry.identifier} ({entry.width}x{entry.height})", flush=True)
    return written


def generate_android_icons(input_path: str, res_dir: str) -> list[str]:
    img = load_source(input_path)
    ensure_dir(res_dir)

    written = []
    for entry in ANDROID_ICON_SIZES:
        dst = os.path.join(res_dir, entry.identifier)
        ensure_dir(dst)

        square = cover_fit(img, entry.width, entry.height)
        for name, icon in (
            (ANDROID_LAUNCHER, square),
            (ANDROID_LAUNCHER_ROUND, apply_round_mask(square, round_mask(entry.width, entry.height))),
        ):
            out = os.path.join(dst, name)
            save_png(icon, out)
            written.append(out)
            print(f"[ANDROID] ✓ Generated {entry.identifier}/{name} ({entry.width}x{entry.height})", flush=True)
    return written
