import struct
import zlib

import pytest
from PIL import Image


def _striped(width: int, height: int) -> Image.Image:
    # 左/中/右三段不同颜色，便于检查居中裁剪
    img = Image.new("RGB", (width, height), (0, 200, 0))
    third = width // 3
    img.paste((200, 0, 0), (0, 0, third, height))
    img.paste((0, 0, 200), (width - third, 0, width, height))
    return img


@pytest.fixture
def striped_image():
    return _striped(300, 100)


@pytest.fixture
def logo_path(tmp_path):
    """A non-square JPEG logo, like assets/logo.jfif."""
    path = tmp_path / "assets" / "logo.jfif"
    path.parent.mkdir(parents=True)
    _striped(360, 240).save(path, format="JPEG", quality=95)
    return path


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data))


@pytest.fixture
def oversized_png_bytes():
    """PNG header claiming 30000x30000 pixels, far above Pillow's pixel limit."""
    ihdr = struct.pack(">IIBBBBB", 30000, 30000, 8, 2, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", ihdr)
        + _png_chunk(b"IDAT", zlib.compress(b""))
        + _png_chunk(b"IEND", b"")
    )
