from typing import NamedTuple

import numpy as np


class PixelLayout(NamedTuple):
    """4바이트 픽셀 안에서 R/G/B 바이트 위치 (나머지 1바이트는 버림)"""
    name: str
    red: int
    green: int
    blue: int


# 리틀엔디안 32bit xRGB 서피스의 메모리 순서: [B, G, R, x]
BGRX = PixelLayout("BGRX", red=2, green=1, blue=0)
# PyMuPDF RGB + alpha pixmap: [R, G, B, A]
RGBX = PixelLayout("RGBX", red=0, green=1, blue=2)


def repack_rgb(data: bytes, layout: PixelLayout = BGRX) -> bytes:
    """
    4바이트/픽셀 래스터 → 3바이트/픽셀 RGB (row-major 유지)
    입력은 건드리지 않고 새 버퍼를 만든다.
    """
    if len(data) % 4:
        raise ValueError(f"raster length {len(data)} is not a multiple of 4")

    px = np.frombuffer(data, dtype=np.uint8).reshape(-1, 4)
    rgb = px[:, [layout.red, layout.green, layout.blue]]
    return rgb.tobytes()
