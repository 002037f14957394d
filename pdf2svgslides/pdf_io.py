"""
PyMuPDF 기반 문서/페이지 래퍼

- PdfDocument: 페이지 수, 페이지 로드 (with 문으로 사용)
- PdfPage: 페이지 영역, SVG 1:1 출력, 썸네일용 래스터 서피스 생성
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

import pymupdf as fitz  # PyMuPDF
from loguru import logger

from .config import SVG_TEXT_AS_PATH
from .errors import DocumentError, SurfaceError
from .pixels import RGBX, PixelLayout


@dataclass(frozen=True)
class RasterSurface:
    width: int
    height: int
    data: bytes  # width*height*4, row padding 없음
    layout: PixelLayout


class PdfPage:
    def __init__(self, page: fitz.Page):
        self._page = page

    def bounds(self) -> Tuple[float, float, float, float]:
        r = self._page.rect
        if r.is_infinite:
            raise ValueError("page has no finite bounds")
        return r.x0, r.y0, r.x1, r.y1

    def render_svg(self, path: Path):
        svg = self._page.get_svg_image(matrix=fitz.Identity, text_as_path=SVG_TEXT_AS_PATH)
        path.write_text(svg, encoding="utf-8")

    def render_raster(self, width: int, height: int, ratio: float) -> RasterSurface:
        """
        width x height 크기의 RGBA 서피스에 ratio 배율로 페이지를 그린다.
        흰 배경 + 불투명 alpha. 크기가 0 이하이면 SurfaceError.
        """
        if width <= 0 or height <= 0:
            raise SurfaceError(f"invalid surface size {width}x{height}")
        try:
            surface = fitz.Pixmap(fitz.csRGB, fitz.IRect(0, 0, width, height), True)
        except Exception as e:
            raise SurfaceError(f"cannot allocate {width}x{height} surface: {e}") from e
        surface.clear_with(255)

        # alpha=False 로 그려야 배경이 흰색. 서피스 포맷(RGBA)에 맞춰 alpha 채널 추가
        rendered = self._page.get_pixmap(matrix=fitz.Matrix(ratio, ratio), alpha=False)
        rendered = fitz.Pixmap(rendered, 1)
        # MuPDF 는 픽셀 경계를 올림 처리하므로 1px 더 클 수 있음 → 서피스 영역만 복사
        surface.copy(rendered, surface.irect)

        data = surface.samples
        if surface.stride != width * 4 or len(data) != width * height * 4:
            raise SurfaceError(
                f"unexpected surface layout: stride={surface.stride}, size={len(data)}"
            )
        return RasterSurface(width, height, bytes(data), RGBX)


class PdfDocument:
    def __init__(self, doc: fitz.Document, name: str = ""):
        self._doc = doc
        self.name = name

    @classmethod
    def open(cls, path: Path) -> "PdfDocument":
        path = Path(path)
        if not path.is_file():
            raise DocumentError(f"error opening PDF file: {path} not found")
        try:
            doc = fitz.open(path.as_posix(), filetype="pdf")
        except Exception as e:
            raise DocumentError(f"error opening PDF file {path}: {e}") from e
        logger.debug(f"Opened {path} ({doc.page_count} pages)")
        return cls(doc, name=path.name)

    @property
    def page_count(self) -> int:
        return self._doc.page_count

    def load_page(self, index: int) -> PdfPage:
        return PdfPage(self._doc.load_page(index))

    def close(self):
        if not self._doc.is_closed:
            self._doc.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False
