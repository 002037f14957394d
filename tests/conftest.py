"""
Shared fixtures.

FakeDocument / FakePage stand in for the PyMuPDF wrapper so the conversion
loop can be tested without a PDF on disk. `sample_pdf` builds a real 3-page
PDF with PyMuPDF for the integration tests.
"""
from pathlib import Path

import pymupdf as fitz
from loguru import logger
import pytest

from pdf2svgslides.errors import SurfaceError
from pdf2svgslides.pdf_io import RasterSurface
from pdf2svgslides.pixels import BGRX


class FakePage:
    def __init__(self, width, height, pixel=(0x30, 0x20, 0x10, 0xFF), fail=None):
        self.width = width
        self.height = height
        self.pixel = bytes(pixel)  # BGRX
        self.fail = fail or {}
        self.raster_calls = []

    def bounds(self):
        if "bounds" in self.fail:
            raise self.fail["bounds"]
        return 0.0, 0.0, self.width, self.height

    def render_svg(self, path: Path):
        if "svg" in self.fail:
            raise self.fail["svg"]
        path.write_text(f'<svg width="{self.width}" height="{self.height}"/>')

    def render_raster(self, width, height, ratio):
        self.raster_calls.append((width, height, ratio))
        if width <= 0 or height <= 0:
            raise SurfaceError(f"invalid surface size {width}x{height}")
        if "raster" in self.fail:
            raise self.fail["raster"]
        return RasterSurface(width, height, self.pixel * (width * height), BGRX)


class FakeDocument:
    def __init__(self, pages, fail_load=None):
        self.pages = pages
        self.fail_load = fail_load

    @property
    def page_count(self):
        return len(self.pages)

    def load_page(self, index):
        if self.fail_load is not None:
            raise self.fail_load
        return self.pages[index]


class FakeEncoder:
    def __init__(self, fail=None):
        self.calls = []
        self.fail = fail

    def __call__(self, path, rgb, width, height):
        if self.fail is not None:
            raise self.fail
        self.calls.append((path, rgb, width, height))
        path.write_bytes(b"jpeg")


@pytest.fixture
def encoder():
    return FakeEncoder()


@pytest.fixture
def sample_pdf(tmp_path):
    """3 pages: 1000x500 solid red, 500x1000 with text, blank letter size."""
    path = tmp_path / "slides.pdf"
    doc = fitz.open()
    p1 = doc.new_page(width=1000, height=500)
    p1.draw_rect(p1.rect, color=(1, 0, 0), fill=(1, 0, 0))
    p2 = doc.new_page(width=500, height=1000)
    p2.insert_text((72, 72), "slide 2", fontsize=24)
    doc.new_page(width=612, height=792)
    doc.save(path.as_posix())
    doc.close()
    return path


@pytest.fixture(autouse=True)
def _reset_logger():
    # cli.main() 가 sink 를 바꾸므로 테스트마다 정리
    yield
    logger.remove()
