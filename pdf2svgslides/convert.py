# pdf2svgslides/convert.py
from pathlib import Path
from typing import Callable, Optional, Sequence

from loguru import logger

from .config import JPG_NAME, SVG_NAME, THUMB_MAX_SIDE
from .encoder import save_jpeg
from .errors import ConversionError, PageError, SurfaceError
from .geometry import thumbnail_size
from .pages import select_pages
from .pdf_io import PdfDocument
from .pixels import repack_rgb


def render_page(page, page_no: int, out_dir: Path) -> Path:
    svg_path = out_dir / SVG_NAME.format(page_no)
    try:
        page.render_svg(svg_path)
    except Exception as e:
        raise PageError(page_no, "render", e) from e
    return svg_path


def render_thumbnail(
    page,
    page_no: int,
    width: float,
    height: float,
    out_dir: Path,
    encoder: Callable = save_jpeg,
    max_side: int = THUMB_MAX_SIDE,
) -> Path:
    try:
        ratio, tw, th = thumbnail_size(width, height, max_side)
    except ValueError as e:
        raise PageError(page_no, "thumbnail geometry", e) from e
    logger.debug(f"page {page_no}: {width:g}x{height:g} -> {tw}x{th} (ratio={ratio:.6f})")

    try:
        surface = page.render_raster(tw, th, ratio)
    except SurfaceError as e:
        raise PageError(page_no, "surface creation", e) from e
    except Exception as e:
        raise PageError(page_no, "thumbnail render", e) from e

    # 서피스는 여기서 버리고 RGB 버퍼만 인코더로 넘김
    rgb = repack_rgb(surface.data, surface.layout)
    del surface

    jpg_path = out_dir / JPG_NAME.format(page_no)
    try:
        encoder(jpg_path, rgb, tw, th)
    except Exception as e:
        raise PageError(page_no, "save", e) from e
    return jpg_path


def convert_document(
    document,
    out_dir: Path,
    pages: Optional[Sequence[int]] = None,
    encoder: Callable = save_jpeg,
    max_side: int = THUMB_MAX_SIDE,
) -> list[Path]:
    """
    document 의 선택된 페이지마다 NNN.svg + NNN.jpg 생성
    에러가 나면 그 자리에서 중단 (이전 페이지 출력은 남음)
    """
    page_numbers = select_pages(pages, document.page_count)
    if not page_numbers:
        logger.info("Nothing to convert")
        return []

    out_dir = Path(out_dir)
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConversionError(f"error creating output directory {out_dir}: {e}") from e

    written = []
    for page_no in page_numbers:
        try:
            page = document.load_page(page_no - 1)
        except Exception as e:
            raise PageError(page_no, "page access", e) from e

        try:
            x0, y0, x1, y1 = page.bounds()
        except Exception as e:
            raise PageError(page_no, "bounding box", e) from e
        width, height = x1 - x0, y1 - y0

        written.append(render_page(page, page_no, out_dir))
        written.append(render_thumbnail(page, page_no, width, height, out_dir, encoder, max_side))
        logger.info(f"Page {page_no}/{document.page_count} → {written[-2].name}, {written[-1].name}")

    return written


def convert_file(pdf_path: Path, out_dir: Path, pages: Optional[Sequence[int]] = None) -> list[Path]:
    with PdfDocument.open(pdf_path) as doc:
        return convert_document(doc, out_dir, pages)
