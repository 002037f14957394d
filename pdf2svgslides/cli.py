"""
PDF 각 페이지를 SVG 로 분리하고, 페이지마다 JPEG 썸네일 생성

사용:
pdf2svgslides slides.pdf out/ --pages 1,3,5
pdf2svgslides slides.pdf out/ "1 3 5"      (예전 방식)
"""
import argparse
import sys
from pathlib import Path

from loguru import logger

from .config import DEFAULT_OUT_DIR, THUMB_MAX_SIDE
from .convert import convert_file
from .errors import ConversionError
from .logger import setup_logger
from .pages import parse_pages


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pdf2svgslides",
        description="Extract pages of a PDF as SVG files, and generate a "
                    f"JPEG thumbnail (longest side {THUMB_MAX_SIDE}px) for each.",
    )
    ap.add_argument("input", type=Path, help="input PDF file")
    ap.add_argument("output_dir", type=Path, nargs="?", default=DEFAULT_OUT_DIR,
                    help="output directory (default: current directory)")
    ap.add_argument("selected_pages", nargs="?", default=None,
                    help=argparse.SUPPRESS)  # 예전 방식: 공백 구분 페이지 목록
    ap.add_argument("--pages", default=None,
                    help="comma-separated 1-based page numbers to convert (default: all)")
    ap.add_argument("--log-file", type=Path, default=None, help="also write logs to this file")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.pages is not None and args.selected_pages is not None:
        ap.error("use either --pages or the positional page list, not both")

    setup_logger(args.log_file, verbose=args.verbose)

    page_arg = args.pages if args.pages is not None else args.selected_pages
    try:
        pages = parse_pages(page_arg) if page_arg is not None else None
        convert_file(args.input, args.output_dir, pages)
    except ConversionError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
