from pathlib import Path

DEFAULT_OUT_DIR = Path(".")

# 썸네일 긴 변 길이(px)
THUMB_MAX_SIDE = 512

# SVG: 텍스트를 path 로 출력 (폰트 없는 뷰어 호환)
SVG_TEXT_AS_PATH = True

JPEG_QUALITY = 85

SVG_NAME = "{:03d}.svg"
JPG_NAME = "{:03d}.jpg"

# u32 최대값. 이보다 큰 페이지 크기는 거부
DIM_MAX = 2**32 - 1

LOG_LEVEL = "INFO"
LOG_ROTATION = "1 MB"
