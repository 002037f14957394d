import math
from typing import Tuple

from .config import DIM_MAX, THUMB_MAX_SIDE
from .errors import InvalidDimension


def check_dimension(dim: float) -> int:
    """
    페이지 폭/높이 검증 후 정수로 변환 (반올림 아님, 0 방향 절사)
    음수 / u32 범위 초과 / NaN 은 InvalidDimension
    """
    if math.isnan(dim):
        raise InvalidDimension("value is not a number")
    if dim < 0:
        raise InvalidDimension("value is negative")
    if dim > DIM_MAX:
        raise InvalidDimension("value is too large")
    return int(dim)


def scale_ratio(w: int, h: int, max_side: int) -> float:
    side = max(w, h)
    if side == 0:
        return 0.0  # 0x0 페이지는 비율 0 (에러 아님)
    return float(max_side) / float(side)


def scale_rect(w: int, h: int, ratio: float) -> Tuple[int, int]:
    return int(w * ratio), int(h * ratio)


def thumbnail_size(width: float, height: float, max_side: int = THUMB_MAX_SIDE) -> Tuple[float, int, int]:
    """
    페이지 크기(float) → (ratio, thumb_w, thumb_h)
    결과가 0이어도 여기서는 보정하지 않는다. 서피스 생성 단계에서 거부됨.
    """
    try:
        w = check_dimension(width)
    except InvalidDimension as e:
        raise InvalidDimension(f"invalid width: {e}") from e
    try:
        h = check_dimension(height)
    except InvalidDimension as e:
        raise InvalidDimension(f"invalid height: {e}") from e

    ratio = scale_ratio(w, h, max_side)
    tw, th = scale_rect(w, h, ratio)
    return ratio, tw, th
