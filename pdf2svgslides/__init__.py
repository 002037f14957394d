from .geometry import check_dimension, scale_ratio, scale_rect, thumbnail_size
from .pixels import BGRX, RGBX, PixelLayout, repack_rgb

__version__ = "0.1.0"
