from .pattern import BLACK, WHITE, render_split_circle, split_circle_sample
from .types import Raster

__all__ = ["BLACK", "Raster", "WHITE", "render_split_circle", "split_circle_sample"]
