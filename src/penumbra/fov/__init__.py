from .fov import bresenham_line, compute_fov, is_visible_line
from .viewshed import Viewshed
from .visibility import VisibilitySystem

__all__ = ["Viewshed", "VisibilitySystem", "bresenham_line", "compute_fov", "is_visible_line"]
