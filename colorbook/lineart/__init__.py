"""
Lineart 模块 - 照片转涂色线稿

职责：
- 灰度、反相、盒式模糊、颜色减淡、色阶五个滤镜
- 按固定顺序编排为 transform
"""

from .grayscale import to_grayscale
from .invert import invert
from .box_blur import box_blur
from .color_dodge import color_dodge
from .levels import apply_levels
from .params import (
    THICKNESS_RANGE,
    CLEANLINESS_RANGE,
    clamp_thickness,
    clamp_cleanliness,
    thickness_to_radius,
    cleanliness_to_level,
)
from .sketch import transform

__all__ = [
    "to_grayscale",
    "invert",
    "box_blur",
    "color_dodge",
    "apply_levels",
    "THICKNESS_RANGE",
    "CLEANLINESS_RANGE",
    "clamp_thickness",
    "clamp_cleanliness",
    "thickness_to_radius",
    "cleanliness_to_level",
    "transform",
]
