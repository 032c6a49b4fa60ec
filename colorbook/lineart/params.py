"""
参数映射 - 滑块数值到滤镜参数

thickness   [1, 50]  -> 模糊半径 max(1, floor(thickness / 2))
cleanliness [0, 100] -> 白点 level = 255 - cleanliness * 1.5
"""

import math
import numbers

from ..errors import ParameterOutOfRangeError


THICKNESS_RANGE = (1, 50)
CLEANLINESS_RANGE = (0, 100)

# 对比度拉伸的上限，刻意低于 255 以保留线条边缘的抗锯齿灰度
STRETCH_CEILING = 240


def _require_number(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ParameterOutOfRangeError(f"{name} 必须是数值，当前: {value!r}")
    if not math.isfinite(value):
        raise ParameterOutOfRangeError(f"{name} 必须是有限数值，当前: {value!r}")
    return value


def clamp_thickness(thickness) -> int:
    """截断到 [1, 50] 并取整"""
    value = _require_number("thickness", thickness)
    low, high = THICKNESS_RANGE
    return int(math.floor(min(max(value, low), high)))


def clamp_cleanliness(cleanliness) -> float:
    """截断到 [0, 100]，保留小数"""
    value = _require_number("cleanliness", cleanliness)
    low, high = CLEANLINESS_RANGE
    return min(max(value, low), high)


def thickness_to_radius(thickness) -> int:
    """线条粗细 -> 盒式模糊半径"""
    return max(1, clamp_thickness(thickness) // 2)


def cleanliness_to_level(cleanliness) -> float:
    """干净度 -> 白点阈值，范围 [105, 255]"""
    return 255 - clamp_cleanliness(cleanliness) * 1.5
