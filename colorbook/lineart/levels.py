"""
色阶归一化（白点阈值 + 对比度拉伸）

v > level       -> 255（抹掉浅色背景阴影）
v <= level      -> v / level * 240（拉伸到 [0, 240]，保留一点抗锯齿）
"""

import numpy as np

from ..buffer import PixelBuffer, clamp_to_bytes
from .params import STRETCH_CEILING, cleanliness_to_level


def apply_levels(buffer: PixelBuffer, white_point) -> PixelBuffer:
    """
    原地应用色阶

    Args:
        buffer: 颜色减淡的结果（R=G=B），会被修改
        white_point: 干净度 [0, 100]，越界时截断

    Returns:
        同一个 buffer，alpha 置 255
    """
    level = cleanliness_to_level(white_point)

    px = buffer.view()
    v = px[..., 0].astype(np.float64)
    result = clamp_to_bytes(np.where(v > level, 255.0, v / level * STRETCH_CEILING))

    px[..., 0] = result
    px[..., 1] = result
    px[..., 2] = result
    px[..., 3] = 255
    return buffer
