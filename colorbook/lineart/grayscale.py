"""
灰度转换

luma = 0.299 R + 0.587 G + 0.114 B，写回 R、G、B 三个通道。
"""

import numpy as np

from ..buffer import PixelBuffer, clamp_to_bytes


def to_grayscale(buffer: PixelBuffer) -> PixelBuffer:
    """
    原地将缓冲区转为灰度（alpha 不变）

    Args:
        buffer: 输入缓冲区，会被修改

    Returns:
        同一个 buffer，便于链式调用
    """
    px = buffer.view()
    rgb = px[..., :3].astype(np.float64)
    luma = clamp_to_bytes(0.299 * rgb[..., 0] + 0.587 * rgb[..., 1] + 0.114 * rgb[..., 2])

    px[..., 0] = luma
    px[..., 1] = luma
    px[..., 2] = luma
    return buffer
