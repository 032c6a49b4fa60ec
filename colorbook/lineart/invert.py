"""
通道反相（底片效果）
"""

from ..buffer import PixelBuffer


def invert(buffer: PixelBuffer) -> PixelBuffer:
    """原地将 R、G、B 替换为 255 - v，alpha 不变。连续调用两次恢复原值。"""
    px = buffer.view()
    px[..., :3] = 255 - px[..., :3]
    return buffer
