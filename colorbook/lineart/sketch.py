"""
Sketch - 线稿流水线编排

固定顺序，无分支、无重试：
    灰度 G -> 反相 I -> 模糊 B -> 颜色减淡(G, B) -> 色阶
中间缓冲区只属于单次调用，调用结束即丢弃。
"""

from ..buffer import PixelBuffer, validate_buffer
from .box_blur import box_blur
from .color_dodge import color_dodge
from .grayscale import to_grayscale
from .invert import invert
from .levels import apply_levels
from .params import clamp_cleanliness, clamp_thickness, thickness_to_radius


def transform(
    source: PixelBuffer,
    thickness,
    cleanliness,
    out: PixelBuffer | None = None
) -> PixelBuffer:
    """
    将照片缓冲区转换为涂色线稿

    Args:
        source: 输入缓冲区，不会被修改（除非 out 就是 source）
        thickness: 线条粗细 [1, 50]，越界截断
        cleanliness: 干净度 [0, 100]，越界截断
        out: 可选的输出缓冲区；传入 source 即原地输出

    Returns:
        与 source 同尺寸的缓冲区，R=G=B，alpha=255

    Raises:
        InvalidDimensionsError: 尺寸非法
        BufferSizeMismatchError: 像素字节数与尺寸不符
        ParameterOutOfRangeError: 参数不是有限数值
        ValueError: out 尺寸与 source 不一致
    """
    validate_buffer(source)
    thickness = clamp_thickness(thickness)
    cleanliness = clamp_cleanliness(cleanliness)

    if out is None:
        out = PixelBuffer.blank(source.width, source.height)
    else:
        validate_buffer(out)
        if not out.same_shape(source):
            raise ValueError(
                f"out 尺寸 {out.width}x{out.height} 与 source "
                f"{source.width}x{source.height} 不一致"
            )

    gray = to_grayscale(source.copy())
    blurred = invert(gray.copy())
    box_blur(blurred, thickness_to_radius(thickness))

    color_dodge(gray, blurred, out)
    return apply_levels(out, cleanliness)
