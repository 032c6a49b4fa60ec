"""
颜色减淡混合

result = b / (255 - l) * 255，上限 255；l == 255 时直接取 255。
用模糊后的反相灰度对原灰度做减淡：平坦区域趋向白色，边缘处留下暗线。
"""

import numpy as np

from ..buffer import PixelBuffer, clamp_to_bytes


def color_dodge(
    base: PixelBuffer,
    blend: PixelBuffer,
    target: PixelBuffer | None = None
) -> PixelBuffer:
    """
    颜色减淡混合

    每个像素只依赖两个输入中同位置的像素，所以 target 可以就是 base。

    Args:
        base: 底图（灰度原图）
        blend: 混合图（模糊后的反相灰度）
        target: 输出缓冲区，默认新建；不能与 blend 共享存储

    Returns:
        target，R=G=B=结果值，alpha=255

    Raises:
        ValueError: 尺寸不一致或 target 与 blend 共享存储
    """
    if not base.same_shape(blend):
        raise ValueError(
            f"base {base.width}x{base.height} 与 blend {blend.width}x{blend.height} 尺寸不一致"
        )
    if target is None:
        target = PixelBuffer.blank(base.width, base.height)
    elif not target.same_shape(base):
        raise ValueError(f"target 尺寸 {target.width}x{target.height} 与输入不一致")
    elif target.shares_memory(blend):
        raise ValueError("target 不能与 blend 共享存储")

    b = base.view()[..., 0].astype(np.float64)
    l = blend.view()[..., 0].astype(np.float64)

    # l == 255 时公式分母为 0，显式分支直接给 255
    result = np.full(b.shape, 255.0)
    mask = l != 255
    result[mask] = np.minimum(255.0, b[mask] / (255.0 - l[mask]) * 255.0)
    result = clamp_to_bytes(result)

    out = target.view()
    out[..., 0] = result
    out[..., 1] = result
    out[..., 2] = result
    out[..., 3] = 255
    return target
