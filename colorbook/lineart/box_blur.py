"""
可分离盒式模糊

用水平、垂直两次一维平均近似半径 r 的二维盒式模糊。
窗口为 2r+1，靠近边界时截断到图像范围内，除数为实际参与的样本数
（边缘截断，不回绕、不补零）。

每次 pass 都从一个缓冲区读、向另一个缓冲区写：
水平 pass  buffer  -> scratch
垂直 pass  scratch -> buffer
"""

import numpy as np

from ..buffer import PixelBuffer, clamp_to_bytes


def _window_means(values: np.ndarray, radius: int, axis: int) -> np.ndarray:
    """
    沿 axis 计算边缘截断的滑动窗口均值

    Args:
        values: uint8 (H,W)
        radius: 窗口半径
        axis: 1 为水平方向，0 为垂直方向

    Returns:
        float64 (H,W) 均值
    """
    n = values.shape[axis]

    # 前缀和，首位补 0：sum[lo:hi] = csum[hi] - csum[lo]
    csum = np.cumsum(values, axis=axis, dtype=np.int64)
    pad_shape = list(csum.shape)
    pad_shape[axis] = 1
    csum = np.concatenate([np.zeros(pad_shape, dtype=np.int64), csum], axis=axis)

    idx = np.arange(n)
    lo = np.clip(idx - radius, 0, n)
    hi = np.clip(idx + radius + 1, 0, n)

    sums = np.take(csum, hi, axis=axis) - np.take(csum, lo, axis=axis)
    counts = (hi - lo).astype(np.float64)
    if axis == 0:
        counts = counts[:, np.newaxis]
    return sums / counts


def _blur_pass(src: PixelBuffer, dst: PixelBuffer, radius: int, axis: int) -> None:
    """读 src 的 R 通道，把均值写入 dst 的 R、G、B，alpha 置 255"""
    means = clamp_to_bytes(_window_means(src.view()[..., 0], radius, axis))

    out = dst.view()
    out[..., 0] = means
    out[..., 1] = means
    out[..., 2] = means
    out[..., 3] = 255


def box_blur(
    buffer: PixelBuffer,
    radius: int,
    scratch: PixelBuffer | None = None
) -> PixelBuffer:
    """
    原地模糊缓冲区

    Args:
        buffer: 输入缓冲区（灰度），结果写回此缓冲区
        radius: 模糊半径，小于 1 时不做任何处理
        scratch: 可选的中间缓冲区，与 buffer 同尺寸且不共享存储

    Returns:
        同一个 buffer

    Raises:
        ValueError: scratch 尺寸不符或与 buffer 共享存储
    """
    if radius < 1:
        return buffer

    if scratch is None:
        scratch = PixelBuffer.blank(buffer.width, buffer.height)
    elif not scratch.same_shape(buffer):
        raise ValueError(
            f"scratch 尺寸 {scratch.width}x{scratch.height} 与 buffer "
            f"{buffer.width}x{buffer.height} 不一致"
        )
    elif scratch.shares_memory(buffer):
        raise ValueError("scratch 不能与 buffer 共享存储")

    radius = int(radius)
    _blur_pass(buffer, scratch, radius, axis=1)
    _blur_pass(scratch, buffer, radius, axis=0)
    return buffer
