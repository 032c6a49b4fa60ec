"""
Context - 单次处理的上下文

贯穿边界层（预处理 -> 线稿 -> 后处理）的数据结构。
不缓存任何中间结果，每次调用都新建。
"""

from dataclasses import dataclass

from .buffer import PixelBuffer


@dataclass
class Context:
    """单次处理上下文"""

    buffer: PixelBuffer            # 工作尺寸的 RGBA 缓冲区
    orig_size: tuple[int, int]     # (H_orig, W_orig) - 原始尺寸
    proc_size: tuple[int, int]     # (H_proc, W_proc) - 处理尺寸
    scale: float                   # proc_size / orig_size 的比例


@dataclass
class SketchParams:
    """UI 传递的参数（可选覆盖默认配置）"""

    thickness: int = 10        # 线条粗细 [1, 50]
    cleanliness: float = 85    # 干净度 [0, 100]
