"""
Preprocessor - 图像预处理器

核心功能：
- resize_max_width: 宽度超过 max_image_width（默认 1200）时等比缩小
- 转换为 PixelBuffer，缺失的 alpha 补 255
- 创建 Context 记录原始尺寸与缩放比例
"""

import cv2
import numpy as np
from omegaconf import DictConfig

from ..buffer import PixelBuffer, clamp_to_bytes
from ..context import Context


class Preprocessor:
    """图像预处理器"""

    def __init__(self, cfg: DictConfig):
        """
        初始化预处理器

        Args:
            cfg: 配置对象，需包含 global.max_image_width
        """
        # 使用 getattr 访问 'global' 因为它是 Python 保留字
        global_cfg = getattr(cfg, 'global')
        self.max_image_width = int(global_cfg.max_image_width)

    def process(self, image_u8: np.ndarray) -> Context:
        """
        预处理输入图像

        Args:
            image_u8: 输入图像，uint8 (H,W)、(H,W,3) RGB 或 (H,W,4) RGBA；
                浮点图像按 [0, 1] 解释，其他整数类型按 [0, 255] 截断

        Returns:
            Context 对象

        Raises:
            ValueError: 如果输入图像格式不正确
        """
        if image_u8 is None:
            raise ValueError("输入图像不能为空")
        image_u8 = np.asarray(image_u8)
        if image_u8.ndim not in (2, 3) or (image_u8.ndim == 3 and image_u8.shape[2] not in (3, 4)):
            raise ValueError(f"输入图像必须是 (H,W)、(H,W,3) 或 (H,W,4) 格式，当前: {image_u8.shape}")
        if image_u8.shape[0] == 0 or image_u8.shape[1] == 0:
            raise ValueError(f"输入图像尺寸不能为 0，当前: {image_u8.shape}")
        if np.issubdtype(image_u8.dtype, np.floating):
            # 浮点图像约定范围为 [0, 1]
            image_u8 = clamp_to_bytes(image_u8 * 255)
        elif image_u8.dtype != np.uint8:
            image_u8 = clamp_to_bytes(image_u8)

        orig_h, orig_w = image_u8.shape[:2]

        image_resized, scale = self._resize_max_width(image_u8, self.max_image_width)
        buffer = PixelBuffer.from_array(image_resized)

        return Context(
            buffer=buffer,
            orig_size=(orig_h, orig_w),
            proc_size=buffer.shape,
            scale=scale
        )

    def postprocess(self, buffer: PixelBuffer, ctx: Context | None = None) -> np.ndarray:
        """
        后处理：导出为 RGB 图像

        线稿以工作尺寸展示和下载，不放大回原始尺寸。

        Args:
            buffer: 线稿缓冲区
            ctx: Context 对象，仅用于尺寸校验

        Returns:
            uint8 (H,W,3) RGB
        """
        if ctx is not None and buffer.shape != ctx.proc_size:
            raise ValueError(f"输出尺寸 {buffer.shape} 与处理尺寸 {ctx.proc_size} 不一致")
        return buffer.to_array(channels=3)

    @staticmethod
    def _resize_max_width(
        image: np.ndarray,
        max_width: int
    ) -> tuple[np.ndarray, float]:
        """
        按宽度缩放图像

        Args:
            image: 输入图像
            max_width: 最大宽度

        Returns:
            (resized_image, scale)
        """
        h, w = image.shape[:2]
        if w <= max_width:
            return image, 1.0

        scale = max_width / w
        new_h = max(1, int(h * scale))

        resized = cv2.resize(
            np.ascontiguousarray(image),
            (max_width, new_h),  # cv2.resize 使用 (width, height)
            interpolation=cv2.INTER_AREA  # 缩小时使用 INTER_AREA 效果更好
        )
        return resized, scale
