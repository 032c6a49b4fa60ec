"""
SketchPipeline - 主处理流水线

照片转涂色线稿的边界层入口：
预处理（缩放、转缓冲区） -> transform -> 导出。
"""

from pathlib import Path
from typing import Any

import numpy as np
from omegaconf import OmegaConf, DictConfig

from .buffer import PixelBuffer
from .context import SketchParams
from .export import encode_image, to_data_url
from .lineart import transform


class SketchPipeline:
    """照片转线稿 Pipeline"""

    def __init__(self, config_path: str | Path | None = None):
        """
        初始化 Pipeline

        Args:
            config_path: 配置文件路径，默认使用 config/default.yaml
        """
        if config_path is None:
            config_path = Path(__file__).parent.parent / "config" / "default.yaml"
        self.cfg: DictConfig = OmegaConf.load(config_path)

        self._preprocessor = None

    @property
    def preprocessor(self):
        """预处理模块（懒加载）"""
        if self._preprocessor is None:
            from .preprocess import Preprocessor
            self._preprocessor = Preprocessor(self.cfg)
        return self._preprocessor

    def resolve_params(
        self,
        ui_params: dict[str, Any] | SketchParams | None = None
    ) -> SketchParams:
        """
        合并 UI 参数与配置默认值

        Args:
            ui_params: dict 或 SketchParams，缺省项取 cfg.sketch

        Returns:
            SketchParams（未截断，截断在 transform 内完成）
        """
        if isinstance(ui_params, SketchParams):
            return ui_params
        ui_params = ui_params or {}
        return SketchParams(
            thickness=ui_params.get("thickness", self.cfg.sketch.default_thickness),
            cleanliness=ui_params.get("cleanliness", self.cfg.sketch.default_cleanliness),
        )

    def process_to_buffer(
        self,
        image_u8: np.ndarray,
        ui_params: dict[str, Any] | SketchParams | None = None
    ) -> PixelBuffer:
        """
        处理单张图像，返回线稿缓冲区

        Args:
            image_u8: 输入图像，uint8 (H,W)、(H,W,3) 或 (H,W,4)
            ui_params: UI 参数覆盖 (thickness, cleanliness)

        Returns:
            工作尺寸的 RGBA 缓冲区
        """
        params = self.resolve_params(ui_params)
        ctx = self.preprocessor.process(image_u8)
        if ctx.scale < 1.0:
            print(
                f"[Pipeline] 图像宽度超过 {self.preprocessor.max_image_width}px，"
                f"缩放 {ctx.orig_size[1]}x{ctx.orig_size[0]} -> {ctx.proc_size[1]}x{ctx.proc_size[0]}"
            )

        # 预处理得到的缓冲区只属于本次调用，直接原地输出
        return transform(ctx.buffer, params.thickness, params.cleanliness, out=ctx.buffer)

    def process(
        self,
        image_u8: np.ndarray,
        ui_params: dict[str, Any] | SketchParams | None = None
    ) -> np.ndarray:
        """
        处理单张图像

        Args:
            image_u8: 输入图像
            ui_params: UI 参数覆盖

        Returns:
            线稿图像，uint8 (H,W,3) RGB
        """
        buffer = self.process_to_buffer(image_u8, ui_params)
        return self.preprocessor.postprocess(buffer)

    def encode(
        self,
        image_u8: np.ndarray,
        ui_params: dict[str, Any] | SketchParams | None = None,
        fmt: str | None = None
    ) -> bytes:
        """处理并编码为图像文件字节"""
        buffer = self.process_to_buffer(image_u8, ui_params)
        return encode_image(buffer, fmt or self.cfg.export.format)

    def render_data_url(
        self,
        image_u8: np.ndarray,
        ui_params: dict[str, Any] | SketchParams | None = None
    ) -> str:
        """处理并编码为 data URL（用于网页直接展示）"""
        buffer = self.process_to_buffer(image_u8, ui_params)
        return to_data_url(buffer, self.cfg.export.format)


def load_pipeline(config_path: str | Path | None = None) -> SketchPipeline:
    """
    便捷函数：加载 Pipeline

    Args:
        config_path: 配置文件路径

    Returns:
        SketchPipeline 实例
    """
    return SketchPipeline(config_path)
