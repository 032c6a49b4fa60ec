"""
Preprocess 模块 - 图像预处理

职责：
- 输入图像统一为 RGBA 缓冲区
- 宽度限制在 max_image_width 以内
"""

from .preprocessor import Preprocessor

__all__ = ["Preprocessor"]
