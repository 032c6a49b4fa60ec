"""
UI 模块 - Gradio 交互界面

模块结构：
- state.py: 会话状态管理 (ProcessingState, RenderGeneration)
- config.py: 滑块定义和参数构建
- components.py: UI 组件工厂函数
- theme.py: CSS 和主题定义
- layout.py: UI 布局定义
- logic.py: 核心业务逻辑
- gradio_app.py: 应用入口

使用方式：
    from ui import main
    main()  # 启动 Gradio 应用
"""

from .state import ProcessingState, RenderGeneration, compute_image_hash
from .config import (
    SliderSpec,
    THICKNESS_SLIDER,
    CLEANLINESS_SLIDER,
    build_ui_params,
)
from .gradio_app import main

__all__ = [
    "ProcessingState",
    "RenderGeneration",
    "compute_image_hash",
    "SliderSpec",
    "THICKNESS_SLIDER",
    "CLEANLINESS_SLIDER",
    "build_ui_params",
    "main",
]
