"""
UI Components - UI 组件工厂函数
"""

import gradio as gr
from dataclasses import dataclass

from .config import SliderSpec, THICKNESS_SLIDER, CLEANLINESS_SLIDER


@dataclass
class SketchControls:
    """线稿参数控件引用集合"""
    thickness: gr.Slider = None
    cleanliness: gr.Slider = None
    redraw_btn: gr.Button = None
    download_btn: gr.Button = None
    download_file: gr.File = None

    def get_param_components(self) -> list:
        """返回参数控件的有序列表（用于 Gradio inputs）"""
        return [self.thickness, self.cleanliness]


def create_slider(spec: SliderSpec, value: float | None = None) -> gr.Slider:
    """根据 SliderSpec 创建滑块"""
    return gr.Slider(
        spec.minimum,
        spec.maximum,
        value=spec.value if value is None else value,
        step=spec.step,
        label=spec.label,
        info=spec.info
    )


def create_sketch_controls(defaults=None) -> SketchControls:
    """
    生成线稿参数控件组

    Args:
        defaults: cfg.sketch，提供 default_thickness / default_cleanliness

    Returns:
        SketchControls
    """
    controls = SketchControls()

    with gr.Group():
        gr.Markdown("##### 🎛️ 线稿设置")
        controls.thickness = create_slider(
            THICKNESS_SLIDER,
            defaults.default_thickness if defaults is not None else None
        )
        controls.cleanliness = create_slider(
            CLEANLINESS_SLIDER,
            defaults.default_cleanliness if defaults is not None else None
        )

    controls.redraw_btn = gr.Button(
        "🔄 重新绘制",
        variant="secondary",
        elem_classes="redraw-btn"
    )
    controls.download_btn = gr.Button("⬇️ 保存线稿", variant="primary", size="lg")
    controls.download_file = gr.File(label="下载", interactive=False)

    return controls
