"""
UI Layout - Gradio UI 布局定义

将 UI 布局从主文件分离，提高可维护性。
"""

import gradio as gr

from .theme import create_theme, get_css
from .components import create_sketch_controls
from .state import ProcessingState
from .logic import get_pipeline, load_image, render_sketch, export_sketch


def create_ui():
    """
    创建 Gradio UI

    Returns:
        dict: demo / theme / css
    """
    theme = create_theme()
    css = get_css()
    cfg = get_pipeline().cfg

    with gr.Blocks(title="Colorbook - 涂色线稿生成") as demo:
        # 初始化用户会话状态
        state = gr.State(ProcessingState())

        with gr.Row(elem_classes="header"):
            gr.Markdown(
                """
                # 🖍️ Colorbook
                ### 照片一键变成涂色线稿
                """
            )

        with gr.Row():
            # 左侧控制区
            with gr.Column(scale=1, min_width=320):
                input_image = gr.Image(label="上传照片", type="numpy", height=260)
                controls = create_sketch_controls(cfg.sketch)
                gr.Markdown(
                    "*💡 干净程度调到 80 以上灰色背景会消失；线条太细就把线条粗细往右拉*"
                )

            # 右侧预览区
            with gr.Column(scale=2):
                output_image = gr.Image(
                    label="线稿预览",
                    type="numpy",
                    elem_id="sketch_img",
                    height=600,
                    interactive=False
                )

        param_inputs = controls.get_param_components()

        # 事件处理函数
        def on_upload(current_state, image, thickness, cleanliness):
            """上传新图像后立即渲染"""
            new_state = load_image(current_state, image)
            if image is None:
                return None, new_state
            return _respond(new_state, render_sketch(new_state, thickness, cleanliness))

        def on_params(current_state, thickness, cleanliness):
            """参数变化时实时渲染"""
            return _respond(current_state, render_sketch(current_state, thickness, cleanliness))

        def on_redraw(current_state, thickness, cleanliness):
            """强制重新渲染"""
            return _respond(
                current_state,
                render_sketch(current_state, thickness, cleanliness, force=True)
            )

        def _respond(current_state, result):
            if result is None and current_state.is_ready():
                # 结果已过期，保留当前展示
                return gr.skip(), gr.skip()
            return result, current_state

        # 事件绑定
        input_image.change(
            fn=on_upload,
            inputs=[state, input_image, *param_inputs],
            outputs=[output_image, state],
            trigger_mode="always_last"
        )
        for component in param_inputs:
            component.change(
                fn=on_params,
                inputs=[state, *param_inputs],
                outputs=[output_image, state],
                trigger_mode="always_last"
            )
        controls.redraw_btn.click(
            fn=on_redraw,
            inputs=[state, *param_inputs],
            outputs=[output_image, state]
        )
        controls.download_btn.click(
            fn=export_sketch,
            inputs=[state],
            outputs=[controls.download_file]
        )

    return {
        "demo": demo,
        "theme": theme,
        "css": css,
    }
