"""
UI Theme - CSS 和 Gradio 主题定义

将样式从主文件分离，保持代码整洁。
"""

import gradio as gr


def create_theme() -> gr.themes.Base:
    """创建 Gradio 主题"""
    return gr.themes.Soft(
        primary_hue="sky",
        secondary_hue="pink",
        neutral_hue="slate",
        text_size=gr.themes.sizes.text_md,
        radius_size=gr.themes.sizes.radius_lg,
    )


# 自定义 CSS
CUSTOM_CSS = """
.gradio-container {
    font-family: 'Helvetica Neue', 'Segoe UI', Roboto, sans-serif;
}

.redraw-btn {
    font-weight: bold;
}

/* 线稿预览保持白底 */
#sketch_img img {
    background-color: #ffffff;
}
"""


def get_css() -> str:
    """返回自定义 CSS"""
    return CUSTOM_CSS
