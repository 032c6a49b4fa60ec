"""
Gradio UI - 涂色线稿交互界面

简洁入口文件，业务逻辑和 UI 布局已分离到独立模块。
"""

import sys
from pathlib import Path

# 添加项目根目录到路径
sys.path.insert(0, str(Path(__file__).parent.parent))


def main():
    """主入口"""
    from ui.layout import create_ui
    from ui.logic import get_pipeline

    ui_cfg = get_pipeline().cfg.ui

    # 创建 UI（事件绑定已在 create_ui 内部完成）
    ui_components = create_ui()
    demo = ui_components["demo"]
    theme = ui_components.get("theme")
    css = ui_components.get("css")

    # 启动服务（Gradio 6.0+ 需要在 launch 时传递 theme 和 css）
    demo.launch(
        server_name=ui_cfg.server_name,
        server_port=ui_cfg.server_port,
        share=ui_cfg.share,
        theme=theme,
        css=css,
    )


if __name__ == "__main__":
    main()
