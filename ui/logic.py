"""
UI Logic - 核心业务逻辑

将处理逻辑从 UI 层分离，支持多用户并发。
滑块连续变化时可能有多个渲染请求重叠，只有最新请求的结果会被提交。
"""

import tempfile
from pathlib import Path

import numpy as np

from .config import build_ui_params
from .state import ProcessingState, compute_image_hash

# Pipeline 延迟导入
_pipeline = None


def get_pipeline():
    """懒加载 Pipeline"""
    global _pipeline
    if _pipeline is None:
        from colorbook.pipeline import load_pipeline
        _pipeline = load_pipeline()
    return _pipeline


def load_image(state: ProcessingState, image: np.ndarray | None) -> ProcessingState:
    """
    上传新图像

    Args:
        state: 用户会话状态
        image: 上传的图像，None 表示清空

    Returns:
        更新后的状态（同一对象）
    """
    if image is None:
        state.reset()
        return state

    img_hash = compute_image_hash(image)
    if state.image_hash == img_hash:
        return state

    state.reset()
    state.original_image = image.copy()
    state.image_hash = img_hash
    return state


def render_sketch(
    state: ProcessingState,
    thickness,
    cleanliness,
    force: bool = False
) -> np.ndarray | None:
    """
    渲染线稿

    Args:
        state: 用户会话状态
        thickness: 线条粗细
        cleanliness: 干净程度
        force: 参数未变化时也重新渲染（"重新绘制" 按钮）

    Returns:
        线稿图像 uint8 (H,W,3)；未上传图像或结果已过期时返回 None
    """
    if not state.is_ready():
        return None

    ui_params = build_ui_params(thickness, cleanliness)
    params_key = (state.image_hash, ui_params["thickness"], ui_params["cleanliness"])

    # 命中缓存的请求同样是最新请求，必须让进行中的旧请求失效
    ticket = state.generation.begin()
    if not force and state.last_params == params_key and state.last_rendered_image is not None:
        return state.last_rendered_image

    image = state.original_image
    result = get_pipeline().process(image, ui_params)

    def commit():
        state.last_rendered_image = result
        state.last_params = params_key

    if not state.generation.try_commit(ticket, commit):
        print(f"[UI] 丢弃过期的渲染结果 (#{ticket}, 最新 #{state.generation.current})")
        return None
    return result


def export_sketch(state: ProcessingState, directory: str | Path | None = None) -> str | None:
    """
    导出最后一次渲染的线稿

    Args:
        state: 用户会话状态
        directory: 输出目录，默认新建临时目录

    Returns:
        文件路径；尚无渲染结果时返回 None
    """
    if state.last_rendered_image is None:
        return None

    from colorbook.buffer import PixelBuffer
    from colorbook.export import save_image

    cfg = get_pipeline().cfg
    if directory is None:
        directory = tempfile.mkdtemp(prefix="colorbook_")
    path = Path(directory) / cfg.export.filename

    save_image(PixelBuffer.from_array(state.last_rendered_image), path)
    print(f"[UI] 线稿已导出: {path}")
    return str(path)
