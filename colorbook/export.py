"""
Export - 图像编解码

线稿缓冲区 <-> PNG/JPEG/WebP 字节、data URL、文件。
OpenCV 使用 BGR(A) 通道顺序，进出时在这里转换。
"""

import base64
from pathlib import Path

import cv2
import numpy as np

from .buffer import PixelBuffer


# 格式 -> (扩展名, MIME, 是否保留 alpha)
IMAGE_FORMATS = {
    "png": (".png", "image/png", True),
    "jpg": (".jpg", "image/jpeg", False),
    "jpeg": (".jpg", "image/jpeg", False),
    "webp": (".webp", "image/webp", True),
}


def _resolve_format(fmt: str) -> tuple[str, str, bool]:
    key = fmt.lower().lstrip(".")
    if key not in IMAGE_FORMATS:
        raise ValueError(f"不支持的图像格式: {fmt}，可选: {sorted(IMAGE_FORMATS)}")
    return IMAGE_FORMATS[key]


def encode_image(buffer: PixelBuffer, fmt: str = "png") -> bytes:
    """
    编码缓冲区

    Args:
        buffer: RGBA 缓冲区
        fmt: png | jpg | jpeg | webp

    Returns:
        编码后的字节
    """
    ext, _, keep_alpha = _resolve_format(fmt)

    rgba = buffer.view()
    if keep_alpha:
        bgr = cv2.cvtColor(rgba, cv2.COLOR_RGBA2BGRA)
    else:
        bgr = cv2.cvtColor(rgba, cv2.COLOR_RGBA2BGR)

    ok, encoded = cv2.imencode(ext, bgr)
    if not ok:
        raise ValueError(f"图像编码失败: {fmt}")
    return encoded.tobytes()


def to_data_url(buffer: PixelBuffer, fmt: str = "png") -> str:
    """编码为 data URL，如 data:image/png;base64,..."""
    _, mime, _ = _resolve_format(fmt)
    payload = base64.b64encode(encode_image(buffer, fmt)).decode("ascii")
    return f"data:{mime};base64,{payload}"


def save_image(buffer: PixelBuffer, path: str | Path) -> Path:
    """
    保存到文件，格式由后缀决定

    Args:
        buffer: 线稿缓冲区
        path: 输出路径

    Returns:
        写入的路径
    """
    path = Path(path)
    path.write_bytes(encode_image(buffer, path.suffix or "png"))
    return path


def decode_image(data: bytes) -> np.ndarray:
    """
    解码图像字节

    Args:
        data: PNG/JPEG 等文件内容

    Returns:
        uint8 (H,W) 灰度、(H,W,3) RGB 或 (H,W,4) RGBA

    Raises:
        ValueError: 如果无法解码
    """
    raw = np.frombuffer(data, dtype=np.uint8)
    image = cv2.imdecode(raw, cv2.IMREAD_UNCHANGED) if raw.size else None
    if image is None:
        raise ValueError("无法解码图像数据")

    if image.dtype != np.uint8:
        # 16 位 PNG 等
        image = (image / 257).astype(np.uint8)
    if image.ndim == 3 and image.shape[2] == 4:
        return cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)
    if image.ndim == 3:
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
    return image
