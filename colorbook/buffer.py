"""
PixelBuffer - 流水线共享的像素容器

RGBA 通道顺序，行优先，左上角为原点。
像素以一维 uint8 数组保存，长度恒为 width * height * 4。
"""

from dataclasses import dataclass
import numbers

import numpy as np

from .errors import BufferSizeMismatchError, InvalidDimensionsError


CHANNELS = 4


def clamp_to_bytes(values: np.ndarray) -> np.ndarray:
    """
    按 "clamped uint8" 语义写入字节

    先四舍六入五成双取整，再截断到 [0, 255]。

    Args:
        values: 任意数值数组

    Returns:
        uint8 数组，形状不变
    """
    return np.clip(np.rint(values), 0, 255).astype(np.uint8)


def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidDimensionsError(f"{name} 必须是正整数，当前: {value!r}")
    if value <= 0:
        raise InvalidDimensionsError(f"{name} 必须大于 0，当前: {value}")
    return int(value)


def _as_byte_array(pixels) -> np.ndarray:
    """将 bytes / 列表 / ndarray 统一为一维 uint8 数组（总是拷贝）"""
    if isinstance(pixels, (bytes, bytearray, memoryview)):
        return np.frombuffer(pixels, dtype=np.uint8).copy()

    arr = np.asarray(pixels)
    if arr.dtype != np.uint8:
        arr = clamp_to_bytes(arr)
    return np.ascontiguousarray(arr).reshape(-1).copy()


@dataclass(eq=False)
class PixelBuffer:
    """RGBA 像素缓冲区"""

    width: int
    height: int
    pixels: np.ndarray    # uint8 (width*height*4,)

    def __post_init__(self):
        """校验尺寸并规范化像素数组"""
        self.width = _check_dimension("width", self.width)
        self.height = _check_dimension("height", self.height)
        self.pixels = _as_byte_array(self.pixels)
        validate_buffer(self)

    # ==================== 构造 ====================

    @classmethod
    def blank(cls, width: int, height: int) -> "PixelBuffer":
        """创建全透明黑色缓冲区"""
        width = _check_dimension("width", width)
        height = _check_dimension("height", height)
        return cls(width, height, np.zeros(width * height * CHANNELS, dtype=np.uint8))

    @classmethod
    def from_array(cls, image: np.ndarray) -> "PixelBuffer":
        """
        从图像数组创建缓冲区

        Args:
            image: uint8 (H,W) 灰度、(H,W,3) RGB 或 (H,W,4) RGBA

        Returns:
            PixelBuffer，缺失的 alpha 通道补 255

        Raises:
            ValueError: 如果数组形状不是图像
        """
        image = np.asarray(image)
        if image.ndim == 2:
            image = np.stack([image] * 3, axis=-1)
        if image.ndim != 3 or image.shape[2] not in (3, 4):
            raise ValueError(f"图像必须是 (H,W)、(H,W,3) 或 (H,W,4) 格式，当前: {image.shape}")

        h, w = image.shape[:2]
        if image.dtype != np.uint8:
            image = clamp_to_bytes(image)

        rgba = np.full((h, w, CHANNELS), 255, dtype=np.uint8)
        rgba[..., :image.shape[2]] = image
        return cls(w, h, rgba.reshape(-1))

    # ==================== 访问 ====================

    @property
    def shape(self) -> tuple[int, int]:
        """(height, width)"""
        return (self.height, self.width)

    def view(self) -> np.ndarray:
        """返回共享存储的 (H,W,4) 视图，写入视图即写入缓冲区"""
        return self.pixels.reshape(self.height, self.width, CHANNELS)

    def to_array(self, channels: int = 4) -> np.ndarray:
        """
        导出为图像数组（拷贝）

        Args:
            channels: 4 返回 RGBA，3 返回 RGB

        Returns:
            uint8 (H,W,channels)
        """
        if channels not in (3, 4):
            raise ValueError(f"channels 只能是 3 或 4，当前: {channels}")
        return self.view()[..., :channels].copy()

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.width, self.height, self.pixels)

    def same_shape(self, other: "PixelBuffer") -> bool:
        return self.width == other.width and self.height == other.height

    def shares_memory(self, other: "PixelBuffer") -> bool:
        """两个缓冲区是否共享底层存储"""
        return np.shares_memory(self.pixels, other.pixels)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.same_shape(other) and np.array_equal(self.pixels, other.pixels)

    __hash__ = None


def validate_buffer(buffer: PixelBuffer) -> None:
    """
    校验缓冲区不变量

    构造之后 pixels 仍可能被替换，所以流水线入口会再次调用。

    Raises:
        InvalidDimensionsError: 宽或高不是正整数
        BufferSizeMismatchError: 字节数与尺寸不符或 dtype 不是 uint8
    """
    _check_dimension("width", buffer.width)
    _check_dimension("height", buffer.height)

    pixels = buffer.pixels
    expected = buffer.width * buffer.height * CHANNELS
    if not isinstance(pixels, np.ndarray) or pixels.dtype != np.uint8 or pixels.ndim != 1:
        raise BufferSizeMismatchError("pixels 必须是一维 uint8 数组")
    if pixels.size != expected:
        raise BufferSizeMismatchError(
            f"像素字节数 {pixels.size} 与尺寸 {buffer.width}x{buffer.height} 不符，应为 {expected}"
        )
