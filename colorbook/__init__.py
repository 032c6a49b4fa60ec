"""
colorbook - 照片转涂色线稿

使用方式：
    from colorbook import PixelBuffer, transform
    sketch = transform(PixelBuffer.from_array(image), thickness=10, cleanliness=85)
"""

from .buffer import PixelBuffer, validate_buffer
from .errors import (
    ColorbookError,
    InvalidDimensionsError,
    BufferSizeMismatchError,
    ParameterOutOfRangeError,
)
from .lineart import transform

__all__ = [
    "PixelBuffer",
    "validate_buffer",
    "ColorbookError",
    "InvalidDimensionsError",
    "BufferSizeMismatchError",
    "ParameterOutOfRangeError",
    "transform",
]
