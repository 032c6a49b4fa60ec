"""
PixelBuffer 单元测试
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
import pytest

from colorbook.buffer import PixelBuffer, clamp_to_bytes, validate_buffer
from colorbook.errors import (
    BufferSizeMismatchError,
    ColorbookError,
    InvalidDimensionsError,
)


@pytest.fixture
def rgb_image():
    """创建测试图像 (3x5 RGB)"""
    return np.random.randint(0, 256, (3, 5, 3), dtype=np.uint8)


class TestConstruction:
    """构造与校验"""

    def test_from_bytes(self):
        """测试 bytes 输入"""
        buf = PixelBuffer(2, 1, bytes([1, 2, 3, 4, 5, 6, 7, 8]))
        assert buf.pixels.dtype == np.uint8
        assert buf.pixels.tolist() == [1, 2, 3, 4, 5, 6, 7, 8]

    def test_from_list(self):
        """测试列表输入"""
        buf = PixelBuffer(1, 1, [10, 20, 30, 255])
        assert buf.pixels.tolist() == [10, 20, 30, 255]

    def test_non_uint8_values_are_clamped(self):
        """测试非 uint8 输入按 clamped 语义写入"""
        buf = PixelBuffer(1, 1, np.array([-5.0, 300.0, 12.5, 13.5]))
        assert buf.pixels.tolist() == [0, 255, 12, 14]

    def test_input_is_copied(self):
        """测试构造时拷贝输入"""
        data = np.zeros(4, dtype=np.uint8)
        buf = PixelBuffer(1, 1, data)
        data[0] = 99
        assert buf.pixels[0] == 0

    @pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-2, 3), (2.5, 1), (True, 1)])
    def test_invalid_dimensions(self, width, height):
        """测试非法尺寸"""
        with pytest.raises(InvalidDimensionsError):
            PixelBuffer(width, height, np.zeros(16, dtype=np.uint8))

    def test_size_mismatch(self):
        """测试字节数与尺寸不符"""
        with pytest.raises(BufferSizeMismatchError, match="不符"):
            PixelBuffer(2, 2, np.zeros(15, dtype=np.uint8))

    def test_errors_are_value_errors(self):
        """测试错误类型层级"""
        assert issubclass(InvalidDimensionsError, ColorbookError)
        assert issubclass(BufferSizeMismatchError, ValueError)

    def test_blank(self):
        """测试空白缓冲区"""
        buf = PixelBuffer.blank(3, 2)
        assert buf.pixels.size == 3 * 2 * 4
        assert not buf.pixels.any()


class TestArrayConversion:
    """数组互转"""

    def test_from_rgb_adds_opaque_alpha(self, rgb_image):
        """测试 RGB 补 alpha=255"""
        buf = PixelBuffer.from_array(rgb_image)
        assert (buf.width, buf.height) == (5, 3)
        assert (buf.view()[..., 3] == 255).all()
        np.testing.assert_array_equal(buf.to_array(3), rgb_image)

    def test_from_rgba_keeps_alpha(self):
        """测试 RGBA 保留 alpha"""
        rgba = np.random.randint(0, 256, (4, 4, 4), dtype=np.uint8)
        buf = PixelBuffer.from_array(rgba)
        np.testing.assert_array_equal(buf.to_array(), rgba)

    def test_from_gray(self):
        """测试灰度图扩展到三通道"""
        gray = np.arange(12, dtype=np.uint8).reshape(3, 4)
        arr = PixelBuffer.from_array(gray).to_array(3)
        for c in range(3):
            np.testing.assert_array_equal(arr[..., c], gray)

    def test_from_array_wrong_shape(self):
        """测试错误形状"""
        with pytest.raises(ValueError, match="必须是"):
            PixelBuffer.from_array(np.zeros((4, 4, 2), dtype=np.uint8))

    def test_pixel_layout_is_row_major_rgba(self):
        """测试行优先 RGBA 布局"""
        img = np.zeros((2, 2, 3), dtype=np.uint8)
        img[1, 0] = (7, 8, 9)
        buf = PixelBuffer.from_array(img)
        idx = (1 * 2 + 0) * 4
        assert buf.pixels[idx:idx + 4].tolist() == [7, 8, 9, 255]

    def test_view_shares_storage(self, rgb_image):
        """测试 view 与缓冲区共享存储"""
        buf = PixelBuffer.from_array(rgb_image)
        buf.view()[0, 0, 0] = 42
        assert buf.pixels[0] == 42

    def test_to_array_invalid_channels(self, rgb_image):
        """测试非法通道数"""
        with pytest.raises(ValueError):
            PixelBuffer.from_array(rgb_image).to_array(2)


class TestCopyAndEquality:
    """拷贝与比较"""

    def test_copy_is_independent(self, rgb_image):
        """测试拷贝不共享存储"""
        buf = PixelBuffer.from_array(rgb_image)
        dup = buf.copy()
        assert dup == buf
        assert not dup.shares_memory(buf)
        dup.pixels[0] ^= 0xFF
        assert dup != buf

    def test_different_shape_not_equal(self):
        """测试尺寸不同即不相等"""
        assert PixelBuffer.blank(2, 3) != PixelBuffer.blank(3, 2)


class TestValidate:
    """校验函数"""

    def test_validate_detects_replaced_pixels(self):
        """测试构造后替换 pixels 仍能被发现"""
        buf = PixelBuffer.blank(2, 2)
        buf.pixels = buf.pixels[:-1]
        with pytest.raises(BufferSizeMismatchError):
            validate_buffer(buf)

    def test_validate_detects_bad_dimension(self):
        """测试构造后修改尺寸"""
        buf = PixelBuffer.blank(2, 2)
        buf.width = 0
        with pytest.raises(InvalidDimensionsError):
            validate_buffer(buf)

    def test_clamp_to_bytes_rounds_half_to_even(self):
        """测试四舍六入五成双"""
        values = np.array([0.5, 1.5, 2.5, 254.6, 255.4, -0.4])
        assert clamp_to_bytes(values).tolist() == [0, 2, 2, 255, 255, 0]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
