"""
集成测试 - 测试完整 Pipeline 流程
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
import pytest

from colorbook.buffer import PixelBuffer
from colorbook.context import SketchParams
from colorbook.lineart import transform
from colorbook.pipeline import SketchPipeline, load_pipeline


@pytest.fixture
def sample_image():
    """创建测试图像 (128x96)"""
    img = np.zeros((96, 128, 3), dtype=np.uint8)

    # 上半部分：蓝色天空
    img[:40, :] = (135, 206, 235)
    # 中间：绿色植被
    img[40:70, :] = (34, 139, 34)
    # 下部：灰色道路
    img[70:, :] = (128, 128, 128)

    noise = np.random.randint(-20, 20, img.shape, dtype=np.int16)
    return np.clip(img.astype(np.int16) + noise, 0, 255).astype(np.uint8)


@pytest.fixture
def pipeline():
    """创建 Pipeline"""
    return load_pipeline()


class TestPipelineIntegration:
    """Pipeline 集成测试"""

    def test_load_pipeline(self):
        """测试加载 Pipeline 与默认配置"""
        pipe = load_pipeline()
        assert isinstance(pipe, SketchPipeline)
        assert pipe.cfg.sketch.default_thickness == 10
        assert pipe.cfg.sketch.default_cleanliness == 85
        assert getattr(pipe.cfg, "global").max_image_width == 1200

    def test_process_basic(self, pipeline, sample_image):
        """测试基本处理流程"""
        result = pipeline.process(sample_image)

        assert result.shape == sample_image.shape
        assert result.dtype == np.uint8
        np.testing.assert_array_equal(result[..., 0], result[..., 1])
        np.testing.assert_array_equal(result[..., 0], result[..., 2])

    def test_matches_core_transform(self, pipeline, sample_image):
        """测试与直接调用 transform 一致"""
        result = pipeline.process(sample_image, {"thickness": 6, "cleanliness": 70})
        expected = transform(PixelBuffer.from_array(sample_image), 6, 70)
        np.testing.assert_array_equal(result, expected.to_array(3))

    def test_defaults_from_config(self, pipeline, sample_image):
        """测试缺省参数取自配置"""
        default = pipeline.process(sample_image)
        explicit = pipeline.process(sample_image, {"thickness": 10, "cleanliness": 85})
        np.testing.assert_array_equal(default, explicit)

    def test_sketch_params(self, pipeline, sample_image):
        """测试 SketchParams 参数"""
        a = pipeline.process(sample_image, SketchParams(thickness=4, cleanliness=30))
        b = pipeline.process(sample_image, {"thickness": 4, "cleanliness": 30})
        np.testing.assert_array_equal(a, b)

    def test_clamped_params(self, pipeline, sample_image):
        """测试越界参数被截断"""
        a = pipeline.process(sample_image, {"thickness": 999, "cleanliness": -5})
        b = pipeline.process(sample_image, {"thickness": 50, "cleanliness": 0})
        np.testing.assert_array_equal(a, b)

    def test_wide_image_downscaled(self, pipeline):
        """测试超宽图像缩放到 1200 宽"""
        img = np.random.randint(0, 256, (300, 2400, 3), dtype=np.uint8)
        result = pipeline.process(img)
        assert result.shape == (150, 1200, 3)

    def test_input_not_mutated(self, pipeline, sample_image):
        """测试不修改输入图像"""
        original = sample_image.copy()
        pipeline.process(sample_image)
        np.testing.assert_array_equal(sample_image, original)

    def test_encode(self, pipeline, sample_image):
        """测试编码输出"""
        data = pipeline.encode(sample_image)
        assert data.startswith(b"\x89PNG")

    def test_render_data_url(self, pipeline, sample_image):
        """测试 data URL 输出"""
        url = pipeline.render_data_url(sample_image)
        assert url.startswith("data:image/png;base64,")


class TestCustomConfig:
    """自定义配置"""

    def test_custom_config_path(self, tmp_path, sample_image):
        """测试从自定义路径加载配置"""
        cfg_path = tmp_path / "custom.yaml"
        cfg_path.write_text(
            "global:\n"
            "  max_image_width: 64\n"
            "sketch:\n"
            "  default_thickness: 2\n"
            "  default_cleanliness: 50\n"
            "export:\n"
            "  format: jpg\n"
            "  filename: page.jpg\n"
        )
        pipe = SketchPipeline(cfg_path)
        result = pipe.process(sample_image)

        assert result.shape == (48, 64, 3)
        assert pipe.encode(sample_image).startswith(b"\xff\xd8")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
