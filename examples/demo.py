#!/usr/bin/env python
"""
Colorbook Demo - 命令行演示脚本

使用方法:
    python examples/demo.py [input_image] [output_image]

示例:
    python examples/demo.py examples/input.jpg examples/output.png --thickness 12 --cleanliness 90
"""

import sys
from pathlib import Path

# 添加项目根目录到路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import argparse
import numpy as np
from PIL import Image

from colorbook.pipeline import load_pipeline


def create_sample_image(width: int = 512, height: int = 384) -> np.ndarray:
    """
    创建一个示例图像（天空、房子、太阳、草地）

    Returns:
        uint8 RGB 图像
    """
    img = np.zeros((height, width, 3), dtype=np.uint8)

    # 天空 - 蓝色渐变
    for y in range(height):
        ratio = y / height
        img[y, :, 0] = int(135 + 60 * ratio)
        img[y, :, 1] = int(206 - 20 * ratio)
        img[y, :, 2] = int(235 - 10 * ratio)

    # 草地（下部 30%）
    ground_top = int(height * 0.7)
    img[ground_top:, :] = (70, 150, 60)

    # 房子
    left, right = int(width * 0.15), int(width * 0.45)
    top = int(height * 0.4)
    img[top:ground_top, left:right] = (200, 120, 90)
    img[top + 30:ground_top, left + 40:left + 80] = (90, 60, 40)   # 门

    # 太阳
    yy, xx = np.ogrid[:height, :width]
    cx, cy, r = int(width * 0.78), int(height * 0.2), int(height * 0.09)
    img[(xx - cx) ** 2 + (yy - cy) ** 2 <= r * r] = (250, 220, 60)

    # 添加随机噪声使图像更自然
    noise = np.random.randint(-8, 8, img.shape, dtype=np.int16)
    img = np.clip(img.astype(np.int16) + noise, 0, 255).astype(np.uint8)

    return img


def main():
    parser = argparse.ArgumentParser(description="Colorbook Demo")
    parser.add_argument("input", nargs="?", help="输入图像路径")
    parser.add_argument("output", nargs="?", default="coloring_page.png", help="输出图像路径")
    parser.add_argument("--create-sample", action="store_true", help="创建示例图像")
    parser.add_argument("--thickness", type=int, default=None, help="线条粗细 [1, 50]")
    parser.add_argument("--cleanliness", type=float, default=None, help="干净程度 [0, 100]")
    parser.add_argument("--config", default=None, help="配置文件路径")

    args = parser.parse_args()

    if args.create_sample or args.input is None:
        print("创建示例图像...")
        input_image = create_sample_image()

        sample_path = project_root / "examples" / "sample_input.png"
        Image.fromarray(input_image).save(sample_path)
        print(f"示例图像已保存到: {sample_path}")
    else:
        print(f"加载图像: {args.input}")
        input_image = np.array(Image.open(args.input).convert("RGB"))

    print(f"图像尺寸: {input_image.shape}")

    pipe = load_pipeline(args.config)

    ui_params = {}
    if args.thickness is not None:
        ui_params["thickness"] = args.thickness
    if args.cleanliness is not None:
        ui_params["cleanliness"] = args.cleanliness

    print("生成线稿...")
    output_image = pipe.process(input_image, ui_params)

    output_path = Path(args.output)
    if not output_path.is_absolute():
        output_path = project_root / "examples" / output_path
    Image.fromarray(output_image).save(output_path)
    print(f"输出已保存到: {output_path}")

    print("完成!")


if __name__ == "__main__":
    main()
