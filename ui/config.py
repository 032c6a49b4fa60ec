"""
UI Config - 参数数据类定义

滑块范围与默认值集中在这里，布局和逻辑共用。
"""

from dataclasses import dataclass

from colorbook.lineart import THICKNESS_RANGE, CLEANLINESS_RANGE


@dataclass
class SliderSpec:
    """单个滑块的定义"""
    label: str
    minimum: float
    maximum: float
    value: float
    step: float = 1
    info: str = ""


THICKNESS_SLIDER = SliderSpec(
    label="🖊️ 线条粗细",
    minimum=THICKNESS_RANGE[0],
    maximum=THICKNESS_RANGE[1],
    value=10,
    info="越大线条越粗、越柔和"
)

CLEANLINESS_SLIDER = SliderSpec(
    label="✨ 干净程度",
    minimum=CLEANLINESS_RANGE[0],
    maximum=CLEANLINESS_RANGE[1],
    value=85,
    info="80 以上基本去掉灰色背景"
)


def build_ui_params(thickness, cleanliness) -> dict:
    """
    构建 ui_params 字典

    Args:
        thickness: 线条粗细滑块值
        cleanliness: 干净程度滑块值

    Returns:
        传给 SketchPipeline 的参数字典
    """
    return {
        "thickness": int(thickness),
        "cleanliness": float(cleanliness),
    }
