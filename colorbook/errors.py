"""
Errors - 线稿流水线的错误类型

所有错误在调用时立即抛出，不做重试（流水线是确定性的，重试只会得到同样的错误）。
"""


class ColorbookError(ValueError):
    """所有 colorbook 错误的基类"""


class InvalidDimensionsError(ColorbookError):
    """宽或高不是正整数"""


class BufferSizeMismatchError(ColorbookError):
    """像素字节数不等于 width * height * 4"""


class ParameterOutOfRangeError(ColorbookError):
    """
    参数无法解释为有限数值

    数值型的越界参数会被截断到合法区间，不会抛出此错误。
    """
