"""
UI State - 会话状态管理

使用 Gradio 的 gr.State 实现多用户并发支持。
每个用户独立维护自己的处理状态。
"""

from dataclasses import dataclass, field
import threading

import numpy as np


class RenderGeneration:
    """
    渲染请求的代数计数器（最新请求优先）

    每个渲染请求先 begin() 领取代数；完成后用 try_commit() 提交，
    期间若有更新的请求开始，旧结果被丢弃。
    """

    def __init__(self, current: int = 0):
        self._current = current
        self._lock = threading.Lock()

    @property
    def current(self) -> int:
        with self._lock:
            return self._current

    def begin(self) -> int:
        """开始新请求，返回其代数"""
        with self._lock:
            self._current += 1
            return self._current

    def is_current(self, ticket: int) -> bool:
        with self._lock:
            return ticket == self._current

    def try_commit(self, ticket: int, commit) -> bool:
        """
        仅当 ticket 仍是最新代数时执行 commit()

        Args:
            ticket: begin() 返回的代数
            commit: 无参回调，写入共享的展示状态

        Returns:
            是否已提交
        """
        with self._lock:
            if ticket != self._current:
                return False
            commit()
            return True

    def __deepcopy__(self, memo):
        # gr.State 会深拷贝初始值，锁不能拷贝
        return RenderGeneration(self.current)


@dataclass
class ProcessingState:
    """
    存储单个用户的会话状态

    通过 gr.State 传递，实现多用户隔离。
    """

    # 原始图像
    original_image: np.ndarray | None = None
    image_hash: str | None = None

    # 最后一次提交的渲染结果与参数
    last_rendered_image: np.ndarray | None = None
    last_params: tuple | None = None

    generation: RenderGeneration = field(default_factory=RenderGeneration)

    def is_ready(self) -> bool:
        """检查是否已上传图像，可以进行渲染"""
        return self.original_image is not None

    def reset(self) -> None:
        """重置状态（上传新图片时）"""
        self.original_image = None
        self.image_hash = None
        self.last_rendered_image = None
        self.last_params = None
        # 让进行中的旧请求失效
        self.generation.begin()


def compute_image_hash(image: np.ndarray) -> str:
    """计算图像哈希（用于判断是否换图）"""
    return str(hash((image.shape, image.tobytes())))
