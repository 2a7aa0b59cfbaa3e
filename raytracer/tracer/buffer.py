# raytracer/tracer/buffer.py
# ---------------------------------------------------------------
# Буфер накопления пикселей + стратегии разбиения кадра на чанки.
# Чанк – список индексов пикселей, которые считает одна задача.
# За один полный проход стратегия выдаёт каждый индекс ровно один раз.
# ---------------------------------------------------------------

from enum import Enum
from typing import List

import numpy as np

from raytracer.core.color import Color, to_rgba8
from raytracer.core.extent import ImageExtent2D
from raytracer.utils.logger import logger


class ChunkStrategy(Enum):
    RANDOM = "random"
    LINE = "line"
    BOX = "box"

    @classmethod
    def from_name(cls, name: str) -> "ChunkStrategy":
        """'random' | 'line' | 'box' (регистр не важен)."""
        try:
            return cls(str(name).lower())
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown chunk strategy: {name!r} (expected one of {valid})") from None

    def create(self):
        """Новый (ещё не сброшенный) экземпляр стратегии."""
        if self is ChunkStrategy.RANDOM:
            return RandomChunk()
        if self is ChunkStrategy.LINE:
            return LineChunk()
        return BoxChunk()


# -----------------------------------------------------------------
class RandomChunk:
    """Все индексы в случайном порядке, порциями по PIXEL_PER_CHUNK."""
    kind = ChunkStrategy.RANDOM
    PIXEL_PER_CHUNK = 20000

    def __init__(self):
        self.draw_indexes = np.empty(0, dtype=np.int64)

    def reset(self, extent: ImageExtent2D) -> None:
        rng = np.random.default_rng()
        self.draw_indexes = rng.permutation(extent.size())

    def is_complete(self) -> bool:
        return self.draw_indexes.size == 0

    def get_chunk(self) -> List[int]:
        chunk = self.draw_indexes[:self.PIXEL_PER_CHUNK]
        self.draw_indexes = self.draw_indexes[self.PIXEL_PER_CHUNK:]
        return chunk.tolist()


class LineChunk:
    """
    Построчная развёртка в порядке буфера. Чанк – целое число строк,
    сколько помещается в PIXEL_PER_CHUNK (строка Full HD), но не меньше одной.
    """
    kind = ChunkStrategy.LINE
    PIXEL_PER_CHUNK = 1920

    def __init__(self):
        self.draw_indexes = np.empty(0, dtype=np.int64)
        self.chunk_size = 0

    def reset(self, extent: ImageExtent2D) -> None:
        self.draw_indexes = np.arange(extent.size(), dtype=np.int64)
        self.chunk_size = max(1, self.PIXEL_PER_CHUNK // max(1, extent.width)) * extent.width

    def is_complete(self) -> bool:
        return self.draw_indexes.size == 0

    def get_chunk(self) -> List[int]:
        chunk = self.draw_indexes[:self.chunk_size]
        self.draw_indexes = self.draw_indexes[self.chunk_size:]
        return chunk.tolist()


class BoxChunk:
    """Плитки BOX_WIDTH x BOX_HEIGHT в случайном порядке (крайние обрезаны)."""
    kind = ChunkStrategy.BOX
    BOX_WIDTH = 128
    BOX_HEIGHT = 128

    def __init__(self):
        self.cols = 0
        self.rows = 0
        self.draw_boxes: List[np.ndarray] = []

    def reset(self, extent: ImageExtent2D) -> None:
        self.cols = -(-extent.width // self.BOX_WIDTH)
        self.rows = -(-extent.height // self.BOX_HEIGHT)

        boxes = []
        for j in range(self.rows):
            for i in range(self.cols):
                x_min = i * self.BOX_WIDTH
                x_max = min(x_min + self.BOX_WIDTH, extent.width)
                y_min = j * self.BOX_HEIGHT
                y_max = min(y_min + self.BOX_HEIGHT, extent.height)

                xs = np.arange(x_min, x_max, dtype=np.int64)
                ys = np.arange(y_min, y_max, dtype=np.int64)
                boxes.append((ys[:, None] * extent.width + xs[None, :]).ravel())

        order = np.random.default_rng().permutation(len(boxes))
        self.draw_boxes = [boxes[k] for k in order]

    def is_complete(self) -> bool:
        logger.debug(f"[BoxChunk] {len(self.draw_boxes)} boxes to draw")
        return not self.draw_boxes

    def get_chunk(self) -> List[int]:
        if not self.draw_boxes:
            return []
        chunk = self.draw_boxes.pop()
        logger.debug(f"[BoxChunk] Pop chunk: {chunk.size}")
        return chunk.tolist()


# -----------------------------------------------------------------
class ImageBuffer:
    """
    Массив цветов (width*height, 4) + одна стратегия чанков.
    Меняется только между параллельными фазами (из вызывающего потока).
    """

    def __init__(self, extent: ImageExtent2D, strategy: ChunkStrategy):
        self.extent = extent
        self.strategy = strategy.create()
        self._fill_black()

    def _fill_black(self) -> None:
        self.framebuffer = np.tile(Color.BLACK.as_np(), (self.extent.size(), 1))

    def reset(self) -> None:
        logger.debug("[ImageBuffer] Reset buffer")
        self._fill_black()
        self.strategy.reset(self.extent)

    def bytes(self) -> bytes:
        """Построчно, 4 байта на пиксель: R, G, B, A."""
        return to_rgba8(self.framebuffer).tobytes()

    def update_pixel(self, idx: int, c: Color) -> None:
        self.framebuffer[idx] = c.as_np()

    def is_complete(self) -> bool:
        return self.strategy.is_complete()

    def get_chunk(self) -> List[int]:
        logger.debug("[ImageBuffer] Get chunk")
        return self.strategy.get_chunk()
