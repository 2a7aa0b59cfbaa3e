# -*- coding: utf-8 -*-
import numpy as np
import pytest

from raytracer.core.color import Color
from raytracer.core.extent import ImageExtent2D
from raytracer.tracer.buffer import (
    BoxChunk, ChunkStrategy, ImageBuffer, LineChunk, RandomChunk,
)


def drain(chunker):
    """Забрать все чанки текущего прохода."""
    chunks = []
    while not chunker.is_complete():
        chunks.append(chunker.get_chunk())
    return chunks


EXTENTS = [
    ImageExtent2D(1, 1),
    ImageExtent2D(4, 4),
    ImageExtent2D(130, 128),
    ImageExtent2D(300, 70),
    ImageExtent2D(7, 260),
]


@pytest.mark.parametrize("strategy", list(ChunkStrategy))
@pytest.mark.parametrize("extent", EXTENTS)
def test_full_pass_partitions_every_index(strategy, extent):
    chunker = strategy.create()
    chunker.reset(extent)

    seen = [idx for chunk in drain(chunker) for idx in chunk]

    assert len(seen) == extent.size()
    assert set(seen) == set(range(extent.size()))


@pytest.mark.parametrize("strategy", list(ChunkStrategy))
def test_reset_restarts_partition(strategy):
    extent = ImageExtent2D(40, 30)
    chunker = strategy.create()
    chunker.reset(extent)
    chunker.get_chunk()

    chunker.reset(extent)
    assert not chunker.is_complete()
    seen = [idx for chunk in drain(chunker) for idx in chunk]
    assert sorted(seen) == list(range(extent.size()))
    assert chunker.get_chunk() == []


@pytest.mark.parametrize("strategy", list(ChunkStrategy))
def test_fresh_strategy_has_nothing_to_do(strategy):
    assert strategy.create().is_complete()


def test_box_tiles_clip_at_right_edge():
    extent = ImageExtent2D(130, 128)
    chunker = BoxChunk()
    chunker.reset(extent)

    assert (chunker.cols, chunker.rows) == (2, 1)
    tiles = drain(chunker)
    assert sorted(len(t) for t in tiles) == [2 * 128, 128 * 128]

    narrow = next(t for t in tiles if len(t) == 2 * 128)
    columns = {idx % extent.width for idx in narrow}
    assert columns == {128, 129}


def test_box_tile_is_spatially_compact():
    extent = ImageExtent2D(256, 256)
    chunker = BoxChunk()
    chunker.reset(extent)
    for tile in drain(chunker):
        xs = [idx % extent.width for idx in tile]
        ys = [idx // extent.width for idx in tile]
        assert max(xs) - min(xs) == BoxChunk.BOX_WIDTH - 1
        assert max(ys) - min(ys) == BoxChunk.BOX_HEIGHT - 1


def test_line_chunks_are_whole_rows_in_order():
    extent = ImageExtent2D(1000, 5)
    chunker = LineChunk()
    chunker.reset(extent)
    chunks = drain(chunker)
    assert [len(c) for c in chunks] == [1000] * 5
    assert chunks[0] == list(range(1000))
    assert [c[0] for c in chunks] == [0, 1000, 2000, 3000, 4000]


def test_line_chunk_groups_short_rows():
    extent = ImageExtent2D(4, 4)
    chunker = LineChunk()
    chunker.reset(extent)
    assert chunker.get_chunk() == list(range(16))
    assert chunker.is_complete()


def test_random_chunk_size():
    extent = ImageExtent2D(200, 150)
    chunker = RandomChunk()
    chunker.reset(extent)
    sizes = [len(c) for c in drain(chunker)]
    assert sizes == [RandomChunk.PIXEL_PER_CHUNK, extent.size() - RandomChunk.PIXEL_PER_CHUNK]


@pytest.mark.parametrize("name, expected", [
    ("box", ChunkStrategy.BOX),
    ("LINE", ChunkStrategy.LINE),
    ("Random", ChunkStrategy.RANDOM),
])
def test_strategy_from_name(name, expected):
    assert ChunkStrategy.from_name(name) is expected


def test_strategy_from_name_rejects_unknown():
    with pytest.raises(ValueError):
        ChunkStrategy.from_name("spiral")


def test_image_buffer_reset_and_bytes():
    extent = ImageExtent2D(3, 2)
    buffer = ImageBuffer(extent, ChunkStrategy.LINE)
    assert buffer.framebuffer.shape == (extent.size(), 4)
    assert buffer.is_complete()

    buffer.update_pixel(4, Color(1.0, 0.5, 0.0, 1.0))
    buffer.reset()
    assert not buffer.is_complete()
    assert np.allclose(buffer.framebuffer, Color.BLACK.as_np())

    buffer.update_pixel(1, Color(1.0, 0.0, 0.0, 1.0))
    buffer.update_pixel(5, Color(0.0, 0.0, 1.0, 1.0))
    data = buffer.bytes()
    assert len(data) == extent.size() * 4
    assert data[0:4] == bytes([0, 0, 0, 255])
    assert data[4:8] == bytes([255, 0, 0, 255])
    assert data[20:24] == bytes([0, 0, 255, 255])


def test_image_buffer_update_overwrites():
    buffer = ImageBuffer(ImageExtent2D(2, 2), ChunkStrategy.BOX)
    buffer.update_pixel(0, Color(1.0, 1.0, 1.0, 1.0))
    buffer.update_pixel(0, Color(0.25, 0.25, 0.25, 1.0))
    assert np.allclose(buffer.framebuffer[0], [0.25, 0.25, 0.25, 1.0])


def test_image_buffer_keeps_strategy_variant():
    buffer = ImageBuffer(ImageExtent2D(8, 8), ChunkStrategy.RANDOM)
    buffer.reset()
    drain(buffer)
    buffer.reset()
    assert buffer.strategy.kind is ChunkStrategy.RANDOM
