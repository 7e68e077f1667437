import math

from wither.math.boundingbox import BoundingBox, BoundingBoxSize
from wither.math.position import WorldPosition
from wither.math.vector import Vector3


def test_from_pos_is_centred():
    size = BoundingBoxSize(width=0.6, height=1.8)
    box = BoundingBox.from_pos(10.0, 64.0, -3.0, size)
    assert math.isclose(box.min_x + box.max_x, 2 * 10.0)
    assert math.isclose(box.min_z + box.max_z, 2 * -3.0)
    assert math.isclose(box.max_x - box.min_x, size.width)
    assert math.isclose(box.max_y - box.min_y, size.height)
    assert box.min_y == 64.0


def test_from_size_is_at_origin():
    size = BoundingBoxSize(width=2.0, height=3.0)
    assert BoundingBox.from_size(size) == BoundingBox.from_pos(0.0, 0.0, 0.0, size)


def test_from_vectors():
    box = BoundingBox.from_vectors(Vector3(1.0, 2.0, 3.0), Vector3(4.0, 5.0, 6.0))
    assert (box.min_x, box.min_y, box.min_z) == (1.0, 2.0, 3.0)
    assert (box.max_x, box.max_y, box.max_z) == (4.0, 5.0, 6.0)


def test_from_block_is_unit_cube():
    box = BoundingBox.from_block(WorldPosition(1, -2, 3))
    assert (box.min_x, box.min_y, box.min_z) == (1.0, -2.0, 3.0)
    assert box.max_x - box.min_x == box.max_y - box.min_y == box.max_z - box.min_z == 1.0


def test_intersects():
    block = BoundingBox.from_block(WorldPosition(0, 0, 0))
    neighbour = BoundingBox.from_block(WorldPosition(1, 0, 0))
    overlapping = BoundingBox.from_vectors(Vector3(0.5, 0.5, 0.5), Vector3(1.5, 1.5, 1.5))
    assert block.intersects(block)
    assert not block.intersects(neighbour)
    assert block.intersects(overlapping)
    assert overlapping.intersects(block)


def test_squared_magnitude():
    box = BoundingBox.from_vectors(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 1.0, 1.0))
    assert box.squared_magnitude(Vector3(0.5, 0.5, 0.5)) == 0.0
    assert math.isclose(box.squared_magnitude(Vector3(1.0 + 2.5, 0.5, 0.5)), 2.5 * 2.5)
    assert math.isclose(box.squared_magnitude(Vector3(0.5, -3.0, 0.5)), 3.0 * 3.0)