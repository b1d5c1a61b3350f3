import pytest

from flappy_solo.constants import VERTICAL_GAP
from flappy_solo.obstacle_pool import ObstaclePool


def test_acquire_cycles_round_robin():
    pool = ObstaclePool(10)
    handed_out = [pool.acquire(0, 0, 52, 320) for _ in range(25)]

    assert len({id(o) for o in handed_out}) == 10
    for i, obstacle in enumerate(handed_out):
        assert obstacle is handed_out[i % 10]
    assert handed_out[10] is handed_out[0]
    assert pool.cursor == 5


def test_acquire_overwrites_geometry_in_place():
    pool = ObstaclePool(5)
    first = pool.acquire(0, 0, 10, 20)
    first.scored = True
    first.move_x(40)
    for _ in range(4):
        pool.acquire(0, 0, 10, 20)

    again = pool.acquire(3, 4, 52, 320)
    assert again is first
    assert (again.x, again.y, again.width, again.height) == (3, 4, 52, 320)
    assert (again.top.x, again.top.y, again.top.width, again.top.height) == (3, 4, 52, 320)
    assert again.bottom.y == 320 + VERTICAL_GAP
    assert again.bottom.x == 3


def test_cursor_stays_in_range():
    pool = ObstaclePool(6, peak_live=2)
    for _ in range(40):
        pool.acquire(0, 0, 1, 1)
        assert 0 <= pool.cursor < len(pool)


@pytest.mark.parametrize("size", [0, 3, 4])
def test_capacity_must_exceed_peak_live(size):
    with pytest.raises(ValueError):
        ObstaclePool(size, peak_live=4)
