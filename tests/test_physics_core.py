from flappy_solo.data_models import Box, Direction, Flappy, ScrollLayer
from flappy_solo.physics_core import PhysicsCore


def test_gravity_accelerates_fall():
    core = PhysicsCore()
    y, v = core.apply_gravity_and_movement(100.0, 0.0)
    assert (y, v) == (100.25, 0.25)
    y, v = core.apply_gravity_and_movement(y, v)
    assert (y, v) == (100.75, 0.5)


def test_ascend_snaps_velocity_every_frame():
    core = PhysicsCore()
    flappy = Flappy(box=Box(0, 100, 34, 24), velocity=3.0, direction=Direction.ASCEND)
    core.step_player(flappy)
    assert flappy.velocity == -4.5
    assert flappy.box.y == 95.5
    core.step_player(flappy)
    assert flappy.velocity == -4.5
    assert flappy.box.y == 91.0


def test_no_direction_means_no_motion():
    core = PhysicsCore()
    flappy = Flappy(box=Box(0, 100, 34, 24), velocity=2.0)
    core.step_player(flappy)
    assert flappy.box.y == 100
    assert flappy.velocity == 2.0


def test_scroll_wraps_by_own_width():
    core = PhysicsCore()
    layer = ScrollLayer(Box(0, 0, 9, 10), speed=3)
    offsets = []
    for _ in range(7):
        core.scroll(layer)
        offsets.append(layer.box.x)
    assert offsets == [-3, -6, 0, -3, -6, 0, -3]


def test_scroll_offset_stays_in_window():
    core = PhysicsCore()
    layer = ScrollLayer(Box(0, 0, 288, 512), speed=1)
    for _ in range(1000):
        core.scroll(layer)
        assert -288 < layer.box.x <= 0


def test_animation_advances_every_six_ticks():
    core = PhysicsCore()
    flappy = Flappy()
    frames = []
    for _ in range(19):
        core.advance_animation(flappy)
        frames.append(flappy.frame_index)
    # Counter starts primed, so the first tick advances
    assert frames[0] == 1
    assert frames[1:7] == [1, 1, 1, 1, 1, 2]
    assert frames[7:13] == [2, 2, 2, 2, 2, 0]
    assert frames[13:19] == [0, 0, 0, 0, 0, 1]


def test_out_of_bounds_floor_and_ceiling():
    core = PhysicsCore()
    assert core.out_of_bounds(Box(0, 376, 34, 24), 400)
    assert not core.out_of_bounds(Box(0, 375.9, 34, 24), 400)
    assert core.out_of_bounds(Box(0, 0, 34, 24), 400)
    assert core.out_of_bounds(Box(0, -3, 34, 24), 400)
    assert not core.out_of_bounds(Box(0, 0.5, 34, 24), 400)
