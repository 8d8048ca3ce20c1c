import pytest

from flappy_sim.data_models import Bird, Bounds, GameConfig, Pipe


def test_gravity_integration_is_exact():
    bird = Bird(y=300, velocity=0.0)
    bird.apply_gravity(0.5)
    assert bird.velocity == 0.5
    assert bird.y == 300.5
    bird.apply_gravity(0.5)
    assert bird.velocity == 1.0
    assert bird.y == 301.5


def test_gravity_has_no_terminal_velocity():
    bird = Bird(y=0, velocity=100.0)
    bird.apply_gravity(0.5)
    assert bird.velocity == 100.5


def test_jump_overwrites_velocity():
    for prior in (-3.0, 0.0, 7.25, 42.0):
        bird = Bird(velocity=prior)
        bird.jump(-10)
        assert bird.velocity == -10


def test_bounds():
    bird = Bird(x=50, y=100, width=34, height=24)
    assert bird.bounds() == Bounds(left=50, top=100, right=84, bottom=124)


@pytest.mark.parametrize("velocity, expected", [
    (0.0, 0.0),
    (5.0, 15.0),
    (100.0, 90),
    (-20.0, -25),
])
def test_tilt_is_clamped(velocity, expected):
    assert Bird(velocity=velocity).tilt() == expected


def test_bird_fully_inside_gap_does_not_collide():
    bounds = Bounds(left=50, top=100, right=84, bottom=124)
    pipe = Pipe(x=40, width=80, gap_top=80, gap_size=150)
    assert pipe.gap_bottom == 230
    assert not pipe.collides_with(bounds)


def test_bird_above_gap_collides():
    bounds = Bounds(left=50, top=100, right=84, bottom=124)
    pipe = Pipe(x=40, width=80, gap_top=150, gap_size=150)
    assert pipe.collides_with(bounds)


def test_bird_below_gap_collides():
    bounds = Bounds(left=50, top=100, right=84, bottom=124)
    pipe = Pipe(x=40, width=80, gap_top=0, gap_size=110)
    assert pipe.collides_with(bounds)


@pytest.mark.parametrize("x", [84, -30, 200, -200])
def test_no_collision_without_horizontal_overlap(x):
    bounds = Bounds(left=50, top=100, right=84, bottom=124)
    pipe = Pipe(x=x, width=80, gap_top=150, gap_size=150)
    assert not pipe.collides_with(bounds)


@pytest.mark.parametrize("gap_top", [123.5, 204.25640971137344, 0.1 + 0.2])
def test_gap_size_survives_movement(gap_top):
    pipe = Pipe(x=400, gap_top=gap_top, gap_size=150)
    for _ in range(50):
        pipe.advance(3)
        assert pipe.gap_top == gap_top
        assert pipe.gap_bottom == gap_top + 150
        assert pipe.gap_bottom - pipe.gap_top == pytest.approx(150)
    assert pipe.x == 250


def test_offscreen_needs_whole_pipe_past_left_edge():
    assert not Pipe(x=-80, gap_top=100, width=80).is_offscreen()
    assert Pipe(x=-80.5, gap_top=100, width=80).is_offscreen()


def test_has_cleared():
    assert not Pipe(x=-30, gap_top=100, width=80).has_cleared(50)
    assert Pipe(x=-31, gap_top=100, width=80).has_cleared(50)


def test_default_gap_range():
    assert GameConfig().gap_top_range() == (50, 400)


def test_custom_gap_range():
    cfg = GameConfig(screen_height=300, pipe_gap=100, pipe_margin_total=100)
    assert cfg.gap_top_range() == (50, 150)


def test_config_rejects_gap_that_does_not_fit():
    with pytest.raises(ValueError):
        GameConfig(pipe_gap=550)


@pytest.mark.parametrize("field", ["pipe_speed", "screen_width", "spawn_interval_ms"])
def test_config_rejects_non_positive_values(field):
    with pytest.raises(ValueError):
        GameConfig(**{field: 0})


@pytest.mark.parametrize("overrides", [
    {"pipe_top_margin": -1},
    {"pipe_top_margin": 150, "pipe_margin_total": 100},
    {"bird_height": 150},
    {"bird_height": 200},
])
def test_config_rejects_gaps_that_can_leave_the_screen(overrides):
    with pytest.raises(ValueError):
        GameConfig(**overrides)


def test_config_accepts_zero_margins():
    cfg = GameConfig(pipe_top_margin=0, pipe_margin_total=0)
    assert cfg.gap_top_range() == (0, 450)


@pytest.mark.parametrize("frame_time_ms", [0, -16.7])
def test_config_rejects_non_positive_frame_time(frame_time_ms):
    with pytest.raises(ValueError):
        GameConfig(frame_time_ms=frame_time_ms)


def test_default_frame_time_is_sixty_hz():
    assert GameConfig().frame_time_ms == pytest.approx(1000 / 60)
