from sand_traveler.config.constants import (
    BLENDED_MAX_ALPHA,
    GRAINS,
    MAX_GRAIN_DISTANCE,
    MAX_ITERATIONS,
    MIN_FRIEND_CITIES,
    NORMAL_MAX_ALPHA,
    NUM_CITIES,
    SAND_PALETTE,
    VELOCITY_DAMPING,
)


def test_city_count_supports_friend_selection() -> None:
    assert isinstance(NUM_CITIES, int) and NUM_CITIES >= MIN_FRIEND_CITIES


def test_iteration_budget_is_positive() -> None:
    assert isinstance(MAX_ITERATIONS, int) and MAX_ITERATIONS > 0


def test_damping_shrinks_velocity() -> None:
    assert 0.0 < VELOCITY_DAMPING < 1.0


def test_alpha_caps_fit_a_channel() -> None:
    assert 0 < BLENDED_MAX_ALPHA < NORMAL_MAX_ALPHA <= 255


def test_grain_layout() -> None:
    assert GRAINS == 11
    assert 0.0 < MAX_GRAIN_DISTANCE < 1.0


def test_palette_entries_are_opaque_rgba() -> None:
    assert SAND_PALETTE
    for color in SAND_PALETTE:
        assert 0 <= color <= 0xFFFFFFFF
        assert color & 0xFF == 0xFF
