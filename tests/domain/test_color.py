"""Tests for sand_traveler.domain.color module."""

from __future__ import annotations

from random import Random

import pytest

from sand_traveler.config.constants import SAND_PALETTE
from sand_traveler.domain.color import (
    BlendMode,
    blend,
    blend_additive,
    blend_normal,
    blend_subtractive,
    choose_blend_mode,
    pack,
    plot,
    some_color,
    unpack,
    unpack_a,
    unpack_b,
    unpack_g,
    unpack_r,
)
from sand_traveler.domain.surface import ArraySurface

WHITE = pack(255, 255, 255, 255)
BLACK = pack(0, 0, 0, 255)


class TestPack:
    def test_channel_layout_is_rgba(self) -> None:
        assert pack(0x12, 0x34, 0x56, 0x78) == 0x12345678

    def test_unpack_inverts_pack(self) -> None:
        color = pack(1, 2, 3, 4)
        assert (unpack_r(color), unpack_g(color), unpack_b(color), unpack_a(color)) == (1, 2, 3, 4)

    def test_out_of_range_channels_clamp(self) -> None:
        assert unpack(pack(300, -5, 255, 256)) == (255, 0, 255, 255)

    def test_fractional_channels_truncate_toward_zero(self) -> None:
        assert unpack(pack(12.9, 0.99, -0.5, 254.999)) == (12, 0, 0, 254)

    def test_round_trip_random_inputs(self) -> None:
        rng = Random(0)
        for _ in range(200):
            raw = [rng.uniform(-100, 400) for _ in range(4)]
            expected = tuple(min(255, max(0, int(c))) for c in raw)
            assert unpack(pack(*raw)) == expected


class TestBlendNormal:
    def test_zero_alpha_returns_src(self) -> None:
        src = pack(10, 20, 30, 40)
        assert blend_normal(src, WHITE, 0) == src
        assert blend_normal(src, WHITE, -7) == src

    def test_full_alpha_returns_dst(self) -> None:
        src = pack(10, 20, 30, 40)
        assert blend_normal(src, WHITE, 255) == WHITE
        assert blend_normal(src, WHITE, 400) == WHITE

    def test_midpoint_interpolates(self) -> None:
        # (128*255 + 127*0) >> 8 == 127; alpha channel (255*255) >> 8 == 254
        assert unpack(blend_normal(BLACK, WHITE, 128)) == (127, 127, 127, 254)


class TestBlendAdditiveSubtractive:
    def test_additive_saturates_at_255(self) -> None:
        src = pack(250, 10, 0, 255)
        assert unpack(blend_additive(src, WHITE, 128)) == (255, 137, 127, 255)

    def test_subtractive_saturates_at_zero(self) -> None:
        src = pack(100, 10, 0, 255)
        assert unpack(blend_subtractive(src, WHITE, 128)) == (0, 0, 0, 128)

    def test_channels_stay_in_range(self) -> None:
        rng = Random(1)
        for _ in range(300):
            src = rng.getrandbits(32)
            dst = rng.getrandbits(32)
            alpha = rng.randint(0, 255)
            for result in (blend_additive(src, dst, alpha), blend_subtractive(src, dst, alpha)):
                assert 0 <= result <= 0xFFFFFFFF
                assert all(0 <= c <= 255 for c in unpack(result))

    def test_zero_alpha_is_identity(self) -> None:
        src = pack(9, 8, 7, 6)
        assert blend_additive(src, WHITE, 0) == src
        assert blend_subtractive(src, WHITE, 0) == src


class TestBlendDispatch:
    @pytest.mark.parametrize(
        ("mode", "func"),
        [
            (BlendMode.NORMAL, blend_normal),
            (BlendMode.ADDITIVE, blend_additive),
            (BlendMode.SUBTRACTIVE, blend_subtractive),
        ],
    )
    def test_dispatch_matches_operator(self, mode: BlendMode, func: object) -> None:
        src = pack(40, 80, 120, 200)
        dst = pack(200, 100, 50, 255)
        assert blend(mode, src, dst, 90) == func(src, dst, 90)  # type: ignore[operator]


class TestPlot:
    def test_writes_blended_pixel_at_truncated_coordinates(self) -> None:
        surface = ArraySurface(4, 4)
        surface.clear(BLACK)
        plot(surface, 2.9, 1.2, WHITE, 255, BlendMode.NORMAL)
        assert surface.get_pixel(2, 1) == WHITE
        assert surface.get_pixel(3, 1) == BLACK

    def test_out_of_bounds_is_ignored(self) -> None:
        surface = ArraySurface(4, 4)
        surface.clear(BLACK)
        for x, y in [(-1, 0), (0, -1), (4, 0), (0, 4), (100.5, -30.2)]:
            plot(surface, x, y, WHITE, 255, BlendMode.NORMAL)
        assert (surface.pixels == BLACK).all()

    def test_alpha_is_clamped_before_blending(self) -> None:
        surface = ArraySurface(2, 2)
        surface.clear(BLACK)
        plot(surface, 0, 0, WHITE, 999.0, BlendMode.ADDITIVE)
        # 0 + ((255*255) >> 8) == 254 per colour channel; alpha saturates
        assert unpack(surface.get_pixel(0, 0)) == (254, 254, 254, 255)
        plot(surface, 1, 1, WHITE, -20.0, BlendMode.NORMAL)
        assert surface.get_pixel(1, 1) == BLACK


class TestChooseBlendMode:
    def test_both_enabled_picks_additive_or_subtractive(self) -> None:
        rng = Random(3)
        seen = set()
        for _ in range(50):
            mode, max_alpha = choose_blend_mode(rng, True, True)
            assert max_alpha == 128
            seen.add(mode)
        assert seen == {BlendMode.ADDITIVE, BlendMode.SUBTRACTIVE}

    def test_single_modes(self) -> None:
        rng = Random(0)
        assert choose_blend_mode(rng, True, False) == (BlendMode.ADDITIVE, 128)
        assert choose_blend_mode(rng, False, True) == (BlendMode.SUBTRACTIVE, 128)
        assert choose_blend_mode(rng, False, False) == (BlendMode.NORMAL, 255)


def test_some_color_comes_from_palette() -> None:
    rng = Random(0)
    assert all(some_color(rng) in SAND_PALETTE for _ in range(20))
