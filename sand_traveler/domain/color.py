"""RGBA packing and the three compositing operators.

Colours are plain ints packed as ``0xRRGGBBAA``. Every operator works on
all four channels and produces a packed colour whose channels are clamped
to ``[0, 255]``. In the blend functions ``src`` is the colour already on
the surface and ``dst`` is the paint being laid down; ``alpha`` weights
``dst``.
"""

from __future__ import annotations

from enum import Enum
from random import Random
from typing import TYPE_CHECKING

from sand_traveler.config.constants import (
    BLENDED_MAX_ALPHA,
    NORMAL_MAX_ALPHA,
    SAND_PALETTE,
)

if TYPE_CHECKING:
    from sand_traveler.domain.surface import PixelSurface

Color = int
"""32-bit packed RGBA colour."""


class BlendMode(Enum):
    """Compositing operator applied by a painter."""

    NORMAL = "normal"
    ADDITIVE = "additive"
    SUBTRACTIVE = "subtractive"


def _clamp_channel(value: float) -> int:
    channel = int(value)
    if channel < 0:
        return 0
    if channel > 255:
        return 255
    return channel


def pack(r: float, g: float, b: float, a: float) -> Color:
    """Pack four channels, truncating toward zero and clamping to [0, 255]."""
    return (
        (_clamp_channel(r) << 24)
        | (_clamp_channel(g) << 16)
        | (_clamp_channel(b) << 8)
        | _clamp_channel(a)
    )


def unpack_r(color: Color) -> int:
    return (color >> 24) & 0xFF


def unpack_g(color: Color) -> int:
    return (color >> 16) & 0xFF


def unpack_b(color: Color) -> int:
    return (color >> 8) & 0xFF


def unpack_a(color: Color) -> int:
    return color & 0xFF


def unpack(color: Color) -> tuple[int, int, int, int]:
    """Return ``(r, g, b, a)``."""
    return unpack_r(color), unpack_g(color), unpack_b(color), unpack_a(color)


def blend_normal(src: Color, dst: Color, alpha: int) -> Color:
    """Alpha-over compositing of ``dst`` onto ``src``."""
    if alpha >= 255:
        return dst
    if alpha <= 0:
        return src
    inverse = 255 - alpha
    return pack(
        *(
            (alpha * d + inverse * s) >> 8
            for s, d in zip(unpack(src), unpack(dst), strict=True)
        )
    )


def blend_additive(src: Color, dst: Color, alpha: int) -> Color:
    """Add ``alpha``-scaled ``dst`` to ``src``, saturating at 255."""
    return pack(*(s + ((alpha * d) >> 8) for s, d in zip(unpack(src), unpack(dst), strict=True)))


def blend_subtractive(src: Color, dst: Color, alpha: int) -> Color:
    """Subtract ``alpha``-scaled ``dst`` from ``src``, saturating at 0."""
    return pack(*(s - ((alpha * d) >> 8) for s, d in zip(unpack(src), unpack(dst), strict=True)))


_BLENDERS = {
    BlendMode.NORMAL: blend_normal,
    BlendMode.ADDITIVE: blend_additive,
    BlendMode.SUBTRACTIVE: blend_subtractive,
}


def blend(mode: BlendMode, src: Color, dst: Color, alpha: int) -> Color:
    """Dispatch to the operator selected by *mode*."""
    return _BLENDERS[mode](src, dst, alpha)


def plot(
    surface: PixelSurface,
    x: float,
    y: float,
    color: Color,
    alpha: float,
    mode: BlendMode,
) -> None:
    """Blend one dab into *surface* at the truncated coordinates.

    Coordinates outside the surface are ignored; alpha is clamped to
    ``[0, 255]`` before blending.
    """
    px = int(x)
    py = int(y)
    if not (0 <= px < surface.width and 0 <= py < surface.height):
        return
    a = int(alpha)
    a = 0 if a < 0 else 255 if a > 255 else a
    surface.set_pixel(px, py, blend(mode, surface.get_pixel(px, py), color, a))


def choose_blend_mode(rng: Random, additive: bool, subtractive: bool) -> tuple[BlendMode, int]:
    """Pick a painter's blend mode and alpha cap.

    With both additive and subtractive enabled a coin flip decides between
    them; with neither enabled the painter uses normal alpha blending.
    """
    if additive and subtractive:
        mode = BlendMode.ADDITIVE if rng.random() > 0.5 else BlendMode.SUBTRACTIVE
        return mode, BLENDED_MAX_ALPHA
    if additive:
        return BlendMode.ADDITIVE, BLENDED_MAX_ALPHA
    if subtractive:
        return BlendMode.SUBTRACTIVE, BLENDED_MAX_ALPHA
    return BlendMode.NORMAL, NORMAL_MAX_ALPHA


def some_color(rng: Random) -> Color:
    """Pick a paint colour from the sand palette."""
    return rng.choice(SAND_PALETTE)
