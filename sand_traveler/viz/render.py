"""Matplotlib-based presentation of sand-traveler surfaces and runs."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from matplotlib import animation

from sand_traveler.domain.field import SimulationField
from sand_traveler.domain.surface import ArraySurface

BACKGROUND_COLOR = "#000000"
CITY_COLOR = "#e0b87e"
FRIEND_EDGE_COLOR = "#6a8687"


def _as_image(rgba: np.ndarray, opaque: bool) -> np.ndarray:
    """Drop the alpha channel when *opaque* so subtractive alpha does not show through."""
    if rgba.ndim != 3 or rgba.shape[2] != 4:
        raise ValueError(f"expected an (H, W, 4) RGBA array, got shape {rgba.shape}")
    return rgba[..., :3] if opaque else rgba


def save_surface_image(surface: ArraySurface, output_path: Path, opaque: bool = True) -> Path:
    """Write the surface to an image file at its native resolution."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    plt.imsave(output_path, _as_image(surface.to_rgba_array(), opaque))
    return output_path


def render_animation(
    frames: list[np.ndarray],
    output_path: Path,
    fps: int = 8,
    opaque: bool = True,
) -> Path:
    """Render captured RGBA frames as an animation (GIF via Pillow, else ffmpeg)."""
    if not frames:
        raise ValueError("frames must not be empty")
    if fps < 1:
        raise ValueError("fps must be >= 1")

    first = _as_image(frames[0], opaque)
    height, width = first.shape[:2]
    dpi = 100
    fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    fig.patch.set_facecolor(BACKGROUND_COLOR)
    ax = fig.add_axes((0, 0, 1, 1))
    ax.set_axis_off()
    img = ax.imshow(first, origin="upper", interpolation="nearest")

    def update(frame_index: int) -> tuple[Any, ...]:
        img.set_data(_as_image(frames[frame_index], opaque))
        return (img,)

    anim = animation.FuncAnimation(
        fig, update, frames=len(frames), interval=max(1, int(1000 / fps)), blit=False
    )

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    writer: animation.PillowWriter | animation.FFMpegWriter
    if output_path.suffix.lower() == ".gif":
        writer = animation.PillowWriter(fps=fps)
    else:
        writer = animation.FFMpegWriter(fps=fps)
    anim.save(output_path, writer=writer)
    plt.close(fig)
    return output_path


def render_friend_graph(field: SimulationField, output_path: Path) -> Path:
    """Plot city positions with an arrow from each city to its friend."""
    if not field.started:
        raise ValueError("field has no cities; call start() first")
    graph = field.friend_graph()
    xs = [graph.nodes[n]["x"] for n in graph.nodes]
    ys = [graph.nodes[n]["y"] for n in graph.nodes]

    fig, ax = plt.subplots(figsize=(6, 6))
    fig.patch.set_facecolor(BACKGROUND_COLOR)
    ax.set_facecolor(BACKGROUND_COLOR)
    for a, b in graph.edges:
        ax.annotate(
            "",
            xy=(graph.nodes[b]["x"], graph.nodes[b]["y"]),
            xytext=(graph.nodes[a]["x"], graph.nodes[a]["y"]),
            arrowprops={"arrowstyle": "->", "color": FRIEND_EDGE_COLOR, "linewidth": 0.5},
        )
    ax.scatter(xs, ys, s=6, color=CITY_COLOR, zorder=3)
    ax.set_xlim(0, field.surface.width)
    ax.set_ylim(field.surface.height, 0)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(
        f"Friend graph ({graph.number_of_nodes()} cities, run {field.run_count})",
        color="white",
        fontsize=10,
    )

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150, facecolor=fig.get_facecolor())
    plt.close(fig)
    return output_path
