"""Visualization: surface images, animations, and friend-graph plots."""

from sand_traveler.viz.render import render_animation, render_friend_graph, save_surface_image

__all__ = [
    "render_animation",
    "render_friend_graph",
    "save_surface_image",
]
