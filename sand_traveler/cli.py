"""CLI entrypoint: run a sand-traveler field for a number of frames and save the result.

CLI arguments override ``--config`` file values; config-file values override
the built-in defaults from :mod:`sand_traveler.config.constants`.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from sand_traveler.config import constants
from sand_traveler.config.types import SimulationConfig, UpdateMode
from sand_traveler.domain.field import SimulationField
from sand_traveler.simulation.driver import capture_frames, run_frames
from sand_traveler.viz.render import render_animation, render_friend_graph, save_surface_image

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_update_mode(raw_update_mode: str) -> UpdateMode:
    """Parse update mode from CLI/config."""
    try:
        return UpdateMode(raw_update_mode)
    except ValueError as exc:
        valid = ", ".join(mode.value for mode in UpdateMode)
        raise ValueError(f"update-mode must be one of {valid}") from exc


def _parse_color(raw: object, key: str) -> int:
    """Parse a packed RGBA colour given as int or hex string (``0xRRGGBBAA`` / ``#RRGGBBAA``)."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a colour value")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str):
        text = raw.strip().lower().removeprefix("#").removeprefix("0x")
        if len(text) == 6:
            text += "ff"
        try:
            value = int(text, 16)
        except ValueError as exc:
            raise ValueError(f"{key} must be a hex colour like 0xRRGGBBAA") from exc
    else:
        raise ValueError(f"{key} must be a colour value")
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"{key} must fit in 32 bits")
    return value


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        return int(raw)
    raise ValueError(f"{key} must be an integer value")


def _coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a float value")
    if isinstance(raw, (int, float, str)):
        return float(raw)
    raise ValueError(f"{key} must be a float value")


def _coerce_seed(raw: object, key: str) -> int | str:
    """Seeds stay ints or strings; integer-looking strings become ints.

    ``--seed 42`` and ``{"seed": 42}`` must select the same PRNG stream, and
    ``Random("42")`` differs from ``Random(42)``.
    """
    if isinstance(raw, bool) or not isinstance(raw, (int, str)):
        raise ValueError(f"{key} must be an integer or string")
    if isinstance(raw, str) and raw.strip().removeprefix("-").isdecimal():
        return int(raw)
    return raw


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Paint sand between traveling cities")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--city-count", type=int, default=None)
    parser.add_argument("--sand-painter-count", type=int, default=None)
    parser.add_argument("--iterations-max", type=int, default=None)
    parser.add_argument("--iterations-per-tick", type=int, default=None)
    parser.add_argument("--distance-minimum", type=float, default=None)
    parser.add_argument("--velocity", type=float, default=None)
    parser.add_argument("--blending-additive", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument(
        "--blending-subtractive", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument("--draw-travelers", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument(
        "--draw-perpendicular", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument(
        "--use-sand-painters", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument("--seed", type=str, default=None)
    parser.add_argument("--background-color", type=str, default=None, help="0xRRGGBBAA")
    parser.add_argument("--canvas-width", type=int, default=None)
    parser.add_argument("--canvas-height", type=int, default=None)
    parser.add_argument(
        "--update-mode",
        type=str,
        choices=[mode.value for mode in UpdateMode],
        default=None,
    )
    parser.add_argument("--frames", type=int, default=None, help="Number of ticks to run")
    parser.add_argument("--output", type=Path, default=None, help="PNG of the final surface")
    parser.add_argument("--animation", type=Path, default=None, help="Optional GIF/MP4 output")
    parser.add_argument("--capture-every", type=int, default=None)
    parser.add_argument("--fps", type=int, default=None)
    parser.add_argument("--friend-graph", type=Path, default=None, help="Optional graph plot")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def build_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> SimulationConfig:
    """Resolve a :class:`SimulationConfig` from parsed CLI args and file values."""

    def _int(key: str, default: int) -> int:
        return _coerce_int(_get_val(getattr(args, key), key, file_cfg, default), key)

    def _float(key: str, default: float) -> float:
        return _coerce_float(_get_val(getattr(args, key), key, file_cfg, default), key)

    def _bool(key: str, default: bool) -> bool:
        return _coerce_bool(_get_val(getattr(args, key), key, file_cfg, default), key)

    update_mode_raw = _get_val(
        args.update_mode, "update_mode", file_cfg, UpdateMode.SEQUENTIAL.value
    )
    return SimulationConfig(
        city_count=_int("city_count", constants.NUM_CITIES),
        sand_painter_count=_int("sand_painter_count", constants.NUM_SANDPAINTERS),
        iterations_max=_int("iterations_max", constants.MAX_ITERATIONS),
        iterations_per_tick=_int("iterations_per_tick", constants.ITERATIONS_PER_TICK),
        distance_minimum=_float("distance_minimum", constants.MIN_DISTANCE),
        velocity=_float("velocity", constants.VELOCITY),
        blending_additive=_bool("blending_additive", True),
        blending_subtractive=_bool("blending_subtractive", True),
        draw_travelers=_bool("draw_travelers", False),
        draw_perpendicular=_bool("draw_perpendicular", True),
        use_sand_painters=_bool("use_sand_painters", True),
        seed=_coerce_seed(_get_val(args.seed, "seed", file_cfg, constants.DEFAULT_SEED), "seed"),
        background_color=_parse_color(
            _get_val(
                args.background_color,
                "background_color",
                file_cfg,
                constants.CANVAS_BACKGROUND_COLOR,
            ),
            "background_color",
        ),
        canvas_width=_int("canvas_width", constants.CANVAS_WIDTH),
        canvas_height=_int("canvas_height", constants.CANVAS_HEIGHT),
        update_mode=_parse_update_mode(str(update_mode_raw)),
    )


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Run a field, save the final surface, and print a JSON summary."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    config = build_config(args, file_cfg)
    frames = _coerce_int(_get_val(args.frames, "frames", file_cfg, 600), "frames")
    output = Path(str(_get_val(args.output, "output", file_cfg, "sand_traveler.png")))
    capture_every = _coerce_int(
        _get_val(args.capture_every, "capture_every", file_cfg, 10), "capture_every"
    )
    fps = _coerce_int(_get_val(args.fps, "fps", file_cfg, 12), "fps")

    field = SimulationField(config)
    field.start()
    logger.info("running %d frames into %s", frames, output)

    if args.friend_graph is not None:
        render_friend_graph(field, args.friend_graph)

    if args.animation is not None:
        captured = capture_frames(field, frames, every=capture_every)
        if captured:
            render_animation(captured, args.animation, fps=fps)
        else:
            logger.warning("no frames captured; skipping animation %s", args.animation)
    else:
        run_frames(field, frames)

    save_surface_image(field.surface, output)

    summary = {
        "frames": frames,
        "runs": field.run_count,
        "iteration": field.iteration_count,
        "city_count": config.city_count,
        "seed": config.seed,
        "output": str(output),
        "animation": str(args.animation) if args.animation is not None else None,
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
