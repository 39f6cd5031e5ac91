"""Generate seeded tracks and export preview plots plus a JSON summary."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

import matplotlib.pyplot as plt

from seedtrack.track import Track, TrackCache, corner_fractions, sample_fractions, turn_markers
from seedtrack.utils import configure_logging

DEFAULT_SEEDS = ("octocat/Hello-World", "torvalds/linux", "python/cpython")
OG_IMAGE_WIDTH = 1200.0
OG_IMAGE_HEIGHT = 630.0
START_LINE_HALF_WIDTH = 12.0
TURN_LABEL_OFFSET = 34.0


def _export_track_plot(track: Track, seed: str, path: Path) -> None:
    """Plot one track with its start line, kerb corners and turn labels.

    Args:
        track: Track to draw.
        seed: Seed shown in the title.
        path: Output path for the figure.
    """
    fig, axis = plt.subplots(figsize=(8.0, 4.2), constrained_layout=True)

    axis.plot(
        list(track.x) + [float(track.x[0])],
        list(track.y) + [float(track.y[0])],
        lw=2.0,
        color="#2a2520",
    )
    a, b = track.start_line(START_LINE_HALF_WIDTH)
    axis.plot([a.x, b.x], [a.y, b.y], lw=2.5, color="#c62828")

    corners = [track.point_at(t) for t in corner_fractions(track)]
    axis.scatter([p.x for p in corners], [p.y for p in corners], s=8, color="#c62828")
    for number, turn in enumerate(turn_markers(track), start=1):
        nx, ny = turn.normal
        axis.annotate(
            f"T{number}",
            (turn.point.x + nx * TURN_LABEL_OFFSET, turn.point.y + ny * TURN_LABEL_OFFSET),
            ha="center",
            va="center",
            fontsize=7,
            color="#8c806c",
        )

    axis.set_xlim(0.0, OG_IMAGE_WIDTH)
    axis.set_ylim(OG_IMAGE_HEIGHT, 0.0)
    axis.set_aspect("equal")
    axis.set_title(seed)

    fig.savefig(path, dpi=120)
    plt.close(fig)


def _summary(track: Track) -> dict[str, float | int]:
    """Summarize one track for the JSON report.

    Args:
        track: Generated track.

    Returns:
        Report fields keyed by name.
    """
    samples = sample_fractions(track, 4)
    return {
        "samples": track.size,
        "total_length": track.total_length,
        "corners": len(corner_fractions(track)),
        "turns": len(turn_markers(track)),
        "start_heading_x": float(samples.tangent_x[0]),
        "start_heading_y": float(samples.tangent_y[0]),
    }


def main() -> None:
    """Generate preview artifacts for the requested seeds."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("seeds", nargs="*", default=list(DEFAULT_SEEDS))
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(__file__).resolve().parent / "output" / "seeded_tracks",
    )
    parser.add_argument("--verbose", action="store_true", help="log generation stages")
    args = parser.parse_args()

    configure_logging(logging.INFO, logging.DEBUG if args.verbose else None)
    logger = logging.getLogger("seeded_track_preview")
    args.output.mkdir(parents=True, exist_ok=True)

    cache = TrackCache(max_entries=max(1, len(args.seeds)))
    summary: dict[str, dict[str, float | int]] = {}
    for index, seed in enumerate(args.seeds):
        track = cache.get(seed, OG_IMAGE_WIDTH, OG_IMAGE_HEIGHT)
        _export_track_plot(track, seed, args.output / f"track_{index:02d}.png")
        summary[seed] = _summary(track)
        logger.info("%s: lap length %.1f px, %d samples", seed, track.total_length, track.size)

    (args.output / "summary.json").write_text(json.dumps(summary, indent=2), encoding="utf-8")
    logger.info("Track previews written to %s", args.output)


if __name__ == "__main__":
    main()
