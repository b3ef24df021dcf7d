"""Drawing of level schemes as vector graphics (PDF and SVG)."""

from __future__ import annotations

import os

from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.patches import Polygon

from levelschemer.scheme import LevelScheme, Threshold

WIDTH = 600.0
HEIGHT = 800.0
MARGIN = 50.0
LEVEL_WIDTH = 200.0
TEXT_OFFSET = 5.0
LINE_WIDTH = 2.0
ARROW_SIZE = 8.0
ENERGY_HEADROOM = 100.0
FONT_FAMILY = "serif"

_POINTS_PER_INCH = 72.0
_SUPERSCRIPTABLE = frozenset("0123456789+-")


def split_superscript(text: str) -> list[tuple[str, bool]]:
    """Split *text* into runs, flagging those that are superscripted.

    A ``^`` starts superscript mode; digits, ``+`` and ``-`` stay raised
    until any other character ends the mode. The carets are dropped.
    """
    segments: list[tuple[str, bool]] = []
    in_super = False
    for char in text:
        if char == "^":
            in_super = True
            continue
        raised = in_super and char in _SUPERSCRIPTABLE
        if not raised:
            in_super = False
        if segments and segments[-1][1] == raised:
            segments[-1] = (segments[-1][0] + char, raised)
        else:
            segments.append((char, raised))
    return segments


def vertical_scale(scheme: LevelScheme) -> float:
    """Points per keV so that the highest level or threshold fits the page."""
    energies = [lvl.energy for lvl in scheme.levels]
    energies += [t.energy for t in scheme.thresholds]
    max_energy = max([0.0, *energies])
    return (HEIGHT - 2 * MARGIN) / (max_energy + ENERGY_HEADROOM)


def energy_to_y(energy: float, scale: float) -> float:
    """Page y coordinate (downwards from the top) of an energy."""
    return HEIGHT - MARGIN - energy * scale


def format_energy(energy: float) -> str:
    return f"{energy:g} keV"


def _markup(segments: list[tuple[str, bool]]) -> tuple[str, bool]:
    """Text for matplotlib and whether it must be parsed as mathtext."""
    if not any(raised for _, raised in segments):
        return "".join(run for run, _ in segments), False
    parts = [
        f"$^{{{run}}}$" if raised else run.replace("$", r"\$")
        for run, raised in segments
    ]
    return "".join(parts), True


def _linestyle(dash_pattern: tuple[float, ...]):
    if not dash_pattern:
        return "-"
    pattern = list(dash_pattern)
    if any(v < 0 for v in pattern) or sum(pattern) <= 0:
        raise ValueError(f"invalid dash pattern: {dash_pattern!r}")
    if len(pattern) % 2:
        pattern *= 2
    return (0, tuple(v / LINE_WIDTH for v in pattern))


def _colour(threshold: Threshold) -> tuple[float, float, float]:
    return tuple(min(max(c, 0.0), 1.0) for c in (threshold.r, threshold.g, threshold.b))


def _draw_thresholds(ax, scheme: LevelScheme, scale: float) -> None:
    inset = 0.1 * (WIDTH - 2 * MARGIN)
    start, end = MARGIN + inset, WIDTH - MARGIN - inset
    for threshold in scheme.thresholds:
        y = energy_to_y(threshold.energy, scale)
        colour = _colour(threshold)
        ax.add_line(
            Line2D(
                [start, end],
                [y, y],
                color=colour,
                linewidth=LINE_WIDTH,
                linestyle=_linestyle(threshold.dash_pattern),
                dash_capstyle="butt",
                solid_capstyle="butt",
            )
        )
        label = ax.text(
            end + 5, y + 4, threshold.kind,
            fontsize=10, fontstyle="italic", fontfamily=FONT_FAMILY,
            color=colour, va="baseline", ha="left", parse_math=False,
        )
        ax.annotate(
            format_energy(threshold.energy),
            xy=(1, 0), xycoords=label,
            xytext=(5, 0), textcoords="offset points",
            fontsize=10, fontfamily=FONT_FAMILY, color=colour,
            va="bottom", ha="left", parse_math=False, annotation_clip=False,
        )


def _draw_levels(ax, scheme: LevelScheme, scale: float) -> None:
    x1 = (WIDTH - LEVEL_WIDTH) / 2
    x2 = x1 + LEVEL_WIDTH
    for level in scheme.levels:
        y = energy_to_y(level.energy, scale)
        ax.add_line(Line2D([x1, x2], [y, y], color="black", linewidth=LINE_WIDTH))
        segments = [(f"{level.label} (", False)]
        segments += split_superscript(level.spin_parity)
        segments.append((f"), {format_energy(level.energy)}", False))
        text, is_math = _markup(segments)
        ax.text(
            x2 + TEXT_OFFSET, y + 4, text,
            fontsize=12, fontfamily=FONT_FAMILY, color="black",
            va="baseline", ha="left", parse_math=is_math,
        )


def _draw_transitions(ax, scheme: LevelScheme, scale: float) -> None:
    x = WIDTH / 2
    for transition in scheme.transitions:
        y1 = energy_to_y(transition.from_energy, scale)
        y2 = energy_to_y(transition.to_energy, scale)
        pointing_up = y2 < y1
        base = y2 + ARROW_SIZE if pointing_up else y2 - ARROW_SIZE
        ax.add_line(Line2D([x, x], [y1, base], color="black", linewidth=LINE_WIDTH))
        half = ARROW_SIZE / 2
        ax.add_patch(
            Polygon(
                [(x, y2), (x - half, base), (x + half, base)],
                closed=True, facecolor="black", edgecolor="none",
            )
        )
        ax.text(
            x + TEXT_OFFSET, (y1 + y2) / 2,
            f"{transition.kind}, {transition.intensity:g}%",
            fontsize=10, fontfamily=FONT_FAMILY, color="black",
            va="baseline", ha="left", parse_math=False,
        )


def render_figure(scheme: LevelScheme) -> Figure:
    """Draw *scheme* on a page-sized figure whose data units are points."""
    fig = Figure(figsize=(WIDTH / _POINTS_PER_INCH, HEIGHT / _POINTS_PER_INCH), dpi=_POINTS_PER_INCH)
    ax = fig.add_axes((0, 0, 1, 1))
    ax.set_xlim(0, WIDTH)
    ax.set_ylim(HEIGHT, 0)
    ax.set_axis_off()

    scale = vertical_scale(scheme)
    _draw_thresholds(ax, scheme, scale)
    _draw_levels(ax, scheme, scale)
    _draw_transitions(ax, scheme, scale)

    if scheme.isotope_label:
        text, is_math = _markup(split_superscript(scheme.isotope_label))
        ax.text(
            WIDTH / 2, HEIGHT - 15, text,
            fontsize=16, fontfamily=FONT_FAMILY, color="black",
            va="baseline", ha="center", parse_math=is_math,
        )
    return fig


def render_to_pdf(scheme: LevelScheme, filename: str | os.PathLike[str]) -> None:
    render_figure(scheme).savefig(os.fspath(filename), format="pdf")


def render_to_svg(scheme: LevelScheme, filename: str | os.PathLike[str]) -> None:
    render_figure(scheme).savefig(os.fspath(filename), format="svg")