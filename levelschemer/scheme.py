"""Data model of a nuclear level scheme: levels, transitions and thresholds."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable, TextIO

DEFAULT_DASH_PATTERN: tuple[float, ...] = (4.0, 2.0)


@dataclass(frozen=True)
class Level:
    """An excited (or ground) state of the nucleus."""

    energy: float
    spin_parity: str
    label: str


@dataclass(frozen=True)
class Transition:
    """A transition between two levels, identified by their energies."""

    from_energy: float
    to_energy: float
    kind: str
    intensity: float


@dataclass(frozen=True)
class Threshold:
    """The energy at which a decay channel opens, drawn as a coloured line.

    An empty dash pattern means a solid line.
    """

    energy: float
    kind: str
    dash_pattern: tuple[float, ...] = DEFAULT_DASH_PATTERN
    r: float = 1.0
    g: float = 0.0
    b: float = 0.0


@dataclass
class LevelScheme:
    """A collection of levels, transitions and thresholds for one isotope."""

    levels: list[Level] = field(default_factory=list)
    transitions: list[Transition] = field(default_factory=list)
    thresholds: list[Threshold] = field(default_factory=list)
    isotope_label: str = ""

    def add_level(self, energy: float, spin_parity: str, label: str) -> Level:
        level = Level(energy, spin_parity, label)
        self.levels.append(level)
        return level

    def add_transition(
        self, from_energy: float, to_energy: float, kind: str, intensity: float
    ) -> Transition:
        transition = Transition(from_energy, to_energy, kind, intensity)
        self.transitions.append(transition)
        return transition

    def add_threshold(
        self,
        energy: float,
        kind: str,
        dash_pattern: Iterable[float] = DEFAULT_DASH_PATTERN,
        r: float = 1.0,
        g: float = 0.0,
        b: float = 0.0,
    ) -> Threshold:
        threshold = Threshold(energy, kind, tuple(dash_pattern), r, g, b)
        self.thresholds.append(threshold)
        return threshold

    def format_scheme(self) -> str:
        """Return a plain-text listing of the levels and transitions."""
        lines = ["Nuclear Level Scheme:\n"]
        lines.extend(
            f"\tLevel: {lvl.energy:g} keV, {lvl.spin_parity} ({lvl.label})\n"
            for lvl in self.levels
        )
        lines.extend(
            f"\tTransition: {t.from_energy:g} -> {t.to_energy:g} [{t.kind}], "
            f"Intensity: {t.intensity:g}\n"
            for t in self.transitions
        )
        return "".join(lines)

    def print_scheme(self, file: TextIO | None = None) -> None:
        """Write the listing from :meth:`format_scheme` to *file* (stdout by default)."""
        print(self.format_scheme(), end="", file=file if file is not None else sys.stdout)