"""Shared types for palette-clash: RGB, XYZ, LAB, NamedColour, DiffEntry, ClashReport, Renderer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, NamedTuple


@dataclass(frozen=True)
class RGB:
    """8-bit sRGB channels (0-255), gamma encoded."""

    r: int
    g: int
    b: int


@dataclass(frozen=True)
class XYZ:
    """CIE 1931 tristimulus values on the 0-100 scale."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class LAB:
    """CIELAB colour: lightness l (0-100) and chromaticity axes a, b."""

    l: float  # noqa: E741
    a: float
    b: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.l, self.a, self.b)


@dataclass(frozen=True)
class NamedColour:
    """A language colour after conversion to LAB."""

    name: str
    hex: str  # as written in the config, e.g. '#3572A5'
    lab: LAB


class DiffEntry(NamedTuple):
    """One neighbour of a language: its name and CIE94 distance."""

    name: str
    diff: float


@dataclass
class ClashReport:
    """Everything a renderer needs for one run."""

    threshold: float
    colours: dict[str, str] = field(default_factory=dict)  # valid name -> hex
    neighbours: dict[str, list[DiffEntry]] = field(default_factory=dict)  # filtered, ascending
    skipped: dict[str, str] = field(default_factory=dict)  # name -> reason
    names: list[str] = field(default_factory=list)  # output selection, in order

    def selected(self) -> list[tuple[str, list[DiffEntry]]]:
        """Selected names that have at least one neighbour below threshold, in output order."""
        out = []
        for name in self.names:
            entries = self.neighbours.get(name)
            if entries:
                out.append((name, entries))
        return out

    @property
    def clash_count(self) -> int:
        return len(self.selected())


class Renderer:
    """A self-registering output mode.

    Usage in a renderer module:

        renderer = Renderer(name='text', help='Plain text report')

        @renderer.run
        def run(report, args):
            ...
    """

    def __init__(self, name: str, help: str = '', default_output: str | None = None):
        self.name = name
        self.help = help
        self.default_output = default_output
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, report: ClashReport, args: Any) -> None:
        """Execute the renderer's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Renderer {self.name} has no run function')
        self._run_fn(report, args)
