"""Pairwise ranking and threshold filtering of language colours.

compute_report() is the entry point for callers that only want the numbers:

    compute_report({'Python': '#3572A5', 'Go': '#00ADD8'}, threshold=10)
    -> {'Python': [...], 'Go': [...]}  # lists of DiffEntry(name, diff)

build_report() keeps the hex values, skipped entries and output selection
for the renderers.
"""

import itertools
import logging
from collections.abc import Iterable, Mapping, Sequence

import numpy as np

from palette_clash.core.colour import ColourError, hex_to_lab
from palette_clash.core.difference import UNIT_WEIGHTS, Cie94Weights, cie94_matrix
from palette_clash.core.types import LAB, ClashReport, DiffEntry, NamedColour

_log = logging.getLogger('palette_clash.core.ranking')


def convert_colours(colours: Mapping[str, str]) -> tuple[list[NamedColour], dict[str, str]]:
    """Convert name -> hex to NamedColours, dropping entries that fail to parse.

    Returns (converted, skipped) where skipped maps name -> reason.
    """
    converted: list[NamedColour] = []
    skipped: dict[str, str] = {}
    for name, hex_value in colours.items():
        try:
            lab = hex_to_lab(hex_value)
        except ColourError as e:
            _log.warning('skipping %s: %s', name, e)
            skipped[name] = str(e)
            continue
        converted.append(NamedColour(name=name, hex=hex_value, lab=lab))
    return converted, skipped


def _as_named(colours: Sequence[NamedColour] | Mapping[str, LAB]) -> list[tuple[str, LAB]]:
    if isinstance(colours, Mapping):
        return list(colours.items())
    return [(c.name, c.lab) for c in colours]


def rank(
    colours: Sequence[NamedColour] | Mapping[str, LAB],
    weights: Cie94Weights = UNIT_WEIGHTS,
) -> dict[str, list[DiffEntry]]:
    """For every name, all other names sorted ascending by CIE94 distance.

    The sort is stable over input order, so exact ties keep that order.
    """
    pairs = _as_named(colours)
    if not pairs:
        return {}

    names = [name for name, _lab in pairs]
    labs = np.array([lab.as_tuple() for _name, lab in pairs])
    diffs = cie94_matrix(labs, weights)

    ranked: dict[str, list[DiffEntry]] = {}
    for i, name in enumerate(names):
        order = np.argsort(diffs[i], kind='stable')
        ranked[name] = [DiffEntry(names[j], float(diffs[i, j])) for j in order if j != i]
    _log.debug('ranked %d colours (%d pairs)', len(names), len(names) * (len(names) - 1))
    return ranked


def filter_below(entries: Iterable[DiffEntry], threshold: float) -> list[DiffEntry]:
    """Leading entries with diff < threshold. Input must be sorted ascending."""
    return list(itertools.takewhile(lambda e: e.diff < threshold, entries))


def compute_report(colours: Mapping[str, str], threshold: float) -> dict[str, list[DiffEntry]]:
    """Ranked, threshold-filtered neighbours for every valid name.

    Names whose colour does not parse are left out. Names with no neighbour
    below threshold map to an empty list.
    """
    converted, _skipped = convert_colours(colours)
    return {name: filter_below(entries, threshold) for name, entries in rank(converted).items()}


def build_report(
    colours: Mapping[str, str],
    threshold: float,
    names: Sequence[str] | None = None,
) -> ClashReport:
    """Run the full pipeline and collect what the renderers need.

    names selects and orders the output; None means every configured name,
    sorted alphabetically.
    """
    converted, skipped = convert_colours(colours)
    ranked = rank(converted)

    if names:
        selection = list(names)
        for name in selection:
            if name not in colours:
                _log.warning('unknown language requested: %s', name)
    else:
        selection = sorted(colours)

    report = ClashReport(
        threshold=threshold,
        colours={c.name: c.hex for c in converted},
        neighbours={name: filter_below(entries, threshold) for name, entries in ranked.items()},
        skipped=skipped,
        names=selection,
    )
    _log.info(
        'threshold=%s colours=%d skipped=%d clashing=%d',
        threshold,
        len(converted),
        len(skipped),
        report.clash_count,
    )
    return report
