"""Report builder — text, JSON and HTML output for palette-clash results."""

import html
import json
from typing import Any

from palette_clash.core.colour import REFERENCE_WHITE
from palette_clash.core.difference import UNIT_WEIGHTS
from palette_clash.core.types import ClashReport

RULE_WIDTH = 80


def format_text(report: ClashReport) -> str:
    """Format report as plain text, one block per clashing language."""
    lines = []
    for name, entries in report.selected():
        lines.append(f'{name}: ({report.colours[name]})')
        lines.append('=' * RULE_WIDTH)
        for entry in entries:
            lines.append(f'{entry.name:>30}: {entry.diff:8.4f} ({report.colours[entry.name]})')
    return '\n'.join(lines)


def format_json(report: ClashReport) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'threshold': report.threshold,
        'reference_white': {'x': REFERENCE_WHITE.x, 'y': REFERENCE_WHITE.y, 'z': REFERENCE_WHITE.z},
        'weights': {'l': UNIT_WEIGHTS.k_l, 'c': UNIT_WEIGHTS.k_c, 'h': UNIT_WEIGHTS.k_h},
    }

    obj['languages'] = []
    for name, entries in report.selected():
        obj['languages'].append(
            {
                'name': name,
                'color': report.colours[name],
                'neighbours': [
                    {'name': e.name, 'color': report.colours[e.name], 'diff': round(e.diff, 4)} for e in entries
                ],
            }
        )

    obj['skipped'] = dict(report.skipped)
    return json.dumps(obj, indent=2)


_HTML_HEAD = """<!doctype html>
<html>
<head><meta charset="utf-8"><title>Language colour clashes</title></head>
<body>
<table style="margin-bottom:50px">
<thead>
<tr><th width="33%">CIE1994 Parameters</th></tr>
</thead>
<tbody>
<tr><td>X</td><td>{x:.4f}</td></tr>
<tr><td>Y</td><td>{y:.4f}</td></tr>
<tr><td>Z</td><td>{z:.4f}</td></tr>
<tr><td>WL</td><td>{wl:.4f}</td></tr>
<tr><td>WC</td><td>{wc:.4f}</td></tr>
<tr><td>WH</td><td>{wh:.4f}</td></tr>
<tr><td>Threshold</td><td>{threshold:.4f}</td></tr>
</tbody>
</table>

<table>
<thead>
<tr>
<th width="30%">Name</th>
<th width="30%">Difference (<a href="https://en.wikipedia.org/wiki/Color_difference#CIE94">CIE1994</a>)</th>
<th width="40%">Color</th>
</tr>
</thead>
<tbody>"""

_HTML_LANG = """
<tr style="height:10px"><td colspan="3"></td></tr>
<tr style="height:1px;background-color:black"><td colspan="3"></td></tr>
<tr id="{anchor}">
<td style="font-weight:bold">{name}</td>
<td></td>
<td style="background-color:{colour}"></td>
</tr>
<tr style="height:10px"><td colspan="3"></td></tr>"""

_HTML_NEIGHBOUR = """
<tr>
<td><a href="#{anchor}">{name}</a></td>
<td>{diff:.4f}</td>
<td style="background-color:{colour}"></td>
</tr>"""

_HTML_TAIL = """
</tbody>
</table>
</body>
</html>
"""


def format_html(report: ClashReport) -> str:
    """Format report as a standalone HTML page with colour swatches."""
    e = html.escape
    parts = [
        _HTML_HEAD.format(
            x=REFERENCE_WHITE.x,
            y=REFERENCE_WHITE.y,
            z=REFERENCE_WHITE.z,
            wl=UNIT_WEIGHTS.k_l,
            wc=UNIT_WEIGHTS.k_c,
            wh=UNIT_WEIGHTS.k_h,
            threshold=report.threshold,
        )
    ]
    for name, entries in report.selected():
        parts.append(_HTML_LANG.format(anchor=e(name), name=e(name), colour=e(report.colours[name])))
        for entry in entries:
            parts.append(
                _HTML_NEIGHBOUR.format(
                    anchor=e(entry.name),
                    name=e(entry.name),
                    diff=entry.diff,
                    colour=e(report.colours[entry.name]),
                )
            )
    parts.append(_HTML_TAIL)
    return ''.join(parts)
