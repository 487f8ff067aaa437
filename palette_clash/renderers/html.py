"""HTML page of near-identical language colours with swatches.

Writes a standalone page: a table of the CIE94 parameters (reference white
and weights), then one section per language listing its neighbours with
difference and colour swatch. Neighbour names link to their own section.

Written to --output (default output.html).

Example:
    palette-clash html --yaml languages.yml -o clashes.html
"""

import logging
import sys

from palette_clash.core.report import format_html
from palette_clash.core.types import ClashReport, Renderer

_log = logging.getLogger('palette_clash.renderers.html')

renderer = Renderer(
    name='html',
    help='Write an HTML page with colour swatches.',
    default_output='output.html',
)


@renderer.run
def run(report: ClashReport, args) -> None:
    path = getattr(args, 'output', None) or renderer.default_output
    with open(path, 'w', encoding='utf-8') as f:
        f.write(format_html(report))
    _log.debug('wrote %d languages to %s', report.clash_count, path)
    print(f'palette-clash: wrote {path}', file=sys.stderr)
