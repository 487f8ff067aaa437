"""JSON report of near-identical language colours.

Same selection as 'text', plus the CIE94 parameters used and the entries
that were skipped because their colour did not parse.

Example:
    palette-clash json --yaml languages.yml > clashes.json
"""

from palette_clash.core.report import format_json
from palette_clash.core.types import ClashReport, Renderer

renderer = Renderer(
    name='json',
    help='JSON report, including skipped entries and CIE94 parameters.',
)


@renderer.run
def run(report: ClashReport, args) -> None:
    print(format_json(report))
