"""Plain text report of near-identical language colours.

For each language with at least one neighbour below the threshold, prints
the language and its colour, a rule, then one line per neighbour with the
CIE94 difference (4 decimals) and the neighbour's colour. Languages with
no neighbours below the threshold are omitted.

Example:
    palette-clash text --yaml languages.yml --threshold 5
    palette-clash text --yaml languages.yml Python Go Rust
"""

from palette_clash.core.report import format_text
from palette_clash.core.types import ClashReport, Renderer

renderer = Renderer(
    name='text',
    help='Plain text list of near-identical colours per language.',
)


@renderer.run
def run(report: ClashReport, args) -> None:
    text = format_text(report)
    if text:
        print(text)
