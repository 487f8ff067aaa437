"""PNG swatch chart of near-identical language colours.

One row per language with neighbours below the threshold: the language's
own swatch and name, then a swatch for each neighbour labelled with its
name and CIE94 difference. Useful for eyeballing whether a reported clash
is visible.

Written to --output (default swatches.png).

Example:
    palette-clash swatch --yaml languages.yml --threshold 3 -o clashes.png
"""

import logging
import sys

from PIL import Image, ImageDraw, ImageFont

from palette_clash.core.colour import parse_hex
from palette_clash.core.types import ClashReport, Renderer

_log = logging.getLogger('palette_clash.renderers.swatch')

renderer = Renderer(
    name='swatch',
    help='Write a PNG chart of clashing colour swatches.',
    default_output='swatches.png',
)

ROW_HEIGHT = 28
SWATCH = 20
PAD = 4
NAME_WIDTH = 220
CELL_WIDTH = 200
BACKGROUND = (255, 255, 255)
INK = (0, 0, 0)


def _swatch_rgb(hex_value: str) -> tuple[int, int, int]:
    c = parse_hex(hex_value)
    return (c.r, c.g, c.b)


def render_image(report: ClashReport) -> Image.Image:
    """Draw the chart for report and return it."""
    rows = report.selected()
    widest = max((len(entries) for _name, entries in rows), default=0)
    width = NAME_WIDTH + max(widest, 1) * CELL_WIDTH
    height = max(len(rows), 1) * ROW_HEIGHT + 2 * PAD

    image = Image.new('RGB', (width, height), BACKGROUND)
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()

    if not rows:
        draw.text((PAD, PAD), f'no clashes below {report.threshold:g}', fill=INK, font=font)
        return image

    for i, (name, entries) in enumerate(rows):
        top = PAD + i * ROW_HEIGHT
        box = (PAD, top, PAD + SWATCH, top + SWATCH)
        draw.rectangle(box, fill=_swatch_rgb(report.colours[name]), outline=INK)
        draw.text((PAD * 2 + SWATCH, top + PAD), name, fill=INK, font=font)

        for j, entry in enumerate(entries):
            left = NAME_WIDTH + j * CELL_WIDTH
            box = (left, top, left + SWATCH, top + SWATCH)
            draw.rectangle(box, fill=_swatch_rgb(report.colours[entry.name]), outline=INK)
            draw.text((left + SWATCH + PAD, top + PAD), f'{entry.name} {entry.diff:.2f}', fill=INK, font=font)

    return image


@renderer.run
def run(report: ClashReport, args) -> None:
    path = getattr(args, 'output', None) or renderer.default_output
    image = render_image(report)
    image.save(path)
    _log.debug('swatch chart %dx%d saved to %s', image.width, image.height, path)
    print(f'palette-clash: wrote {path}', file=sys.stderr)
