"""Colour space conversion: hex -> sRGB -> CIE XYZ -> CIELAB.

Formulas from http://www.easyrgb.com/en/math.php.

The reference white is the CIE 1964 10 degree observer under illuminant F5
(daylight fluorescent). Other observer/illuminant pairs for reference:

    Illuminant   X10       Y10       Z10
    D50          96.720    100.000    81.427   ICC profile PCS
    D65          94.811    100.000   107.304   Daylight, sRGB, Adobe-RGB
    E           100.000    100.000   100.000   Equal energy
    F2          103.280    100.000    69.026   Cool fluorescent
    F5           93.369    100.000    98.636   Daylight fluorescent
    F7           95.792    100.000   107.687   D65 simulator
    F11         103.866    100.000    65.627   Philips TL84
"""

import numpy as np

from palette_clash.core.types import LAB, RGB, XYZ

# sRGB (linear, 0-100) -> XYZ. Rows produce X, Y, Z.
SRGB_TO_XYZ = np.array(
    [
        [0.4124, 0.3576, 0.1805],
        [0.2126, 0.7152, 0.0722],
        [0.0193, 0.1192, 0.9505],
    ]
)
SRGB_TO_XYZ.flags.writeable = False

REFERENCE_WHITE = XYZ(x=93.369, y=100.000, z=98.636)

SRGB_LINEAR_TH = 0.04045
LAB_EPSILON = 0.008856
LAB_KAPPA = 7.787


class ColourError(ValueError):
    """Raised when a colour string cannot be parsed."""


class InvalidFormat(ColourError):
    """Colour is not a 7 character '#RRGGBB' string."""


class InvalidHex(ColourError):
    """Colour tail is not 3 bytes of hexadecimal."""


def parse_hex(s: str) -> RGB:
    """Parse '#RRGGBB' into an RGB triple.

    Raises InvalidFormat if the value is not 7 characters starting with '#',
    InvalidHex if the remaining characters do not decode to exactly 3 bytes.
    """
    if not isinstance(s, str) or len(s) != 7 or not s.startswith('#'):
        raise InvalidFormat(f'expected hex colour of form #RRGGBB, got {s!r}')
    try:
        raw = bytes.fromhex(s[1:])
    except ValueError as e:
        raise InvalidHex(f'invalid hex colour {s!r}: {e}') from e
    if len(raw) != 3:
        raise InvalidHex(f'decoded hex length {len(raw)} != 3 in {s!r}')
    return RGB(r=raw[0], g=raw[1], b=raw[2])


def _expand_gamma(n: float) -> float:
    if n > SRGB_LINEAR_TH:
        return ((n + 0.055) / 1.055) ** 2.4
    return n / 12.92


def rgb_to_xyz(c: RGB) -> XYZ:
    """Linearise sRGB channels and project onto CIE XYZ (0-100 scale)."""
    linear = np.array([_expand_gamma(v / 255) * 100 for v in (c.r, c.g, c.b)])
    x, y, z = SRGB_TO_XYZ @ linear
    return XYZ(x=float(x), y=float(y), z=float(z))


def _lab_f(n: float) -> float:
    if n > LAB_EPSILON:
        return n ** (1.0 / 3.0)
    return LAB_KAPPA * n + 16.0 / 116.0


def xyz_to_lab(c: XYZ, white: XYZ = REFERENCE_WHITE) -> LAB:
    """Convert XYZ to CIELAB relative to the given reference white."""
    fx = _lab_f(c.x / white.x)
    fy = _lab_f(c.y / white.y)
    fz = _lab_f(c.z / white.z)
    return LAB(
        l=116.0 * fy - 16.0,
        a=500.0 * (fx - fy),
        b=200.0 * (fy - fz),
    )


def hex_to_lab(s: str) -> LAB:
    """Parse '#RRGGBB' straight to LAB. Raises ColourError on bad input."""
    return xyz_to_lab(rgb_to_xyz(parse_hex(s)))

