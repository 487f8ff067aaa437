"""CIE94 colour difference (delta-E 1994).

The formula is not symmetric: the chroma weighting terms SC and SH come
from the first colour only. Keep that direction consistent when comparing a
fixed colour against many others; cie94(a, b) and cie94(b, a) can differ.

https://en.wikipedia.org/wiki/Color_difference#CIE94
"""

import math
from dataclasses import dataclass

import numpy as np

from palette_clash.core.types import LAB

K1 = 0.045
K2 = 0.015


@dataclass(frozen=True)
class Cie94Weights:
    """Parametric weighting factors kL, kC, kH."""

    k_l: float = 1.0
    k_c: float = 1.0
    k_h: float = 1.0


# Graphic arts / textiles default
UNIT_WEIGHTS = Cie94Weights()


def cie94(c1: LAB, c2: LAB, weights: Cie94Weights = UNIT_WEIGHTS) -> float:
    """Return the CIE94 difference of c2 relative to c1 (always >= 0)."""
    chroma1 = math.sqrt(c1.a * c1.a + c1.b * c1.b)
    chroma2 = math.sqrt(c2.a * c2.a + c2.b * c2.b)

    d_l = c2.l - c1.l
    d_c = chroma2 - chroma1
    d_e = math.sqrt((c1.l - c2.l) ** 2 + (c1.a - c2.a) ** 2 + (c1.b - c2.b) ** 2)

    # Rounding can push dH^2 slightly negative for near-identical hues
    d_h2 = d_e * d_e - d_l * d_l - d_c * d_c
    d_h = math.sqrt(d_h2) if d_h2 > 0 else 0.0

    s_c = 1 + K1 * chroma1
    s_h = 1 + K2 * chroma1

    d_l /= weights.k_l
    d_c /= weights.k_c * s_c
    d_h /= weights.k_h * s_h

    return math.sqrt(d_l * d_l + d_c * d_c + d_h * d_h)


def cie94_matrix(labs: np.ndarray, weights: Cie94Weights = UNIT_WEIGHTS) -> np.ndarray:
    """All-pairs CIE94 for an (n, 3) array of L, a, b rows.

    Entry [i, j] equals cie94(labs[i], labs[j]); row i supplies the chroma
    for SC and SH.
    """
    labs = np.asarray(labs, dtype=float).reshape(-1, 3)
    lightness = labs[:, 0]
    chroma = np.hypot(labs[:, 1], labs[:, 2])

    d_l = lightness[np.newaxis, :] - lightness[:, np.newaxis]
    d_c = chroma[np.newaxis, :] - chroma[:, np.newaxis]
    d_e2 = np.sum((labs[:, np.newaxis, :] - labs[np.newaxis, :, :]) ** 2, axis=-1)

    d_h2 = d_e2 - d_l**2 - d_c**2
    d_h = np.sqrt(np.where(d_h2 > 0, d_h2, 0.0))

    s_c = (1 + K1 * chroma)[:, np.newaxis]
    s_h = (1 + K2 * chroma)[:, np.newaxis]

    d_l = d_l / weights.k_l
    d_c = d_c / (weights.k_c * s_c)
    d_h = d_h / (weights.k_h * s_h)

    return np.sqrt(d_l**2 + d_c**2 + d_h**2)
