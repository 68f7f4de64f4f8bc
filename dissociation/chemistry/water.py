"""Water self-ionization lines and pKa annotation points.

Background Theory:
    Water dissociates as H2O ⇌ H⁺ + OH⁻ with Kw = [H⁺][OH⁻] = 10^-14 at
    25 °C, so on a log10 concentration vs pH diagram:

        log10[H⁺]  = -pH
        log10[OH⁻] = pH - pKw

    Both are straight lines, so two endpoints at pH 0 and pH 14 describe them
    completely. They are independent of the acid and of its concentration.
"""

from __future__ import annotations

from typing import List

import numpy as np

from ..schema import LABELS, AcidSpec, PKaMarker, SpeciesCurve, color_for_label
from .validation import PH_MAX, PH_MIN

PKW: float = 14.0


def log_hydrogen(ph: np.ndarray | float) -> np.ndarray:
    """Return log10[H⁺] in mol dm^-3 at the given pH."""
    return -np.asarray(ph, dtype=float)


def log_hydroxide(ph: np.ndarray | float, pkw: float = PKW) -> np.ndarray:
    """Return log10[OH⁻] in mol dm^-3 at the given pH."""
    return np.asarray(ph, dtype=float) - float(pkw)


def water_lines() -> List[SpeciesCurve]:
    """Return the [H⁺] and [OH⁻] lines sampled at pH 0 and pH 14.

    Returns:
        list[SpeciesCurve]: ``water_h`` then ``water_oh``.
    """
    endpoints = np.array([PH_MIN, PH_MAX])
    return [
        SpeciesCurve(
            label=LABELS.water_h,
            ph=endpoints.copy(),
            log_concentration=log_hydrogen(endpoints),
            color=color_for_label(LABELS.water_h),
        ),
        SpeciesCurve(
            label=LABELS.water_oh,
            ph=endpoints.copy(),
            log_concentration=log_hydroxide(endpoints),
            color=color_for_label(LABELS.water_oh),
        ),
    ]


def pka_markers(spec: AcidSpec, concentration: float) -> List[PKaMarker]:
    """Return one marker per pKa at ``log10(concentration)``."""
    log_c = float(np.log10(concentration))
    return [PKaMarker(pka=p, log_concentration=log_c) for p in spec.pka]
