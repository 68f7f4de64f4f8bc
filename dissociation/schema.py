"""Define the records exchanged between the model and the renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class CurveLabels:
    """Container for standardized curve labels.

    These labels identify every series of a dissociation diagram, both in the
    computed curve list and in the color and legend tables of the renderer.

    Attributes:
        acid: Fully protonated form (H_nA). Dominant below the first pKa.

        amphiprotic: Prefix for intermediate forms. The k-th amphiprotic
            species has lost k protons and can act as acid or base; it is
            labelled ``amphiprotic_k`` with k from 1 to N - 1.

        basic: Fully deprotonated form (A^n-). Dominant above the last pKa.

        water_h: Water self-ionization line log10[H+] = -pH.

        water_oh: Water self-ionization line log10[OH-] = pH - pKw.
    """

    acid: str = "acid"
    amphiprotic: str = "amphiprotic"
    basic: str = "basic"
    water_h: str = "water_h"
    water_oh: str = "water_oh"


LABELS = CurveLabels()

SPECIES_COLORS = {
    LABELS.acid: "red",
    f"{LABELS.amphiprotic}_1": "green",
    f"{LABELS.amphiprotic}_2": "magenta",
    f"{LABELS.amphiprotic}_3": "black",
    LABELS.basic: "blue",
    LABELS.water_h: "cyan",
    LABELS.water_oh: "cyan",
}


def species_labels(n_steps: int) -> Tuple[str, ...]:
    """Return species labels for an acid with ``n_steps`` dissociation steps.

    Args:
        n_steps (int): Number of pKa values.

    Returns:
        tuple[str, ...]: ``n_steps + 1`` labels ordered from the fully
        protonated to the fully deprotonated form.
    """
    amphiprotic = tuple(f"{LABELS.amphiprotic}_{k}" for k in range(1, n_steps))
    return (LABELS.acid,) + amphiprotic + (LABELS.basic,)


def color_for_label(label: str) -> str:
    """Return the display color assigned to a curve label."""
    return SPECIES_COLORS[label]


@dataclass(frozen=True)
class AcidSpec:
    """Validated, immutable set of successive pKa values."""

    pka: Tuple[float, ...]

    @property
    def n_steps(self) -> int:
        return len(self.pka)

    @property
    def labels(self) -> Tuple[str, ...]:
        return species_labels(self.n_steps)


@dataclass(frozen=True, eq=False)
class SpeciesCurve:
    """One plotted series: log10 concentration sampled over pH.

    Attributes:
        label: Curve label from ``CurveLabels``.
        ph: pH sample points.
        log_concentration: log10 concentration (mol dm^-3) at each pH point;
            same length as ``ph``.
        color: Display-only color name.
    """

    label: str
    ph: np.ndarray
    log_concentration: np.ndarray
    color: str

    @property
    def samples(self) -> np.ndarray:
        """Return ``(pH, log10 c)`` pairs as an ``(n, 2)`` array."""
        return np.column_stack((self.ph, self.log_concentration))

    def __len__(self) -> int:
        return int(len(self.ph))


@dataclass(frozen=True)
class PKaMarker:
    """Annotation point drawn at ``(pKa, log10 C)``."""

    pka: float
    log_concentration: float
