"""
Chemistry models for polyprotic acid dissociation diagrams.

This subpackage computes the log10 concentration of every protonation form
of a polyprotic acid over pH, together with the water self-ionization lines.

Modules:
    validation:
        Input checks for pKa values, concentration, pH domain and title.
        Non-ascending pKa values are reported with a UserWarning.

    distribution:
        Step ratios, cumulative ratios and the closed-form species curves
        (acid, amphiprotic forms, basic form) for 1 to 4 pKa values.

    water:
        [H⁺] and [OH⁻] lines and the pKa annotation markers.

Interpretation Guardrails:
    Curves describe ideal-solution behaviour at 25 °C. Concentrations stand
    in for activities, so values at high ionic strength are approximate.

Design Principle:
    This subpackage has no dependencies on plotting/ or matplotlib.
"""

from .distribution import (
    compute,
    cumulative_ratios,
    species_curves,
    species_log_concentration,
    step_ratio,
)
from .validation import DEFAULT_CONCENTRATION
from .water import pka_markers, water_lines

__all__ = [
    "compute",
    "cumulative_ratios",
    "species_curves",
    "species_log_concentration",
    "step_ratio",
    "water_lines",
    "pka_markers",
    "DEFAULT_CONCENTRATION",
]
