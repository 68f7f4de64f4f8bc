"""
A Python package for polyprotic acid dissociation diagrams.

Computes the log10 concentration of every protonation form of a mono- to
tetraprotic acid across pH 0-14 and renders the result, together with the
water self-ionization lines, as an annotated chart.

Modules:
    - chemistry: Input validation, closed-form species curves and water lines.
    - diagram: Assembles complete diagrams and exposes the ``acids`` entry point.
    - plotting: Renders diagrams with matplotlib and saves figure bundles.
    - cli: Command-line interface.
"""

__version__ = "1.0.0"

from .chemistry import compute, pka_markers, step_ratio, water_lines
from .diagram import (
    DistributionDiagram,
    acids,
    build_diagram,
    default_title,
    species_at_pka,
)
from .errors import InvalidArgument
from .plotting import plot_distribution_diagram, render_context
from .schema import AcidSpec, PKaMarker, SpeciesCurve

__all__ = [
    # Model
    "compute",
    "step_ratio",
    "water_lines",
    "pka_markers",
    # Diagram
    "acids",
    "build_diagram",
    "default_title",
    "species_at_pka",
    "DistributionDiagram",
    # Plotting
    "plot_distribution_diagram",
    "render_context",
    # Records and errors
    "AcidSpec",
    "PKaMarker",
    "SpeciesCurve",
    "InvalidArgument",
]
