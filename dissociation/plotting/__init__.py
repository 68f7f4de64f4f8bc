"""
Plotting utilities for dissociation diagrams.

All plotting functions accept a precomputed ``DistributionDiagram`` and do
not perform chemistry calculations.

Modules:
    distribution_plots:
        Explicit render context and the diagram renderer: species and water
        lines, pKa crosses, fixed pH axis, square axes and an outside legend.

    style:
        Style constants, legend text per curve label and multi-format figure
        saving.
"""

from .distribution_plots import (
    RenderContext,
    plot_distribution_diagram,
    render_context,
)
from .style import save_figure, set_global_style

__all__ = [
    "RenderContext",
    "plot_distribution_diagram",
    "render_context",
    "save_figure",
    "set_global_style",
]
