"""Render dissociation diagrams onto an explicit matplotlib render context.

The renderer receives a fully computed ``DistributionDiagram`` and only
draws it; no chemistry is evaluated here.
"""

from __future__ import annotations

import math
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from ..chemistry.validation import PH_MAX, PH_MIN
from .style import MARKER_STYLE, MATH_LABELS, STYLE, legend_label, set_global_style

if TYPE_CHECKING:
    from ..diagram import DistributionDiagram

Y_MIN = -14.0


@dataclass(frozen=True)
class RenderContext:
    """Figure and axes a diagram is drawn into.

    Attributes:
        figure: Target figure.
        axes: Target axes.
        owned: ``True`` when the context created the figure and is
            responsible for closing it.
    """

    figure: Figure
    axes: Axes
    owned: bool


@contextmanager
def render_context(ax: Axes | None = None) -> Iterator[RenderContext]:
    """Acquire a drawing context and release it on exit.

    Args:
        ax (matplotlib.axes.Axes | None): Existing axes to draw into. When
            given, its figure is left open for the caller.

    Yields:
        RenderContext: Context holding the figure and axes. A figure created
        here is closed when the block exits, including on error.
    """
    if ax is not None:
        yield RenderContext(figure=ax.figure, axes=ax, owned=False)
        return

    set_global_style()
    fig, new_ax = plt.subplots(figsize=STYLE.FIGSIZE_DIAGRAM)
    try:
        yield RenderContext(figure=fig, axes=new_ax, owned=True)
    finally:
        plt.close(fig)


def y_limits(concentration: float) -> tuple[float, float]:
    """Return ``(-14, max(0, log10 C + 1))`` for the concentration axis."""
    return Y_MIN, max(0.0, math.log10(concentration) + 1.0)


def plot_distribution_diagram(
    diagram: DistributionDiagram, ctx: RenderContext
) -> Axes:
    """Draw species curves, water lines, pKa crosses and axis furniture.

    Args:
        diagram (DistributionDiagram): Output of
            ``dissociation.diagram.build_diagram``.
        ctx (RenderContext): Target figure and axes.

    Returns:
        matplotlib.axes.Axes: The axes drawn into.

    Note:
        The legend lists curves in the order acid, amphiprotic species, basic,
        water H⁺, water OH⁻ and sits outside the plot area to the right.
        pKa crosses are drawn without a legend entry.
    """
    ax = ctx.axes

    for curve in diagram.curves:
        ax.plot(
            curve.ph,
            curve.log_concentration,
            color=curve.color,
            linewidth=STYLE.LINEWIDTH,
            label=legend_label(curve.label),
        )

    if diagram.markers:
        ax.plot(
            [m.pka for m in diagram.markers],
            [m.log_concentration for m in diagram.markers],
            markersize=STYLE.MARKERSIZE,
            markeredgewidth=STYLE.MARKER_EDGE_WIDTH,
            label="_pka_markers",
            **MARKER_STYLE,
        )

    y_low, y_high = diagram.y_limits
    ax.set_xlim(PH_MIN, PH_MAX)
    ax.set_ylim(y_low, y_high)
    ax.set_xticks(np.arange(PH_MIN, PH_MAX + 1.0, 1.0))
    ax.set_yticks(np.arange(y_low, math.floor(y_high) + 1.0, 1.0))
    ax.set_box_aspect(1)
    ax.grid(True)

    ax.set_title(diagram.title)
    ax.set_xlabel(MATH_LABELS["ph"])
    ax.set_ylabel(MATH_LABELS["log_conc"])
    ax.legend(loc="upper left", bbox_to_anchor=(1.02, 1.0), borderaxespad=0.0)
    return ax
