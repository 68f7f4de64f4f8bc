"""Assemble and render complete dissociation diagrams.

This module is the boundary between the pure chemistry model and the
matplotlib renderer. ``build_diagram`` validates every input up front, so a
bad argument never leaves a half-drawn figure behind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Tuple

import matplotlib.pyplot as plt
import pandas as pd
from matplotlib.axes import Axes

from .chemistry.distribution import species_curves, species_log_concentration
from .chemistry.validation import (
    validate_concentration,
    validate_ph_domain,
    validate_pka,
    validate_title,
)
from .chemistry.water import pka_markers, water_lines
from .errors import InvalidArgument
from .plotting.distribution_plots import (
    plot_distribution_diagram,
    render_context,
    y_limits,
)
from .plotting.style import save_figure
from .schema import AcidSpec, PKaMarker, SpeciesCurve

logger = logging.getLogger(__name__)

DEFAULT_TITLES = {
    1: "Monoprotic acid",
    2: "Diprotic acid",
    3: "Triprotic acid",
    4: "Tetraprotic acid",
}


def default_title(n_steps: int) -> str:
    """Return the generic acid description for ``n_steps`` pKa values."""
    try:
        return DEFAULT_TITLES[int(n_steps)]
    except KeyError:
        raise InvalidArgument(
            f"pKa count out of range: no default title for {n_steps} values"
        ) from None


@dataclass(frozen=True)
class DistributionDiagram:
    """Everything needed to draw one dissociation diagram.

    Attributes:
        acid: Validated pKa values.
        concentration: Total analytical concentration (mol dm^-3).
        title: Chart title.
        species: ``N + 1`` species curves, acid first, basic last.
        water: ``water_h`` and ``water_oh`` lines.
        markers: One pKa marker per dissociation step.
    """

    acid: AcidSpec
    concentration: float
    title: str
    species: Tuple[SpeciesCurve, ...]
    water: Tuple[SpeciesCurve, ...]
    markers: Tuple[PKaMarker, ...]

    @property
    def curves(self) -> Tuple[SpeciesCurve, ...]:
        """Species curves followed by water lines, in legend order."""
        return self.species + self.water

    @property
    def y_limits(self) -> Tuple[float, float]:
        """Vertical axis range in log10 concentration units."""
        return y_limits(self.concentration)


def build_diagram(
    pka: Sequence[float] | float,
    concentration: float | None = None,
    title: str | None = None,
    ph_domain: Sequence[float] | None = None,
) -> DistributionDiagram:
    """Validate inputs and compute every element of a dissociation diagram.

    Args:
        pka (Sequence[float] | float): One to four ascending pKa values.
        concentration (float | None, optional): Total concentration in
            mol dm^-3. Defaults to 0.1.
        title (str | None, optional): Chart title. Defaults to a description
            based on the number of pKa values, e.g. ``"Triprotic acid"``.
        ph_domain (Sequence[float] | None, optional): pH samples within
            [0, 14]. Defaults to 300 evenly spaced points.

    Returns:
        DistributionDiagram: Immutable diagram description.

    Raises:
        InvalidArgument: If any input fails validation.
    """
    spec = validate_pka(pka)
    c = validate_concentration(concentration)
    ph = validate_ph_domain(ph_domain)
    text = validate_title(title) or default_title(spec.n_steps)

    species = species_curves(spec, c, ph)
    return DistributionDiagram(
        acid=spec,
        concentration=c,
        title=text,
        species=tuple(species),
        water=tuple(water_lines()),
        markers=tuple(pka_markers(spec, c)),
    )


def species_at_pka(diagram: DistributionDiagram) -> pd.DataFrame:
    """Tabulate log10 concentrations of every species at each pKa.

    At pH = pKa_i the two species joined by step i are present in equal
    amounts, which makes this table a quick check of a diagram.

    Returns:
        pandas.DataFrame: One row per pKa with a ``pKa`` column followed by
        one column per species label.
    """
    pka = list(diagram.acid.pka)
    log_c = species_log_concentration(pka, diagram.concentration, pka)
    table = pd.DataFrame(
        {curve.label: log_c[j] for j, curve in enumerate(diagram.species)}
    )
    table.insert(0, "pKa", pka)
    return table


def acids(
    pka: Sequence[float] | float,
    concentration: float | None = None,
    title: str | None = None,
    *,
    ax: Axes | None = None,
    savepath: str | Path | None = None,
    show: bool | None = None,
) -> None:
    """Plot the dissociation diagram of a mono- to tetraprotic acid.

    Draws the acid, amphiprotic and basic species lines, the water [H⁺] and
    [OH⁻] lines and a black cross at each pKa.

    Args:
        pka (Sequence[float] | float): One to four positive, finite pKa values
            in ascending order.
        concentration (float | None, optional): Total analytical concentration
            in mol dm^-3. Defaults to 0.1 (100 mM).
        title (str | None, optional): Acid name used as plot title. Defaults to
            a generic description based on the number of pKa values.
        ax (matplotlib.axes.Axes | None, optional): Axes to draw into. The
            caller keeps ownership of its figure.
        savepath (str | Path | None, optional): If given, save the figure as a
            PNG/PDF/SVG bundle sharing this base name.
        show (bool | None, optional): Display the figure. ``None`` shows it
            only when neither ``ax`` nor ``savepath`` is given.

    Raises:
        InvalidArgument: If any input fails validation; nothing is drawn.

    Example:
        Phosphoric acid (H3PO4), 100 mM::

            acids([2.1, 7.2, 12.6])
    """
    diagram = build_diagram(pka, concentration, title)
    render_diagram(diagram, ax=ax, savepath=savepath, show=show)


def render_diagram(
    diagram: DistributionDiagram,
    *,
    ax: Axes | None = None,
    savepath: str | Path | None = None,
    show: bool | None = None,
) -> str | None:
    """Render a built diagram, optionally saving and showing it.

    Returns:
        str | None: PNG path when ``savepath`` is given, else ``None``.
    """
    if show is None:
        show = ax is None and savepath is None

    saved = None
    with render_context(ax=ax) as ctx:
        plot_distribution_diagram(diagram, ctx)
        if savepath is not None:
            saved = save_figure(ctx.figure, savepath)
            logger.info("Saved dissociation diagram to %s", saved)
        if show:
            plt.show()
    return saved
