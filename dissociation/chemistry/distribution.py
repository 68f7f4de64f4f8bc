"""Closed-form species distribution of a polyprotic acid over pH.

Theoretical Framework:
    For dissociation step i with constant Ka_i, the Henderson-Hasselbalch
    relation gives the ratio of the conjugate base to the acid of that step:

        r_i(pH) = [H_(n-i)A] / [H_(n-i+1)A] = 10^(pH - pKa_i)

    Relative to the fully protonated form, the species that has lost k
    protons is present in the proportion

        R_k = r_1 * r_2 * ... * r_k        (R_0 = 1)

    Mass balance over all N + 1 forms then fixes each concentration:

        c_j = C * R_j / (R_0 + R_1 + ... + R_N)
            = C / sum_m (R_m / R_j)

    For the acid (j = 0) the denominator is 1 + R_1 + ... + R_N. For the k-th
    amphiprotic form it is 1 + 1/R_k + ... + r_(k+1) + r_(k+1) r_(k+2) + ...,
    and for the basic form (j = N) it is the sum of reciprocal reverse
    products ending at step N.

Numerical form:
    The sums are evaluated in log space. log10 R_k is the cumulative sum of
    (pH - pKa_i), and log10 sum_m 10^x_m is taken after shifting by the
    largest exponent, so very large or very small ratios neither overflow nor
    vanish.

Model limits:
    Concentrations stand in for activities and Kw is fixed at 25 °C. No
    simultaneous equilibria with other solutes are considered.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from ..schema import AcidSpec, SpeciesCurve, color_for_label, species_labels
from .validation import validate_concentration, validate_ph_domain, validate_pka

logger = logging.getLogger(__name__)


def step_ratio(ph: np.ndarray | float, pka: float) -> np.ndarray:
    """Return the conjugate-base to acid ratio of one dissociation step.

    Args:
        ph (numpy.ndarray | float): pH value(s).
        pka (float): pKa of the step.

    Returns:
        numpy.ndarray: ``10 ** (pH - pKa)``; exactly 1 where ``pH == pKa``.
    """
    return np.power(10.0, np.asarray(ph, dtype=float) - float(pka))


def log_cumulative_ratios(pka: Sequence[float], ph: np.ndarray) -> np.ndarray:
    """Return log10 R_k for k = 0..N as an ``(N + 1, len(ph))`` array.

    Row 0 is zero (the fully protonated reference); row k is
    ``sum_{i<=k} (pH - pKa_i)``.
    """
    ph_arr = np.atleast_1d(np.asarray(ph, dtype=float))
    steps = ph_arr[np.newaxis, :] - np.asarray(pka, dtype=float)[:, np.newaxis]
    reference = np.zeros((1, ph_arr.size))
    return np.vstack((reference, np.cumsum(steps, axis=0)))


def cumulative_ratios(pka: Sequence[float], ph: np.ndarray) -> np.ndarray:
    """Return the cumulative products R_0..R_N of the step ratios.

    ``R_0`` is 1 and ``R_k = r_1 * ... * r_k``; shape ``(N + 1, len(ph))``.
    """
    return np.power(10.0, log_cumulative_ratios(pka, ph))


def _log10_sum(exponents: np.ndarray, axis: int = 0) -> np.ndarray:
    top = np.max(exponents, axis=axis, keepdims=True)
    total = np.sum(np.power(10.0, exponents - top), axis=axis, keepdims=True)
    return np.squeeze(top + np.log10(total), axis=axis)


def species_log_concentration(
    pka: Sequence[float], concentration: float, ph: np.ndarray
) -> np.ndarray:
    """Return log10 concentrations of all protonation forms.

    No validation is performed; use ``compute`` for checked input.

    Args:
        pka (Sequence[float]): Successive pKa values.
        concentration (float): Total analytical concentration (mol dm^-3).
        ph (numpy.ndarray): pH sample points.

    Returns:
        numpy.ndarray: Shape ``(N + 1, len(ph))``. Row 0 is the acid, rows
        1..N-1 the amphiprotic forms, row N the basic form.
    """
    log_r = log_cumulative_ratios(pka, ph)
    # log10 of sum_m R_m / R_j for each species j
    denominators = np.stack(
        [_log10_sum(log_r - log_r[j]) for j in range(len(log_r))]
    )
    return np.log10(concentration) - denominators


def compute(
    pka: Sequence[float] | float,
    concentration: float | None = None,
    ph_domain: Sequence[float] | None = None,
) -> List[SpeciesCurve]:
    """Compute the species curves of a polyprotic acid.

    Args:
        pka (Sequence[float] | float): One to four positive, finite pKa values
            in ascending order.
        concentration (float | None, optional): Total analytical concentration
            in mol dm^-3. Defaults to 0.1.
        ph_domain (Sequence[float] | None, optional): pH sample points within
            [0, 14]. Defaults to 300 evenly spaced points.

    Returns:
        list[SpeciesCurve]: ``N + 1`` curves ordered acid, amphiprotic_1 ..
        amphiprotic_(N-1), basic; each sampled at every pH point.

    Raises:
        InvalidArgument: If any input fails validation. Nothing is computed in
            that case.

    Example:
        Phosphoric acid at 0.1 M yields four curves::

            >>> [c.label for c in compute([2.1, 7.2, 12.6])]
            ['acid', 'amphiprotic_1', 'amphiprotic_2', 'basic']
    """
    spec = validate_pka(pka)
    c = validate_concentration(concentration)
    ph = validate_ph_domain(ph_domain)
    return species_curves(spec, c, ph)


def species_curves(
    spec: AcidSpec, concentration: float, ph: np.ndarray
) -> List[SpeciesCurve]:
    """Build labelled, colored species curves from already validated input."""
    logger.debug(
        "Computing %d species curves for pKa=%s, C=%g M over %d pH points",
        spec.n_steps + 1,
        spec.pka,
        concentration,
        ph.size,
    )

    log_c = species_log_concentration(spec.pka, concentration, ph)
    return [
        SpeciesCurve(
            label=label,
            ph=ph.copy(),
            log_concentration=log_c[j],
            color=color_for_label(label),
        )
        for j, label in enumerate(species_labels(spec.n_steps))
    ]
