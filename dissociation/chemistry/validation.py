"""Validate inputs of the dissociation model before any curve is computed.

Accepted inputs:
    - pKa: one to four finite, real, strictly positive values. Each value is
      -log10(Ka) of one successive dissociation step. A bare real number is
      read as a monoprotic acid.
    - Concentration: total analytical concentration C of all protonation
      forms in mol dm^-3, finite and positive. ``None`` selects 0.1 M.
    - pH domain: finite sample points within [0, 14]. ``None`` selects 300
      evenly spaced points.

Ordering precondition:
    The stepwise ratio algebra only describes successive dissociation steps
    when pKa_1 < pKa_2 < ... < pKa_N. Unsorted input still produces a
    mathematically consistent curve set, so it is accepted with a
    ``UserWarning`` and never re-sorted.
"""

from __future__ import annotations

import math
import numbers
import warnings
from typing import Sequence

import numpy as np

from ..errors import InvalidArgument
from ..schema import AcidSpec

DEFAULT_CONCENTRATION: float = 0.1
MAX_PKA_COUNT: int = 4
PH_MIN: float = 0.0
PH_MAX: float = 14.0
PH_POINTS: int = 300


def _is_real_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def validate_pka(pka: Sequence[float] | float) -> AcidSpec:
    """Validate a pKa sequence and freeze it into an ``AcidSpec``.

    Args:
        pka (Sequence[float] | float): Successive pKa values, assumed to be in
            ascending order.

    Returns:
        AcidSpec: Immutable pKa tuple in the order supplied.

    Raises:
        InvalidArgument: If the count is outside 1..4, the input is not a
            one-dimensional real sequence, or any value is non-finite or not
            strictly positive.

    Warns:
        UserWarning: If the values are not in ascending order.
    """
    if isinstance(pka, (str, bytes)):
        raise InvalidArgument(f"pKa values must be real numbers, got {pka!r}")
    if _is_real_scalar(pka):
        pka = [pka]

    try:
        arr = np.asarray(pka)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"pKa values must be real numbers: {exc}") from exc

    if arr.ndim != 1:
        raise InvalidArgument(
            f"pKa values must form a one-dimensional sequence, got shape {arr.shape}"
        )
    if arr.size < 1 or arr.size > MAX_PKA_COUNT:
        raise InvalidArgument(
            f"pKa count out of range: expected 1 to {MAX_PKA_COUNT} values, "
            f"got {arr.size}"
        )
    if arr.dtype.kind not in "iuf":
        if arr.dtype.kind != "O" or not all(_is_real_scalar(v) for v in arr):
            raise InvalidArgument(
                f"pKa value not positive/finite: values must be real numbers, "
                f"got {list(arr)}"
            )

    try:
        values = arr.astype(float)
    except OverflowError as exc:
        raise InvalidArgument(
            "pKa value not positive/finite: value too large for a float"
        ) from exc
    bad = ~np.isfinite(values) | (values <= 0)
    if np.any(bad):
        raise InvalidArgument(
            f"pKa value not positive/finite: {values[bad].tolist()}"
        )

    if np.any(np.diff(values) < 0):
        warnings.warn(
            f"pKa values {values.tolist()} are not in ascending order; curves "
            f"assume successive dissociation steps with increasing pKa.",
            UserWarning,
            stacklevel=2,
        )

    return AcidSpec(pka=tuple(float(v) for v in values))


def validate_concentration(concentration: float | None) -> float:
    """Return a validated total concentration in mol dm^-3.

    Args:
        concentration (float | None): Total analytical concentration.
            ``None`` selects ``DEFAULT_CONCENTRATION``.

    Returns:
        float: Concentration as a Python float.

    Raises:
        InvalidArgument: If the value is not a real scalar, or is non-finite or
            not strictly positive.
    """
    if concentration is None:
        return DEFAULT_CONCENTRATION
    if not _is_real_scalar(concentration):
        raise InvalidArgument(
            f"concentration must be a real scalar, got {type(concentration).__name__}"
        )

    try:
        c = float(concentration)
    except OverflowError as exc:
        raise InvalidArgument(
            "concentration must be positive and finite, got a value too large "
            "for a float"
        ) from exc
    if not math.isfinite(c) or c <= 0:
        raise InvalidArgument(f"concentration must be positive and finite, got {c}")
    return c


def default_ph_domain(n_points: int = PH_POINTS) -> np.ndarray:
    """Return ``n_points`` evenly spaced pH values covering [0, 14]."""
    return np.linspace(PH_MIN, PH_MAX, n_points)


def validate_ph_domain(ph_domain: Sequence[float] | None) -> np.ndarray:
    """Return a validated pH sample array.

    Args:
        ph_domain (Sequence[float] | None): pH sample points. ``None`` selects
            ``default_ph_domain()``.

    Returns:
        numpy.ndarray: One-dimensional float array.

    Raises:
        InvalidArgument: If the domain is empty, not one-dimensional, not
            numeric, non-finite, or leaves [0, 14].
    """
    if ph_domain is None:
        return default_ph_domain()

    try:
        ph = np.asarray(ph_domain, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"pH domain must be numeric: {exc}") from exc

    if ph.ndim != 1 or ph.size == 0:
        raise InvalidArgument("pH domain must be a non-empty one-dimensional sequence")
    if not np.all(np.isfinite(ph)):
        raise InvalidArgument("pH domain must contain only finite values")
    if ph.min() < PH_MIN or ph.max() > PH_MAX:
        raise InvalidArgument(
            f"pH domain must lie within [{PH_MIN:g}, {PH_MAX:g}], "
            f"got [{ph.min():g}, {ph.max():g}]"
        )
    return ph


def validate_title(title: object) -> str | None:
    """Return the title string, or ``None`` when a default should be used.

    Raises:
        InvalidArgument: If ``title`` is neither ``None`` nor a string.
    """
    if title is None:
        return None
    if not isinstance(title, str):
        raise InvalidArgument(f"title must be a string, got {type(title).__name__}")
    return title or None
