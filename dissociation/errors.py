"""Exception types raised by the dissociation package."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when a pKa set, concentration, pH domain or title is unusable.

    Subclasses ``ValueError`` so callers that already guard numeric input with
    ``except ValueError`` keep working. Every validation failure is raised
    before any curve is computed or drawn.
    """
