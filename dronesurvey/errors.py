"""Mini README: Error taxonomy raised by the coverage planner.

Both errors subclass ``ValueError`` so callers that already guard input
validation with ``except ValueError`` keep working. Neither is transient; the
HTTP layer maps both to a 400 response.
"""

from __future__ import annotations


class FormatError(ValueError):
    """Boundary input is malformed or structurally invalid."""


class PlanningError(ValueError):
    """Boundary is well-formed but the geometry or parameters cannot be planned."""
