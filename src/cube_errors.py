"""
cube_errors.py — typed failures raised by the cube core.

All errors derive from ``ValueError`` so callers that already guard solver
input with ``except ValueError`` keep working.

--------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""


class CubeError(ValueError):
    """Base class for every error raised by the cube core."""


class InvalidMove(CubeError):
    """A move outside the 18 legal face turns was requested."""


class InvalidState(CubeError):
    """Raw arrays do not describe a cube reachable from the solved state."""


class InvalidArgument(CubeError):
    """A ranking helper was called outside its domain."""
