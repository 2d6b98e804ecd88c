"""Parametric generators for 3D-printable robot parts.

Parts are described as immutable solid trees (see ``botparts.models.solid``)
and converted to geometry only at export time.
"""

__version__ = "0.1.0"
