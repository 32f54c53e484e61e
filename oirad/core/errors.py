"""
Exceptions raised by the radiance-to-irradiance stage.

All of them describe an inconsistency between the scene and optics
descriptors that only the caller can fix, so they derive from ValueError.
"""

from __future__ import annotations


class IrradianceError(ValueError):
    """Base class for irradiance computation failures."""


class UnsupportedModelError(IrradianceError):
    """The optics model kind is not one the resolver knows about."""


class DimensionMismatchError(IrradianceError):
    """Transmittance length does not match the scene band count."""


class InvalidParameterError(IrradianceError):
    """A radiometric parameter is outside its physical domain."""
