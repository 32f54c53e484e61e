"""
Configuration primitives for oirad.

Defines enums for optics model kinds and radiometric formulas, and a
dataclass collecting the converter settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

import numpy as np

from oirad.core.errors import UnsupportedModelError


class OpticsModel(Enum):
    """Optics model kinds understood by the parameter resolver."""

    RAY_TRACE = "raytrace"                       # Lens design ray-trace tables
    SKIP = "skip"                                # No optical degradation
    DIFFRACTION_LIMITED = "diffractionlimited"   # Fourier-optics diffraction model
    SHIFT_INVARIANT = "shiftinvariant"           # Linear shift-invariant OTF

    @classmethod
    def parse(cls, value: Union["OpticsModel", str]) -> "OpticsModel":
        """
        Convert a model name to an enum member.

        Matching ignores case, spaces, hyphens and underscores, so
        ``"Diffraction Limited"`` and ``"shift-invariant"`` both resolve.
        """

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnsupportedModelError(f"Unknown optics model: {value!r}")

        key = value.lower()
        for char in " -_":
            key = key.replace(char, "")

        for member in cls:
            if member.value == key:
                return member

        raise UnsupportedModelError(f"Unknown optics model: {value!r}")


class RadiometricFormula(Enum):
    """Radiance-to-irradiance conversion formula."""

    GENERAL = "general"      # pi / (1 + 4 fN^2 (1+|m|)^2), includes non-paraxial rays
    PARAXIAL = "paraxial"    # pi / (4 fN^2 (1+|m|)^2), small-angle (Holst 1998)
    SIMPLE = "simple"        # pi / (4 fN^2), magnification ignored


@dataclass
class IrradianceConfig:
    """
    Settings for the irradiance converter.

    The defaults reproduce the general (non-paraxial) conversion.
    """

    formula: RadiometricFormula = RadiometricFormula.GENERAL
    skip_unit_transmittance: bool = True  # fast path when T == 1 everywhere
    warn_negative_radiance: bool = True
    dtype: str = "float64"

    def validate(self) -> None:
        """Validate configuration parameters."""

        if not isinstance(self.formula, RadiometricFormula):
            raise ValueError(f"Unknown radiometric formula {self.formula!r}")

        try:
            dtype = np.dtype(self.dtype)
        except TypeError as exc:
            raise ValueError(f"Invalid dtype {self.dtype!r}") from exc

        if not np.issubdtype(dtype, np.floating):
            raise ValueError(f"dtype {self.dtype!r} is not a floating point type")
