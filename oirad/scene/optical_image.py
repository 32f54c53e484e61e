"""
Optical image: irradiance at the image plane.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

from oirad.utils.units import quanta_to_energy

if TYPE_CHECKING:  # pragma: no cover
    from oirad.core.resolver import ModelParameters


@dataclass
class OpticalImage:
    """Irradiance (photons/s/m^2/nm) with the parameters that produced it."""

    photons: np.ndarray
    wavelengths: np.ndarray
    parameters: Optional["ModelParameters"] = None
    name: str = "oi"

    @property
    def n_wave(self) -> int:
        return int(np.size(self.wavelengths))

    @property
    def energy(self) -> np.ndarray:
        return quanta_to_energy(self.photons, self.wavelengths)

    def mean_photons(self) -> np.ndarray:
        """Spatial mean irradiance per wavelength band."""

        return self.photons.mean(axis=(0, 1))
