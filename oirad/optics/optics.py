"""
Optics description consumed by the irradiance stage.

Holds the nominal lens parameters, the optional ray-trace table values and
the lens transmittance spectrum.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np

from oirad.core.config import OpticsModel


@dataclass(frozen=True)
class RayTraceParameters:
    """Values derived from a lens design program's ray-trace tables."""

    object_distance: float  # meters
    magnification: float
    effective_f_number: float


@dataclass
class Optics:
    """
    Optics container.

    ``transmittance`` is one attenuation factor per scene wavelength; when
    it is left as ``None`` the lens is treated as perfectly transmissive.
    """

    model: Union[OpticsModel, str] = OpticsModel.DIFFRACTION_LIMITED
    f_number: float = 4.0
    focal_length: float = 0.0039  # meters
    transmittance: Optional[Sequence[float]] = None
    ray_trace: Optional[RayTraceParameters] = None
    name: str = "optics"

    def __post_init__(self) -> None:
        self.model = OpticsModel.parse(self.model)
        if self.transmittance is not None:
            self.transmittance = np.asarray(self.transmittance, dtype=float).ravel()

    @property
    def aperture_diameter(self) -> float:
        return self.focal_length / self.f_number

    def image_distance(self, distance: float) -> float:
        """Thin-lens image distance (m) for an object at ``distance`` meters."""

        if np.isinf(distance):
            return self.focal_length
        with np.errstate(divide="ignore"):
            return float(1.0 / np.float64(1.0 / self.focal_length - 1.0 / distance))

    def magnification(self, distance: Optional[float] = None) -> float:
        """
        Lateral magnification for an object at ``distance`` meters.

        The skip model passes the scene through untouched, so its
        magnification is always 1. Otherwise the thin-lens value
        ``-f / (d - f)`` is returned; it is negative because the image is
        inverted.
        """

        if OpticsModel.parse(self.model) is OpticsModel.SKIP:
            return 1.0
        if distance is None:
            raise ValueError("Object distance required for magnification")

        if np.isinf(distance):
            return 0.0
        # Object at the focal plane images at infinity.
        with np.errstate(divide="ignore"):
            return float(-self.focal_length / np.float64(distance - self.focal_length))

    def get_transmittance(self, n_wave: int) -> np.ndarray:
        """Transmittance spectrum, defaulting to all ones for ``n_wave`` bands."""

        if self.transmittance is None:
            return np.ones(n_wave)
        return np.array(self.transmittance, dtype=float)
