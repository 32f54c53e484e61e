"""
Scene spectral radiance container.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Tuple, Union

import numpy as np

from oirad.utils.units import energy_to_quanta, quanta_to_energy

DEFAULT_WAVELENGTHS = np.arange(400.0, 701.0, 10.0)


@dataclass
class Scene:
    """
    Spectral radiance of a scene.

    ``photons`` is an H×W×B array in photons/s/m^2/sr/nm, with one band per
    entry of ``wavelengths`` (nm). ``distance`` is the distance from the
    scene to the optics in meters.
    """

    photons: np.ndarray
    wavelengths: np.ndarray = field(default_factory=lambda: DEFAULT_WAVELENGTHS.copy())
    distance: float = 1.2
    name: str = "scene"

    def __post_init__(self) -> None:
        self.photons = np.asarray(self.photons, dtype=float)
        self.wavelengths = np.asarray(self.wavelengths, dtype=float).ravel()
        self.validate()

    @classmethod
    def from_energy(
        cls,
        energy: np.ndarray,
        wavelengths: Sequence[float],
        distance: float = 1.2,
        name: str = "scene",
    ) -> "Scene":
        """Build a scene from radiance in watts/sr/m^2/nm."""

        photons = energy_to_quanta(energy, wavelengths)
        return cls(photons, np.asarray(wavelengths, dtype=float), distance, name)

    @classmethod
    def uniform(
        cls,
        size: Union[int, Tuple[int, int]] = 32,
        wavelengths: Sequence[float] = DEFAULT_WAVELENGTHS,
        photons: float = 1.0,
        distance: float = 1.2,
    ) -> "Scene":
        """Spatially and spectrally uniform radiance field."""

        if isinstance(size, int):
            size = (size, size)
        wave = np.asarray(wavelengths, dtype=float)
        data = np.full((size[0], size[1], wave.size), float(photons))
        return cls(data, wave, distance, name="uniform")

    @property
    def n_wave(self) -> int:
        return int(self.wavelengths.size)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.photons.shape[:2]

    @property
    def energy(self) -> np.ndarray:
        return quanta_to_energy(self.photons, self.wavelengths)

    def validate(self) -> None:
        """Check that the radiance field matches the wavelength samples."""

        if self.photons.ndim != 3:
            raise ValueError(f"Expected H×W×B radiance, got shape {self.photons.shape}")
        if self.photons.shape[2] != self.n_wave:
            raise ValueError(
                f"Radiance has {self.photons.shape[2]} bands but "
                f"{self.n_wave} wavelengths are declared"
            )
