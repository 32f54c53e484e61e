"""
Photon / energy unit conversions for spectral data.
"""

from __future__ import annotations

import numpy as np
from scipy.constants import c, h


def photon_energy(wavelengths: np.ndarray) -> np.ndarray:
    """
    Energy of a single photon in joules.

    Parameters
    ----------
    wavelengths : array_like
        Wavelength samples in nanometers.
    """

    wave_m = np.asarray(wavelengths, dtype=float) * 1e-9
    return h * c / wave_m


def energy_to_quanta(energy: np.ndarray, wavelengths: np.ndarray) -> np.ndarray:
    """Convert spectral energy (last axis = wavelength) to photon counts."""

    energy = np.asarray(energy, dtype=float)
    _check_spectral_axis(energy, wavelengths)
    return energy / photon_energy(wavelengths)


def quanta_to_energy(photons: np.ndarray, wavelengths: np.ndarray) -> np.ndarray:
    """Convert photon counts (last axis = wavelength) to spectral energy."""

    photons = np.asarray(photons, dtype=float)
    _check_spectral_axis(photons, wavelengths)
    return photons * photon_energy(wavelengths)


def _check_spectral_axis(data: np.ndarray, wavelengths: np.ndarray) -> None:
    n_wave = np.size(wavelengths)
    if data.shape[-1] != n_wave:
        raise ValueError(
            f"Last axis has {data.shape[-1]} samples, expected {n_wave} wavelengths"
        )
