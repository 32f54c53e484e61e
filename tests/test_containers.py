"""
Tests for scene, optics and optical image containers.
"""

from __future__ import annotations

import numpy as np
import pytest
from scipy.constants import c, h

from oirad import IrradianceConfig, Optics, OpticsModel, RadiometricFormula, Scene
from oirad.scene import DEFAULT_WAVELENGTHS, OpticalImage
from oirad.utils.units import energy_to_quanta, photon_energy, quanta_to_energy


def test_uniform_scene_shape() -> None:
    scene = Scene.uniform(size=(6, 8), photons=3.0)
    assert scene.photons.shape == (6, 8, DEFAULT_WAVELENGTHS.size)
    assert scene.n_wave == DEFAULT_WAVELENGTHS.size
    assert scene.shape == (6, 8)
    assert np.all(scene.photons == 3.0)


def test_scene_band_count_mismatch_raises() -> None:
    with pytest.raises(ValueError):
        Scene(np.ones((4, 4, 3)), wavelengths=[500.0, 600.0])


def test_scene_requires_three_dimensions() -> None:
    with pytest.raises(ValueError):
        Scene(np.ones((4, 4)), wavelengths=[500.0])


def test_scene_energy_round_trip() -> None:
    wave = np.array([400.0, 700.0])
    energy = np.full((2, 2, 2), 1e-3)

    scene = Scene.from_energy(energy, wave)

    np.testing.assert_allclose(scene.photons[0, 0, 0], 1e-3 / (h * c / 400e-9))
    np.testing.assert_allclose(scene.energy, energy)


def test_photon_energy_at_550nm() -> None:
    np.testing.assert_allclose(photon_energy([550.0]), [3.6117e-19], rtol=1e-4)


def test_unit_conversion_checks_spectral_axis() -> None:
    with pytest.raises(ValueError):
        energy_to_quanta(np.ones((2, 2, 3)), [500.0, 600.0])
    with pytest.raises(ValueError):
        quanta_to_energy(np.ones((2, 2, 3)), [500.0])


def test_thin_lens_magnification() -> None:
    optics = Optics(focal_length=0.01)
    np.testing.assert_allclose(optics.magnification(1.01), -0.01)
    np.testing.assert_allclose(optics.image_distance(1.01), 0.01 * 1.01 / 1.0)
    assert optics.magnification(np.inf) == 0.0
    assert optics.image_distance(np.inf) == 0.01


def test_magnification_at_focal_plane_is_infinite() -> None:
    optics = Optics(focal_length=0.01)
    assert np.isinf(optics.magnification(0.01))


def test_skip_magnification_is_one() -> None:
    optics = Optics(model=OpticsModel.SKIP)
    assert optics.magnification(0.5) == 1.0
    assert optics.magnification() == 1.0


def test_magnification_requires_distance() -> None:
    with pytest.raises(ValueError):
        Optics().magnification()


def test_default_transmittance_is_unity() -> None:
    optics = Optics()
    np.testing.assert_array_equal(optics.get_transmittance(5), np.ones(5))


def test_aperture_diameter() -> None:
    optics = Optics(f_number=2.0, focal_length=0.05)
    assert optics.aperture_diameter == pytest.approx(0.025)


def test_optical_image_mean_photons() -> None:
    photons = np.stack([np.full((2, 2), 1.0), np.full((2, 2), 3.0)], axis=-1)
    oi = OpticalImage(photons=photons, wavelengths=np.array([500.0, 600.0]))
    np.testing.assert_allclose(oi.mean_photons(), [1.0, 3.0])
    assert oi.n_wave == 2
    assert oi.energy.shape == photons.shape


def test_valid_config() -> None:
    IrradianceConfig(formula=RadiometricFormula.PARAXIAL, dtype="float32").validate()


def test_invalid_config_dtype() -> None:
    config = IrradianceConfig(dtype="int32")
    with pytest.raises(ValueError):
        config.validate()


def test_invalid_config_formula() -> None:
    config = IrradianceConfig(formula="general")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        config.validate()
