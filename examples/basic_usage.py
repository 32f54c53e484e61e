"""
Basic usage examples for oirad.
"""

from __future__ import annotations

import numpy as np

from oirad import (
    IrradianceConfig,
    IrradianceConverter,
    OpticalImage,
    Optics,
    OpticsModel,
    RadiometricFormula,
    RayTraceParameters,
    Scene,
    calculate_irradiance,
)


def example_diffraction_limited() -> OpticalImage:
    """Uniform scene through a diffraction-limited f/4 lens."""

    scene = Scene.uniform(size=64, photons=1e16, distance=1.2)
    optics = Optics(model=OpticsModel.DIFFRACTION_LIMITED, f_number=4.0)
    oi = calculate_irradiance(scene, optics)
    print(f"Diffraction-limited mean irradiance: {oi.photons.mean():0.3e} photons/s/m^2/nm")
    return oi


def example_ray_trace() -> OpticalImage:
    """Use the effective f-number and magnification from a lens design program."""

    scene = Scene.uniform(size=64, photons=1e16)
    rt = RayTraceParameters(object_distance=2.0, magnification=-0.0025, effective_f_number=2.9)
    transmittance = np.linspace(0.8, 0.95, scene.n_wave)
    optics = Optics(model=OpticsModel.RAY_TRACE, ray_trace=rt, transmittance=transmittance)
    oi = calculate_irradiance(scene, optics)
    print(f"Ray-trace mean irradiance: {oi.photons.mean():0.3e} photons/s/m^2/nm")
    return oi


def example_paraxial_formula() -> OpticalImage:
    """Compare against the small-angle conversion."""

    scene = Scene.uniform(size=32, photons=1e16)
    optics = Optics(model=OpticsModel.SKIP, f_number=2.0)
    converter = IrradianceConverter(IrradianceConfig(formula=RadiometricFormula.PARAXIAL))
    oi = converter.process(scene, optics)
    print(f"Paraxial mean irradiance: {oi.photons.mean():0.3e} photons/s/m^2/nm")
    return oi


if __name__ == "__main__":
    print("Running oirad basic examples...")
    example_diffraction_limited()
    example_ray_trace()
    example_paraxial_formula()
