"""
Scene radiance to optical image irradiance.

The scene spectral radiance (photons/s/m^2/sr/nm) is attenuated by the lens
transmittance and converted to image-plane irradiance (photons/s/m^2/nm)
with

    irradiance = pi / (1 + 4 fN^2 (1 + |m|)^2) * radiance

where fN is the f-number and m the magnification. The commonly quoted
``pi / (4 fN^2 (1 + |m|)^2)`` is the small-angle limit of this expression
(Holst, CCD Arrays, Cameras and Displays, 1998) and is available as the
paraxial formula. The general form, derived in Catrysse's dissertation
(pp. 150-151), also accounts for non-paraxial rays.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence, Union

import numpy as np

from oirad.core.config import IrradianceConfig, RadiometricFormula
from oirad.core.errors import DimensionMismatchError, InvalidParameterError
from oirad.core.resolver import ModelParameters, resolve_model_parameters
from oirad.optics.optics import Optics
from oirad.scene.optical_image import OpticalImage
from oirad.scene.scene import Scene

logger = logging.getLogger(__name__)


def radiometric_factor(
    f_number: float,
    magnification: float,
    formula: RadiometricFormula = RadiometricFormula.GENERAL,
) -> float:
    """
    Scalar factor converting radiance to irradiance.

    Non-finite inputs are allowed and give a non-finite or zero factor.
    """

    if f_number <= 0:
        raise InvalidParameterError(f"f-number must be positive, got {f_number}")

    fn = np.float64(f_number)
    m = np.abs(np.float64(magnification))

    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        if formula is RadiometricFormula.GENERAL:
            return float(np.pi / (1.0 + 4.0 * fn**2 * (1.0 + m) ** 2))
        if formula is RadiometricFormula.PARAXIAL:
            return float(np.pi / (4.0 * fn**2 * (1.0 + m) ** 2))
        if formula is RadiometricFormula.SIMPLE:
            return float(np.pi / (4.0 * fn**2))

    raise ValueError(f"Unknown radiometric formula: {formula!r}")


def apply_transmittance(radiance: np.ndarray, transmittance: Sequence[float]) -> np.ndarray:
    """
    Scale each spectral band of ``radiance`` by its transmittance.

    Returns a new array; the input is left untouched.
    """

    radiance = np.asarray(radiance)
    trans = _check_transmittance(radiance, transmittance)
    return radiance * trans[np.newaxis, np.newaxis, :]


def radiance_to_irradiance(
    radiance: np.ndarray,
    transmittance: Sequence[float],
    magnification: float,
    f_number: float,
    formula: RadiometricFormula = RadiometricFormula.GENERAL,
    skip_unit_transmittance: bool = True,
) -> np.ndarray:
    """
    Convert an H×W×B radiance field to irradiance.

    Every argument is validated before any output is allocated.
    """

    radiance = np.asarray(radiance)
    trans = _check_transmittance(radiance, transmittance)
    factor = radiometric_factor(f_number, magnification, formula)

    if skip_unit_transmittance and np.all(trans == 1.0):
        return factor * radiance

    # One pass: transmittance and factor folded into a per-band scale.
    return radiance * (factor * trans)[np.newaxis, np.newaxis, :]


def _check_transmittance(radiance: np.ndarray, transmittance: Sequence[float]) -> np.ndarray:
    if radiance.ndim != 3:
        raise DimensionMismatchError(f"Expected H×W×B radiance, got shape {radiance.shape}")

    trans = np.asarray(transmittance, dtype=float)
    if trans.ndim != 1 or trans.size != radiance.shape[2]:
        raise DimensionMismatchError(
            f"Transmittance has {trans.size} samples but radiance has "
            f"{radiance.shape[2]} bands"
        )
    if np.any((trans < 0.0) | (trans > 1.0)):
        raise InvalidParameterError(f"Transmittance values must lie in [0, 1], got {trans}")
    return trans


class IrradianceConverter:
    """
    Two-stage radiance-to-irradiance pipeline.

    Pipeline stages:
        1. Model parameter resolution (distance, magnification, f-number)
        2. Lens transmittance
        3. Radiometric conversion
    """

    def __init__(self, config: Optional[IrradianceConfig] = None) -> None:
        self.config = config or IrradianceConfig()
        self.config.validate()

        logger.info("Initializing irradiance converter")
        logger.info("  Formula: %s", self.config.formula.value)

    def process(
        self,
        scene: Scene,
        optics: Optics,
        return_intermediate: bool = False,
    ) -> Union[OpticalImage, Dict[str, object]]:
        """
        Compute the optical image irradiance for ``scene`` through ``optics``.
        """

        radiance = scene.photons
        if radiance.ndim != 3:
            raise DimensionMismatchError(f"Expected H×W×B radiance, got shape {radiance.shape}")
        if self.config.warn_negative_radiance and np.any(radiance < 0):
            logger.warning("Scene radiance contains negative values")

        logger.info("Processing scene %r: shape=%s", scene.name, radiance.shape)

        params = self._stage_resolve(scene, optics)
        transmittance = optics.get_transmittance(scene.n_wave)

        # Validate everything before touching the data.
        _check_transmittance(radiance, transmittance)
        factor = radiometric_factor(params.f_number, params.magnification, self.config.formula)

        transmitted = self._stage_transmittance(radiance, transmittance)
        irradiance = self._stage_convert(transmitted, factor)

        if irradiance.size and logger.isEnabledFor(logging.INFO):
            logger.info(
                "Irradiance range: [%0.3e, %0.3e] photons/s/m^2/nm",
                float(np.min(irradiance)),
                float(np.max(irradiance)),
            )

        oi = OpticalImage(
            photons=irradiance,
            wavelengths=scene.wavelengths.copy(),
            parameters=params,
            name=scene.name,
        )

        if return_intermediate:
            return {
                "parameters": params,
                "transmitted": transmitted,
                "factor": factor,
                "irradiance": irradiance,
                "optical_image": oi,
            }
        return oi

    # ------------------------------------------------------------------
    # Individual pipeline stages
    # ------------------------------------------------------------------

    def _stage_resolve(self, scene: Scene, optics: Optics) -> ModelParameters:
        logger.debug("Stage 1: model parameters (%s)", optics.model)
        return resolve_model_parameters(optics, scene)

    def _stage_transmittance(self, radiance: np.ndarray, transmittance: np.ndarray) -> np.ndarray:
        logger.debug("Stage 2: lens transmittance")

        dtype = np.dtype(self.config.dtype)
        if self.config.skip_unit_transmittance and np.all(transmittance == 1.0):
            return radiance.astype(dtype, copy=True)
        return apply_transmittance(radiance, transmittance).astype(dtype, copy=False)

    def _stage_convert(self, transmitted: np.ndarray, factor: float) -> np.ndarray:
        logger.debug("Stage 3: radiometric conversion (k=%0.6g)", factor)
        return transmitted * factor


def calculate_irradiance(
    scene: Scene,
    optics: Optics,
    formula: RadiometricFormula = RadiometricFormula.GENERAL,
) -> OpticalImage:
    """
    Convenience wrapper for a single radiance-to-irradiance computation.
    """

    converter = IrradianceConverter(IrradianceConfig(formula=formula))
    return converter.process(scene, optics)
