"""
Radiance-to-irradiance conversion implemented with torch tensors.
"""

from __future__ import annotations

import logging
from typing import Optional

import torch

from oirad.core.config import IrradianceConfig, RadiometricFormula
from oirad.core.errors import DimensionMismatchError, InvalidParameterError
from oirad.core.irradiance import radiometric_factor
from oirad.core.resolver import resolve_model_parameters
from oirad.optics.optics import Optics
from oirad.scene.scene import Scene
from oirad.torch.common import default_device, ensure_tensor

logger = logging.getLogger(__name__)


def apply_transmittance(radiance: torch.Tensor, transmittance: torch.Tensor) -> torch.Tensor:
    """
    Scale each band of an H×W×B tensor by its transmittance.
    """

    _check_shapes(radiance, transmittance)
    return radiance * transmittance.view(1, 1, -1)


def radiance_to_irradiance(
    radiance: torch.Tensor,
    transmittance: torch.Tensor,
    magnification: float,
    f_number: float,
    formula: RadiometricFormula = RadiometricFormula.GENERAL,
) -> torch.Tensor:
    """
    Torch counterpart of :func:`oirad.core.irradiance.radiance_to_irradiance`.

    Tensors stay on their device; the scalar factor is computed on the host.
    """

    _check_shapes(radiance, transmittance)
    factor = radiometric_factor(f_number, magnification, formula)

    if torch.all(transmittance == 1.0):
        return radiance * factor
    return radiance * (transmittance * factor).view(1, 1, -1)


def _check_shapes(radiance: torch.Tensor, transmittance: torch.Tensor) -> None:
    if radiance.dim() != 3:
        raise DimensionMismatchError(
            f"Expected H×W×B radiance, got shape {tuple(radiance.shape)}"
        )
    if transmittance.dim() != 1 or transmittance.numel() != radiance.shape[2]:
        raise DimensionMismatchError(
            f"Transmittance has {transmittance.numel()} samples but radiance has "
            f"{radiance.shape[2]} bands"
        )
    if torch.any((transmittance < 0.0) | (transmittance > 1.0)):
        raise InvalidParameterError("Transmittance values must lie in [0, 1]")


class TorchIrradianceConverter:
    """
    GPU-accelerated irradiance converter using PyTorch tensors.
    """

    def __init__(
        self,
        config: Optional[IrradianceConfig] = None,
        device: Optional[torch.device] = None,
        dtype: torch.dtype = torch.float32,
    ) -> None:
        self.config = config or IrradianceConfig()
        self.config.validate()

        if device is None:
            device = default_device()

        self.device = device
        self.dtype = dtype

        logger.info("Initializing TorchIrradianceConverter (%s)", self.device)
        logger.info("  Formula: %s", self.config.formula.value)

    def process(self, scene: Scene, optics: Optics) -> torch.Tensor:
        """Return the irradiance of ``scene`` as an H×W×B tensor."""

        params = resolve_model_parameters(optics, scene)

        radiance = ensure_tensor(scene.photons, device=self.device, dtype=self.dtype)
        transmittance = ensure_tensor(
            optics.get_transmittance(scene.n_wave), device=self.device, dtype=self.dtype
        )

        return radiance_to_irradiance(
            radiance,
            transmittance,
            params.magnification,
            params.f_number,
            self.config.formula,
        )
