"""Optical image irradiance (oirad).

Converts scene spectral radiance into optical-image irradiance for
ray-trace, diffraction-limited, shift-invariant and skip optics models.
"""

from oirad.core.config import IrradianceConfig, OpticsModel, RadiometricFormula
from oirad.core.errors import (
    DimensionMismatchError,
    InvalidParameterError,
    IrradianceError,
    UnsupportedModelError,
)
from oirad.core.irradiance import (
    IrradianceConverter,
    apply_transmittance,
    calculate_irradiance,
    radiance_to_irradiance,
    radiometric_factor,
)
from oirad.core.resolver import ModelParameters, resolve_model_parameters
from oirad.optics import Optics, RayTraceParameters
from oirad.scene import OpticalImage, Scene

__all__ = [
    "IrradianceConverter",
    "IrradianceConfig",
    "OpticsModel",
    "RadiometricFormula",
    "IrradianceError",
    "UnsupportedModelError",
    "DimensionMismatchError",
    "InvalidParameterError",
    "ModelParameters",
    "resolve_model_parameters",
    "apply_transmittance",
    "radiance_to_irradiance",
    "radiometric_factor",
    "calculate_irradiance",
    "Optics",
    "RayTraceParameters",
    "Scene",
    "OpticalImage",
]

try:  # Optional PyTorch acceleration
    from oirad.torch import TorchIrradianceConverter  # type: ignore

    __all__.append("TorchIrradianceConverter")
except ImportError:  # pragma: no cover - torch not installed
    TorchIrradianceConverter = None  # type: ignore

__version__ = "0.1.0"
