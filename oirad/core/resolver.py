"""
Resolve the geometric parameters of the radiometric formula.

Each optics model draws object distance, magnification and f-number from a
different part of the optics description:

    ray trace            ray-trace table values (effective f-number)
    skip                 magnification 1, nominal f-number
    diffraction limited  scene distance, magnification at that distance,
    shift invariant      nominal f-number
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from oirad.core.config import OpticsModel
from oirad.core.errors import UnsupportedModelError
from oirad.optics.optics import Optics
from oirad.scene.scene import Scene

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelParameters:
    """Parameters feeding the radiance-to-irradiance conversion."""

    model: OpticsModel
    magnification: float
    f_number: float
    distance: Optional[float] = None  # informational only


def resolve_model_parameters(optics: Optics, scene: Optional[Scene] = None) -> ModelParameters:
    """
    Pick distance, magnification and f-number for the optics model.

    ``scene`` is only needed by the diffraction-limited and shift-invariant
    models, which evaluate the magnification at the scene distance.
    """

    model = OpticsModel.parse(optics.model)

    if model is OpticsModel.RAY_TRACE:
        rt = optics.ray_trace
        if rt is None:
            raise ValueError("Ray-trace model selected but optics has no ray-trace data")
        params = ModelParameters(
            model=model,
            magnification=rt.magnification,
            f_number=rt.effective_f_number,
            distance=rt.object_distance,
        )

    elif model is OpticsModel.SKIP:
        # TODO: confirm whether skip mode should use the nominal f-number.
        params = ModelParameters(model=model, magnification=1.0, f_number=optics.f_number)

    elif model in (OpticsModel.DIFFRACTION_LIMITED, OpticsModel.SHIFT_INVARIANT):
        if scene is None:
            raise ValueError(f"{model.value} model needs the scene distance")
        distance = scene.distance
        params = ModelParameters(
            model=model,
            magnification=optics.magnification(distance),
            f_number=optics.f_number,
            distance=distance,
        )

    else:
        raise UnsupportedModelError(f"Unknown optics model: {model!r}")

    logger.debug(
        "Resolved %s parameters: m=%s, fN=%s, distance=%s",
        model.value,
        params.magnification,
        params.f_number,
        params.distance,
    )
    return params
