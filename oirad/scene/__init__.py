"""Scene radiance and optical image containers."""

from oirad.scene.optical_image import OpticalImage
from oirad.scene.scene import DEFAULT_WAVELENGTHS, Scene

__all__ = ["Scene", "OpticalImage", "DEFAULT_WAVELENGTHS"]
