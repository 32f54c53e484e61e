"""
GPU-accelerated irradiance conversion backed by PyTorch.
"""

from oirad.torch.irradiance import TorchIrradianceConverter, radiance_to_irradiance

__all__ = ["TorchIrradianceConverter", "radiance_to_irradiance"]
