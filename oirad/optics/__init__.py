"""Optics description."""

from oirad.optics.optics import Optics, RayTraceParameters

__all__ = ["Optics", "RayTraceParameters"]
