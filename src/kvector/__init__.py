"""
kvector: immutable 3D and homogeneous 4D vector value types.
"""
import logging

from kvector.affine import AffineVector4
from kvector.kernels import warmup
from kvector.vector import Vector3

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["AffineVector4", "Vector3", "warmup"]
