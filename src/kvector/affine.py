# kvector/affine.py
import math

from kvector import kernels


class AffineVector4:
    """
    An immutable 4-component vector in homogeneous form. w is carried
    as-is; whether it marks a point or a direction is up to the caller.
    """
    __slots__ = ("_x", "_y", "_z", "_w")

    def __init__(self, x: float, y: float, z: float, w: float):
        self._x = float(x)
        self._y = float(y)
        self._z = float(z)
        self._w = float(w)

    @classmethod
    def new(cls, x: float, y: float, z: float, w: float) -> "AffineVector4":
        return cls(x, y, z, w)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    def w(self) -> float:
        return self._w

    def add(self, other: "AffineVector4") -> "AffineVector4":
        return AffineVector4(self._x + other._x, self._y + other._y,
                             self._z + other._z, self._w + other._w)

    def subtract(self, other: "AffineVector4") -> "AffineVector4":
        return AffineVector4(self._x - other._x, self._y - other._y,
                             self._z - other._z, self._w - other._w)

    def negate(self) -> "AffineVector4":
        return AffineVector4(-self._x, -self._y, -self._z, -self._w)

    def dot(self, other: "AffineVector4") -> float:
        return kernels.dot4(self._x, self._y, self._z, self._w,
                            other._x, other._y, other._z, other._w)

    def magnitude_squared(self) -> float:
        return self.dot(self)

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def equals(self, other: "AffineVector4") -> bool:
        return (self._x == other._x and self._y == other._y
                and self._z == other._z and self._w == other._w)

    def __add__(self, other: "AffineVector4") -> "AffineVector4":
        if not isinstance(other, AffineVector4):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "AffineVector4") -> "AffineVector4":
        if not isinstance(other, AffineVector4):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "AffineVector4":
        return self.negate()

    def __eq__(self, other) -> bool:
        if not isinstance(other, AffineVector4):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self._x, self._y, self._z, self._w))

    def __repr__(self) -> str:
        return f"AffineVector4({self._x}, {self._y}, {self._z}, {self._w})"
