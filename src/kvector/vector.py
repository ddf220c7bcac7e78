# kvector/vector.py
import math

from kvector import kernels


class Vector3:
    """
    An immutable 3D vector supporting arithmetic, dot and cross products,
    and normalization. Every operation returns a new vector.
    """
    __slots__ = ("_x", "_y", "_z")

    def __init__(self, x: float, y: float, z: float):
        self._x = float(x)
        self._y = float(y)
        self._z = float(z)

    @classmethod
    def new(cls, x: float, y: float, z: float) -> "Vector3":
        return cls(x, y, z)

    @classmethod
    def new_from_ints(cls, x: int, y: int, z: int) -> "Vector3":
        """
        Build a vector from integer components, widened to float.
        """
        return cls(float(x), float(y), float(z))

    @staticmethod
    def zero() -> "Vector3":
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def identity() -> "Vector3":
        return Vector3(1.0, 1.0, 1.0)

    @staticmethod
    def i_hat() -> "Vector3":
        return Vector3(1.0, 0.0, 0.0)

    @staticmethod
    def j_hat() -> "Vector3":
        return Vector3(0.0, 1.0, 0.0)

    @staticmethod
    def k_hat() -> "Vector3":
        return Vector3(0.0, 0.0, 1.0)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    def with_x(self, x: float) -> "Vector3":
        return Vector3(x, self._y, self._z)

    def with_y(self, y: float) -> "Vector3":
        return Vector3(self._x, y, self._z)

    def with_z(self, z: float) -> "Vector3":
        return Vector3(self._x, self._y, z)

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self._x + other._x, self._y + other._y, self._z + other._z)

    def subtract(self, other: "Vector3") -> "Vector3":
        return Vector3(self._x - other._x, self._y - other._y, self._z - other._z)

    def negate(self) -> "Vector3":
        return Vector3(-self._x, -self._y, -self._z)

    v_add = add
    v_sub = subtract
    v_usub = negate

    def scale(self, s: float) -> "Vector3":
        return Vector3(self._x * s, self._y * s, self._z * s)

    def dot(self, other: "Vector3") -> float:
        return kernels.dot3(self._x, self._y, self._z, other._x, other._y, other._z)

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(*kernels.cross3(self._x, self._y, self._z,
                                       other._x, other._y, other._z))

    def magnitude_squared(self) -> float:
        return self.dot(self)

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def unit(self) -> "Vector3":
        """
        Scale to unit length. The zero vector is not special-cased:
        its components come out non-finite.
        """
        return self.scale(kernels.reciprocal(self.magnitude()))

    def round(self) -> "Vector3":
        return Vector3(
            kernels.round_half_away(self._x),
            kernels.round_half_away(self._y),
            kernels.round_half_away(self._z)
        )

    def equals(self, other: "Vector3") -> bool:
        return self._x == other._x and self._y == other._y and self._z == other._z

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Vector3":
        return self.negate()

    def __mul__(self, s):
        # Scalar multiplication only.
        if isinstance(s, (int, float)):
            return self.scale(s)
        return NotImplemented

    def __rmul__(self, s: float) -> "Vector3":
        return self.__mul__(s)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self._x, self._y, self._z))

    def __repr__(self) -> str:
        return f"Vector3({self._x}, {self._y}, {self._z})"
