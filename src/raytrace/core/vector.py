# core/vector.py
import math


class Vector3:
    """
    A simple 3D vector class supporting arithmetic, dot and cross products,
    and normalization. Used interchangeably as a point, a direction and an
    RGB color.
    """
    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> "Vector3":
        return cls(1.0, 1.0, 1.0)

    def __add__(self, other) -> "Vector3":
        # Scalars are added to every component.
        if isinstance(other, (int, float)):
            return Vector3(self.x + other, self.y + other, self.z + other)
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __radd__(self, other) -> "Vector3":
        return self.__add__(other)

    def __sub__(self, other) -> "Vector3":
        if isinstance(other, (int, float)):
            return Vector3(self.x - other, self.y - other, self.z - other)
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other) -> "Vector3":
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        # Element-wise multiplication (color attenuation).
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vector3":
        l = self.length()
        if l == 0:
            return Vector3(0.0, 0.0, 0.0)
        return self / l

    def reflect(self, normal: "Vector3") -> "Vector3":
        """
        Mirror this vector about a unit normal: v - 2*dot(v, n)*n.
        """
        return self - normal * (2.0 * self.dot(normal))

    def refract(self, normal: "Vector3", etai_over_etat: float) -> "Vector3":
        """
        Bend a unit incident vector through a surface with the given ratio of
        refractive indices (Snell's law), split into the components
        perpendicular and parallel to the normal.
        """
        cos_theta = min((-self).dot(normal), 1.0)
        r_out_perp = (self + normal * cos_theta) * etai_over_etat
        r_out_parallel = normal * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
        return r_out_perp + r_out_parallel

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
