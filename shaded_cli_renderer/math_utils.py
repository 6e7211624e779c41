#
# PROJECT: shaded-cli-renderer
# MODULE: shaded_cli_renderer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math
from typing import Tuple

from .errors import DegenerateGeometryError


class Vec3:
    """Immutable 3-component vector."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vec3 is immutable")

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return self.x == other.x and self.y == other.y and self.z == other.z
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    def plus(self, other: 'Vec3') -> 'Vec3':
        return self + other

    def minus(self, other: 'Vec3') -> 'Vec3':
        return self - other

    def scale(self, k: float) -> 'Vec3':
        return self * k

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other) -> 'Vec3':
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> 'Vec3':
        m = self.length()
        if m == 0:
            raise DegenerateGeometryError(f"cannot normalize zero-length {self!r}")
        return self / m


class Vec4:
    """Homogeneous 4-vector produced by Mat4.mul_vec4; a4 is the divisor."""
    __slots__ = ('a1', 'a2', 'a3', 'a4')

    def __init__(self, a1: float, a2: float, a3: float, a4: float):
        self.a1 = a1
        self.a2 = a2
        self.a3 = a3
        self.a4 = a4

    def __repr__(self):
        return f"Vec4({self.a1:.3f}, {self.a2:.3f}, {self.a3:.3f}, {self.a4:.3f})"

    def __iter__(self):
        yield self.a1
        yield self.a2
        yield self.a3
        yield self.a4

    def __eq__(self, other):
        if isinstance(other, Vec4):
            return tuple(self) == tuple(other)
        return NotImplemented

    @classmethod
    def from_point(cls, v: Vec3) -> 'Vec4':
        return cls(v.x, v.y, v.z, 1.0)

    def perspective_divide(self) -> Vec3:
        """Divide by a4; a divisor of exactly 0 is treated as 1."""
        w = self.a4 if self.a4 != 0 else 1.0
        return Vec3(self.a1 / w, self.a2 / w, self.a3 / w)


class Mat4:
    """4x4 matrix stored row-major as [row][col].

    Vectors are row vectors multiplied on the left (v * M), so translation
    lives in row 3 and ``A @ B`` applies A first.  Matrices come only from
    the named constructors below and are read-only afterwards.
    """
    __slots__ = ('m',)

    def __init__(self, rows):
        self.m = tuple(tuple(float(v) for v in row) for row in rows)
        if len(self.m) != 4 or any(len(row) != 4 for row in self.m):
            raise ValueError("Mat4 needs exactly 4 rows of 4 values")

    def __repr__(self):
        return f"Mat4({[list(row) for row in self.m]})"

    def __getitem__(self, row):
        return self.m[row]

    def __eq__(self, other):
        if isinstance(other, Mat4):
            return self.m == other.m
        return NotImplemented

    @staticmethod
    def _identity_rows():
        return [[1.0 if r == c else 0.0 for c in range(4)] for r in range(4)]

    @classmethod
    def identity(cls) -> 'Mat4':
        return cls(cls._identity_rows())

    @classmethod
    def translation(cls, x, y, z) -> 'Mat4':
        m = cls._identity_rows()
        m[3][0] = x
        m[3][1] = y
        m[3][2] = z
        return cls(m)

    @classmethod
    def scale(cls, sx, sy, sz) -> 'Mat4':
        m = cls._identity_rows()
        m[0][0] = sx
        m[1][1] = sy
        m[2][2] = sz
        return cls(m)

    @classmethod
    def rotation_x(cls, rad: float) -> 'Mat4':
        m = cls._identity_rows()
        c = math.cos(rad)
        s = math.sin(rad)
        m[1][1] = c
        m[1][2] = s
        m[2][1] = -s
        m[2][2] = c
        return cls(m)

    @classmethod
    def rotation_y(cls, rad: float) -> 'Mat4':
        m = cls._identity_rows()
        c = math.cos(rad)
        s = math.sin(rad)
        m[0][0] = c
        m[0][2] = -s
        m[2][0] = s
        m[2][2] = c
        return cls(m)

    @classmethod
    def rotation_z(cls, rad: float) -> 'Mat4':
        m = cls._identity_rows()
        c = math.cos(rad)
        s = math.sin(rad)
        m[0][0] = c
        m[0][1] = s
        m[1][0] = -s
        m[1][1] = c
        return cls(m)

    @classmethod
    def projection(cls, near: float, far: float, fov: float, aspect: float) -> 'Mat4':
        """
        Perspective projection.

        Args:
            near: Near plane distance.
            far: Far plane distance.
            fov: Vertical field of view in degrees.
            aspect: Viewport height / width.

        Row 2 column 3 is 1 so the homogeneous result carries camera z in
        a4 for the perspective divide.  near == far yields Inf/NaN.
        """
        f = 1.0 / math.tan(math.radians(fov) / 2.0)
        m = [[0.0] * 4 for _ in range(4)]
        m[0][0] = aspect * f
        m[1][1] = f
        m[2][2] = far / (far - near)
        m[2][3] = 1.0
        m[3][2] = -far * near / (far - near)
        return cls(m)

    @staticmethod
    def _basis(eye: Vec3, target: Vec3, up: Vec3):
        forward = (target - eye).normalize()
        new_up = (up - forward * up.dot(forward)).normalize()
        right = new_up.cross(forward)
        return right, new_up, forward

    @classmethod
    def point_at(cls, eye: Vec3, target: Vec3, up: Vec3) -> 'Mat4':
        """Place an object at eye facing target (basis rows + translation)."""
        right, new_up, forward = cls._basis(eye, target, up)
        return cls([
            [right.x, right.y, right.z, 0.0],
            [new_up.x, new_up.y, new_up.z, 0.0],
            [forward.x, forward.y, forward.z, 0.0],
            [eye.x, eye.y, eye.z, 1.0],
        ])

    @classmethod
    def look_at_inverse(cls, eye: Vec3, target: Vec3, up: Vec3) -> 'Mat4':
        """Inverse of point_at: world space into the eye's basis."""
        right, new_up, forward = cls._basis(eye, target, up)
        return cls([
            [right.x, new_up.x, forward.x, 0.0],
            [right.y, new_up.y, forward.y, 0.0],
            [right.z, new_up.z, forward.z, 0.0],
            [-eye.dot(right), -eye.dot(new_up), -eye.dot(forward), 1.0],
        ])

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            a, b = self.m, other.m
            return Mat4([
                [sum(a[r][k] * b[k][c] for k in range(4)) for c in range(4)]
                for r in range(4)
            ])
        return NotImplemented

    def mul_vec4(self, v: Vec4) -> Vec4:
        """Row vector times matrix.  Caller performs the perspective divide."""
        m = self.m
        return Vec4(
            v.a1 * m[0][0] + v.a2 * m[1][0] + v.a3 * m[2][0] + v.a4 * m[3][0],
            v.a1 * m[0][1] + v.a2 * m[1][1] + v.a3 * m[2][1] + v.a4 * m[3][1],
            v.a1 * m[0][2] + v.a2 * m[1][2] + v.a3 * m[2][2] + v.a4 * m[3][2],
            v.a1 * m[0][3] + v.a2 * m[1][3] + v.a3 * m[2][3] + v.a4 * m[3][3],
        )

    def transform_point(self, v: Vec3) -> Vec3:
        return self.mul_vec4(Vec4.from_point(v)).perspective_divide()


def to_angle(direction: Vec3) -> Tuple[float, float]:
    """Direction vector -> (pitch, yaw) in radians.

    Yaw turns about +Y starting at +Z towards +X; pitch raises towards +Y.
    """
    d = direction.normalize()
    pitch = math.asin(max(-1.0, min(1.0, d.y)))
    yaw = math.atan2(d.x, d.z)
    return pitch, yaw


def from_angle(pitch: float, yaw: float) -> Vec3:
    """(pitch, yaw) in radians -> unit direction vector."""
    cp = math.cos(pitch)
    return Vec3(math.sin(yaw) * cp, math.sin(pitch), math.cos(yaw) * cp)
