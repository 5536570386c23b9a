"""
Three-dimensional vectors with integer, real or complex components.

``I3``, ``R3`` and ``C3`` share one implementation in ``Vec3``; components are
held in a NumPy array ``v`` whose dtype fixes the scalar type. Arithmetic that
mixes in a scalar of a wider type (``I3 * 0.5``, ``R3 * 1j``) returns a vector
of the promoted class, while the in-place operators keep the receiver's type.
"""
import numbers

import numpy as np

from .config import get_config
from .errors import NullVectorError
from .logger import get_logger

logger = get_logger(__name__)


def _is_scalar(a):
    return isinstance(a, numbers.Number)


def _norm(arr):
    # |z|^2 componentwise, always squared in floating point
    arr = arr.astype(np.complex128 if arr.dtype.kind == 'c' else np.float64)
    return arr.real * arr.real + arr.imag * arr.imag


def _vector_class(dtype):
    kind = np.dtype(dtype).kind
    if kind == 'c':
        return C3
    if kind == 'f':
        return R3
    if kind in 'iub':
        return I3
    raise TypeError(f"no vector type for components of dtype {dtype}")


class Vec3:
    """Three-dimensional vector in cartesian coordinates.

    Not instantiated directly; use ``I3``, ``R3`` or ``C3``.
    """
    dtype = None

    # Make NumPy scalars defer to our reflected operators.
    __array_ufunc__ = None

    def __init__(self, x=0, y=0, z=0):
        if self.dtype is None:
            raise TypeError("Vec3 is abstract; construct an I3, R3 or C3")
        self.v = np.array([x, y, z], dtype=self.dtype)

    @classmethod
    def from_array(cls, arr):
        """Build a vector from three components.

        Called on ``Vec3`` itself, the concrete class is picked from the
        array's dtype.
        """
        arr = np.asarray(arr)
        if arr.shape != (3,):
            raise ValueError(f"expected 3 components, got shape {arr.shape}")
        if cls is Vec3:
            cls = _vector_class(arr.dtype)
        return cls(*arr)

    def _new(self, components):
        return type(self)(*components)

    def copy(self):
        return self._new(self.v)

    def to_array(self):
        return self.v.copy()

    # -- Component access ---------------------------------------------------
    @property
    def x(self):
        return self.v[0].item()

    @property
    def y(self):
        return self.v[1].item()

    @property
    def z(self):
        return self.v[2].item()

    def set_x(self, a):
        self.v[0] = a

    def set_y(self, a):
        self.v[1] = a

    def set_z(self, a):
        self.v[2] = a

    def __iter__(self):
        return iter(self.v.tolist())

    # -- In-place operations ------------------------------------------------
    def __iadd__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        self.v += other.v
        return self

    def __isub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        self.v -= other.v
        return self

    def __imul__(self, a):
        if not _is_scalar(a):
            return NotImplemented
        try:
            self.v *= a
        except TypeError as e:
            # NumPy refuses casts that would change the component type.
            raise TypeError(
                f"{type(self).__name__} *= {a!r} would change the component "
                f"type; use v * {a!r} for a promoted copy") from e
        return self

    def __itruediv__(self, a):
        if not _is_scalar(a):
            return NotImplemented
        try:
            with np.errstate(divide='ignore', invalid='ignore'):
                self.v /= a
        except TypeError as e:
            raise TypeError(
                f"{type(self).__name__} /= {a!r} would change the component "
                f"type; use v / {a!r} for a promoted copy") from e
        return self

    # -- Operators ----------------------------------------------------------
    def __pos__(self):
        return self.copy()

    def __neg__(self):
        return self._new(-self.v)

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._new(self.v + other.v)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._new(self.v - other.v)

    def __mul__(self, a):
        # vector * vector is deliberately unsupported: use dot() or cross()
        if not _is_scalar(a):
            return NotImplemented
        return Vec3.from_array(self.v * a)

    def __rmul__(self, a):
        if not _is_scalar(a):
            return NotImplemented
        return Vec3.from_array(a * self.v)

    def __truediv__(self, a):
        if not _is_scalar(a):
            return NotImplemented
        with np.errstate(divide='ignore', invalid='ignore'):
            return Vec3.from_array(self.v / a)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self.v, other.v))

    def isclose(self, other, rtol=None, atol=None):
        """Componentwise comparison within tolerance.

        ``==`` stays exact; this is the comparison to use after floating
        point arithmetic. ``other`` may be a vector or any 3-sequence.
        """
        config = get_config()
        rtol = config["rtol"] if rtol is None else rtol
        atol = config["atol"] if atol is None else atol
        other = other.v if isinstance(other, Vec3) else np.asarray(other)
        return bool(np.allclose(self.v, other, rtol=rtol, atol=atol))

    # -- Functions of this --------------------------------------------------
    def conj(self):
        """Return the complex conjugate vector (a copy for int and real)."""
        return self._new(np.conj(self.v))

    def mag2(self):
        """Return magnitude squared of the vector."""
        return float(np.sum(_norm(self.v)))

    def mag(self):
        return float(np.sqrt(self.mag2()))

    def magxy2(self):
        """Return squared distance from z axis."""
        return float(np.sum(_norm(self.v[:2])))

    def magxy(self):
        return float(np.sqrt(self.magxy2()))

    def complex(self):
        """Return this, trivially converted to complex type."""
        return C3(*self.v)

    def real(self):
        """Return real parts."""
        return R3(*np.real(self.v))

    # -- Functions of this and another vector -------------------------------
    def dot(self, other):
        """Dot product, antilinear in self and linear in other."""
        left = np.conj(self.v)
        right = other.v
        return (left[0] * right[0] + left[1] * right[1] + left[2] * right[2]).item()

    def cross(self, other):
        """Cross product, linear in both arguments."""
        a, b = self.v, other.v
        return Vec3.from_array(np.array([
            a[1] * b[2] - b[1] * a[2],
            a[2] * b[0] - b[2] * a[0],
            a[0] * b[1] - b[0] * a[1],
        ]))

    def project(self, v):
        """Return projection of this onto v: dot(this, v) * v / |v|^2."""
        return self.dot(v) * v / v.mag2()

    def __str__(self):
        return f"({self.x},{self.y},{self.z})"

    def __repr__(self):
        return f"{type(self).__name__}({self.x!r}, {self.y!r}, {self.z!r})"


class I3(Vec3):
    """Vector with integer components."""
    dtype = np.int64


class _InexactVec3(Vec3):
    """Operations defined for real and complex, but not integer, vectors."""

    def unit(self):
        """Return unit vector in direction of this. Raises for null vector."""
        length = self.mag()
        if length == 0.0:
            logger.debug("cannot normalize null vector %r", self)
            raise NullVectorError()
        return self / length

    def rotated_y(self, a):
        """Return result of rotation by angle a around the y axis."""
        c, s = np.cos(a), np.sin(a)
        x, y, z = self.v
        return self._new([c * x + s * z, y, -s * x + c * z])

    def rotated_z(self, a):
        """Return result of rotation by angle a around the z axis.

        Positive angles turn x towards -y: rotating (1, 0, 0) by pi/2
        gives (0, -1, 0).
        """
        c, s = np.cos(a), np.sin(a)
        x, y, z = self.v
        return self._new([c * x + s * y, -s * x + c * y, z])


class R3(_InexactVec3):
    """Vector with real components; adds spherical coordinate helpers."""
    dtype = np.float64

    def theta(self):
        """Return polar angle, 0 for the null vector."""
        if self.x == 0.0 and self.y == 0.0 and self.z == 0.0:
            return 0.0
        return float(np.arctan2(self.magxy(), self.z))

    def phi(self):
        """Return azimuthal angle atan2(-y, x), 0 on the z axis."""
        if self.x == 0.0 and self.y == 0.0:
            return 0.0
        return float(np.arctan2(-self.y, self.x))

    def cos_theta(self):
        mag = self.mag()
        return 1.0 if mag == 0 else self.z / mag

    def sin2_theta(self):
        mag2 = self.mag2()
        return 0.0 if mag2 == 0 else self.magxy2() / mag2

    def angle(self, other):
        """Return angle between this and other, pi/2 if either is null."""
        cosa = 0.0
        ptot = self.mag() * other.mag()
        if ptot > 0:
            cosa = self.dot(other) / ptot
            if cosa > 1 or cosa < -1:
                logger.debug("clamping cosine %r into [-1, 1]", cosa)
                cosa = min(max(cosa, -1.0), 1.0)
        return float(np.arccos(cosa))


class C3(_InexactVec3):
    """Vector with complex components."""
    dtype = np.complex128
