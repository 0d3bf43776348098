"""Rotation and rigid-transform wrappers that keep their invariants.

``Quat`` and ``DualQuat`` accept any components and leave normalization
to the caller. ``Rotation`` and ``RigidTransform`` only expose
construction paths that normalize, and check the unit-norm (and, for
rigid transforms, orthogonality) invariant with ``assert`` after every
construction. The checks are removed when Python runs with ``-O``.

Both wrappers are immutable: every operation returns a new value.

Example:
    >>> from xformkit import RigidTransform, Rotation, Vec3
    >>> turn = Rotation.from_axis_angle(Vec3(0, 0, 1), 1.5707963)
    >>> pose = RigidTransform.from_translation_rotation(Vec3(1, 0, 0), turn)
    >>> pose.apply(Vec3(1, 0, 0))  # ~vec3(1, 1, 0)
"""

from __future__ import annotations

import logging

from xformkit.common import equals_approximately
from xformkit.config import CONFIG
from xformkit.mat33 import Mat3
from xformkit.mat44 import Mat4
from xformkit.quat import AxisAngle, Quat
from xformkit.quat2 import DualQuat
from xformkit.vec3 import Vec3

logger = logging.getLogger(__name__)

INVARIANT_TOLERANCE = CONFIG.numeric.invariant_tolerance


class Rotation:
    """Unit quaternion rotation."""

    __slots__ = ("_quat",)

    def __init__(self, quat: Quat | None = None) -> None:
        """Wrap a quaternion, normalizing a copy of it.

        :param quat: Rotation quaternion (any non-zero length); identity when omitted
        """
        if quat is None:
            self._quat = Quat()
        else:
            if not equals_approximately(quat.squared_length, 1.0):
                logger.debug("[Rotation] Normalizing non-unit quaternion %s", quat)
            self._quat = quat.clone().normalize()
        self._check()

    def _check(self) -> None:
        assert INVARIANT_TOLERANCE.is_within(self._quat.squared_length - 1.0), (
            f"Rotation is not unit length: {self._quat}"
        )

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def identity(cls) -> Rotation:
        return cls()

    @classmethod
    def from_axis_angle(cls, axis: Vec3, rad: float) -> Rotation:
        """Rotation of ``rad`` radians around ``axis`` (normalized here)."""
        return cls(Quat.from_axis_angle(axis.clone().normalize(), rad))

    @classmethod
    def from_euler_degrees(cls, x: float, y: float, z: float) -> Rotation:
        return cls(Quat.from_euler_degrees(x, y, z))

    @classmethod
    def from_mat3(cls, m: Mat3) -> Rotation:
        """Rotation of an orthonormal 3x3 matrix."""
        return cls(Quat.from_mat3(m))

    @classmethod
    def between(cls, a: Vec3, b: Vec3) -> Rotation:
        """Shortest rotation taking direction ``a`` onto direction ``b``."""
        return cls(Quat.from_rotation_to(a.clone().normalize(), b.clone().normalize()))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def quat(self) -> Quat:
        """Copy of the unit quaternion."""
        return self._quat.clone()

    @property
    def axis_angle(self) -> AxisAngle:
        return self._quat.axis_angle

    def to_mat3(self) -> Mat3:
        return Mat3.from_quat(self._quat)

    def to_mat4(self) -> Mat4:
        return Mat4.from_quat(self._quat)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def compose(self, other: Rotation) -> Rotation:
        """Rotation applying ``other`` first, then self."""
        return Rotation(self._quat * other._quat)

    def inverse(self) -> Rotation:
        return Rotation(self._quat.clone().conjugate())

    def slerp(self, other: Rotation, t: float) -> Rotation:
        """Spherical interpolation towards ``other`` along the shorter arc."""
        return Rotation(Quat.from_slerp(self._quat, other._quat, t))

    def angle_to(self, other: Rotation) -> float:
        """Angle in radians of the rotation taking self onto ``other``."""
        return self._quat.angle_distance(other._quat)

    def apply(self, v: Vec3) -> Vec3:
        """Rotate a vector, returning a new one."""
        return v.clone().transform_quat(self._quat)

    def __mul__(self, other: Rotation) -> Rotation:
        if not isinstance(other, Rotation):
            return NotImplemented
        return self.compose(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rotation):
            return NotImplemented
        return self._quat == other._quat

    __hash__ = None

    def __repr__(self) -> str:
        return f"Rotation({self._quat})"


class RigidTransform:
    """Rotation followed by translation, stored as a normalized dual quaternion."""

    __slots__ = ("_dq",)

    def __init__(self, dq: DualQuat | None = None) -> None:
        """Wrap a dual quaternion, normalizing a copy of it.

        :param dq: Dual quaternion with a non-zero real part; identity when omitted
        """
        if dq is None:
            self._dq = DualQuat()
        else:
            if not equals_approximately(dq.squared_length, 1.0):
                logger.debug("[RigidTransform] Normalizing non-unit dual quaternion %s", dq)
            self._dq = dq.clone().normalize()
        self._check()

    def _check(self) -> None:
        real = self._dq.real
        dual = self._dq.dual
        assert INVARIANT_TOLERANCE.is_within(real.squared_length - 1.0), (
            f"RigidTransform real part is not unit length: {self._dq}"
        )
        # Orthogonality error grows with the translation magnitude
        scale = max(1.0, dual.length)
        assert INVARIANT_TOLERANCE.is_within(real.dot(dual) / scale), (
            f"RigidTransform real and dual parts are not orthogonal: {self._dq}"
        )

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def identity(cls) -> RigidTransform:
        return cls()

    @classmethod
    def from_translation_rotation(
        cls, translation: Vec3, rotation: Rotation | None = None
    ) -> RigidTransform:
        """Rigid transform rotating by ``rotation`` and then translating by ``translation``."""
        quat = rotation.quat if rotation is not None else Quat()
        return cls(DualQuat.from_translation_rotation(quat, translation))

    @classmethod
    def from_translation(cls, translation: Vec3) -> RigidTransform:
        return cls(DualQuat.from_translation(translation))

    @classmethod
    def from_rotation(cls, rotation: Rotation) -> RigidTransform:
        return cls(DualQuat.from_rotation(rotation.quat))

    @classmethod
    def from_mat4(cls, m: Mat4) -> RigidTransform:
        """Rigid part of a rotation + translation matrix."""
        return cls(DualQuat.from_mat4(m))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def dual_quat(self) -> DualQuat:
        """Copy of the normalized dual quaternion."""
        return self._dq.clone()

    @property
    def translation(self) -> Vec3:
        return self._dq.translation

    @property
    def rotation(self) -> Rotation:
        return Rotation(self._dq.real)

    def to_mat4(self) -> Mat4:
        return Mat4.from_quat2(self._dq)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def compose(self, other: RigidTransform) -> RigidTransform:
        """Transform applying ``other`` first, then self."""
        return RigidTransform(self._dq * other._dq)

    def inverse(self) -> RigidTransform:
        return RigidTransform(self._dq.clone().conjugate())

    def lerp(self, other: RigidTransform, t: float) -> RigidTransform:
        """Dual quaternion blend along the shorter path, renormalized."""
        return RigidTransform(DualQuat.from_lerp(self._dq, other._dq, t))

    def apply(self, point: Vec3) -> Vec3:
        """Transform a point, returning a new one."""
        return point.clone().transform_quat(self._dq.real).add(self._dq.translation)

    def __mul__(self, other: RigidTransform) -> RigidTransform:
        if not isinstance(other, RigidTransform):
            return NotImplemented
        return self.compose(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RigidTransform):
            return NotImplemented
        return self._dq == other._dq

    __hash__ = None

    def __repr__(self) -> str:
        return f"RigidTransform({self._dq})"
