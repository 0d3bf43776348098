"""
xformkit - Linear algebra for 2D/3D graphics

Small fixed-size vector, matrix and quaternion types backed by float32
storage, following the conventions of WebGL-style math libraries.

Features:
- Vectors: Vec2, Vec3, Vec4 with in-place, chainable arithmetic
- Matrices: Mat2, Mat23 (2D affine), Mat3, Mat4, all column-major
- Rotations: Quat (x, y, z, w) with slerp, exp/ln/pow, rotation_to
- Rigid transforms: DualQuat (real, dual) with blending and normalization
- Cameras: perspective, ortho, frustum, look_at, target_to
- Invariant-carrying wrappers: Rotation, RigidTransform
- Degenerate input yields NaN/Inf or a documented fallback, never an exception

Conventions:
  - Matrices are column-major: ``m[col * n + row]``
  - Transforms are post-multiplied: ``m.translate(v)`` applies v first
  - Quaternions are scalar-last, identity (0, 0, 0, 1)

Example - Camera:
    >>> from xformkit import Mat4, Vec3
    >>>
    >>> view = Mat4.look_at(Vec3(0, 0, 5), Vec3(0, 0, 0), Vec3(0, 1, 0))
    >>> proj = Mat4.perspective(0.785398, 16 / 9, 0.1, 100.0)
    >>> view_proj = proj @ view
    >>> Vec3(1, 1, 0).transform_mat4(view_proj)

Example - Rigid transforms:
    >>> from xformkit import DualQuat, Quat, Vec3
    >>>
    >>> q = Quat.from_axis_angle(Vec3(0, 1, 0), 1.5707963)
    >>> dq = DualQuat.from_translation_rotation(q, Vec3(1, 2, 3))
    >>> dq.rotate_x(0.5).translate(Vec3(0, 0, 1))
    >>> dq.translation
"""

__version__ = "0.1.0"

# Shared storage and outcome reporting
from xformkit.base import COMPUTED, DEGENERATE, Float32Values, Matrix, Outcome, Vector

# Scalar helpers
from xformkit.common import (
    DEGREE_TO_RAD,
    EPSILON,
    degree_to_rad,
    equals_approximately,
    fast_inverse_sqrt,
    inverse_sqrt,
)

# Configuration
from xformkit.config import CONFIG

# Matrices
from xformkit.mat22 import Mat2
from xformkit.mat23 import Mat23
from xformkit.mat33 import Mat3
from xformkit.mat44 import Decomposition, FieldOfView, Mat4

# Rotations
from xformkit.quat import AxisAngle, Quat
from xformkit.quat2 import DualQuat

# Invariant-carrying wrappers
from xformkit.rigid import RigidTransform, Rotation

# Vectors
from xformkit.vec2 import Vec2
from xformkit.vec3 import Vec3
from xformkit.vec4 import Vec4

__all__ = [
    # Version
    "__version__",
    # Vectors
    "Vec2",
    "Vec3",
    "Vec4",
    # Matrices
    "Mat2",
    "Mat23",
    "Mat3",
    "Mat4",
    "FieldOfView",
    "Decomposition",
    # Rotations
    "Quat",
    "AxisAngle",
    "DualQuat",
    # Wrappers
    "Rotation",
    "RigidTransform",
    # Base types
    "Float32Values",
    "Vector",
    "Matrix",
    "Outcome",
    "COMPUTED",
    "DEGENERATE",
    # Scalar helpers
    "EPSILON",
    "DEGREE_TO_RAD",
    "degree_to_rad",
    "equals_approximately",
    "inverse_sqrt",
    "fast_inverse_sqrt",
    # Configuration
    "CONFIG",
]
