"""
Example: camera and rigid-transform usage.

Demonstrates how to use xformkit for:
- View and projection matrices
- Orienting an object towards a target
- Blending rigid transforms with dual quaternions
- Invariant-carrying Rotation/RigidTransform wrappers
"""

import logging
import math

from xformkit import (
    DualQuat,
    Mat4,
    Quat,
    RigidTransform,
    Rotation,
    Vec3,
    Vec4,
)

# Debug level shows degenerate-input fallbacks
logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


def example_1_view_projection():
    """Example 1: Project a world-space point to normalized device coordinates."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: View and Projection")
    print("=" * 70)

    eye = Vec3(0, 2, 5)
    view = Mat4.look_at(eye, Vec3(0, 0, 0), Vec3(0, 1, 0))
    projection = Mat4.perspective(math.radians(60), 16 / 9, 0.1, 100.0)
    view_projection = projection @ view

    print(f"View matrix:\n{view}")
    for point in (Vec3(0, 0, 0), Vec3(1, 1, 0), Vec3(0, 0, -10)):
        clip = Vec4(*point, 1.0).transform_mat4(view_projection)
        ndc = Vec3(clip.x, clip.y, clip.z).scale(1 / clip.w)
        print(f"{point} -> {ndc}")

    # Infinite far plane
    infinite = Mat4.perspective(math.radians(60), 16 / 9, 0.1)
    print(f"Infinite far plane m10={infinite[10]}, m14={infinite[14]}")


def example_2_target_to():
    """Example 2: Place an object facing a target."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: target_to")
    print("=" * 70)

    model = Mat4.target_to(Vec3(3, 0, 0), Vec3(0, 0, 0), Vec3(0, 1, 0))
    translation, rotation, scaling = model.decompose()
    print(f"Position: {translation}")
    print(f"Rotation: {rotation}")
    print(f"Scaling:  {scaling}")

    # Degenerate camera: eye == center falls back to identity (logged at debug level)
    fallback = Mat4.look_at(Vec3(1, 1, 1), Vec3(1, 1, 1), Vec3(0, 1, 0))
    print(f"look_at(eye == center):\n{fallback}")


def example_3_dual_quaternions():
    """Example 3: Blend two rigid transforms."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: Dual Quaternion Blending")
    print("=" * 70)

    start = DualQuat.from_translation_rotation(Quat(), Vec3(0, 0, 0))
    end = DualQuat.from_translation_rotation(
        Quat.from_axis_angle(Vec3(0, 1, 0), math.pi / 2), Vec3(4, 0, 0)
    )

    for t in (0.0, 0.25, 0.5, 0.75, 1.0):
        blended = DualQuat.from_lerp(start, end, t).normalize()
        print(f"t={t:.2f}: translation={blended.translation}, rotation={blended.real}")

    # Local-space edits keep the world-space translation
    edited = end.clone().rotate_x(math.pi / 4).translate(Vec3(0, 1, 0))
    print(f"Edited: {edited}")
    print(f"As matrix:\n{Mat4.from_quat2(edited)}")


def example_4_wrappers():
    """Example 4: Rotation and RigidTransform keep themselves normalized."""
    print("\n" + "=" * 70)
    print("EXAMPLE 4: Invariant-Carrying Wrappers")
    print("=" * 70)

    turn = Rotation.from_axis_angle(Vec3(0, 0, 3), math.pi / 2)
    print(f"Quarter turn: {turn}")
    print(f"Applied to x axis: {turn.apply(Vec3(1, 0, 0))}")

    arm = RigidTransform.from_translation_rotation(Vec3(1, 0, 0), turn)
    hand = RigidTransform.from_translation(Vec3(0.5, 0, 0))
    world = arm * hand
    print(f"Hand origin in world space: {world.apply(Vec3())}")
    print(f"Round trip: {world.inverse().apply(world.apply(Vec3(1, 2, 3)))}")

    # Non-unit input is normalized on construction (logged at debug level)
    print(f"Repaired: {Rotation(Quat(0, 0, 0, 2))}")


def main():
    """Run all examples."""
    print("\n" + "=" * 70)
    print("XFORMKIT CAMERA AND TRANSFORM EXAMPLES")
    print("=" * 70)

    example_1_view_projection()
    example_2_target_to()
    example_3_dual_quaternions()
    example_4_wrappers()

    print("\n" + "=" * 70)
    print("ALL EXAMPLES COMPLETED")
    print("=" * 70)


if __name__ == "__main__":
    main()
