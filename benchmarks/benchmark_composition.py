"""Benchmark rigid-transform composition: DualQuat vs Mat4."""

import logging
import math
import time

import numpy as np

from xformkit import DualQuat, Mat4, Quat, Vec3

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)


def create_transforms(n: int, seed: int = 0):
    """Create matching lists of random rigid transforms."""
    rng = np.random.default_rng(seed)
    dual_quats = []
    matrices = []
    for _ in range(n):
        q = Quat().random(rng)
        t = Vec3(*(rng.standard_normal(3) * 10.0))
        dual_quats.append(DualQuat.from_translation_rotation(q, t))
        matrices.append(Mat4.from_translation_rotation(q, t))
    return dual_quats, matrices


def benchmark(func, warmup=3, iterations=20):
    """Benchmark a function, returning milliseconds per call."""
    for _ in range(warmup):
        func()

    start = time.perf_counter()
    for _ in range(iterations):
        func()
    elapsed = time.perf_counter() - start

    return (elapsed / iterations) * 1000


def chain(items, identity):
    """Compose a list of transforms left to right."""
    result = identity.clone()
    for item in items:
        result.multiply(item)
    return result


def run_benchmarks():
    """Run composition benchmarks."""
    logger.info("=" * 70)
    logger.info("RIGID TRANSFORM COMPOSITION BENCHMARKS")
    logger.info("=" * 70)

    n = 1_000
    dual_quats, matrices = create_transforms(n)
    logger.info(f"Chain length: {n:,} transforms")
    logger.info("")

    dq_ms = benchmark(lambda: chain(dual_quats, DualQuat()))
    logger.info(f"DualQuat: {dq_ms:.3f} ms ({n / dq_ms * 1000:,.0f} products/sec)")

    mat_ms = benchmark(lambda: chain(matrices, Mat4()))
    logger.info(f"Mat4:     {mat_ms:.3f} ms ({n / mat_ms * 1000:,.0f} products/sec)")

    ratio = mat_ms / dq_ms
    if ratio > 1:
        logger.info(f"\nDualQuat is {ratio:.2f}x faster than Mat4")
    else:
        logger.info(f"\nMat4 is {1 / ratio:.2f}x faster than DualQuat")

    # Accumulated float32 drift of the two representations
    logger.info("\n" + "-" * 70)
    logger.info("Drift after chaining")
    logger.info("-" * 70)

    dq = chain(dual_quats, DualQuat())
    m = chain(matrices, Mat4())
    logger.info(f"DualQuat |real| - 1:    {abs(dq.length - 1.0):.2e}")
    logger.info(f"DualQuat real . dual:   {abs(dq.real.dot(dq.dual)):.2e}")
    logger.info(f"Mat4 |det| - 1:         {abs(m.determinant - 1.0):.2e}")

    probe = Vec3(1, 2, 3)
    via_dq = probe.clone().transform_mat4(Mat4.from_quat2(dq.clone().normalize()))
    via_mat = probe.clone().transform_mat4(m)
    logger.info(f"Point disagreement:     {via_dq.distance(via_mat):.2e}")
    logger.info(f"Point magnitude:        {via_mat.length:.2e}")
    if not math.isfinite(via_dq.distance(via_mat)):
        logger.warning("Non-finite result, chain diverged")

    logger.info("\n" + "=" * 70)


if __name__ == "__main__":
    run_benchmarks()
