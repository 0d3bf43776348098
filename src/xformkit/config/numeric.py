"""Numeric configuration.

Thresholds shared by the scalar helpers, the rotation algorithms and the
invariant-carrying wrappers.
"""

from __future__ import annotations

from dataclasses import dataclass

from xformkit.config.tolerances import ToleranceSpec


@dataclass(frozen=True)
class NumericConfig:
    """Configuration for numeric thresholds.

    Modules read epsilon once at import; replacing the singleton afterwards
    has no effect on them.
    """

    epsilon: ToleranceSpec = ToleranceSpec(
        name="epsilon",
        value=1e-6,
        description="Relative tolerance for approximate equality and degenerate-input checks",
    )

    parallel_threshold: ToleranceSpec = ToleranceSpec(
        name="parallel_threshold",
        value=0.999999,
        description="Dot product beyond which two unit vectors count as (anti)parallel",
    )

    invariant_tolerance: ToleranceSpec = ToleranceSpec(
        name="invariant_tolerance",
        value=1e-4,
        description="Allowed drift of unit norm and orthogonality in Rotation/RigidTransform",
    )

    def get_spec(self, name: str) -> ToleranceSpec:
        """Get tolerance spec by name.

        :param name: Tolerance name
        :return: ToleranceSpec for the threshold
        :raises ValueError: If the threshold is not defined
        """
        spec = getattr(self, name, None)
        if not isinstance(spec, ToleranceSpec):
            raise ValueError(f"Unknown numeric tolerance: {name}")
        return spec

    def get_all_specs(self) -> dict[str, ToleranceSpec]:
        """Get all tolerance specs as a dictionary.

        :return: Dictionary mapping tolerance names to specs
        """
        return {
            "epsilon": self.epsilon,
            "parallel_threshold": self.parallel_threshold,
            "invariant_tolerance": self.invariant_tolerance,
        }
