"""Unified xformkit configuration.

This module provides the top-level configuration dataclass and the
singleton every other module reads its thresholds from.
"""

from __future__ import annotations

from dataclasses import dataclass

from xformkit.config.numeric import NumericConfig
from xformkit.config.tolerances import ToleranceSpec


@dataclass(frozen=True)
class XformConfig:
    """Top-level configuration.

    Provides hierarchical access to all specifications:
        CONFIG.numeric.epsilon
        CONFIG.numeric.parallel_threshold

    Attributes:
        numeric: Numeric tolerance specifications
    """

    numeric: NumericConfig = NumericConfig()

    def get_all_specs(self) -> dict[str, dict[str, ToleranceSpec]]:
        """Get all specs organized by section.

        :return: Nested dictionary of all specifications
        """
        return {"numeric": self.numeric.get_all_specs()}


# Main singleton instance
CONFIG = XformConfig()

NUMERIC_CONFIG = CONFIG.numeric
