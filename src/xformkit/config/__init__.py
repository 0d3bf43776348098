"""Configuration module for xformkit.

Usage:
    from xformkit.config import CONFIG
    CONFIG.numeric.epsilon.value  # 1e-6
    CONFIG.numeric.parallel_threshold.value  # 0.999999
"""

from xformkit.config.config import CONFIG, NUMERIC_CONFIG, XformConfig
from xformkit.config.numeric import NumericConfig
from xformkit.config.tolerances import ToleranceSpec

__all__ = [
    "CONFIG",
    "NUMERIC_CONFIG",
    "NumericConfig",
    "ToleranceSpec",
    "XformConfig",
]
