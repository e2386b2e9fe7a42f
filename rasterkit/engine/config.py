"""Engine constants — approximations used by the drawing code."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Numeric approximations used by the fractal generator."""

    # sin(60°), truncated: height of an equilateral triangle per unit of side
    sin60: float = 0.866


ENGINE_CONFIG = EngineConfig()
