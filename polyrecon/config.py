"""Configuration helpers for polygon reconstruction."""

from __future__ import annotations

import copy
from dataclasses import dataclass

EPSILON = 1e-6


@dataclass
class ReconstructionConfig:
    """Tolerances used while placing and closing a polygon."""

    # absolute tolerance on coordinate-scale distances
    epsilon: float = EPSILON
    # seam angles above this count as reflex
    convex_limit: float = 180.0


_RECONSTRUCTION_CONFIG = ReconstructionConfig()


def get_reconstruction_config() -> ReconstructionConfig:
    return copy.deepcopy(_RECONSTRUCTION_CONFIG)


def set_reconstruction_config(config: ReconstructionConfig) -> None:
    global _RECONSTRUCTION_CONFIG
    _RECONSTRUCTION_CONFIG = copy.deepcopy(config)


__all__ = [
    "EPSILON",
    "ReconstructionConfig",
    "get_reconstruction_config",
    "set_reconstruction_config",
]
