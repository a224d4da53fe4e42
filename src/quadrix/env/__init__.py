"""Gymnasium environments for Quadrix."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="Quadrix-v0",
    entry_point="quadrix.env.quadrix_env:QuadrixEnv",
)

__all__ = ["Quadrix-v0"]
