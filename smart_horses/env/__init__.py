"""Gymnasium environment wrapping the game for an external agent."""

from .gym_env import SmartHorsesEnv

__all__ = ["SmartHorsesEnv"]
