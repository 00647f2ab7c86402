"""Feature extraction helpers for Mancala."""

from .observation import OBSERVATION_SIZE, build_observation, legal_action_mask

__all__ = ["OBSERVATION_SIZE", "build_observation", "legal_action_mask"]
