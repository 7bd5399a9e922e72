"""
Client Configuration Module

Provides endpoint and request configuration for the owo requesters.
"""

from .settings import OwoConfig

__all__ = [
    "OwoConfig",
]
