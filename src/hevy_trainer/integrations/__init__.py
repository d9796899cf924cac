"""
External integrations for Hevy Trainer.

Provides the Hevy API client and the base class it builds on.
"""

from .base import IntegrationClient
from .hevy import HevyClient

__all__ = [
    "IntegrationClient",
    "HevyClient",
]
