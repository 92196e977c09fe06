"""Configuration modules for llstage."""

from .build_context import BuildContext
from .env import env_fields

__all__ = [
    "BuildContext",
    "env_fields",
]
