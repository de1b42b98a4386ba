"""Katas: small exercises for basic Python language constructs."""
from __future__ import annotations

from katas.config import KatasConfig

__version__ = "0.1.0"

__all__ = [
    "KatasConfig",
    "__version__",
]
