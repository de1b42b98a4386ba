from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KatasConfig:
    log_level: str = "WARNING"
    strict_combinators: bool = False  # accept only ' ', '>', '+', '~'
