from __future__ import annotations

import pytest

from katas.config import KatasConfig


class TestKatasConfig:
    def test_default_values(self) -> None:
        cfg = KatasConfig()
        assert cfg.log_level == "WARNING"
        assert cfg.strict_combinators is False

    def test_custom_values(self) -> None:
        cfg = KatasConfig(log_level="DEBUG", strict_combinators=True)
        assert cfg.log_level == "DEBUG"
        assert cfg.strict_combinators is True

    def test_frozen_immutability(self) -> None:
        cfg = KatasConfig()
        with pytest.raises(AttributeError):
            cfg.log_level = "INFO"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert KatasConfig() == KatasConfig()
        assert KatasConfig(strict_combinators=True) != KatasConfig()

    def test_hashable(self) -> None:
        assert KatasConfig() in {KatasConfig()}
