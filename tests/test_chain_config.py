"""Tests for the nested EVM chain configuration."""

import pytest

from src.chain import ChainConfig, ChainConfigError, default_chain_config


class TestChainConfigValidation:
    """Fork schedule rules."""

    def test_default_valid(self):
        cfg = default_chain_config()
        assert cfg.cancun_time == 0
        assert cfg.prague_time is None
        cfg.validate()

    def test_all_scheduled_in_order(self):
        ChainConfig(cancun_time=0, prague_time=100, verkle_time=100).validate()

    def test_all_unscheduled(self):
        ChainConfig(cancun_time=None).validate()

    def test_negative_time(self):
        with pytest.raises(ChainConfigError, match="negative"):
            ChainConfig(prague_time=-1).validate()

    def test_out_of_order(self):
        with pytest.raises(ChainConfigError, match="earlier"):
            ChainConfig(cancun_time=200, prague_time=100).validate()

    def test_gap_in_schedule(self):
        with pytest.raises(ChainConfigError, match="prague_time is not"):
            ChainConfig(cancun_time=0, verkle_time=10).validate()

    def test_non_integer_time(self):
        with pytest.raises(ChainConfigError, match="integer"):
            ChainConfig(cancun_time="0").validate()  # type: ignore[arg-type]

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            ChainConfig(cancun_time=-1).validate()
