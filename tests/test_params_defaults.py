"""Tests for genesis default parameters."""

import re
from decimal import Decimal

from src.artifacts import keccak256_hex, native_bytecode
from src.chain import ChainConfig
from src.params import default_params, native_code_hash, validate_params
from src.params.defaults import (
    CW20_CODE_HASH_HEX,
    CW721_CODE_HASH_HEX,
    default_whitelisted_codehashes_bank_send,
    default_whitelisted_cw_code_hashes_for_delegate_call,
)


class TestDefaultValues:
    """default_params() has the locked network defaults."""

    def test_default_values(self):
        params = default_params()
        assert params.base_denom == "usei"
        assert params.priority_normalizer == Decimal(1)
        assert params.base_fee_per_gas == Decimal(0)
        assert params.minimum_fee_per_gas == Decimal(1_000_000_000)
        assert params.chain_id == 713715
        assert params.chain_config == ChainConfig()

    def test_defaults_validate(self):
        validate_params(default_params())

    def test_min_fee_not_below_base_fee(self):
        params = default_params()
        assert params.minimum_fee_per_gas >= params.base_fee_per_gas


class TestDefaultWhitelists:
    """Code-hash whitelist defaults."""

    def test_bank_send_is_native_code_hash(self):
        hashes = default_whitelisted_codehashes_bank_send()
        assert hashes == [keccak256_hex(native_bytecode())]

    def test_bank_send_hash_format(self):
        (code_hash,) = default_params().whitelisted_codehashes_bank_send
        assert re.match(r"^0x[0-9a-f]{64}$", code_hash)

    def test_native_code_hash_cached(self):
        assert native_code_hash() is native_code_hash()

    def test_delegate_call_template_hashes(self):
        cw20, cw721 = default_whitelisted_cw_code_hashes_for_delegate_call()
        assert cw20 == bytes.fromhex(CW20_CODE_HASH_HEX)
        assert cw721 == bytes.fromhex(CW721_CODE_HASH_HEX)
        assert len(cw20) == 32
        assert len(cw721) == 32
        assert cw20.hex().upper().startswith("A25D78D7")
        assert cw721.hex().upper().endswith("741FEBC8")


class TestDefaultIsolation:
    """Each call builds fresh objects; mutating one result leaks nowhere."""

    def test_fresh_instances(self):
        p1 = default_params()
        p2 = default_params()
        assert p1 == p2
        assert p1 is not p2
        assert p1.whitelisted_codehashes_bank_send is not p2.whitelisted_codehashes_bank_send

    def test_mutation_does_not_leak(self):
        p1 = default_params()
        p1.base_denom = "uatom"
        p1.whitelisted_codehashes_bank_send.append("0xdead")
        p1.whitelisted_cw_code_hashes_for_delegate_call.clear()

        p2 = default_params()
        assert p2.base_denom == "usei"
        assert len(p2.whitelisted_codehashes_bank_send) == 1
        assert len(p2.whitelisted_cw_code_hashes_for_delegate_call) == 2
