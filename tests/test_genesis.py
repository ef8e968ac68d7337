"""Tests for genesis loading, init/export and the show_params CLI."""

import json
from dataclasses import replace
from decimal import Decimal

import pytest

import show_params
from src.genesis import (
    GenesisState,
    default_genesis,
    export_genesis,
    genesis_from_dict,
    genesis_from_json,
    genesis_to_json,
    init_genesis,
    load_genesis,
    validate_genesis,
)
from src.params import (
    EmptyValueError,
    InconsistentFeesError,
    default_params,
    param_key_table,
    params_to_dict,
)
from src.store import Subspace


def _new_subspace():
    return Subspace("evm").with_key_table(param_key_table())


class TestGenesisState:
    """Default genesis and validation."""

    def test_default_genesis_valid(self):
        state = default_genesis()
        assert state.params == default_params()
        validate_genesis(state)

    def test_invalid_genesis(self):
        state = GenesisState(params=replace(default_params(), base_denom=""))
        with pytest.raises(EmptyValueError):
            validate_genesis(state)

    def test_json_round_trip(self):
        state = GenesisState(
            params=replace(default_params(), chain_id=1329, base_denom="uatom")
        )
        assert genesis_from_json(genesis_to_json(state)) == state

    def test_missing_params_uses_defaults(self):
        assert genesis_from_dict({}) == default_genesis()

    def test_unknown_top_level_field(self):
        with pytest.raises(ValueError, match="unknown genesis fields"):
            genesis_from_dict({"params": params_to_dict(default_params()), "x": 1})


class TestGenesisFiles:
    """load_genesis reads and validates a file."""

    def test_load_valid(self, tmp_path):
        path = tmp_path / "genesis.json"
        path.write_text(genesis_to_json(default_genesis()))
        assert load_genesis(path) == default_genesis()

    def test_load_invalid(self, tmp_path):
        data = {"params": params_to_dict(default_params())}
        data["params"]["base_fee_per_gas"] = "5000000000"
        path = tmp_path / "genesis.json"
        path.write_text(json.dumps(data))
        with pytest.raises(InconsistentFeesError):
            load_genesis(path)

    def test_load_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_genesis(tmp_path / "nope.json")


class TestInitExport:
    """init_genesis writes the store, export_genesis reads it back."""

    def test_init_then_export(self):
        space = _new_subspace()
        state = GenesisState(
            params=replace(default_params(), minimum_fee_per_gas=Decimal("3"))
        )
        init_genesis(space, state)
        assert export_genesis(space) == state

    def test_init_rejects_invalid(self):
        space = _new_subspace()
        state = GenesisState(params=replace(default_params(), base_denom=""))
        with pytest.raises(EmptyValueError):
            init_genesis(space, state)
        assert not any(space.has(k) for k in space.keys())


class TestShowParamsCli:
    """show_params.main output and exit codes."""

    def test_defaults_yaml(self, capsys):
        assert show_params.main([]) == 0
        out = capsys.readouterr().out
        assert "base_denom: usei" in out
        assert "Params hash:" in out
        assert "Params are valid." in out

    def test_json_format(self, capsys):
        assert show_params.main(["--format", "json"]) == 0
        out = capsys.readouterr().out
        assert '"chain_id": 713715' in out

    def test_invalid_genesis_exit_code(self, tmp_path, capsys):
        data = {"params": params_to_dict(default_params())}
        data["params"]["chain_id"] = -1
        path = tmp_path / "genesis.json"
        path.write_text(json.dumps(data))
        assert show_params.main(["--genesis", str(path)]) == 1
        assert "NegativeValueError" in capsys.readouterr().err

    def test_missing_genesis_file(self, tmp_path, capsys):
        assert show_params.main(["--genesis", str(tmp_path / "x.json")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_write_default(self, tmp_path):
        path = tmp_path / "genesis.json"
        assert show_params.main(["--write-default", str(path)]) == 0
        assert load_genesis(path) == default_genesis()


class TestMalformedGenesis:
    """Documents that are not objects are rejected, never read as defaults."""

    @pytest.mark.parametrize("document", ["[]", "null", '"params"', "42"])
    def test_non_object_genesis(self, document):
        with pytest.raises(ValueError, match="genesis must be an object"):
            genesis_from_json(document)

    @pytest.mark.parametrize("params", [[], None, "params"])
    def test_non_object_params(self, params):
        with pytest.raises(ValueError, match="genesis params must be an object"):
            genesis_from_dict({"params": params})

    def test_cli_rejects_list_document(self, tmp_path):
        path = tmp_path / "genesis.json"
        path.write_text("[]")
        assert show_params.main(["--genesis", str(path)]) == 1
