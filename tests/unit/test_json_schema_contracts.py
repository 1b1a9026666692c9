"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- parse_block / parse_genesis → Pydantic модели → Runtime
"""

import copy

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    BlockValidator,
    GenesisValidator,
    SchemaLoader,
    parse_block,
    parse_genesis,
    validate_block,
    validate_genesis,
)
from src.core.domain import BALANCE_MAX, transfer
from src.runtime import Runtime


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_block():
    """Валидный block для тестирования."""
    return {
        "header": {"block_number": 0},
        "extrinsics": [
            {
                "caller": "alice",
                "call": {
                    "pallet": "balances",
                    "call": {"call": "transfer", "to": "bob", "amount": 30},
                },
            },
            {
                "caller": "alice",
                "call": {
                    "pallet": "balances",
                    "call": {"call": "transfer", "to": "charlie", "amount": 20},
                },
            },
            {
                "caller": "bob",
                "call": {
                    "pallet": "claims",
                    "call": {"call": "create_claim", "claim": "claim_02"},
                },
            },
        ],
    }


@pytest.fixture
def valid_genesis():
    """Валидный genesis для тестирования."""
    return {
        "block_number": 0,
        "balances": {"alice": 100},
        "nonces": {},
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_schemas_load(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("block")["title"] == "block"
        assert loader.load_schema("genesis")["title"] == "genesis"

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("block") is loader.load_schema("block")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")


# =============================================================================
# BLOCK CONTRACT
# =============================================================================


class TestBlockContract:
    """Тесты block контракта"""

    def test_valid_block(self, valid_block) -> None:
        validate_block(valid_block)
        assert BlockValidator().is_valid(valid_block)

    def test_empty_extrinsics_valid(self) -> None:
        validate_block({"header": {"block_number": 5}, "extrinsics": []})

    def test_missing_header(self, valid_block) -> None:
        del valid_block["header"]
        with pytest.raises(ValidationError):
            validate_block(valid_block)

    def test_negative_block_number(self, valid_block) -> None:
        valid_block["header"]["block_number"] = -1
        with pytest.raises(ValidationError):
            validate_block(valid_block)

    def test_unknown_pallet(self, valid_block) -> None:
        valid_block["extrinsics"][0]["call"]["pallet"] = "staking"
        assert not BlockValidator().is_valid(valid_block)

    def test_unknown_claims_call(self, valid_block) -> None:
        valid_block["extrinsics"][2]["call"]["call"]["call"] = "transfer_claim"
        with pytest.raises(ValidationError):
            validate_block(valid_block)

    def test_amount_bounds(self, valid_block) -> None:
        amount_path = valid_block["extrinsics"][0]["call"]["call"]

        amount_path["amount"] = BALANCE_MAX
        validate_block(valid_block)

        amount_path["amount"] = BALANCE_MAX + 1
        with pytest.raises(ValidationError):
            validate_block(valid_block)

    def test_amount_as_string_rejected(self, valid_block) -> None:
        valid_block["extrinsics"][0]["call"]["call"]["amount"] = "30"
        with pytest.raises(ValidationError):
            validate_block(valid_block)

    def test_extra_field_rejected(self, valid_block) -> None:
        valid_block["extrinsics"][0]["signature"] = "0xdead"
        with pytest.raises(ValidationError):
            validate_block(valid_block)

    def test_iter_errors_reports_all(self, valid_block) -> None:
        valid_block["header"]["block_number"] = -1
        valid_block["extrinsics"][0]["caller"] = ""
        errors = list(BlockValidator().iter_errors(valid_block))
        assert len(errors) >= 2

    def test_parse_block(self, valid_block) -> None:
        block = parse_block(valid_block)

        assert block.header.block_number == 0
        assert [x.caller for x in block.extrinsics] == ["alice", "alice", "bob"]
        assert block.extrinsics[0].call == transfer("bob", 30)

    def test_parse_block_rejects_invalid(self, valid_block) -> None:
        broken = copy.deepcopy(valid_block)
        del broken["extrinsics"][0]["caller"]
        with pytest.raises(ValidationError):
            parse_block(broken)


# =============================================================================
# GENESIS CONTRACT
# =============================================================================


class TestGenesisContract:
    """Тесты genesis контракта"""

    def test_valid_genesis(self, valid_genesis) -> None:
        validate_genesis(valid_genesis)
        assert GenesisValidator().is_valid({})

    def test_negative_balance(self, valid_genesis) -> None:
        valid_genesis["balances"]["bob"] = -5
        with pytest.raises(ValidationError):
            validate_genesis(valid_genesis)

    def test_empty_account_name(self, valid_genesis) -> None:
        valid_genesis["nonces"][""] = 1
        with pytest.raises(ValidationError):
            validate_genesis(valid_genesis)

    def test_parse_genesis(self, valid_genesis) -> None:
        genesis = parse_genesis(valid_genesis)
        assert genesis.balances == {"alice": 100}


# =============================================================================
# INTEGRATION
# =============================================================================


class TestContractsWithRuntime:
    """Контракты → Pydantic модели → Runtime"""

    def test_parsed_block_executes(self, valid_block, valid_genesis) -> None:
        runtime = Runtime.from_genesis(parse_genesis(valid_genesis))
        result = runtime.execute_block(parse_block(valid_block))

        assert result.failed == ()
        assert runtime.balance_of("alice") == 50
        assert runtime.balance_of("bob") == 30
        assert runtime.balance_of("charlie") == 20
        assert runtime.get_claim("claim_02") == "bob"
        assert runtime.block_number() == 1
