"""
Тесты для паллеты Claims

Проверяет:
1. create_claim на свободном содержимом
2. ClaimAlreadyExists для любого owner, владелец не меняется
3. revoke_claim: ClaimNotFound / NotClaimOwner без изменения mapping
4. Повторный claim после отзыва
5. dispatch CreateClaim / RevokeClaim
"""

import pytest

from src.core.domain.calls import CreateClaim, RevokeClaim
from src.core.domain.errors import (
    ClaimAlreadyExistsError,
    ClaimNotFoundError,
    ErrorKind,
    NotClaimOwnerError,
)
from src.pallets.claims import ClaimsPallet


@pytest.fixture
def claims() -> ClaimsPallet:
    """Claims с claim_01 → alice."""
    pallet = ClaimsPallet()
    pallet.create_claim("alice", "claim_01")
    return pallet


class TestCreateClaim:
    """Тесты для create_claim"""

    def test_unclaimed_content(self) -> None:
        pallet = ClaimsPallet()
        assert pallet.get_claim("none_claim") is None

    def test_create_sets_owner(self, claims: ClaimsPallet) -> None:
        assert claims.get_claim("claim_01") == "alice"

    def test_duplicate_by_other_account(self, claims: ClaimsPallet) -> None:
        """Повторный claim другим аккаунтом → ClaimAlreadyExists"""
        with pytest.raises(ClaimAlreadyExistsError) as exc_info:
            claims.create_claim("bob", "claim_01")

        assert exc_info.value.kind == ErrorKind.CLAIM_ALREADY_EXISTS
        assert exc_info.value.owner == "alice"
        assert claims.get_claim("claim_01") == "alice"

    def test_duplicate_by_owner(self, claims: ClaimsPallet) -> None:
        """Повторный claim самим владельцем тоже запрещён"""
        with pytest.raises(ClaimAlreadyExistsError):
            claims.create_claim("alice", "claim_01")
        assert claims.get_claim("claim_01") == "alice"

    def test_empty_content_rejected(self) -> None:
        with pytest.raises(ValueError):
            ClaimsPallet().create_claim("alice", "")

    def test_empty_owner_rejected(self, claims: ClaimsPallet) -> None:
        with pytest.raises(ValueError):
            claims.create_claim("", "claim_02")
        assert claims.claims() == {"claim_01": "alice"}


class TestRevokeClaim:
    """Тесты для revoke_claim"""

    def test_owner_revokes(self, claims: ClaimsPallet) -> None:
        claims.revoke_claim("alice", "claim_01")
        assert claims.get_claim("claim_01") is None
        assert claims.claims() == {}

    def test_revoke_missing_claim(self, claims: ClaimsPallet) -> None:
        """Отзыв несуществующего claim → ClaimNotFound"""
        with pytest.raises(ClaimNotFoundError) as exc_info:
            claims.revoke_claim("charlie", "none_claim")

        assert exc_info.value.kind == ErrorKind.CLAIM_NOT_FOUND
        assert claims.claims() == {"claim_01": "alice"}

    def test_revoke_by_non_owner(self, claims: ClaimsPallet) -> None:
        """Отзыв чужого claim → NotClaimOwner"""
        with pytest.raises(NotClaimOwnerError) as exc_info:
            claims.revoke_claim("bob", "claim_01")

        assert exc_info.value.kind == ErrorKind.NOT_CLAIM_OWNER
        assert claims.claims() == {"claim_01": "alice"}

    def test_reclaim_after_revoke(self, claims: ClaimsPallet) -> None:
        """После отзыва содержимое свободно для любого аккаунта"""
        claims.revoke_claim("alice", "claim_01")
        claims.create_claim("bob", "claim_01")
        assert claims.get_claim("claim_01") == "bob"

    @pytest.mark.parametrize("caller, content", [("", "claim_01"), ("alice", "")])
    def test_empty_caller_or_content_rejected(
        self, claims: ClaimsPallet, caller: str, content: str
    ) -> None:
        with pytest.raises(ValueError):
            claims.revoke_claim(caller, content)
        assert claims.claims() == {"claim_01": "alice"}


class TestClaimsDispatch:
    """Тесты dispatch"""

    def test_dispatch_create_and_revoke(self) -> None:
        pallet = ClaimsPallet()

        pallet.dispatch("bob", CreateClaim(claim="claim_02"))
        assert pallet.get_claim("claim_02") == "bob"

        pallet.dispatch("bob", RevokeClaim(claim="claim_02"))
        assert pallet.get_claim("claim_02") is None

    def test_dispatch_propagates_error(self) -> None:
        with pytest.raises(ClaimNotFoundError):
            ClaimsPallet().dispatch("bob", RevokeClaim(claim="claim_03"))
