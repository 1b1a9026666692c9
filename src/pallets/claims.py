"""Claims — паллета доказательства существования (proof of existence).

Владеет mapping Content → AccountId. Первый заявивший становится владельцем,
отозвать claim может только владелец. После отзыва содержимое снова свободно.
"""

import logging
from typing import Optional, Union

from src.core.domain.calls import CreateClaim, RevokeClaim
from src.core.domain.errors import (
    ClaimAlreadyExistsError,
    ClaimNotFoundError,
    NotClaimOwnerError,
)
from src.core.domain.types import AccountId, Content, validate_account_id, validate_content

logger = logging.getLogger(__name__)


class ClaimsPallet:
    """Паллета Claims."""

    def __init__(self):
        self._claims: dict[Content, AccountId] = {}

    def get_claim(self, content: Content) -> Optional[AccountId]:
        """Текущий владелец содержимого или None."""
        return self._claims.get(content)

    def claims(self) -> dict[Content, AccountId]:
        """Копия claims, отсортированная по содержимому."""
        return dict(sorted(self._claims.items()))

    def create_claim(self, owner: AccountId, content: Content) -> None:
        """Заявить владение свободным содержимым.

        Raises:
            ClaimAlreadyExistsError: содержимое уже кому-то принадлежит,
                включая самого owner
            ValueError: owner или content пустой
        """
        validate_account_id(owner, "owner")
        validate_content(content)

        current_owner = self._claims.get(content)
        if current_owner is not None:
            raise ClaimAlreadyExistsError(content, current_owner)

        self._claims[content] = owner
        logger.debug("claim %r created by %s", content, owner)

    def revoke_claim(self, caller: AccountId, content: Content) -> None:
        """Отозвать claim. Разрешено только текущему владельцу.

        Raises:
            ClaimNotFoundError: содержимое никому не принадлежит
            NotClaimOwnerError: владелец не caller
            ValueError: caller или content пустой
        """
        validate_account_id(caller, "caller")
        validate_content(content)

        current_owner = self._claims.get(content)
        if current_owner is None:
            raise ClaimNotFoundError(content)

        if current_owner != caller:
            raise NotClaimOwnerError(content, caller, current_owner)

        del self._claims[content]
        logger.debug("claim %r revoked by %s", content, caller)

    def dispatch(self, caller: AccountId, call: Union[CreateClaim, RevokeClaim]) -> None:
        if isinstance(call, CreateClaim):
            self.create_claim(caller, call.claim)
        elif isinstance(call, RevokeClaim):
            self.revoke_claim(caller, call.claim)
        else:
            raise TypeError(f"Unknown claims call: {type(call).__name__}")
