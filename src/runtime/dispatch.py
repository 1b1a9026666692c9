"""Dispatch — единый контракт паллет.

Паллета получает caller и вызов из собственного перечисления, изменяет
только своё состояние и либо завершается успешно, либо поднимает
DispatchError с именованной причиной.
"""

from typing import Protocol, TypeVar, runtime_checkable

from src.core.domain.types import AccountId

CallT = TypeVar("CallT", contravariant=True)


@runtime_checkable
class Dispatchable(Protocol[CallT]):
    """Компонент, выполняющий вызовы своего типа."""

    def dispatch(self, caller: AccountId, call: CallT) -> None:
        """Выполнить call от имени caller.

        Raises:
            DispatchError: именованная ошибка выполнения, состояние не изменено
        """
        ...
