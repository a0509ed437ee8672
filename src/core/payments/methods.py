"""
Payment methods — способы оплаты покупателя

Strategy-based оплата (cash/card/crypto). Все способы списывают сумму с
баланса плательщика одинаково и отличаются только отображаемым именем.
Классы-наследники — точка расширения для будущих различий (комиссии,
внешние расчёты).

NOTE: Реальные платёжные шлюзы не вызываются.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Protocol, Union

from src.core.errors import UnknownPaymentMethodError
from src.core.math.money import MoneyLike, to_money


# =============================================================================
# ENUMS / PROTOCOLS
# =============================================================================


class PaymentMethodType(str, Enum):
    """Тип способа оплаты"""

    CASH = "cash"
    CARD = "card"
    CRYPTO = "crypto"


class SupportsBalance(Protocol):
    """Плательщик: любой объект с изменяемым атрибутом balance."""

    balance: Decimal


# =============================================================================
# STRATEGIES
# =============================================================================


@dataclass(frozen=True)
class PaymentMethod:
    """Базовый способ оплаты: списание с баланса при достаточных средствах."""

    kind: ClassVar[PaymentMethodType]
    display_name: ClassVar[str]

    def name(self) -> str:
        """Отображаемое имя (для чека)."""
        return self.display_name

    def pay(self, amount: MoneyLike, account: SupportsBalance) -> bool:
        """
        Попытка списать amount с баланса account.

        Успех только если account.balance >= amount; баланс меняется
        только при успехе.

        Args:
            amount: Сумма к списанию
            account: Плательщик

        Returns:
            True если сумма списана
        """
        amount = to_money(amount)
        if account.balance >= amount:
            account.balance = account.balance - amount
            return True
        return False

    def refund(self, amount: MoneyLike, account: SupportsBalance) -> None:
        """Возврат ранее списанной суммы (компенсирующий откат)."""
        account.balance = account.balance + to_money(amount)


@dataclass(frozen=True)
class CashPayment(PaymentMethod):
    """Оплата наличными."""

    kind: ClassVar[PaymentMethodType] = PaymentMethodType.CASH
    display_name: ClassVar[str] = "Cash"


@dataclass(frozen=True)
class CardPayment(PaymentMethod):
    """Оплата банковской картой."""

    kind: ClassVar[PaymentMethodType] = PaymentMethodType.CARD
    display_name: ClassVar[str] = "Card"


@dataclass(frozen=True)
class CryptoPayment(PaymentMethod):
    """Оплата криптовалютой."""

    kind: ClassVar[PaymentMethodType] = PaymentMethodType.CRYPTO
    display_name: ClassVar[str] = "Crypto"


# =============================================================================
# REGISTRY
# =============================================================================


_PAYMENT_METHODS: dict[PaymentMethodType, type[PaymentMethod]] = {
    PaymentMethodType.CASH: CashPayment,
    PaymentMethodType.CARD: CardPayment,
    PaymentMethodType.CRYPTO: CryptoPayment,
}


def payment_method_for(kind: Union[PaymentMethodType, str]) -> PaymentMethod:
    """
    Создание способа оплаты по типу.

    Args:
        kind: PaymentMethodType или его строковое значение ("Cash", " card ")

    Returns:
        Экземпляр способа оплаты

    Raises:
        UnknownPaymentMethodError: Если тип не поддерживается
    """
    if not isinstance(kind, PaymentMethodType):
        try:
            kind = PaymentMethodType(str(kind).strip().lower())
        except ValueError:
            raise UnknownPaymentMethodError(
                str(kind), [t.value for t in PaymentMethodType]
            ) from None
    return _PAYMENT_METHODS[kind]()
