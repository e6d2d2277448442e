import enum
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .order import Order

logger = logging.getLogger(__name__)


class OrderStatus(enum.Enum):
    CREATED = "created"
    PAID = "paid"
    SHIPPED = "shipped"


class InvalidTransitionError(ValueError):
    """Transição de status não permitida"""

    def __init__(self, current: OrderStatus, new: OrderStatus):
        super().__init__(f"Não é possível passar de '{current.value}' para '{new.value}'")
        self.current = current
        self.new = new


_ALLOWED_TRANSITIONS = {
    OrderStatus.CREATED: [OrderStatus.PAID],
    OrderStatus.PAID: [OrderStatus.SHIPPED],
    OrderStatus.SHIPPED: []
}


def can_transition(current: OrderStatus, new: OrderStatus) -> bool:
    """Verifica se pode transicionar para o novo status"""
    return new in _ALLOWED_TRANSITIONS.get(current, [])


class OrderState(ABC):
    @abstractmethod
    def mark_paid(self, order: "Order"):
        pass

    @abstractmethod
    def mark_shipped(self, order: "Order"):
        pass


class PaidShippedState(OrderState):
    """Apenas anuncia pagamento e envio; não lê nem altera o pedido"""

    def mark_paid(self, order: "Order"):
        print("Order marked as paid")

    def mark_shipped(self, order: "Order"):
        print("Order marked as shipped")


class TrackedOrderState(OrderState):
    """
    Variante com ciclo de vida real: created -> paid -> shipped.
    Grava o status no pedido e rejeita transições fora de ordem.
    """

    def _transition(self, order: "Order", new: OrderStatus):
        if not can_transition(order.status, new):
            raise InvalidTransitionError(order.status, new)
        logger.debug("Pedido: %s -> %s", order.status.value, new.value)
        order.status = new

    def mark_paid(self, order: "Order"):
        self._transition(order, OrderStatus.PAID)
        print("Order marked as paid")

    def mark_shipped(self, order: "Order"):
        self._transition(order, OrderStatus.SHIPPED)
        print("Order marked as shipped")
