"""
Chain of Responsibility para aplicação de descontos
"""
import logging
from typing import Optional

from .order import Order

logger = logging.getLogger(__name__)


class DiscountChainError(ValueError):
    """Ligação que tornaria a cadeia cíclica"""
    pass


class DiscountHandler:
    """Handler base: repassa ao próximo, se houver"""

    def __init__(self, forward_to_next: bool = False):
        self._next_handler: Optional["DiscountHandler"] = None
        # False: handlers concretos aplicam o próprio desconto e param
        self.forward_to_next = forward_to_next

    @property
    def next_handler(self) -> Optional["DiscountHandler"]:
        return self._next_handler

    def set_next_handler(self, handler: Optional["DiscountHandler"]) -> Optional["DiscountHandler"]:
        """Define o sucessor e o retorna, permitindo encadear ligações"""
        node = handler
        while node is not None:
            if node is self:
                raise DiscountChainError(
                    f"{type(handler).__name__} já leva de volta a {type(self).__name__}"
                )
            node = node.next_handler
        self._next_handler = handler
        logger.debug("%s -> %s", type(self).__name__, type(handler).__name__)
        return handler

    def apply_discount(self, order: Order):
        if self._next_handler:
            self._next_handler.apply_discount(order)


class EarlyBirdDiscount(DiscountHandler):
    def apply_discount(self, order: Order):
        print("Early Bird Discount Applied")
        if self.forward_to_next:
            super().apply_discount(order)


class VIPDiscount(DiscountHandler):
    def apply_discount(self, order: Order):
        print("VIP Discount Applied")
        if self.forward_to_next:
            super().apply_discount(order)


def build_discount_chain(*handlers: DiscountHandler) -> Optional[DiscountHandler]:
    """Liga os handlers na ordem dada e retorna o primeiro"""
    if not handlers:
        return None
    for current, following in zip(handlers, handlers[1:]):
        current.set_next_handler(following)
    return handlers[0]
