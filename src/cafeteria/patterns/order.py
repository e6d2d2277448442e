"""
Agregado Order: cliente (referência não proprietária) e lista de produtos
"""
import logging
from typing import List, Optional, Tuple

from .client import Client
from .product import Product
from .state import OrderStatus

logger = logging.getLogger(__name__)


class Order:
    """Pedido com lista de produtos apenas para inclusão (append-only)"""

    def __init__(self, client: Optional[Client] = None):
        self.client = client
        self._products: List[Product] = []
        self.status = OrderStatus.CREATED

    def add_product(self, product: Product):
        """Adiciona produto ao pedido, sem limite nem verificação de duplicados"""
        self._products.append(product)
        logger.debug("Produto %s adicionado; total=%d", product.get_name(), len(self._products))

    @property
    def products(self) -> Tuple[Product, ...]:
        return tuple(self._products)

    def product_count(self) -> int:
        return len(self._products)

    def execute(self):
        """Confirma o pedido; não processa os produtos nem o cliente"""
        print("Order executed")
