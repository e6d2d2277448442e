"""
Demonstração sequencial dos padrões da cafeteria
"""
import logging
import sys
from typing import Optional

from pydantic import ValidationError

from .config import Settings, get_settings
from .patterns.factory import CoffeeFactory
from .patterns.client import ConcreteClient
from .patterns.order import Order
from .patterns.command import OrderCommand
from .patterns.chain import EarlyBirdDiscount, VIPDiscount
from .patterns.state import PaidShippedState

logger = logging.getLogger(__name__)


def run_demo(settings: Optional[Settings] = None):
    """Cria uma instância de cada componente e invoca cada operação uma vez"""
    settings = settings or get_settings()
    logger.debug("Demonstração de %s (repasse na cadeia: %s)",
                 settings.shop_name, settings.discount_chain_forwarding)

    # 1. Produtos
    coffee_factory = CoffeeFactory()
    coffee = coffee_factory.create_product()
    coffee.display()

    # 2. Clientes
    client = ConcreteClient()
    client.place_order()
    client.view_order_history()

    # 3. Pedido
    order = Order(client)
    order.add_product(coffee)
    order_command = OrderCommand(order)
    order_command.execute()

    # 4. Descontos
    forward = settings.discount_chain_forwarding
    early_bird_discount = EarlyBirdDiscount(forward_to_next=forward)
    vip_discount = VIPDiscount(forward_to_next=forward)
    early_bird_discount.set_next_handler(vip_discount)

    discounted_order = Order(client)
    early_bird_discount.apply_discount(discounted_order)

    # 5. Pago e enviado
    order_state = PaidShippedState()
    order_state.mark_paid(discounted_order)
    order_state.mark_shipped(discounted_order)


def main() -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Configuração inválida: {e}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    run_demo(settings)
    return 0
