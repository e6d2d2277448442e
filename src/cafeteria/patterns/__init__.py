"""
Padrões GoF implementados para o sistema de cafeteria
"""
from .product import Product, ProductBase, ProductTag, Coffee, Tea, Cookie
from .factory import ProductFactory, CoffeeFactory, TeaFactory, CookieFactory, MenuFactory
from .client import Client, ConcreteClient
from .mediator import Mediator, ConcreteMediator
from .state import (
    OrderState, PaidShippedState, TrackedOrderState,
    OrderStatus, InvalidTransitionError, can_transition
)
from .order import Order
from .command import Command, OrderCommand, CommandInvoker
from .chain import (
    DiscountHandler, EarlyBirdDiscount, VIPDiscount,
    DiscountChainError, build_discount_chain
)

__all__ = [
    # Produtos
    'Product',
    'ProductBase',
    'ProductTag',
    'Coffee',
    'Tea',
    'Cookie',

    # Factory Method Pattern
    'ProductFactory',
    'CoffeeFactory',
    'TeaFactory',
    'CookieFactory',
    'MenuFactory',

    # Clientes e Mediator Pattern
    'Client',
    'ConcreteClient',
    'Mediator',
    'ConcreteMediator',

    # Pedido e Command Pattern
    'Order',
    'Command',
    'OrderCommand',
    'CommandInvoker',

    # Chain of Responsibility
    'DiscountHandler',
    'EarlyBirdDiscount',
    'VIPDiscount',
    'DiscountChainError',
    'build_discount_chain',

    # State Pattern
    'OrderState',
    'PaidShippedState',
    'TrackedOrderState',
    'OrderStatus',
    'InvalidTransitionError',
    'can_transition'
]
