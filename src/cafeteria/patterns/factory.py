from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Union
from .product import Product, ProductTag, Coffee, Tea, Cookie


class ProductFactory(ABC):
    """Factory Method interface para criação de produtos"""

    @abstractmethod
    def create_product(self) -> Product:
        pass


class CoffeeFactory(ProductFactory):
    """Factory concreta para cafés"""

    def create_product(self) -> Product:
        return Coffee()


class TeaFactory(ProductFactory):
    """Factory concreta para chás"""

    def create_product(self) -> Product:
        return Tea()


class CookieFactory(ProductFactory):
    """Factory concreta para biscoitos"""

    def create_product(self) -> Product:
        return Cookie()


class MenuFactory:
    """Factory para gerenciar criação dos produtos do menu"""

    def __init__(self):
        self._factories: Dict[str, ProductFactory] = {
            ProductTag.COFFEE.value: CoffeeFactory(),
            ProductTag.TEA.value: TeaFactory(),
            ProductTag.COOKIE.value: CookieFactory()
        }

    @staticmethod
    def _key(tag: Union[ProductTag, str]) -> str:
        if isinstance(tag, ProductTag):
            return tag.value
        return tag.strip().lower()

    def register_factory(self, tag: Union[ProductTag, str], factory: ProductFactory):
        """Registra (ou substitui) uma factory"""
        self._factories[self._key(tag)] = factory

    def create_product(self, tag: Union[ProductTag, str]) -> Optional[Product]:
        """Cria produto usando a factory apropriada; None para tipo desconhecido"""
        factory = self._factories.get(self._key(tag))
        if factory:
            return factory.create_product()
        return None

    def get_available_tags(self) -> List[str]:
        """Retorna tipos de produtos disponíveis"""
        return list(self._factories.keys())
