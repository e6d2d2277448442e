import enum
from abc import ABC, abstractmethod


class ProductTag(enum.Enum):
    COFFEE = "coffee"
    TEA = "tea"
    COOKIE = "cookie"


class Product(ABC):
    """Interface dos produtos vendidos na cafeteria"""

    __slots__ = ()

    @abstractmethod
    def display(self) -> None:
        pass

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def get_tag(self) -> ProductTag:
        pass


class ProductBase(Product):
    """Classe base para produtos concretos (imutáveis após a criação)"""

    __slots__ = ("_name", "_tag")

    def __init__(self, name: str, tag: ProductTag):
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_tag", tag)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} é imutável")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} é imutável")

    def display(self) -> None:
        print(self._name)

    def get_name(self) -> str:
        return self._name

    def get_tag(self) -> ProductTag:
        return self._tag

    def __repr__(self):
        return f"{type(self).__name__}()"


# Produtos concretos
class Coffee(ProductBase):
    __slots__ = ()

    def __init__(self):
        super().__init__("Coffee", ProductTag.COFFEE)


class Tea(ProductBase):
    __slots__ = ()

    def __init__(self):
        super().__init__("Tea", ProductTag.TEA)


class Cookie(ProductBase):
    __slots__ = ()

    def __init__(self):
        super().__init__("Cookie", ProductTag.COOKIE)
