from abc import ABC, abstractmethod


class Client(ABC):
    """Interface do cliente da cafeteria"""

    @abstractmethod
    def place_order(self):
        pass

    @abstractmethod
    def view_order_history(self):
        pass


class ConcreteClient(Client):
    """Cliente sem atributos: apenas identidade"""

    def place_order(self):
        print("Order placed")

    def view_order_history(self):
        # Nenhum histórico é guardado, apenas exibe o aviso
        print("Order history viewed")
