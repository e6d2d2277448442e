"""
Padrão Mediator para desacoplar as notificações do cliente
"""
from abc import ABC, abstractmethod
from typing import Optional
from .client import Client


class Mediator(ABC):
    @abstractmethod
    def notify(self, client: Optional[Client], message: str):
        pass


class ConcreteMediator(Mediator):
    """Mediator que apenas emite a notificação; o cliente não é guardado nem validado"""

    def notify(self, client: Optional[Client], message: str):
        print(f"Notification to client: {message}")
