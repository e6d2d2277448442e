"""
Padrão Command para encapsular a execução de pedidos
"""
import logging
from abc import ABC, abstractmethod
from typing import List

from .order import Order

logger = logging.getLogger(__name__)


class Command(ABC):
    """Interface Command"""

    @abstractmethod
    def execute(self):
        pass


class OrderCommand(Command):
    """Command concreto que repassa a execução ao pedido (receiver)"""

    def __init__(self, order: Order):
        self._order = order

    def execute(self):
        self._order.execute()


class CommandInvoker:
    """Invoker - Gerencia execução dos comandos"""

    def __init__(self):
        self._history: List[Command] = []

    def execute_command(self, command: Command):
        """Executa um comando e o adiciona ao histórico"""
        command.execute()
        self._history.append(command)
        logger.debug("Comando executado. Histórico: %d comandos", len(self._history))

    def get_history(self) -> List[str]:
        """Obtém histórico de comandos como strings"""
        return [type(cmd).__name__ for cmd in self._history]
