"""
Aplicação principal do Sistema de Cafeteria
Demonstra os padrões GoF: Factory, Mediator, Command, Chain of Responsibility e State
"""
import sys

from cafeteria.demo import main


if __name__ == "__main__":
    sys.exit(main())
