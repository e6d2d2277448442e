"""
Sistema de Cafeteria - Padrões GoF
"""

__version__ = "1.0.0"
