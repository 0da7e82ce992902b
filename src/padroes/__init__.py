"""
Padrões GoF - vitrine de padrões de projeto
Cada padrão é ilustrado por um cenário pequeno e independente
"""

__version__ = "1.0.0"
