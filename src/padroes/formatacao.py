"""
Formatação de valores monetários no padrão brasileiro
"""
from decimal import Decimal
from typing import Union

from .config import SIMBOLO_MOEDA


def formatar_moeda(valor: Union[Decimal, int, float]) -> str:
    """Formata 1500.5 como 'R$ 1.500,50'"""
    texto = f"{Decimal(str(valor)):,.2f}"
    texto = texto.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{SIMBOLO_MOEDA} {texto}"
