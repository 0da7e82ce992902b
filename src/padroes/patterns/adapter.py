"""
Padrão Adapter para integração de APIs de pagamento
Três SDKs com interfaces incompatíveis passam a responder pela mesma interface
"""
from abc import ABC, abstractmethod
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Optional

from ..formatacao import formatar_moeda


class ResultadoPagamento:
    """Resposta padronizada, independente do provedor"""

    def __init__(self, provedor: str, aprovado: bool, valor: Decimal,
                 transacao_id: Optional[str] = None, mensagem: str = ""):
        self.provedor = provedor
        self.aprovado = aprovado
        self.valor = valor
        self.transacao_id = transacao_id
        self.mensagem = mensagem

    def to_dict(self) -> dict:
        return {
            "provedor": self.provedor,
            "aprovado": self.aprovado,
            "valor": str(self.valor),
            "transacao_id": self.transacao_id,
            "mensagem": self.mensagem,
        }


class ProcessadorPagamento(ABC):
    """Target - interface esperada pelo código cliente"""

    @abstractmethod
    def processar_pagamento(self, valor: Decimal, descricao: str) -> ResultadoPagamento:
        pass


# SDKs externos simulados (Adaptees)

class ApiPayPal:
    def __init__(self):
        self._sequencia = 0

    def make_payment(self, total: float, currency: str, memo: str) -> dict:
        if total <= 0:
            return {"state": "failed", "reason": "INVALID_AMOUNT"}
        self._sequencia += 1
        return {"state": "approved", "id": f"PAY-{self._sequencia:06d}", "currency": currency, "memo": memo}


class ApiStripe:
    class Charge:
        def __init__(self, charge_id: Optional[str], paid: bool, failure_message: Optional[str] = None):
            self.id = charge_id
            self.paid = paid
            self.failure_message = failure_message

    def __init__(self):
        self._sequencia = 0

    def create_charge(self, amount_cents: int, currency: str, description: str) -> "ApiStripe.Charge":
        if amount_cents <= 0:
            return ApiStripe.Charge(None, False, "Amount must be positive")
        self._sequencia += 1
        return ApiStripe.Charge(f"ch_{self._sequencia:06d}", True)


class ApiMercadoPago:
    def __init__(self):
        self._sequencia = 0

    def criar_cobranca(self, valor_centavos: int, descricao: str) -> tuple:
        """Retorna (status, id) no formato do SDK"""
        if valor_centavos <= 0:
            return ("rejected", None)
        self._sequencia += 1
        return ("approved", f"MP-{self._sequencia}")


def _para_centavos(valor: Decimal) -> int:
    return int((Decimal(valor) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


# Adapters

class AdaptadorPayPal(ProcessadorPagamento):
    def __init__(self, api: Optional[ApiPayPal] = None):
        self._api = api or ApiPayPal()

    def processar_pagamento(self, valor: Decimal, descricao: str) -> ResultadoPagamento:
        print(f"[PayPal] make_payment({float(valor)}, 'BRL', '{descricao}')")
        resposta = self._api.make_payment(float(valor), "BRL", descricao)
        if resposta["state"] == "approved":
            return ResultadoPagamento("paypal", True, valor, resposta["id"],
                                      f"Pagamento de {formatar_moeda(valor)} aprovado pelo PayPal")
        return ResultadoPagamento("paypal", False, valor, mensagem=f"PayPal recusou: {resposta['reason']}")


class AdaptadorStripe(ProcessadorPagamento):
    def __init__(self, api: Optional[ApiStripe] = None):
        self._api = api or ApiStripe()

    def processar_pagamento(self, valor: Decimal, descricao: str) -> ResultadoPagamento:
        centavos = _para_centavos(valor)
        print(f"[Stripe] create_charge({centavos}, 'brl', '{descricao}')")
        cobranca = self._api.create_charge(centavos, "brl", descricao)
        if cobranca.paid:
            return ResultadoPagamento("stripe", True, valor, cobranca.id,
                                      f"Pagamento de {formatar_moeda(valor)} aprovado pelo Stripe")
        return ResultadoPagamento("stripe", False, valor, mensagem=f"Stripe recusou: {cobranca.failure_message}")


class AdaptadorMercadoPago(ProcessadorPagamento):
    def __init__(self, api: Optional[ApiMercadoPago] = None):
        self._api = api or ApiMercadoPago()

    def processar_pagamento(self, valor: Decimal, descricao: str) -> ResultadoPagamento:
        centavos = _para_centavos(valor)
        print(f"[MercadoPago] criar_cobranca({centavos}, '{descricao}')")
        status, cobranca_id = self._api.criar_cobranca(centavos, descricao)
        if status == "approved":
            return ResultadoPagamento("mercadopago", True, valor, cobranca_id,
                                      f"Pagamento de {formatar_moeda(valor)} aprovado pelo MercadoPago")
        return ResultadoPagamento("mercadopago", False, valor, mensagem=f"MercadoPago recusou: {status}")


_ADAPTADORES = {
    "paypal": AdaptadorPayPal,
    "stripe": AdaptadorStripe,
    "mercadopago": AdaptadorMercadoPago,
}


def obter_processador(provedor: str) -> Optional[ProcessadorPagamento]:
    adaptador = _ADAPTADORES.get(provedor.lower())
    if adaptador:
        return adaptador()
    return None


def provedores_disponiveis() -> list:
    return list(_ADAPTADORES.keys())


def demonstrar_adapter() -> dict:
    print("\n===== INTEGRAÇÃO DE APIS DE PAGAMENTO COM ADAPTER =====")
    print("Interfaces incompatíveis de pagamento adaptadas para uma interface comum.")

    resultados: Dict[str, dict] = {}
    for provedor in provedores_disponiveis():
        print(f"\n--- Processando pagamento com {provedor} ---")
        resultado = obter_processador(provedor).processar_pagamento(Decimal("149.90"), "Assinatura anual")
        print(resultado.mensagem)
        resultados[provedor] = resultado.to_dict()

    return {
        "padrao": "Adapter",
        "descricao": "Provedores de pagamento atrás de uma interface comum",
        "resultados": resultados,
    }
