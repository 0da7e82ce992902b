"""
Testes dos padrões estruturais: Adapter, Decorator e Facade
"""

from decimal import Decimal

import pytest

from padroes.patterns.adapter import (
    AdaptadorMercadoPago, AdaptadorPayPal, AdaptadorStripe, ApiStripe,
    ProcessadorPagamento, demonstrar_adapter, obter_processador, provedores_disponiveis,
)
from padroes.patterns.decorator import (
    NotificadorBase, NotificadorEmail, NotificadorPush, NotificadorSMS, demonstrar_decorator,
)
from padroes.patterns.facade import (
    AgenciaViagensFacade, SistemaHoteis, SistemaTransporte, SistemaVoos, demonstrar_facade,
)


class TestAdapter:

    @pytest.mark.parametrize("adaptador, prefixo", [
        (AdaptadorPayPal, "PAY-"),
        (AdaptadorStripe, "ch_"),
        (AdaptadorMercadoPago, "MP-"),
    ])
    def test_pagamento_aprovado(self, adaptador, prefixo):
        resultado = adaptador().processar_pagamento(Decimal("149.90"), "Assinatura")
        assert resultado.aprovado is True
        assert resultado.transacao_id.startswith(prefixo)
        assert resultado.valor == Decimal("149.90")
        assert "R$ 149,90" in resultado.mensagem

    @pytest.mark.parametrize("provedor", ["paypal", "stripe", "mercadopago"])
    def test_valor_invalido_recusado(self, provedor):
        resultado = obter_processador(provedor).processar_pagamento(Decimal("0"), "Nada")
        assert resultado.aprovado is False
        assert resultado.transacao_id is None

    def test_stripe_recebe_centavos(self):
        chamadas = []

        class ApiStripeEspia(ApiStripe):
            def create_charge(self, amount_cents, currency, description):
                chamadas.append(amount_cents)
                return super().create_charge(amount_cents, currency, description)

        AdaptadorStripe(ApiStripeEspia()).processar_pagamento(Decimal("10.505"), "x")
        assert chamadas == [1051]

    def test_identificadores_sequenciais(self):
        adaptador = AdaptadorPayPal()
        primeiro = adaptador.processar_pagamento(Decimal("1"), "a")
        segundo = adaptador.processar_pagamento(Decimal("1"), "b")
        assert (primeiro.transacao_id, segundo.transacao_id) == ("PAY-000001", "PAY-000002")

    def test_obter_processador(self):
        assert isinstance(obter_processador("Stripe"), ProcessadorPagamento)
        assert obter_processador("boleto") is None
        assert provedores_disponiveis() == ["paypal", "stripe", "mercadopago"]

    def test_demonstracao(self):
        resumo = demonstrar_adapter()
        assert all(r["aprovado"] for r in resumo["resultados"].values())


class TestDecorator:

    def setup_method(self):
        self.base = NotificadorBase("ana")

    def test_notificacao_basica(self):
        assert self.base.enviar("oi") == ["[App] ana: oi"]
        assert self.base.get_descricao() == "Notificação básica"
        assert self.base.get_custo() == 0.0

    def test_canais_empilhados_em_ordem(self):
        notificador = NotificadorSMS(NotificadorEmail(self.base, "ana@x.com"), "+55 11 9")
        assert notificador.enviar("oi") == [
            "[App] ana: oi",
            "[Email] ana@x.com: oi",
            "[SMS] +55 11 9: oi",
        ]
        assert notificador.get_descricao() == "Notificação básica + Email + SMS"

    def test_custo_acumulado(self):
        notificador = NotificadorPush(NotificadorSMS(NotificadorEmail(self.base, "a"), "b"), "c")
        assert notificador.get_custo() == pytest.approx(0.13)

    def test_sms_limita_tamanho(self):
        entregas = NotificadorSMS(self.base, "123").enviar("x" * 200)
        assert entregas[-1] == "[SMS] 123: " + "x" * 160

    def test_demonstracao(self):
        resumo = demonstrar_decorator()
        assert resumo["etapas"][-1]["descricao"] == "Notificação básica + Email + SMS + Push"
        assert len(resumo["etapas"][-1]["entregas"]) == 4


class TestFacade:

    def setup_method(self):
        self.agencia = AgenciaViagensFacade()

    def test_reserva_completa(self):
        reserva = self.agencia.reservar_viagem("Carlos", "Rio de Janeiro", 3)

        assert reserva.codigos == ["VOO-0001", "HTL-0001", "TRF-0001"]
        # 890 de voo + 3 x 350 de hotel + 120 de traslado
        assert reserva.total == Decimal("2060.00")
        assert "R$ 2.060,00" in str(reserva)

    def test_destino_desconhecido_sem_reserva_parcial(self):
        voos = SistemaVoos()
        hoteis = SistemaHoteis()
        transporte = SistemaTransporte()
        agencia = AgenciaViagensFacade(hoteis, voos, transporte)

        assert agencia.reservar_viagem("Carlos", "Atlântida", 2) is None

        reserva = agencia.reservar_viagem("Carlos", "Salvador", 1)
        assert reserva.codigos == ["VOO-0001", "HTL-0001", "TRF-0001"]

    def test_subsistemas_padrao_criados(self):
        reserva = self.agencia.reservar_viagem("Ana", "lisboa", 2)
        assert reserva.to_dict()["total"] == "5460.00"

    def test_demonstracao(self):
        resumo = demonstrar_facade()
        assert resumo["destino_nao_atendido"] is True
        assert resumo["reserva"]["destino"] == "Rio de Janeiro"
