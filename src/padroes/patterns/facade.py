"""
Padrão Facade para reservas de viagem
O cliente reserva hotel, voo e traslado com uma única chamada
"""
from decimal import Decimal
from typing import Dict, List, Optional

from ..formatacao import formatar_moeda


class SistemaHoteis:
    DIARIAS: Dict[str, Decimal] = {
        "rio de janeiro": Decimal("350.00"),
        "salvador": Decimal("280.00"),
        "lisboa": Decimal("520.00"),
    }

    def __init__(self):
        self._sequencia = 0

    def verificar_disponibilidade(self, destino: str) -> bool:
        print(f"[Hotéis] Verificando quartos disponíveis em {destino}...")
        return destino.lower() in self.DIARIAS

    def reservar(self, passageiro: str, destino: str, noites: int) -> tuple:
        self._sequencia += 1
        codigo = f"HTL-{self._sequencia:04d}"
        total = self.DIARIAS[destino.lower()] * noites
        print(f"[Hotéis] Quarto reservado para {passageiro} ({noites} noites): {codigo}")
        return codigo, total


class SistemaVoos:
    TARIFAS: Dict[str, Decimal] = {
        "rio de janeiro": Decimal("890.00"),
        "salvador": Decimal("1100.00"),
        "lisboa": Decimal("4300.00"),
    }

    def __init__(self):
        self._sequencia = 0

    def buscar_voo(self, destino: str) -> Optional[Decimal]:
        print(f"[Voos] Buscando voos para {destino}...")
        return self.TARIFAS.get(destino.lower())

    def emitir_passagem(self, passageiro: str, destino: str) -> tuple:
        self._sequencia += 1
        codigo = f"VOO-{self._sequencia:04d}"
        print(f"[Voos] Passagem emitida para {passageiro} com destino a {destino}: {codigo}")
        return codigo, self.TARIFAS[destino.lower()]


class SistemaTransporte:
    TARIFA_TRASLADO = Decimal("120.00")

    def __init__(self):
        self._sequencia = 0

    def agendar_traslado(self, passageiro: str, destino: str) -> tuple:
        self._sequencia += 1
        codigo = f"TRF-{self._sequencia:04d}"
        print(f"[Transporte] Traslado aeroporto-hotel agendado em {destino}: {codigo}")
        return codigo, self.TARIFA_TRASLADO


class ReservaViagem:
    def __init__(self, passageiro: str, destino: str, noites: int,
                 codigos: List[str], total: Decimal):
        self.passageiro = passageiro
        self.destino = destino
        self.noites = noites
        self.codigos = codigos
        self.total = total

    def to_dict(self) -> dict:
        return {
            "passageiro": self.passageiro,
            "destino": self.destino,
            "noites": self.noites,
            "codigos": self.codigos,
            "total": str(self.total),
        }

    def __str__(self) -> str:
        return (f"Reserva de {self.passageiro} para {self.destino} ({self.noites} noites) "
                f"- {', '.join(self.codigos)} - total {formatar_moeda(self.total)}")


class AgenciaViagensFacade:
    """Facade - esconde a coordenação entre os subsistemas de reserva"""

    def __init__(self, hoteis: Optional[SistemaHoteis] = None,
                 voos: Optional[SistemaVoos] = None,
                 transporte: Optional[SistemaTransporte] = None):
        self._hoteis = hoteis or SistemaHoteis()
        self._voos = voos or SistemaVoos()
        self._transporte = transporte or SistemaTransporte()

    def reservar_viagem(self, passageiro: str, destino: str, noites: int) -> Optional[ReservaViagem]:
        """Reserva o pacote completo ou nada (sem reservas parciais)"""
        print(f"[Agência] Iniciando reserva de viagem para {passageiro}...")

        if not self._hoteis.verificar_disponibilidade(destino):
            print(f"[Agência] Nenhum hotel disponível em {destino}. Reserva não realizada.")
            return None
        if self._voos.buscar_voo(destino) is None:
            print(f"[Agência] Nenhum voo disponível para {destino}. Reserva não realizada.")
            return None

        codigo_voo, valor_voo = self._voos.emitir_passagem(passageiro, destino)
        codigo_hotel, valor_hotel = self._hoteis.reservar(passageiro, destino, noites)
        codigo_traslado, valor_traslado = self._transporte.agendar_traslado(passageiro, destino)

        reserva = ReservaViagem(
            passageiro, destino, noites,
            [codigo_voo, codigo_hotel, codigo_traslado],
            valor_voo + valor_hotel + valor_traslado,
        )
        print(f"[Agência] {reserva}")
        return reserva


def demonstrar_facade() -> dict:
    print("\n===== SISTEMA DE RESERVAS DE VIAGEM (PADRÃO FACADE) =====")
    print("O cliente reserva uma viagem completa sem conhecer os detalhes de cada sistema.")

    agencia = AgenciaViagensFacade()

    print("\n--- Realizando reserva completa de viagem ---")
    reserva = agencia.reservar_viagem("Carlos", "Rio de Janeiro", 3)

    print("\n--- Tentando reservar para um destino não atendido ---")
    recusada = agencia.reservar_viagem("Carlos", "Atlântida", 2)

    return {
        "padrao": "Facade",
        "descricao": "Interface única para hotéis, voos e transporte",
        "reserva": reserva.to_dict(),
        "destino_nao_atendido": recusada is None,
    }
