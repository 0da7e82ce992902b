"""
Padrão Command aplicado ao processamento de transações bancárias
Cada operação (depósito, saque) é encapsulada como comando para permitir
enfileiramento, execução adiada e registro de histórico
"""
import enum
from abc import ABC, abstractmethod
from collections import deque
from datetime import datetime
from decimal import Decimal
from typing import Callable, Deque, List, Optional, Tuple, Union

from ..formatacao import formatar_moeda


class ContaBancaria:
    """Receiver - conta que sofre as operações dos comandos"""

    def __init__(self, numero_conta: str, saldo_inicial: Decimal = Decimal("0")):
        self._numero_conta = numero_conta
        self._saldo = Decimal(saldo_inicial)

    @property
    def numero_conta(self) -> str:
        return self._numero_conta

    def depositar(self, valor: Decimal):
        """Soma o valor ao saldo (a validação do valor fica com o comando)"""
        self._saldo += valor
        print(f"[Conta {self._numero_conta}] Depósito de {formatar_moeda(valor)} realizado. "
              f"Novo saldo: {formatar_moeda(self._saldo)}")

    def pode_sacar(self, valor: Decimal) -> bool:
        return self._saldo >= valor

    def sacar(self, valor: Decimal) -> bool:
        """Subtrai o valor se houver saldo; caso contrário apenas informa a falha"""
        if not self.pode_sacar(valor):
            print(f"[Conta {self._numero_conta}] Erro: saldo insuficiente para sacar {formatar_moeda(valor)}. "
                  f"Saldo atual: {formatar_moeda(self._saldo)}")
            return False

        self._saldo -= valor
        print(f"[Conta {self._numero_conta}] Saque de {formatar_moeda(valor)} realizado. "
              f"Novo saldo: {formatar_moeda(self._saldo)}")
        return True

    def obter_saldo(self) -> Decimal:
        return self._saldo


class ComandoTransacao(ABC):
    """Interface Command"""

    def __init__(self, conta: ContaBancaria, valor: Decimal):
        self._conta = conta
        self._valor = Decimal(valor)

    @property
    def conta(self) -> ContaBancaria:
        return self._conta

    @property
    def valor(self) -> Decimal:
        return self._valor

    @abstractmethod
    def pode_executar(self) -> bool:
        pass

    @abstractmethod
    def executar(self):
        pass

    @abstractmethod
    def get_descricao(self) -> str:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(conta={self._conta.numero_conta!r}, valor={self._valor})"


class ComandoDeposito(ComandoTransacao):
    """Command concreto para depósito"""

    def pode_executar(self) -> bool:
        return self._valor > 0

    def executar(self):
        self._conta.depositar(self._valor)

    def get_descricao(self) -> str:
        return f"Depósito de {formatar_moeda(self._valor)}"


class ComandoSaque(ComandoTransacao):
    """Command concreto para saque"""

    def pode_executar(self) -> bool:
        # O saldo pode mudar entre o enfileiramento e a execução
        return self._valor > 0 and self._conta.pode_sacar(self._valor)

    def executar(self):
        self._conta.sacar(self._valor)

    def get_descricao(self) -> str:
        return f"Saque de {formatar_moeda(self._valor)}"


# Conjunto fechado de comandos suportados pelo processador
Transacao = Union[ComandoDeposito, ComandoSaque]


class TipoTransacao(enum.Enum):
    DEPOSITO = "deposito"
    SAQUE = "saque"


_COMANDOS_POR_TIPO = {
    TipoTransacao.DEPOSITO: ComandoDeposito,
    TipoTransacao.SAQUE: ComandoSaque,
}


def criar_comando(tipo: TipoTransacao, conta: ContaBancaria, valor: Decimal) -> Transacao:
    """Cria o comando concreto correspondente ao tipo de transação"""
    return _COMANDOS_POR_TIPO[tipo](conta, valor)


class StatusTransacao(enum.Enum):
    COMPLETADA = "COMPLETADA"
    REJEITADA = "REJEITADA"


class RegistroTransacao:
    """Entrada do histórico de transações (imutável)"""

    def __init__(self, descricao: str, status: StatusTransacao, timestamp: datetime):
        self._descricao = descricao
        self._status = status
        self._timestamp = timestamp

    @property
    def descricao(self) -> str:
        return self._descricao

    @property
    def status(self) -> StatusTransacao:
        return self._status

    @property
    def timestamp(self) -> datetime:
        return self._timestamp

    def to_dict(self) -> dict:
        return {
            "descricao": self._descricao,
            "status": self._status.value,
            "timestamp": self._timestamp.isoformat(),
        }

    def __str__(self) -> str:
        return f"[{self._timestamp:%d/%m/%Y %H:%M:%S}] {self._descricao} - {self._status.value}"


class ProcessadorTransacoes:
    """Invoker - enfileira comandos e os executa em lote, registrando o resultado"""

    def __init__(self, relogio: Optional[Callable[[], datetime]] = None):
        self._comandos_pendentes: Deque[Transacao] = deque()
        self._historico: List[RegistroTransacao] = []
        self._relogio = relogio or datetime.now

    @property
    def pendentes(self) -> int:
        return len(self._comandos_pendentes)

    @property
    def historico(self) -> Tuple[RegistroTransacao, ...]:
        return tuple(self._historico)

    def adicionar_transacao(self, comando: Transacao) -> bool:
        """Enfileira o comando apenas se ele puder ser executado agora"""
        if comando.pode_executar():
            self._comandos_pendentes.append(comando)
            print(f"[Processador] Transação adicionada à fila: {comando.get_descricao()}")
            return True

        print(f"[Processador] Não é possível executar: {comando.get_descricao()}")
        return False

    def processar_transacoes_pendentes(self) -> List[RegistroTransacao]:
        """
        Esvazia a fila em ordem FIFO.

        Cada comando é verificado de novo antes de executar, pois comandos
        anteriores do mesmo lote podem ter alterado o saldo. Retorna os
        registros gerados neste processamento.
        """
        print("\n[Processador] Processando transações pendentes...")

        if not self._comandos_pendentes:
            print("[Processador] Não há transações pendentes.")
            return []

        registros = []
        while self._comandos_pendentes:
            comando = self._comandos_pendentes.popleft()

            if comando.pode_executar():
                comando.executar()
                status = StatusTransacao.COMPLETADA
            else:
                status = StatusTransacao.REJEITADA
                print(f"[Processador] Transação rejeitada: {comando.get_descricao()}")

            registro = RegistroTransacao(comando.get_descricao(), status, self._relogio())
            self._historico.append(registro)
            registros.append(registro)

        return registros

    def mostrar_historico(self):
        print("\nHistórico de transações:")
        for registro in self._historico:
            print(registro)


def demonstrar_command() -> dict:
    """Cenário clássico: conta com 1000, depósitos e saques com um saque sem saldo"""
    print("\n=== DEMONSTRAÇÃO DO PADRÃO COMMAND (TRANSAÇÕES BANCÁRIAS) ===\n")

    conta = ContaBancaria("123456789", Decimal("1000"))
    processador = ProcessadorTransacoes()

    print("--- Primeiro lote ---")
    comandos = [
        ComandoDeposito(conta, Decimal("500")),
        ComandoSaque(conta, Decimal("200")),
        # Saldo de 1000 no momento do envio: recusado antes de entrar na fila
        ComandoSaque(conta, Decimal("1500")),
        ComandoDeposito(conta, Decimal("300")),
    ]
    for comando in comandos:
        processador.adicionar_transacao(comando)
    processador.processar_transacoes_pendentes()

    print("\n--- Segundo lote ---")
    # Os dois saques cabem no saldo isoladamente, mas não juntos
    processador.adicionar_transacao(ComandoSaque(conta, Decimal("1000")))
    processador.adicionar_transacao(ComandoSaque(conta, Decimal("1000")))
    processador.processar_transacoes_pendentes()

    processador.mostrar_historico()

    return {
        "padrao": "Command",
        "descricao": "Transações bancárias encapsuladas como comandos",
        "conta": conta.numero_conta,
        "saldo_final": str(conta.obter_saldo()),
        "historico": [str(registro) for registro in processador.historico],
    }
