"""
Controller para transações bancárias usando Command Pattern (padrão MVC)
"""
from datetime import datetime
from decimal import Decimal
from typing import List

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from ..patterns.command import (
    ContaBancaria, ProcessadorTransacoes, TipoTransacao, criar_comando,
)


class TransacaoRequest(BaseModel):
    """Schema de uma transação a enfileirar"""
    tipo: TipoTransacao
    valor: Decimal


class ProcessarTransacoesRequest(BaseModel):
    """Schema para processar um lote de transações numa conta nova"""
    numero_conta: str = "123456789"
    saldo_inicial: Decimal = Decimal("0")
    transacoes: List[TransacaoRequest] = []

    class Config:
        json_schema_extra = {
            "example": {
                "numero_conta": "123456789",
                "saldo_inicial": 1000,
                "transacoes": [
                    {"tipo": "deposito", "valor": 500},
                    {"tipo": "saque", "valor": 200},
                    {"tipo": "saque", "valor": 1500},
                    {"tipo": "deposito", "valor": 300},
                ]
            }
        }


class RegistroTransacaoResponse(BaseModel):
    descricao: str
    status: str
    timestamp: datetime


class ProcessamentoResponse(BaseModel):
    """Schema de resposta do processamento"""
    numero_conta: str
    saldo_inicial: Decimal
    saldo_final: Decimal
    recusadas_no_envio: List[str]
    historico: List[RegistroTransacaoResponse]


class TransacaoController:
    """Controller para processamento de transações"""

    def __init__(self):
        self.router = APIRouter(prefix="/transacoes", tags=["Transações"])
        self._setup_routes()

    def _setup_routes(self):
        """Configura as rotas do controller"""

        @self.router.post("/processar", response_model=ProcessamentoResponse)
        async def processar(dados: ProcessarTransacoesRequest):
            """
            Enfileira as transações e processa a fila em ordem

            **Comportamento:**
            - Transações que não podem ser executadas no envio não entram na fila
            - Cada transação é verificada de novo no processamento
            - O histórico traz COMPLETADA ou REJEITADA para cada transação da fila
            """
            return await self.processar_lote(dados)

        @self.router.get("/demo", response_model=ProcessamentoResponse)
        async def demo():
            """Executa o cenário clássico: saldo 1000, +500, -200, -1500, +300"""
            return await self.processar_lote(ProcessarTransacoesRequest(
                saldo_inicial=Decimal("1000"),
                transacoes=[
                    TransacaoRequest(tipo=TipoTransacao.DEPOSITO, valor=Decimal("500")),
                    TransacaoRequest(tipo=TipoTransacao.SAQUE, valor=Decimal("200")),
                    TransacaoRequest(tipo=TipoTransacao.SAQUE, valor=Decimal("1500")),
                    TransacaoRequest(tipo=TipoTransacao.DEPOSITO, valor=Decimal("300")),
                ]
            ))

    async def processar_lote(self, dados: ProcessarTransacoesRequest) -> ProcessamentoResponse:
        try:
            conta = ContaBancaria(dados.numero_conta, dados.saldo_inicial)
            processador = ProcessadorTransacoes()

            recusadas = []
            for transacao in dados.transacoes:
                comando = criar_comando(transacao.tipo, conta, transacao.valor)
                if not processador.adicionar_transacao(comando):
                    recusadas.append(comando.get_descricao())

            registros = processador.processar_transacoes_pendentes()

            return ProcessamentoResponse(
                numero_conta=conta.numero_conta,
                saldo_inicial=dados.saldo_inicial,
                saldo_final=conta.obter_saldo(),
                recusadas_no_envio=recusadas,
                historico=[
                    RegistroTransacaoResponse(
                        descricao=registro.descricao,
                        status=registro.status.value,
                        timestamp=registro.timestamp,
                    )
                    for registro in registros
                ]
            )
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Erro ao processar transações: {str(e)}"
            )
