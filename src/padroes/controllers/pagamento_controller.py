"""
Controller de pagamentos usando Adapter Pattern (padrão MVC)
"""
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from ..patterns.adapter import obter_processador, provedores_disponiveis


class PagamentoRequest(BaseModel):
    provedor: str
    valor: Decimal
    descricao: str = "Pagamento"


class PagamentoResponse(BaseModel):
    provedor: str
    aprovado: bool
    valor: Decimal
    transacao_id: Optional[str] = None
    mensagem: str


class PagamentoController:
    """Controller que envia pagamentos ao provedor escolhido"""

    def __init__(self):
        self.router = APIRouter(prefix="/pagamentos", tags=["Pagamentos"])
        self._setup_routes()

    def _setup_routes(self):

        @self.router.get("/provedores", response_model=List[str])
        async def listar_provedores():
            return provedores_disponiveis()

        @self.router.post("", response_model=PagamentoResponse)
        async def pagar(dados: PagamentoRequest):
            """
            Processa um pagamento pela interface comum de provedores

            **Erros:**
            - 404: Provedor não encontrado
            - 400: Pagamento recusado pelo provedor
            """
            return await self.processar_pagamento(dados)

    async def processar_pagamento(self, dados: PagamentoRequest) -> PagamentoResponse:
        processador = obter_processador(dados.provedor)
        if processador is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Provedor '{dados.provedor}' não encontrado"
            )

        resultado = processador.processar_pagamento(dados.valor, dados.descricao)
        if not resultado.aprovado:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=resultado.mensagem
            )

        return PagamentoResponse(
            provedor=resultado.provedor,
            aprovado=resultado.aprovado,
            valor=resultado.valor,
            transacao_id=resultado.transacao_id,
            mensagem=resultado.mensagem,
        )
