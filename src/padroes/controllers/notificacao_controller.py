"""
Controller para notificações usando Observer Pattern (padrão MVC)
"""
from datetime import datetime
from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from ..patterns.observer import (
    AssinanteEmail, CentralNotificacoes, ClienteMovel, Notificacao,
    Observer, PainelAdministracao, TipoNotificacao,
)


class AssinanteRequest(BaseModel):
    """Schema para inscrever um assinante"""
    tipo: str  # "movel", "email" ou "admin"
    identificador: str
    interesses: List[TipoNotificacao] = []


class PublicarRequest(BaseModel):
    mensagem: str
    tipo: TipoNotificacao
    origem: str


class NotificacaoResponse(BaseModel):
    mensagem: str
    tipo: TipoNotificacao
    origem: str
    timestamp: datetime


class PublicacaoResponse(BaseModel):
    entregues: int
    notificacao: NotificacaoResponse


class NotificacaoController:
    """Controller para o sistema de notificações em memória"""

    def __init__(self, central: Optional[CentralNotificacoes] = None):
        self.router = APIRouter(prefix="/notificacoes", tags=["Notificações"])
        self.central = central or CentralNotificacoes()
        self._assinantes: Dict[str, Observer] = {}
        self._setup_routes()

    def _setup_routes(self):

        @self.router.post("/assinantes", status_code=status.HTTP_201_CREATED)
        async def inscrever(dados: AssinanteRequest):
            """
            Inscreve um assinante na central

            **Tipos:** movel, email (filtram pelos interesses), admin (recebe tudo)
            """
            return await self.inscrever_assinante(dados)

        @self.router.delete("/assinantes/{identificador}")
        async def desinscrever(identificador: str):
            """Remove um assinante da central"""
            return await self.desinscrever_assinante(identificador)

        @self.router.post("/publicar", response_model=PublicacaoResponse)
        async def publicar(dados: PublicarRequest):
            """Publica uma notificação para os assinantes interessados"""
            return await self.publicar_notificacao(dados)

        @self.router.get("/historico", response_model=List[NotificacaoResponse])
        async def historico(tipo: Optional[TipoNotificacao] = None):
            """Histórico de notificações, opcionalmente filtrado por tipo"""
            return [self._to_response(n) for n in self.central.obter_historico(tipo)]

    def _criar_observer(self, dados: AssinanteRequest) -> Optional[Observer]:
        tipo = dados.tipo.lower()
        if tipo == "movel":
            return ClienteMovel(dados.identificador, *dados.interesses)
        if tipo == "email":
            return AssinanteEmail(dados.identificador, *dados.interesses)
        if tipo == "admin":
            return PainelAdministracao(dados.identificador)
        return None

    @staticmethod
    def _to_response(notificacao: Notificacao) -> NotificacaoResponse:
        return NotificacaoResponse(
            mensagem=notificacao.mensagem,
            tipo=notificacao.tipo,
            origem=notificacao.origem,
            timestamp=notificacao.timestamp,
        )

    async def inscrever_assinante(self, dados: AssinanteRequest) -> dict:
        if dados.identificador in self._assinantes:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Assinante '{dados.identificador}' já está inscrito"
            )

        observer = self._criar_observer(dados)
        if observer is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Tipo de assinante '{dados.tipo}' inválido"
            )

        self.central.inscrever(observer)
        self._assinantes[dados.identificador] = observer
        return {
            "success": True,
            "identificador": dados.identificador,
            "tipo": dados.tipo.lower(),
            "total_assinantes": len(self._assinantes),
        }

    async def desinscrever_assinante(self, identificador: str) -> dict:
        observer = self._assinantes.pop(identificador, None)
        if observer is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Assinante '{identificador}' não encontrado"
            )
        self.central.desinscrever(observer)
        return {"success": True, "identificador": identificador}

    async def publicar_notificacao(self, dados: PublicarRequest) -> PublicacaoResponse:
        notificacao = Notificacao(dados.mensagem, dados.tipo, dados.origem)
        entregues = self.central.publicar(notificacao)
        return PublicacaoResponse(entregues=entregues, notificacao=self._to_response(notificacao))
