"""
Controller para validação de usuários usando Strategy Pattern (padrão MVC)
"""
from datetime import date
from typing import Dict, List

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from ..patterns.strategy import (
    ContextoValidacao, Usuario, estrategias_disponiveis, obter_estrategia,
)


class UsuarioRequest(BaseModel):
    nome: str = ""
    email: str = ""
    senha: str = ""
    telefone: str = ""
    data_nascimento: date


class ValidacaoRequest(BaseModel):
    """Schema para validar um usuário com a estratégia escolhida"""
    estrategia: str = "basica"
    usuario: UsuarioRequest


class ValidacaoResponse(BaseModel):
    estrategia: str
    descricao: str
    valido: bool
    erros: List[str]


class ValidacaoController:
    """Controller para validação de dados de usuário"""

    def __init__(self):
        self.router = APIRouter(prefix="/validacao", tags=["Validação"])
        self._setup_routes()

    def _setup_routes(self):

        @self.router.get("/estrategias", response_model=Dict[str, str])
        async def listar_estrategias():
            """Lista as estratégias de validação disponíveis"""
            return estrategias_disponiveis()

        @self.router.post("", response_model=ValidacaoResponse)
        async def validar(dados: ValidacaoRequest):
            """
            Valida o usuário com a estratégia informada

            **Estratégias:** basica, seguranca, perfil

            **Erros:**
            - 404: Estratégia não encontrada
            """
            return await self.validar_usuario(dados)

    async def validar_usuario(self, dados: ValidacaoRequest) -> ValidacaoResponse:
        try:
            estrategia = obter_estrategia(dados.estrategia)
            if estrategia is None:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail=f"Estratégia '{dados.estrategia}' não encontrada"
                )

            usuario = Usuario(**dados.usuario.model_dump())
            resultado = ContextoValidacao(estrategia).validar_usuario(usuario)

            return ValidacaoResponse(
                estrategia=dados.estrategia,
                descricao=estrategia.get_descricao(),
                valido=resultado.valido,
                erros=resultado.erros,
            )
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Erro ao validar usuário: {str(e)}"
            )
