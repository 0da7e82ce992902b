"""
Controller com as demonstrações de cada padrão (padrão MVC)
"""
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException, status

from ..patterns import DEMONSTRACOES, ConfiguracaoGlobal, obter_demonstracao


class DemoController:
    """Executa as demonstrações do catálogo e devolve o resumo de cada uma"""

    def __init__(self, configuracao: ConfiguracaoGlobal):
        self.router = APIRouter(prefix="/demo", tags=["Demonstrações"])
        self._configuracao = configuracao
        self._setup_routes()

    def _setup_routes(self):

        @self.router.get("", response_model=List[Dict[str, str]])
        async def listar_demonstracoes():
            """Lista as demonstrações disponíveis"""
            return [
                {"padrao": d.slug, "categoria": d.categoria, "titulo": d.titulo}
                for d in DEMONSTRACOES
            ]

        @self.router.get("/{padrao}", response_model=Dict[str, Any])
        async def executar_demonstracao(padrao: str):
            """
            Executa a demonstração do padrão informado

            **Erros:**
            - 404: Padrão não encontrado
            """
            return await self.executar(padrao)

    async def executar(self, padrao: str) -> Dict[str, Any]:
        demonstracao = obter_demonstracao(padrao.lower())
        if demonstracao is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Padrão '{padrao}' não encontrado"
            )
        try:
            return demonstracao.executar(self._configuracao)
        except Exception as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Erro na demonstração: {str(e)}"
            )
