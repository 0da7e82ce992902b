"""
Aplicação principal - API de demonstração dos Padrões GoF
Cada padrão pode ser executado pelo menu de texto (padroes-menu) ou por esta API
"""
import uvicorn  # type: ignore
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from padroes import __version__
from padroes.config import APP_HOST, APP_PORT, APP_RELOAD, ARQUIVO_CONFIGURACAO
from padroes.controllers import (
    DemoController,
    NotificacaoController,
    PagamentoController,
    TransacaoController,
    ValidacaoController,
)
from padroes.patterns import DEMONSTRACOES, ConfiguracaoGlobal


def create_app(configuracao: Optional[ConfiguracaoGlobal] = None) -> FastAPI:
    """Monta a aplicação com uma única configuração compartilhada pelos controllers"""
    configuracao = configuracao or ConfiguracaoGlobal(ARQUIVO_CONFIGURACAO)

    app = FastAPI(
        title="Padrões GoF",
        description="""
        Vitrine de padrões de projeto com cenários de exemplo:

        Padrões Criacionais:
        - Singleton: Configuração global (injetada)
        - Factory Method: Criação de documentos
        - Abstract Factory: Interfaces de usuário

        Padrões Estruturais:
        - Adapter: APIs de pagamento
        - Decorator: Notificações multicanal
        - Facade: Reservas de viagem

        Padrões Comportamentais:
        - Observer: Sistema de notificações
        - Command: Transações bancárias
        - Strategy: Validação de dados
        """,
        version=__version__
    )

    # Configuração CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Incluir rotas dos controllers
    app.include_router(DemoController(configuracao).router)
    app.include_router(TransacaoController().router)
    app.include_router(ValidacaoController().router)
    app.include_router(NotificacaoController().router)
    app.include_router(PagamentoController().router)

    @app.on_event("startup")
    async def startup_event():
        """Inicialização da aplicação"""
        print("🚀 Iniciando API de Padrões GoF...")
        print(f"⚙️ Configuração: {configuracao.arquivo}")
        print("📚 Documentação disponível em: /docs")

    @app.get("/")
    async def root():
        """Endpoint raiz com informações do sistema"""
        return {
            "message": "Padrões GoF - vitrine de padrões de projeto",
            "version": __version__,
            "padroes_implementados": {d.slug: d.titulo for d in DEMONSTRACOES},
            "endpoints": {
                "documentacao": "/docs",
                "demonstracoes": "/demo/*",
                "transacoes": "/transacoes/*",
                "validacao": "/validacao/*",
                "notificacoes": "/notificacoes/*",
                "pagamentos": "/pagamentos/*",
            }
        }

    @app.get("/health")
    async def health_check():
        """Verifica saúde da aplicação"""
        return {
            "status": "healthy",
            "patterns": "implemented",
            "configuracao": configuracao.arquivo,
        }

    return app


app = create_app()


if __name__ == "__main__":
    print("🏛️ Iniciando API de Padrões GoF...")
    print(f"📖 Acesse http://localhost:{APP_PORT}/docs para documentação")
    print(f"🎯 Acesse http://localhost:{APP_PORT}/demo para demonstrações")

    uvicorn.run(
        "main:app",
        host=APP_HOST,
        port=APP_PORT,
        reload=APP_RELOAD,
        log_level="info"
    )
