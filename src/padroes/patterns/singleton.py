"""
Configuração global da aplicação (antigo Singleton)

Em vez de uma instância escondida na própria classe, a configuração é
criada uma única vez por quem inicia a aplicação e repassada aos
serviços que precisam dela.
"""
from typing import Any, Dict, Optional


VALORES_PADRAO: Dict[str, Any] = {
    "TemaEscuro": False,
    "IdiomaPreferido": "pt-BR",
    "TamanhoFonte": 12,
    "ModoDebug": False,
    "IntervaloBackup": 30,  # minutos
}


class ConfiguracaoGlobal:
    """Valores de configuração compartilhados por todos os serviços de uma execução"""

    def __init__(self, arquivo: str = "config.json"):
        self._arquivo = arquivo
        self._configuracoes: Dict[str, Any] = {}
        print("[Configuração] Instância de ConfiguracaoGlobal criada.")
        self._carregar_padroes()

    @property
    def arquivo(self) -> str:
        return self._arquivo

    def _carregar_padroes(self):
        self._configuracoes.update(VALORES_PADRAO)
        print("[Configuração] Configuração padrão carregada.")

    def obter_valor(self, chave: str, padrao: Any = None) -> Any:
        return self._configuracoes.get(chave, padrao)

    def definir_valor(self, chave: str, valor: Any):
        self._configuracoes[chave] = valor
        print(f"[Configuração] Configuração atualizada: {chave} = {valor}")

    def listar(self) -> Dict[str, Any]:
        return dict(self._configuracoes)

    def salvar_configuracao(self) -> bool:
        """Simula a gravação da configuração (nenhum arquivo é tocado)"""
        print(f"[Configuração] Configuração salva em {self._arquivo}")
        return True

    def carregar_configuracao(self) -> bool:
        """Simula a leitura da configuração (nenhum arquivo é tocado)"""
        print(f"[Configuração] Configuração carregada de {self._arquivo}")
        return True

    def restaurar_padroes(self):
        self._configuracoes.clear()
        self._carregar_padroes()
        print("[Configuração] Configuração restaurada para os valores padrão.")


class ServicoTema:
    """Consumidor que recebe a configuração por injeção"""

    def __init__(self, configuracao: ConfiguracaoGlobal):
        self._configuracao = configuracao

    @property
    def configuracao(self) -> ConfiguracaoGlobal:
        return self._configuracao

    def descrever(self) -> str:
        tema = "escuro" if self._configuracao.obter_valor("TemaEscuro") else "claro"
        fonte = self._configuracao.obter_valor("TamanhoFonte")
        return f"Tema {tema}, fonte {fonte}"


class ServicoIdioma:
    """Outro consumidor da mesma configuração"""

    def __init__(self, configuracao: ConfiguracaoGlobal):
        self._configuracao = configuracao

    @property
    def configuracao(self) -> ConfiguracaoGlobal:
        return self._configuracao

    def idioma_atual(self) -> str:
        return self._configuracao.obter_valor("IdiomaPreferido")


def demonstrar_singleton(configuracao: Optional[ConfiguracaoGlobal] = None) -> dict:
    print("\n=== DEMONSTRAÇÃO DO SINGLETON (CONFIGURAÇÃO INJETADA) ===\n")

    config = configuracao or ConfiguracaoGlobal()
    tema = ServicoTema(config)
    idioma = ServicoIdioma(config)

    print("\n--- Valores padrão ---")
    print(f"Tema Escuro: {config.obter_valor('TemaEscuro')}")
    print(f"Idioma: {config.obter_valor('IdiomaPreferido')}")
    print(f"Tamanho da Fonte: {config.obter_valor('TamanhoFonte')}")

    print("\n--- Modificando valores ---")
    config.definir_valor("TemaEscuro", True)
    config.definir_valor("TamanhoFonte", 14)
    config.definir_valor("NovaOpcao", "Valor personalizado")
    valores_modificados = config.listar()

    print("\n--- Serviços enxergam a mesma configuração ---")
    print(f"ServicoTema: {tema.descrever()}")
    print(f"ServicoIdioma: {idioma.idioma_atual()}")
    mesma_instancia = tema.configuracao is idioma.configuracao
    print(f"São a mesma instância? {mesma_instancia}")

    print("\n--- Operações de persistência ---")
    config.salvar_configuracao()
    config.restaurar_padroes()

    print("\n--- Valores restaurados ---")
    print(f"Tema Escuro: {config.obter_valor('TemaEscuro')}")
    print(f"Tamanho da Fonte: {config.obter_valor('TamanhoFonte')}")
    print(f"Nova Opção: {config.obter_valor('NovaOpcao', 'Não existe')}")

    return {
        "padrao": "Singleton",
        "descricao": "Uma configuração lógica por execução, injetada nos serviços",
        "arquivo": config.arquivo,
        "valores_modificados": valores_modificados,
        "mesma_instancia": mesma_instancia,
        "valores_restaurados": config.listar(),
    }
