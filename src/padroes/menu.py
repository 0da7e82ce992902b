"""
Menu de texto para escolher e executar as demonstrações dos padrões
"""
from typing import Callable, List, Optional

from .config import ARQUIVO_CONFIGURACAO
from .patterns import (
    COMPORTAMENTAIS, CRIACIONAIS, ESTRUTURAIS,
    ConfiguracaoGlobal, Demonstracao, demonstracoes_por_categoria,
)


CATEGORIAS = {
    "1": CRIACIONAIS,
    "2": ESTRUTURAIS,
    "3": COMPORTAMENTAIS,
}


class MenuConsole:
    """Navegação categoria -> padrão -> demonstração"""

    def __init__(self, configuracao: ConfiguracaoGlobal,
                 entrada: Optional[Callable[[str], str]] = None,
                 saida: Optional[Callable[[str], None]] = None):
        self._configuracao = configuracao
        self._entrada = entrada or input
        self._saida = saida or print

    def _ler(self, prompt: str) -> str:
        # Fim da entrada equivale a escolher "0" (voltar/sair)
        try:
            return self._entrada(prompt).strip()
        except EOFError:
            return "0"

    def _pausar(self):
        self._ler("\nPressione Enter para voltar ao menu...")

    def executar(self):
        while True:
            self._saida("\n==== MENU PRINCIPAL DE PADRÕES DE PROJETO ====")
            for opcao, categoria in CATEGORIAS.items():
                self._saida(f"{opcao}. {categoria}")
            self._saida("0. Sair")

            opcao = self._ler("\nSelecione uma categoria: ")
            if opcao == "0":
                self._saida("Saindo...")
                return
            categoria = CATEGORIAS.get(opcao)
            if categoria is None:
                self._saida("Opção inválida. Tente novamente.")
                continue
            self.menu_categoria(categoria)

    def menu_categoria(self, categoria: str):
        demonstracoes: List[Demonstracao] = demonstracoes_por_categoria(categoria)
        while True:
            self._saida(f"\n==== {categoria.upper()} ====")
            for indice, demonstracao in enumerate(demonstracoes, start=1):
                self._saida(f"{indice}. {demonstracao.titulo}")
            self._saida("0. Voltar ao menu principal")

            opcao = self._ler("\nSelecione um padrão: ")
            if opcao == "0":
                return
            if not opcao.isdigit() or not 1 <= int(opcao) <= len(demonstracoes):
                self._saida("Opção inválida. Tente novamente.")
                continue

            demonstracoes[int(opcao) - 1].executar(self._configuracao)
            self._pausar()


def main() -> int:
    configuracao = ConfiguracaoGlobal(ARQUIVO_CONFIGURACAO)
    try:
        MenuConsole(configuracao).executar()
    except KeyboardInterrupt:
        print("\nSaindo...")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
