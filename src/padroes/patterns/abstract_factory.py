"""
Padrão Abstract Factory para famílias de componentes de interface
Cada fábrica cria botões e menus que combinam entre si
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional


class Botao(ABC):
    @abstractmethod
    def renderizar(self) -> str:
        pass


class Menu(ABC):
    @abstractmethod
    def renderizar(self) -> str:
        pass

    def colaborar_com(self, botao: Botao) -> str:
        """Menus da mesma família sabem exibir o botão que os acompanha"""
        return f"{self.renderizar()} contendo [{botao.renderizar()}]"


class BotaoWeb(Botao):
    def renderizar(self) -> str:
        return "Botão HTML com estilo CSS responsivo"


class MenuWeb(Menu):
    def renderizar(self) -> str:
        return "Menu de navegação web (barra superior)"


class BotaoMovel(Botao):
    def renderizar(self) -> str:
        return "Botão de toque com feedback háptico"


class MenuMovel(Menu):
    def renderizar(self) -> str:
        return "Menu lateral deslizante (hambúrguer)"


class BotaoDesktop(Botao):
    def renderizar(self) -> str:
        return "Botão nativo com atalho de teclado"


class MenuDesktop(Menu):
    def renderizar(self) -> str:
        return "Barra de menus da janela (Arquivo, Editar, Ajuda)"


class FabricaInterface(ABC):
    """Abstract Factory - cria uma família de componentes compatíveis"""

    plataforma = ""

    @abstractmethod
    def criar_botao(self) -> Botao:
        pass

    @abstractmethod
    def criar_menu(self) -> Menu:
        pass


class FabricaWeb(FabricaInterface):
    plataforma = "web"

    def criar_botao(self) -> Botao:
        return BotaoWeb()

    def criar_menu(self) -> Menu:
        return MenuWeb()


class FabricaMovel(FabricaInterface):
    plataforma = "movel"

    def criar_botao(self) -> Botao:
        return BotaoMovel()

    def criar_menu(self) -> Menu:
        return MenuMovel()


class FabricaDesktop(FabricaInterface):
    plataforma = "desktop"

    def criar_botao(self) -> Botao:
        return BotaoDesktop()

    def criar_menu(self) -> Menu:
        return MenuDesktop()


_FABRICAS: Dict[str, FabricaInterface] = {
    "web": FabricaWeb(),
    "movel": FabricaMovel(),
    "desktop": FabricaDesktop(),
}


def obter_fabrica(plataforma: str) -> Optional[FabricaInterface]:
    return _FABRICAS.get(plataforma.lower())


def montar_interface(fabrica: FabricaInterface) -> Dict[str, str]:
    """Código cliente: só conhece as interfaces abstratas"""
    botao = fabrica.criar_botao()
    menu = fabrica.criar_menu()
    return {
        "botao": botao.renderizar(),
        "menu": menu.renderizar(),
        "composicao": menu.colaborar_com(botao),
    }


def demonstrar_abstract_factory() -> dict:
    print("\n===== INTERFACES DE USUÁRIO COM ABSTRACT FACTORY =====")
    print("Este padrão cria famílias de objetos relacionados sem especificar suas classes concretas.")

    interfaces = {}
    for plataforma, fabrica in _FABRICAS.items():
        print(f"\n--- Criando interface para a plataforma {plataforma.upper()} ---")
        interfaces[plataforma] = montar_interface(fabrica)
        for componente, texto in interfaces[plataforma].items():
            print(f" - {componente}: {texto}")

    return {
        "padrao": "Abstract Factory",
        "descricao": "Famílias de componentes de interface (Web, Móvel, Desktop)",
        "interfaces": interfaces,
    }
