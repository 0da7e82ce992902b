from abc import ABC, abstractmethod
from typing import List


class Notificador(ABC):
    """Interface Component do padrão Decorator"""

    @abstractmethod
    def enviar(self, mensagem: str) -> List[str]:
        """Entrega a mensagem e retorna os registros de cada canal"""
        pass

    @abstractmethod
    def get_descricao(self) -> str:
        pass

    @abstractmethod
    def get_custo(self) -> float:
        pass


class NotificadorBase(Notificador):
    """Notificação dentro da própria aplicação"""

    def __init__(self, destinatario: str):
        self._destinatario = destinatario

    def enviar(self, mensagem: str) -> List[str]:
        return [f"[App] {self._destinatario}: {mensagem}"]

    def get_descricao(self) -> str:
        return "Notificação básica"

    def get_custo(self) -> float:
        return 0.0


class NotificadorDecorator(Notificador):
    """Decorator base - delega tudo ao notificador envolvido"""

    def __init__(self, notificador: Notificador):
        self._notificador = notificador

    def enviar(self, mensagem: str) -> List[str]:
        return self._notificador.enviar(mensagem)

    def get_descricao(self) -> str:
        return self._notificador.get_descricao()

    def get_custo(self) -> float:
        return self._notificador.get_custo()


# Decorators concretos para canais adicionais
class NotificadorEmail(NotificadorDecorator):
    def __init__(self, notificador: Notificador, email: str):
        super().__init__(notificador)
        self._email = email

    def enviar(self, mensagem: str) -> List[str]:
        return super().enviar(mensagem) + [f"[Email] {self._email}: {mensagem}"]

    def get_descricao(self) -> str:
        return super().get_descricao() + " + Email"

    def get_custo(self) -> float:
        return super().get_custo() + 0.01


class NotificadorSMS(NotificadorDecorator):
    def __init__(self, notificador: Notificador, telefone: str):
        super().__init__(notificador)
        self._telefone = telefone

    def enviar(self, mensagem: str) -> List[str]:
        # SMS tem limite de 160 caracteres
        return super().enviar(mensagem) + [f"[SMS] {self._telefone}: {mensagem[:160]}"]

    def get_descricao(self) -> str:
        return super().get_descricao() + " + SMS"

    def get_custo(self) -> float:
        return super().get_custo() + 0.10


class NotificadorPush(NotificadorDecorator):
    def __init__(self, notificador: Notificador, dispositivo: str):
        super().__init__(notificador)
        self._dispositivo = dispositivo

    def enviar(self, mensagem: str) -> List[str]:
        return super().enviar(mensagem) + [f"[Push] {self._dispositivo}: {mensagem}"]

    def get_descricao(self) -> str:
        return super().get_descricao() + " + Push"

    def get_custo(self) -> float:
        return super().get_custo() + 0.02


def demonstrar_decorator() -> dict:
    print("\n===== SISTEMA DE NOTIFICAÇÕES MULTICANAL COM DECORATOR =====")
    print("Funcionalidades adicionadas a objetos dinamicamente, sem alterar sua estrutura.")

    mensagem = "Seu pedido foi enviado!"
    etapas = []

    notificador: Notificador = NotificadorBase("ana")
    for titulo, proximo in (
        ("Notificação básica", None),
        ("Com email", lambda n: NotificadorEmail(n, "ana@exemplo.com")),
        ("Com email e SMS", lambda n: NotificadorSMS(n, "+55 11 99999-0000")),
        ("Completa (email, SMS e push)", lambda n: NotificadorPush(n, "Android-67890")),
    ):
        if proximo:
            notificador = proximo(notificador)
        print(f"\n--- {titulo} ---")
        entregas = notificador.enviar(mensagem)
        for entrega in entregas:
            print(entrega)
        print(f"Custo por mensagem: {notificador.get_custo():.2f}")
        etapas.append({
            "descricao": notificador.get_descricao(),
            "entregas": entregas,
            "custo": round(notificador.get_custo(), 2),
        })

    return {
        "padrao": "Decorator",
        "descricao": "Canais de notificação empilhados dinamicamente",
        "etapas": etapas,
    }
