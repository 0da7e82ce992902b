import enum
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional


class TipoNotificacao(enum.Enum):
    INFORMACAO = "informacao"
    ADVERTENCIA = "advertencia"
    ERRO = "erro"
    NOVO_CONTEUDO = "novo_conteudo"


class Notificacao:
    def __init__(self, mensagem: str, tipo: TipoNotificacao, origem: str,
                 timestamp: Optional[datetime] = None):
        self.mensagem = mensagem
        self.tipo = tipo
        self.origem = origem
        self.timestamp = timestamp or datetime.now()

    def to_dict(self) -> dict:
        return {
            "mensagem": self.mensagem,
            "tipo": self.tipo.value,
            "origem": self.origem,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        return f"[{self.timestamp:%H:%M:%S}] [{self.tipo.name}] {self.origem}: {self.mensagem}"


class Observer(ABC):
    def __init__(self):
        self.recebidas: List[Notificacao] = []

    @abstractmethod
    def receber_notificacao(self, notificacao: Notificacao):
        pass

    @abstractmethod
    def esta_interessado_em(self, tipo: TipoNotificacao) -> bool:
        pass


class ClienteMovel(Observer):
    def __init__(self, id_dispositivo: str, *tipos_de_interesse: TipoNotificacao):
        super().__init__()
        self.id_dispositivo = id_dispositivo
        self._tipos_de_interesse = set(tipos_de_interesse)

    def receber_notificacao(self, notificacao: Notificacao):
        self.recebidas.append(notificacao)
        print(f"📱 Dispositivo {self.id_dispositivo} recebeu notificação push: {notificacao}")

    def esta_interessado_em(self, tipo: TipoNotificacao) -> bool:
        return tipo in self._tipos_de_interesse


class AssinanteEmail(Observer):
    def __init__(self, email: str, *tipos_de_interesse: TipoNotificacao):
        super().__init__()
        self.email = email
        self._tipos_de_interesse = set(tipos_de_interesse)

    def receber_notificacao(self, notificacao: Notificacao):
        self.recebidas.append(notificacao)
        print(f"📧 Email enviado para {self.email}: {notificacao}")

    def esta_interessado_em(self, tipo: TipoNotificacao) -> bool:
        return tipo in self._tipos_de_interesse


class PainelAdministracao(Observer):
    """Administradores recebem todos os tipos de notificação"""

    def __init__(self, nome_admin: str):
        super().__init__()
        self.nome_admin = nome_admin

    def receber_notificacao(self, notificacao: Notificacao):
        self.recebidas.append(notificacao)
        print(f"🖥️ Painel de {self.nome_admin} mostra: {notificacao}")

    def esta_interessado_em(self, tipo: TipoNotificacao) -> bool:
        return True


class CentralNotificacoes:
    """Subject - distribui notificações apenas aos observers interessados"""

    def __init__(self):
        self._observers: List[Observer] = []
        self._historico_por_tipo: Dict[TipoNotificacao, List[Notificacao]] = {
            tipo: [] for tipo in TipoNotificacao
        }

    @property
    def observers(self) -> List[Observer]:
        return list(self._observers)

    def inscrever(self, observer: Observer) -> bool:
        if observer in self._observers:
            return False
        self._observers.append(observer)
        print("[Central] Novo observer inscrito no sistema de notificações.")
        return True

    def desinscrever(self, observer: Observer) -> bool:
        if observer not in self._observers:
            return False
        self._observers.remove(observer)
        print("[Central] Observer removido do sistema de notificações.")
        return True

    def publicar(self, notificacao: Notificacao) -> int:
        """Registra a notificação e retorna quantos observers a receberam"""
        self._historico_por_tipo[notificacao.tipo].append(notificacao)

        print(f"\n[Central] Nova notificação gerada: {notificacao}")
        print("[Central] Distribuindo aos observers interessados...")

        entregues = 0
        for observer in self._observers:
            if observer.esta_interessado_em(notificacao.tipo):
                observer.receber_notificacao(notificacao)
                entregues += 1
        return entregues

    def obter_historico(self, tipo: Optional[TipoNotificacao] = None) -> List[Notificacao]:
        """Histórico agrupado por tipo (na ordem do enum) ou filtrado por um tipo"""
        if tipo is not None:
            return list(self._historico_por_tipo[tipo])
        return [n for lista in self._historico_por_tipo.values() for n in lista]

    def mostrar_historico(self, tipo: Optional[TipoNotificacao] = None):
        print("\n=== Histórico de Notificações ===\n")
        if tipo is not None:
            print(f"Filtrando por: {tipo.name}")
        for notificacao in self.obter_historico(tipo):
            print(notificacao)


def demonstrar_observer() -> dict:
    print("\n=== DEMONSTRAÇÃO DO PADRÃO OBSERVER (SISTEMA DE NOTIFICAÇÕES) ===")

    central = CentralNotificacoes()

    cliente_movel1 = ClienteMovel("iPhone-12345", TipoNotificacao.NOVO_CONTEUDO, TipoNotificacao.INFORMACAO)
    cliente_movel2 = ClienteMovel("Android-67890", TipoNotificacao.ERRO,
                                  TipoNotificacao.ADVERTENCIA, TipoNotificacao.NOVO_CONTEUDO)
    assinante_email = AssinanteEmail("usuario@exemplo.com", TipoNotificacao.NOVO_CONTEUDO)
    painel_admin = PainelAdministracao("Administrador Principal")

    for observer in (cliente_movel1, cliente_movel2, assinante_email, painel_admin):
        central.inscrever(observer)

    entregas = [
        central.publicar(Notificacao("Novo artigo publicado: Padrões de Projeto em Python",
                                     TipoNotificacao.NOVO_CONTEUDO, "Sistema de Blog")),
        central.publicar(Notificacao("O servidor está com carga alta",
                                     TipoNotificacao.ADVERTENCIA, "Monitor do Sistema")),
    ]

    central.desinscrever(assinante_email)

    entregas.append(central.publicar(Notificacao("Erro no banco de dados: conexão perdida",
                                                 TipoNotificacao.ERRO, "Serviço de Banco de Dados")))

    central.mostrar_historico()

    return {
        "padrao": "Observer",
        "descricao": "Assinantes notificados conforme os tipos de interesse",
        "entregas_por_publicacao": entregas,
        "historico": [str(n) for n in central.obter_historico()],
    }
