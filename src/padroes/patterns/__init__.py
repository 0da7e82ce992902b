"""
Padrões GoF implementados com cenários de exemplo
"""
from .singleton import ConfiguracaoGlobal, ServicoTema, ServicoIdioma, demonstrar_singleton
from .factory import (
    Documento, DocumentoPDF, DocumentoWord, DocumentoExcel,
    CriadorDocumento, CriadorPDF, CriadorWord, CriadorExcel,
    CatalogoDocumentos, demonstrar_factory_method,
)
from .abstract_factory import (
    FabricaInterface, FabricaWeb, FabricaMovel, FabricaDesktop,
    obter_fabrica, montar_interface, demonstrar_abstract_factory,
)
from .adapter import (
    ProcessadorPagamento, ResultadoPagamento,
    AdaptadorPayPal, AdaptadorStripe, AdaptadorMercadoPago,
    obter_processador, provedores_disponiveis, demonstrar_adapter,
)
from .decorator import (
    Notificador, NotificadorBase, NotificadorDecorator,
    NotificadorEmail, NotificadorSMS, NotificadorPush, demonstrar_decorator,
)
from .facade import AgenciaViagensFacade, ReservaViagem, demonstrar_facade
from .observer import (
    TipoNotificacao, Notificacao, Observer, ClienteMovel, AssinanteEmail,
    PainelAdministracao, CentralNotificacoes, demonstrar_observer,
)
from .command import (
    ContaBancaria, ComandoTransacao, ComandoDeposito, ComandoSaque, Transacao,
    TipoTransacao, criar_comando, StatusTransacao, RegistroTransacao,
    ProcessadorTransacoes, demonstrar_command,
)
from .strategy import (
    Usuario, ResultadoValidacao, EstrategiaValidacao, ValidacaoCadastroBasico,
    ValidacaoSegurancaAvancada, ValidacaoPerfilCompleto, ContextoValidacao,
    obter_estrategia, estrategias_disponiveis, demonstrar_strategy,
)


class Demonstracao:
    """Entrada do catálogo de demonstrações usado pelo menu e pela API"""

    def __init__(self, slug: str, categoria: str, titulo: str, executar,
                 usa_configuracao: bool = False):
        self.slug = slug
        self.categoria = categoria
        self.titulo = titulo
        self._executar = executar
        self._usa_configuracao = usa_configuracao

    def executar(self, configuracao: ConfiguracaoGlobal) -> dict:
        if self._usa_configuracao:
            return self._executar(configuracao)
        return self._executar()


CRIACIONAIS = "Padrões Criacionais"
ESTRUTURAIS = "Padrões Estruturais"
COMPORTAMENTAIS = "Padrões Comportamentais"

DEMONSTRACOES = [
    Demonstracao("singleton", CRIACIONAIS,
                 "Singleton - Configuração Global (tema, idioma, backups)", demonstrar_singleton,
                 usa_configuracao=True),
    Demonstracao("factory-method", CRIACIONAIS,
                 "Factory Method - Criação de Documentos (PDF, Word, Excel)", demonstrar_factory_method),
    Demonstracao("abstract-factory", CRIACIONAIS,
                 "Abstract Factory - Interfaces de Usuário (Web, Móvel, Desktop)", demonstrar_abstract_factory),
    Demonstracao("adapter", ESTRUTURAIS,
                 "Adapter - Integração de APIs de Pagamento (PayPal, Stripe, MercadoPago)", demonstrar_adapter),
    Demonstracao("decorator", ESTRUTURAIS,
                 "Decorator - Notificações Multicanal (Email, SMS, Push)", demonstrar_decorator),
    Demonstracao("facade", ESTRUTURAIS,
                 "Facade - Reservas de Viagem (Hotéis, Voos, Transporte)", demonstrar_facade),
    Demonstracao("observer", COMPORTAMENTAIS,
                 "Observer - Sistema de Notificações (Assinaturas, Alertas, Eventos)", demonstrar_observer),
    Demonstracao("command", COMPORTAMENTAIS,
                 "Command - Transações Bancárias (Depósitos, Saques)", demonstrar_command),
    Demonstracao("strategy", COMPORTAMENTAIS,
                 "Strategy - Validação de Dados (Cadastro, Segurança, Perfil)", demonstrar_strategy),
]


def demonstracoes_por_categoria(categoria: str):
    return [d for d in DEMONSTRACOES if d.categoria == categoria]


def obter_demonstracao(slug: str):
    return next((d for d in DEMONSTRACOES if d.slug == slug), None)


__all__ = [
    # Singleton (configuração injetada)
    'ConfiguracaoGlobal', 'ServicoTema', 'ServicoIdioma',

    # Factory Method
    'Documento', 'DocumentoPDF', 'DocumentoWord', 'DocumentoExcel',
    'CriadorDocumento', 'CriadorPDF', 'CriadorWord', 'CriadorExcel', 'CatalogoDocumentos',

    # Abstract Factory
    'FabricaInterface', 'FabricaWeb', 'FabricaMovel', 'FabricaDesktop',
    'obter_fabrica', 'montar_interface',

    # Adapter
    'ProcessadorPagamento', 'ResultadoPagamento',
    'AdaptadorPayPal', 'AdaptadorStripe', 'AdaptadorMercadoPago',
    'obter_processador', 'provedores_disponiveis',

    # Decorator
    'Notificador', 'NotificadorBase', 'NotificadorDecorator',
    'NotificadorEmail', 'NotificadorSMS', 'NotificadorPush',

    # Facade
    'AgenciaViagensFacade', 'ReservaViagem',

    # Observer
    'TipoNotificacao', 'Notificacao', 'Observer', 'ClienteMovel',
    'AssinanteEmail', 'PainelAdministracao', 'CentralNotificacoes',

    # Command
    'ContaBancaria', 'ComandoTransacao', 'ComandoDeposito', 'ComandoSaque', 'Transacao',
    'TipoTransacao', 'criar_comando', 'StatusTransacao', 'RegistroTransacao',
    'ProcessadorTransacoes',

    # Strategy
    'Usuario', 'ResultadoValidacao', 'EstrategiaValidacao', 'ValidacaoCadastroBasico',
    'ValidacaoSegurancaAvancada', 'ValidacaoPerfilCompleto', 'ContextoValidacao',
    'obter_estrategia', 'estrategias_disponiveis',

    # Catálogo de demonstrações
    'Demonstracao', 'DEMONSTRACOES', 'CRIACIONAIS', 'ESTRUTURAIS', 'COMPORTAMENTAIS',
    'demonstracoes_por_categoria', 'obter_demonstracao',
    'demonstrar_singleton', 'demonstrar_factory_method', 'demonstrar_abstract_factory',
    'demonstrar_adapter', 'demonstrar_decorator', 'demonstrar_facade',
    'demonstrar_observer', 'demonstrar_command', 'demonstrar_strategy',
]
