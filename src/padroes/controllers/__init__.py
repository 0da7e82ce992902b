"""
Controllers do padrão MVC para a API de demonstrações
"""

from .demo_controller import DemoController
from .transacao_controller import TransacaoController
from .validacao_controller import ValidacaoController
from .notificacao_controller import NotificacaoController
from .pagamento_controller import PagamentoController

__all__ = [
    'DemoController',
    'TransacaoController',
    'ValidacaoController',
    'NotificacaoController',
    'PagamentoController'
]
