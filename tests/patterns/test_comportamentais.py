"""
Testes dos padrões comportamentais Observer e Strategy
(o Command tem arquivo próprio)
"""

from datetime import date, datetime

from padroes.patterns.observer import (
    AssinanteEmail, CentralNotificacoes, ClienteMovel, Notificacao,
    PainelAdministracao, TipoNotificacao, demonstrar_observer,
)
from padroes.patterns.strategy import (
    ContextoValidacao, Usuario, ValidacaoCadastroBasico, ValidacaoPerfilCompleto,
    ValidacaoSegurancaAvancada, calcular_idade, demonstrar_strategy,
    estrategias_disponiveis, obter_estrategia,
)


class TestObserver:
    """Testes da central de notificações"""

    def setup_method(self):
        self.central = CentralNotificacoes()
        self.movel = ClienteMovel("iPhone-1", TipoNotificacao.INFORMACAO)
        self.email = AssinanteEmail("a@b.com", TipoNotificacao.ERRO, TipoNotificacao.ADVERTENCIA)
        self.admin = PainelAdministracao("Admin")
        for observer in (self.movel, self.email, self.admin):
            self.central.inscrever(observer)

    def test_entrega_somente_a_interessados(self):
        entregues = self.central.publicar(Notificacao("falhou", TipoNotificacao.ERRO, "Banco"))

        assert entregues == 2
        assert self.movel.recebidas == []
        assert len(self.email.recebidas) == 1
        assert len(self.admin.recebidas) == 1

    def test_admin_recebe_todos_os_tipos(self):
        for tipo in TipoNotificacao:
            self.central.publicar(Notificacao("msg", tipo, "Teste"))
        assert len(self.admin.recebidas) == len(TipoNotificacao)

    def test_inscricao_duplicada_ignorada(self):
        assert self.central.inscrever(self.movel) is False
        assert len(self.central.observers) == 3

    def test_desinscrever(self):
        assert self.central.desinscrever(self.email) is True
        assert self.central.desinscrever(self.email) is False

        self.central.publicar(Notificacao("falhou", TipoNotificacao.ERRO, "Banco"))
        assert self.email.recebidas == []

    def test_historico_guarda_todas_as_publicacoes(self):
        """Notificações sem interessados também entram no histórico"""
        self.central.desinscrever(self.admin)
        self.central.publicar(Notificacao("novo", TipoNotificacao.NOVO_CONTEUDO, "Blog"))
        self.central.publicar(Notificacao("info", TipoNotificacao.INFORMACAO, "Sistema"))

        assert [n.mensagem for n in self.central.obter_historico()] == ["info", "novo"]
        assert [n.mensagem for n in self.central.obter_historico(TipoNotificacao.NOVO_CONTEUDO)] == ["novo"]
        assert self.central.obter_historico(TipoNotificacao.ERRO) == []

    def test_formato_da_notificacao(self):
        notificacao = Notificacao("Servidor lento", TipoNotificacao.ADVERTENCIA, "Monitor",
                                  timestamp=datetime(2026, 10, 19, 8, 5, 9))
        assert str(notificacao) == "[08:05:09] [ADVERTENCIA] Monitor: Servidor lento"

    def test_mostrar_historico_filtrado(self, capsys):
        self.central.publicar(Notificacao("falhou", TipoNotificacao.ERRO, "Banco"))
        self.central.publicar(Notificacao("info", TipoNotificacao.INFORMACAO, "Sistema"))
        capsys.readouterr()

        self.central.mostrar_historico(TipoNotificacao.ERRO)
        saida = capsys.readouterr().out

        assert "Filtrando por: ERRO" in saida
        assert "falhou" in saida
        assert "info" not in saida

    def test_demonstracao(self):
        resumo = demonstrar_observer()
        assert resumo["entregas_por_publicacao"] == [4, 2, 2]
        assert len(resumo["historico"]) == 3


class TestStrategy:
    """Testes das estratégias de validação"""

    def setup_method(self):
        self.usuario = Usuario("Ana", "ana@exemplo.com", "pass123", "555-123-4567", date(1990, 5, 15))

    def test_cadastro_basico_valido(self):
        resultado = ValidacaoCadastroBasico().validar(self.usuario)
        assert resultado.valido is True
        assert str(resultado) == "Validação concluída. Nenhum erro encontrado."

    def test_cadastro_basico_invalido(self):
        usuario = Usuario("A", "email-invalido", "123", "", date(1990, 1, 1))
        resultado = ValidacaoCadastroBasico().validar(usuario)

        assert resultado.valido is False
        assert resultado.erros == [
            "O nome deve ter pelo menos 2 caracteres.",
            "O email não tem um formato válido.",
            "A senha deve ter pelo menos 6 caracteres.",
        ]
        assert str(resultado).startswith("Validação falhou. Foram encontrados 3 erros:\n1. ")

    def test_seguranca_avancada_senha_com_nome(self):
        usuario = Usuario("Carlos", "carlos@exemplo.com", "carlos123", "", date(1985, 8, 22))
        erros = ValidacaoSegurancaAvancada().validar(usuario).erros

        assert "A senha deve conter pelo menos uma letra maiúscula." in erros
        assert "A senha deve conter pelo menos um caractere especial." in erros
        assert "A senha não deve conter o seu nome." in erros
        assert "A senha deve ter pelo menos 8 caracteres." not in erros

    def test_seguranca_avancada_senha_forte(self):
        usuario = Usuario("Elena", "elena@exemplo.com", "Secure$123", "", date(2000, 1, 1))
        assert ValidacaoSegurancaAvancada().validar(usuario).valido is True

    def test_seguranca_avancada_senha_vazia(self):
        usuario = Usuario("Elena", "e@x.com", "  ", "", date(2000, 1, 1))
        assert ValidacaoSegurancaAvancada().validar(usuario).erros == ["A senha é obrigatória."]

    def test_seguranca_avancada_ignora_nome_vazio(self):
        """Sem nome não há o que procurar na senha"""
        usuario = Usuario("", "e@x.com", "Secure$123", "", date(2000, 1, 1))
        assert ValidacaoSegurancaAvancada().validar(usuario).valido is True

    def test_perfil_completo(self):
        hoje = date(2026, 10, 19)
        menor = Usuario("Elena", "elena@exemplo.com", "Secure$123", "", date(2010, 3, 10))
        telefone_invalido = Usuario("Bia", "bia@x.com", "x", "55a-123", date(1990, 1, 1))

        erros_menor = ValidacaoPerfilCompleto(hoje).validar(menor).erros
        erros_telefone = ValidacaoPerfilCompleto(hoje).validar(telefone_invalido).erros

        assert erros_menor == [
            "O telefone é obrigatório para completar o perfil.",
            "É preciso ter mais de 18 anos para completar o perfil.",
        ]
        assert erros_telefone == ["O telefone contém caracteres inválidos."]
        assert ValidacaoPerfilCompleto(hoje).validar(self.usuario).valido is True

    def test_calcular_idade_considera_aniversario(self):
        assert calcular_idade(date(2008, 10, 20), date(2026, 10, 19)) == 17
        assert calcular_idade(date(2008, 10, 19), date(2026, 10, 19)) == 18

    def test_contexto_troca_estrategia(self, capsys):
        contexto = ContextoValidacao(ValidacaoCadastroBasico())
        assert contexto.validar_usuario(self.usuario).valido is True

        contexto.set_strategy(ValidacaoSegurancaAvancada())

        assert isinstance(contexto.estrategia, ValidacaoSegurancaAvancada)
        assert contexto.validar_usuario(self.usuario).valido is False
        assert "Estratégia alterada para: Validação de segurança avançada" in capsys.readouterr().out

    def test_obter_estrategia(self):
        assert isinstance(obter_estrategia("PERFIL"), ValidacaoPerfilCompleto)
        assert obter_estrategia("inexistente") is None
        assert set(estrategias_disponiveis()) == {"basica", "seguranca", "perfil"}

    def test_demonstracao(self):
        resultados = demonstrar_strategy()["resultados"]
        assert resultados["basica"]["valido"] is True
        assert resultados["seguranca"]["valido"] is False
        assert resultados["perfil"]["valido"] is False
