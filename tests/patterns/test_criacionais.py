"""
Testes dos padrões criacionais: configuração injetada, Factory Method e Abstract Factory
"""

from padroes.patterns.abstract_factory import (
    BotaoMovel, FabricaDesktop, FabricaMovel, FabricaWeb, MenuMovel,
    demonstrar_abstract_factory, montar_interface, obter_fabrica,
)
from padroes.patterns.factory import (
    CatalogoDocumentos, CriadorDocumento, CriadorExcel, CriadorPDF, CriadorWord,
    DocumentoExcel, DocumentoPDF, DocumentoWord, demonstrar_factory_method,
)
from padroes.patterns.singleton import (
    ConfiguracaoGlobal, ServicoIdioma, ServicoTema, demonstrar_singleton,
)


class TestConfiguracaoGlobal:
    """Testes da configuração construída explicitamente"""

    def setup_method(self):
        self.config = ConfiguracaoGlobal("teste.json")

    def test_valores_padrao(self):
        assert self.config.obter_valor("TemaEscuro") is False
        assert self.config.obter_valor("IdiomaPreferido") == "pt-BR"
        assert self.config.obter_valor("TamanhoFonte") == 12
        assert self.config.obter_valor("IntervaloBackup") == 30

    def test_valor_inexistente_usa_padrao(self):
        assert self.config.obter_valor("NaoExiste") is None
        assert self.config.obter_valor("NaoExiste", "padrão") == "padrão"

    def test_definir_e_restaurar(self):
        self.config.definir_valor("TamanhoFonte", 16)
        self.config.definir_valor("NovaOpcao", "x")
        assert self.config.obter_valor("TamanhoFonte") == 16

        self.config.restaurar_padroes()

        assert self.config.obter_valor("TamanhoFonte") == 12
        assert self.config.obter_valor("NovaOpcao") is None

    def test_instancias_independentes(self):
        outra = ConfiguracaoGlobal()
        outra.definir_valor("TemaEscuro", True)
        assert self.config.obter_valor("TemaEscuro") is False

    def test_persistencia_simulada(self, capsys, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert self.config.salvar_configuracao() is True
        assert self.config.carregar_configuracao() is True
        assert "teste.json" in capsys.readouterr().out
        assert list(tmp_path.iterdir()) == []

    def test_servicos_compartilham_configuracao(self):
        tema = ServicoTema(self.config)
        idioma = ServicoIdioma(self.config)

        self.config.definir_valor("TemaEscuro", True)
        self.config.definir_valor("IdiomaPreferido", "en-US")

        assert tema.descrever() == "Tema escuro, fonte 12"
        assert idioma.idioma_atual() == "en-US"
        assert tema.configuracao is idioma.configuracao

    def test_demonstracao_usa_configuracao_injetada(self):
        resumo = demonstrar_singleton(self.config)

        assert resumo["arquivo"] == "teste.json"
        assert resumo["mesma_instancia"] is True
        assert resumo["valores_modificados"]["TamanhoFonte"] == 14
        assert "NovaOpcao" not in resumo["valores_restaurados"]


class TestFactoryMethod:

    def test_criadores_produzem_documento_certo(self):
        assert isinstance(CriadorPDF().criar_documento("a"), DocumentoPDF)
        assert isinstance(CriadorWord().criar_documento("a"), DocumentoWord)
        assert isinstance(CriadorExcel().criar_documento("a"), DocumentoExcel)

    def test_nome_arquivo(self):
        assert CriadorPDF().criar_documento("Relatorio").nome_arquivo == "Relatorio.pdf"
        assert CriadorWord().criar_documento("Contrato").nome_arquivo == "Contrato.docx"
        assert CriadorExcel().criar_documento("Orcamento").nome_arquivo == "Orcamento.xlsx"

    def test_exportacoes_suportadas(self):
        pdf = DocumentoPDF("Relatorio")
        excel = DocumentoExcel("Orcamento")
        assert pdf.exportar("imagem") == "Exportando Relatorio como conjunto de imagens PNG"
        assert excel.exportar("CSV") == "Exportando Orcamento para valores separados por vírgula"

    def test_exportacao_nao_suportada(self):
        assert DocumentoWord("Contrato").exportar("csv") == \
            "Formato de exportação 'csv' não suportado para Documento Word"

    def test_editar_e_previa(self):
        criador = CriadorWord()
        documento = criador.criar_documento("Longo")
        criador.editar_documento(documento, "x" * 150)

        previa = criador.gerar_previa(documento)

        assert documento.conteudo == "x" * 150
        assert len(previa) == 100
        assert previa.endswith("...")

    def test_previa_curta_sem_corte(self):
        criador = CriadorPDF()
        documento = criador.criar_documento("Curto")
        criador.editar_documento(documento, "conteúdo")
        assert criador.gerar_previa(documento) == "conteúdo"

    def test_informacoes(self):
        documento = DocumentoExcel("Orcamento")
        documento.conteudo = "a" * 2048
        informacoes = documento.obter_informacoes()
        assert "Planilha Excel: Orcamento.xlsx" in informacoes
        assert "Tamanho: 2.00 KB" in informacoes

    def test_catalogo(self):
        catalogo = CatalogoDocumentos()
        assert catalogo.get_tipos_disponiveis() == ["pdf", "word", "excel"]
        assert isinstance(catalogo.criar_documento("PDF", "x"), DocumentoPDF)
        assert catalogo.criar_documento("odt", "x") is None

    def test_catalogo_registrar_criador(self):
        class CriadorRelatorio(CriadorDocumento):
            def criar_documento(self, nome):
                return DocumentoPDF(f"relatorio-{nome}")

        catalogo = CatalogoDocumentos()
        catalogo.registrar_criador("relatorio", CriadorRelatorio())

        assert catalogo.criar_documento("relatorio", "mensal").nome == "relatorio-mensal"

    def test_demonstracao(self):
        resumo = demonstrar_factory_method()
        assert resumo["documentos"] == ["Relatorio2023.pdf", "Contrato.docx", "Orcamento.xlsx"]
        assert len(resumo["exportacoes"]) == 4


class TestAbstractFactory:

    def test_familia_movel(self):
        fabrica = FabricaMovel()
        assert isinstance(fabrica.criar_botao(), BotaoMovel)
        assert isinstance(fabrica.criar_menu(), MenuMovel)

    def test_obter_fabrica(self):
        assert isinstance(obter_fabrica("WEB"), FabricaWeb)
        assert isinstance(obter_fabrica("desktop"), FabricaDesktop)
        assert obter_fabrica("tv") is None

    def test_componentes_colaboram_dentro_da_familia(self):
        interface = montar_interface(FabricaWeb())
        assert interface["composicao"] == (
            "Menu de navegação web (barra superior) contendo [Botão HTML com estilo CSS responsivo]"
        )

    def test_demonstracao(self):
        resumo = demonstrar_abstract_factory()
        assert set(resumo["interfaces"]) == {"web", "movel", "desktop"}
