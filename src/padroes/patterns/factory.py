"""
Padrão Factory Method aplicado à criação de documentos
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional


class Documento(ABC):
    """Interface comum para todos os tipos de documento"""

    extensao = ""
    tipo = ""
    caracteristicas = ""
    # formato de exportação -> texto do resultado
    exportacoes: Dict[str, str] = {}

    def __init__(self, nome: str):
        self._nome = nome
        self.conteudo = ""

    @property
    def nome(self) -> str:
        return self._nome

    @property
    def nome_arquivo(self) -> str:
        return f"{self._nome}{self.extensao}"

    @abstractmethod
    def abrir(self) -> str:
        pass

    @abstractmethod
    def salvar(self, caminho: str) -> bool:
        pass

    def exportar(self, formato: str) -> str:
        modelo = self.exportacoes.get(formato.lower())
        if modelo:
            return modelo.format(nome=self._nome)
        return f"Formato de exportação '{formato}' não suportado para {self.tipo}"

    def obter_informacoes(self) -> str:
        tamanho_kb = len(self.conteudo) / 1024.0
        return (f"{self.tipo}: {self.nome_arquivo}\n"
                f"Tamanho: {tamanho_kb:.2f} KB\n"
                f"Características: {self.caracteristicas}")


class DocumentoPDF(Documento):
    extensao = ".pdf"
    tipo = "Documento PDF"
    caracteristicas = "Suporta texto, imagens, links e formulários"
    exportacoes = {
        "imagem": "Exportando {nome} como conjunto de imagens PNG",
        "texto": "Extraindo texto de {nome} (sem formatação)",
    }

    def abrir(self) -> str:
        mensagem = f"Abrindo documento PDF '{self.nome_arquivo}' com o leitor de PDF..."
        print(mensagem)
        return mensagem

    def salvar(self, caminho: str) -> bool:
        print(f"Salvando PDF em {caminho}/{self.nome_arquivo}")
        print("Aplicando compressão e otimização para PDF...")
        return True


class DocumentoWord(Documento):
    extensao = ".docx"
    tipo = "Documento Word"
    caracteristicas = "Processador de texto com formatação, estilos e revisões"
    exportacoes = {
        "pdf": "Exportando {nome} para formato PDF",
        "html": "Exportando {nome} para página web HTML",
        "txt": "Exportando {nome} para texto simples",
    }

    def abrir(self) -> str:
        mensagem = f"Abrindo documento Word '{self.nome_arquivo}' com o editor de texto..."
        print(mensagem)
        return mensagem

    def salvar(self, caminho: str) -> bool:
        print(f"Salvando documento Word em {caminho}/{self.nome_arquivo}")
        print("Verificando ortografia e gramática...")
        return True


class DocumentoExcel(Documento):
    extensao = ".xlsx"
    tipo = "Planilha Excel"
    caracteristicas = "Cálculos, tabelas dinâmicas e gráficos"
    exportacoes = {
        "pdf": "Exportando {nome} para formato PDF",
        "csv": "Exportando {nome} para valores separados por vírgula",
        "xml": "Exportando {nome} para formato XML",
    }

    def abrir(self) -> str:
        mensagem = f"Abrindo planilha '{self.nome_arquivo}' com o editor de planilhas..."
        print(mensagem)
        return mensagem

    def salvar(self, caminho: str) -> bool:
        print(f"Salvando planilha em {caminho}/{self.nome_arquivo}")
        print("Recalculando fórmulas e atualizando gráficos...")
        return True


class CriadorDocumento(ABC):
    """Creator - declara o factory method e a lógica comum a todos os documentos"""

    @abstractmethod
    def criar_documento(self, nome: str) -> Documento:
        pass

    def editar_documento(self, documento: Documento, novo_conteudo: str):
        print(f"Editando documento: {documento.nome_arquivo}")
        documento.conteudo = novo_conteudo
        print(f"Conteúdo atualizado ({len(novo_conteudo)} caracteres)")

    def gerar_previa(self, documento: Documento) -> str:
        """Primeiros 100 caracteres do conteúdo"""
        if len(documento.conteudo) > 100:
            return documento.conteudo[:97] + "..."
        return documento.conteudo

    def mostrar_previa(self, documento: Documento):
        print("\n--- PRÉVIA ---")
        print(documento.obter_informacoes())
        print("\nConteúdo (primeiros 100 caracteres):")
        print(self.gerar_previa(documento))
        print("--------------\n")


class CriadorPDF(CriadorDocumento):
    def criar_documento(self, nome: str) -> Documento:
        documento = DocumentoPDF(nome)
        print(f"Criando novo documento PDF: {documento.nome_arquivo}")
        return documento


class CriadorWord(CriadorDocumento):
    def criar_documento(self, nome: str) -> Documento:
        documento = DocumentoWord(nome)
        print(f"Criando novo documento Word: {documento.nome_arquivo}")
        return documento


class CriadorExcel(CriadorDocumento):
    def criar_documento(self, nome: str) -> Documento:
        documento = DocumentoExcel(nome)
        print(f"Criando nova planilha Excel: {documento.nome_arquivo}")
        return documento


class CatalogoDocumentos:
    """Registro de criadores por tipo de documento"""

    def __init__(self):
        self._criadores: Dict[str, CriadorDocumento] = {
            "pdf": CriadorPDF(),
            "word": CriadorWord(),
            "excel": CriadorExcel(),
        }

    def registrar_criador(self, tipo: str, criador: CriadorDocumento):
        self._criadores[tipo.lower()] = criador

    def obter_criador(self, tipo: str) -> Optional[CriadorDocumento]:
        return self._criadores.get(tipo.lower())

    def criar_documento(self, tipo: str, nome: str) -> Optional[Documento]:
        criador = self.obter_criador(tipo)
        if criador:
            return criador.criar_documento(nome)
        return None

    def get_tipos_disponiveis(self) -> List[str]:
        return list(self._criadores.keys())


def demonstrar_factory_method() -> dict:
    print("\n=== DEMONSTRAÇÃO DO PADRÃO FACTORY METHOD (GESTÃO DE DOCUMENTOS) ===\n")

    catalogo = CatalogoDocumentos()
    conteudos = {
        "pdf": ("Relatorio2023", "Este é um relatório anual gerado em formato PDF com gráficos e tabelas."),
        "word": ("Contrato", "CONTRATO DE SERVIÇOS\n\nNa cidade de..., na data de..., as partes acordam..."),
        "excel": ("Orcamento", "Produto,Quantidade,Preço\nNotebook,5,1200\nMonitor,10,300\nTeclado,15,50"),
    }
    formatos = {"pdf": ["imagem"], "word": ["pdf"], "excel": ["csv", "xml"]}

    print("--- Criando diferentes tipos de documento ---\n")
    documentos = {}
    for tipo, (nome, _) in conteudos.items():
        documentos[tipo] = catalogo.criar_documento(tipo, nome)

    print("\n--- Editando documentos ---\n")
    for tipo, (_, conteudo) in conteudos.items():
        catalogo.obter_criador(tipo).editar_documento(documentos[tipo], conteudo)

    print("\n--- Prévia dos documentos ---")
    for tipo, documento in documentos.items():
        catalogo.obter_criador(tipo).mostrar_previa(documento)

    print("--- Abrindo e salvando documentos ---\n")
    for documento in documentos.values():
        documento.abrir()
        documento.salvar("/documentos")

    print("\n--- Exportando documentos ---\n")
    exportacoes = []
    for tipo, lista in formatos.items():
        for formato in lista:
            resultado = documentos[tipo].exportar(formato)
            print(resultado)
            exportacoes.append(resultado)

    return {
        "padrao": "Factory Method",
        "descricao": "Criação de documentos sem acoplar o cliente às classes concretas",
        "documentos": [documento.nome_arquivo for documento in documentos.values()],
        "exportacoes": exportacoes,
    }
