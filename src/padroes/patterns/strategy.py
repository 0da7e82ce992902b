from abc import ABC, abstractmethod
from datetime import date
from typing import Dict, List, Optional


class Usuario:
    def __init__(self, nome: str, email: str, senha: str, telefone: str, data_nascimento: date):
        self.nome = nome
        self.email = email
        self.senha = senha
        self.telefone = telefone
        self.data_nascimento = data_nascimento


class ResultadoValidacao:
    def __init__(self):
        self.erros: List[str] = []

    @property
    def valido(self) -> bool:
        return not self.erros

    def adicionar_erro(self, erro: str):
        self.erros.append(erro)

    def __str__(self) -> str:
        if self.valido:
            return "Validação concluída. Nenhum erro encontrado."
        linhas = [f"{indice}. {erro}" for indice, erro in enumerate(self.erros, start=1)]
        return f"Validação falhou. Foram encontrados {len(self.erros)} erros:\n" + "\n".join(linhas)


class EstrategiaValidacao(ABC):
    """Interface Strategy para validação de usuários"""

    @abstractmethod
    def validar(self, usuario: Usuario) -> ResultadoValidacao:
        pass

    @abstractmethod
    def get_descricao(self) -> str:
        pass


class ValidacaoCadastroBasico(EstrategiaValidacao):
    def validar(self, usuario: Usuario) -> ResultadoValidacao:
        resultado = ResultadoValidacao()

        if not usuario.nome or not usuario.nome.strip():
            resultado.adicionar_erro("O nome é obrigatório.")
        elif len(usuario.nome) < 2:
            resultado.adicionar_erro("O nome deve ter pelo menos 2 caracteres.")

        if not usuario.email or not usuario.email.strip():
            resultado.adicionar_erro("O email é obrigatório.")
        elif "@" not in usuario.email or "." not in usuario.email:
            resultado.adicionar_erro("O email não tem um formato válido.")

        if not usuario.senha or not usuario.senha.strip():
            resultado.adicionar_erro("A senha é obrigatória.")
        elif len(usuario.senha) < 6:
            resultado.adicionar_erro("A senha deve ter pelo menos 6 caracteres.")

        return resultado

    def get_descricao(self) -> str:
        return "Validação básica para cadastro de usuários"


class ValidacaoSegurancaAvancada(EstrategiaValidacao):
    def validar(self, usuario: Usuario) -> ResultadoValidacao:
        resultado = ResultadoValidacao()
        senha = usuario.senha

        if not senha or not senha.strip():
            resultado.adicionar_erro("A senha é obrigatória.")
            return resultado

        if len(senha) < 8:
            resultado.adicionar_erro("A senha deve ter pelo menos 8 caracteres.")
        if not any(c.isupper() for c in senha):
            resultado.adicionar_erro("A senha deve conter pelo menos uma letra maiúscula.")
        if not any(c.islower() for c in senha):
            resultado.adicionar_erro("A senha deve conter pelo menos uma letra minúscula.")
        if not any(c.isdigit() for c in senha):
            resultado.adicionar_erro("A senha deve conter pelo menos um número.")
        if all(c.isalnum() for c in senha):
            resultado.adicionar_erro("A senha deve conter pelo menos um caractere especial.")
        if usuario.nome and usuario.nome.lower() in senha.lower():
            resultado.adicionar_erro("A senha não deve conter o seu nome.")

        return resultado

    def get_descricao(self) -> str:
        return "Validação de segurança avançada para senhas"


class ValidacaoPerfilCompleto(EstrategiaValidacao):
    def __init__(self, hoje: Optional[date] = None):
        self._hoje = hoje

    def validar(self, usuario: Usuario) -> ResultadoValidacao:
        resultado = ResultadoValidacao()

        if not usuario.nome or not usuario.nome.strip():
            resultado.adicionar_erro("O nome é obrigatório para completar o perfil.")
        if not usuario.email or not usuario.email.strip():
            resultado.adicionar_erro("O email é obrigatório para completar o perfil.")

        if not usuario.telefone or not usuario.telefone.strip():
            resultado.adicionar_erro("O telefone é obrigatório para completar o perfil.")
        elif not all(c.isdigit() or c in "+- " for c in usuario.telefone):
            resultado.adicionar_erro("O telefone contém caracteres inválidos.")

        if calcular_idade(usuario.data_nascimento, self._hoje or date.today()) < 18:
            resultado.adicionar_erro("É preciso ter mais de 18 anos para completar o perfil.")

        return resultado

    def get_descricao(self) -> str:
        return "Validação de perfil completo do usuário"


def calcular_idade(data_nascimento: date, hoje: date) -> int:
    idade = hoje.year - data_nascimento.year
    if (hoje.month, hoje.day) < (data_nascimento.month, data_nascimento.day):
        idade -= 1
    return idade


class ContextoValidacao:
    """Contexto que usa as strategies de validação"""

    def __init__(self, estrategia: EstrategiaValidacao):
        self._estrategia = estrategia

    @property
    def estrategia(self) -> EstrategiaValidacao:
        return self._estrategia

    def set_strategy(self, estrategia: EstrategiaValidacao):
        self._estrategia = estrategia
        print(f"[Validação] Estratégia alterada para: {estrategia.get_descricao()}")

    def validar_usuario(self, usuario: Usuario) -> ResultadoValidacao:
        print(f"[Validação] Aplicando estratégia: {self._estrategia.get_descricao()}")
        return self._estrategia.validar(usuario)


_ESTRATEGIAS: Dict[str, type] = {
    "basica": ValidacaoCadastroBasico,
    "seguranca": ValidacaoSegurancaAvancada,
    "perfil": ValidacaoPerfilCompleto,
}


def obter_estrategia(nome: str) -> Optional[EstrategiaValidacao]:
    estrategia = _ESTRATEGIAS.get(nome.lower())
    if estrategia:
        return estrategia()
    return None


def estrategias_disponiveis() -> Dict[str, str]:
    return {nome: classe().get_descricao() for nome, classe in _ESTRATEGIAS.items()}


def demonstrar_strategy() -> dict:
    usuario_novo = Usuario("Ana", "ana@exemplo.com", "pass123", "555-123-4567", date(1990, 5, 15))
    # Senha contém o próprio nome
    usuario_senha_fraca = Usuario("Carlos", "carlos@exemplo.com", "carlos123", "555-987-6543", date(1985, 8, 22))
    # Sem telefone e menor de idade
    usuario_incompleto = Usuario("Elena", "elena@exemplo.com", "Secure$123", "", date(2010, 3, 10))

    print("\n=== VALIDAÇÃO DE USUÁRIOS COM DIFERENTES ESTRATÉGIAS ===\n")
    validador = ContextoValidacao(ValidacaoCadastroBasico())

    resultados = {}

    print("\n--- Validando usuário novo com estratégia básica ---")
    resultados["basica"] = validador.validar_usuario(usuario_novo)
    print(resultados["basica"])

    print("\n--- Trocando para estratégia de segurança avançada ---")
    validador.set_strategy(ValidacaoSegurancaAvancada())
    print("\n--- Validando usuário com senha fraca ---")
    resultados["seguranca"] = validador.validar_usuario(usuario_senha_fraca)
    print(resultados["seguranca"])

    print("\n--- Trocando para estratégia de perfil completo ---")
    validador.set_strategy(ValidacaoPerfilCompleto())
    print("\n--- Validando usuário com perfil incompleto ---")
    resultados["perfil"] = validador.validar_usuario(usuario_incompleto)
    print(resultados["perfil"])

    return {
        "padrao": "Strategy",
        "descricao": "Regras de validação intercambiáveis em tempo de execução",
        "resultados": {
            nome: {"valido": r.valido, "erros": r.erros} for nome, r in resultados.items()
        },
    }
