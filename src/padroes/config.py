"""
Configuração da aplicação lida do ambiente (.env)
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Servidor HTTP
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", "8000"))
APP_RELOAD = os.getenv("APP_RELOAD", "false").lower() in ("1", "true", "sim")

# Arquivo (simulado) usado pela ConfiguracaoGlobal
ARQUIVO_CONFIGURACAO = os.getenv("ARQUIVO_CONFIGURACAO", "config.json")

# Moeda usada nas descrições de valores
SIMBOLO_MOEDA = os.getenv("SIMBOLO_MOEDA", "R$")
