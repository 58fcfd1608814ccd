"""
Erros da camada de persistência
Classificação dos erros do MongoDB em tipos que a API sabe apresentar
"""

import logging
from typing import Any, Dict, Optional

from pymongo import errors as mongo_errors

logger = logging.getLogger(__name__)

# Códigos do servidor MongoDB: Unauthorized, AuthenticationFailed
CODIGOS_PERMISSAO = {13, 18}


class PersistenciaError(Exception):
    """Erro base da camada de persistência"""

    error_code = "PERSISTENCE_ERROR"
    status_code = 500
    retry_allowed = False

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidacaoError(PersistenciaError):
    """Campos obrigatórios ausentes ou regra de negócio violada"""

    error_code = "VALIDATION_ERROR"
    status_code = 400


class RegistroNaoEncontradoError(PersistenciaError):
    error_code = "NOT_FOUND"
    status_code = 404


class PermissaoNegadaError(PersistenciaError):
    error_code = "PERMISSION_DENIED"
    status_code = 403


class ConfiguracaoBackendError(PersistenciaError):
    """Backend sem conexão ou com credenciais/URI inválidas"""

    error_code = "BACKEND_MISCONFIGURED"
    status_code = 503


class ErroPersistenciaDesconhecido(PersistenciaError):
    error_code = "UNKNOWN_ERROR"
    status_code = 500
    retry_allowed = True


def classificar_erro(exc: Exception) -> PersistenciaError:
    """
    Converte uma exceção do driver em PersistenciaError

    Args:
        exc: Exceção lançada pelo motor/pymongo

    Returns:
        Erro tipado correspondente (a própria exceção se já for tipada)
    """
    if isinstance(exc, PersistenciaError):
        return exc

    if isinstance(exc, (mongo_errors.ConfigurationError, mongo_errors.InvalidURI)):
        return ConfiguracaoBackendError(f"Configuração do MongoDB inválida: {exc}")

    if isinstance(exc, mongo_errors.OperationFailure) and exc.code in CODIGOS_PERMISSAO:
        return PermissaoNegadaError(f"Permissão negada no MongoDB: {exc}")

    return ErroPersistenciaDesconhecido(f"Erro inesperado no MongoDB: {exc}")
