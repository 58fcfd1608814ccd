"""
Error Response Models
Modelos padronizados para respostas de erro da API
"""

from pydantic import BaseModel, Field
from typing import Optional


class ErrorResponse(BaseModel):
    """
    Modelo padronizado para respostas de erro

    Utilizado em todos os endpoints para documentar erros HTTP
    e indicar ao frontend se a operação pode ser repetida
    """

    status: str = Field(
        default="error",
        description="Status da resposta (sempre 'error' para erros)"
    )

    error_code: str = Field(
        ...,
        description="Código do erro para identificação programática",
        examples=[
            "VALIDATION_ERROR",
            "NOT_FOUND",
            "PERMISSION_DENIED",
            "BACKEND_MISCONFIGURED",
            "UNKNOWN_ERROR"
        ]
    )

    error_message: str = Field(
        ...,
        description="Mensagem descritiva do erro"
    )

    retry_allowed: bool = Field(
        ...,
        description="Indica se a operação pode ser retentada"
    )

    timestamp: str = Field(
        ...,
        description="Timestamp ISO 8601 do momento do erro"
    )

    path: str = Field(
        ...,
        description="Path do endpoint que gerou o erro"
    )

    details: Optional[dict] = Field(
        default=None,
        description="Detalhes adicionais do erro"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "error",
                    "error_code": "NOT_FOUND",
                    "error_message": "Tarefa 'abc123' não encontrada",
                    "retry_allowed": False,
                    "timestamp": "2024-01-15T10:35:00.000Z",
                    "path": "/tarefas/abc123"
                },
                {
                    "status": "error",
                    "error_code": "BACKEND_MISCONFIGURED",
                    "error_message": "Repositório não conectado ao MongoDB",
                    "retry_allowed": False,
                    "timestamp": "2024-01-15T10:40:00.000Z",
                    "path": "/processos"
                }
            ]
        }
    }


# Mapeamento de códigos HTTP para descrições de erro
HTTP_ERROR_RESPONSES = {
    400: {
        "model": ErrorResponse,
        "description": "**Bad Request** - Regra de negócio violada ou campo obrigatório ausente"
    },
    403: {
        "model": ErrorResponse,
        "description": "**Forbidden** - Backend recusou a operação por permissão"
    },
    404: {
        "model": ErrorResponse,
        "description": "**Not Found** - Registro não encontrado"
    },
    500: {
        "model": ErrorResponse,
        "description": "**Internal Server Error** - Erro inesperado. Retry permitido."
    },
    503: {
        "model": ErrorResponse,
        "description": "**Service Unavailable** - Backend de persistência indisponível ou mal configurado"
    }
}
