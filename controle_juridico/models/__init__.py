"""
Models package
Pydantic models for tarefas, processos, painel and error responses
"""

from .tarefa import (
    CategoriaTarefa,
    PrioridadeTarefa,
    StatusTarefa,
    Tarefa,
    TarefaCreate,
    TarefaExibicao,
    TarefaUpdate,
)
from .processo import (
    Processo,
    ProcessoCreate,
    ProcessoExibicao,
    ProcessoUpdate,
    StatusProcesso,
)
from .painel import ClassesExibicaoResponse, ResumoPainel, ValidarCNJRequest, ValidarCNJResponse
from .error import ErrorResponse, HTTP_ERROR_RESPONSES

__all__ = [
    "CategoriaTarefa",
    "PrioridadeTarefa",
    "StatusTarefa",
    "Tarefa",
    "TarefaCreate",
    "TarefaExibicao",
    "TarefaUpdate",
    "Processo",
    "ProcessoCreate",
    "ProcessoExibicao",
    "ProcessoUpdate",
    "StatusProcesso",
    "ClassesExibicaoResponse",
    "ResumoPainel",
    "ValidarCNJRequest",
    "ValidarCNJResponse",
    "ErrorResponse",
    "HTTP_ERROR_RESPONSES",
]
