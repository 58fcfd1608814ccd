"""
Tarefa models
Pydantic models for legal task validation and serialization
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from controle_juridico.services.prazo_service import PrazoInfo
from controle_juridico.validators.date_validator import validar_data


class StatusTarefa(str, Enum):
    """Task status enumeration"""
    PENDENTE = "pendente"
    EM_ANDAMENTO = "em_andamento"
    CONCLUIDA = "concluida"
    CANCELADA = "cancelada"


class PrioridadeTarefa(str, Enum):
    BAIXA = "baixa"
    MEDIA = "media"
    ALTA = "alta"
    URGENTE = "urgente"


class CategoriaTarefa(str, Enum):
    AUDIENCIA = "audiencia"
    PETICAO = "peticao"
    PRAZO = "prazo"
    REUNIAO = "reuniao"
    PESQUISA = "pesquisa"
    OUTROS = "outros"


def _validar_prazo(valor: Optional[str]) -> Optional[str]:
    if valor is not None and not validar_data(valor):
        raise ValueError("Prazo deve estar no formato YYYY-MM-DD")
    return valor


def _validar_nome(valor: Optional[str]) -> Optional[str]:
    if valor is None:
        return None
    if not valor.strip():
        raise ValueError("Nome da tarefa é obrigatório")
    return valor.strip()


class TarefaCreate(BaseModel):
    """Model for task creation requests"""

    nome: str = Field(..., min_length=1, description="Nome da tarefa")
    descricao: str = Field(default="", description="Descrição livre")
    prazo: str = Field(..., description="Data limite (YYYY-MM-DD)")
    status: StatusTarefa = StatusTarefa.PENDENTE
    prioridade: PrioridadeTarefa = PrioridadeTarefa.MEDIA
    categoria: CategoriaTarefa = CategoriaTarefa.OUTROS

    @field_validator("nome")
    @classmethod
    def nome_nao_vazio(cls, valor: str) -> str:
        return _validar_nome(valor)

    @field_validator("prazo")
    @classmethod
    def prazo_iso(cls, valor: str) -> str:
        return _validar_prazo(valor)


class TarefaUpdate(BaseModel):
    """Partial update; only informed fields are written"""

    nome: Optional[str] = None
    descricao: Optional[str] = None
    prazo: Optional[str] = None
    status: Optional[StatusTarefa] = None
    prioridade: Optional[PrioridadeTarefa] = None
    categoria: Optional[CategoriaTarefa] = None

    @field_validator("nome")
    @classmethod
    def nome_nao_vazio(cls, valor: Optional[str]) -> Optional[str]:
        return _validar_nome(valor)

    @field_validator("prazo")
    @classmethod
    def prazo_iso(cls, valor: Optional[str]) -> Optional[str]:
        return _validar_prazo(valor)

    def to_update_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True, mode="json")


class Tarefa(BaseModel):
    """Stored task as returned by the repository

    Read side is lenient (plain strings, null replaced by the default)
    so legacy documents still load.
    """

    id: str
    nome: str = ""
    descricao: str = ""
    prazo: str = ""
    status: str = StatusTarefa.PENDENTE.value
    prioridade: str = PrioridadeTarefa.MEDIA.value
    categoria: str = CategoriaTarefa.OUTROS.value
    data_criacao: Optional[str] = None
    data_conclusao: Optional[str] = None

    @field_validator("nome", "descricao", "prazo", "status", "prioridade", "categoria", mode="before")
    @classmethod
    def nulo_usa_padrao(cls, valor: Any, info: ValidationInfo) -> Any:
        if valor is None:
            return cls.model_fields[info.field_name].default
        return valor


class TarefaExibicao(Tarefa):
    """Task plus the facts derived for display"""

    prazo_info: PrazoInfo = Field(default_factory=PrazoInfo)
    classe_status: str
    classe_prioridade: str
    cor_status: str
    cor_prioridade: str
