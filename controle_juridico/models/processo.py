"""
Processo models
Pydantic models for case files identified by a CNJ number
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

from controle_juridico.validators.cnj_validator import limpar_numero_cnj, validar_numero_cnj
from controle_juridico.validators.date_validator import validar_data, validar_intervalo_datas

MENSAGEM_CNJ_INVALIDO = "Número do processo inválido (deve seguir padrão CNJ com 17 dígitos)"


class StatusProcesso(str, Enum):
    """Case status enumeration"""
    ATIVO = "ativo"
    SUSPENSO = "suspenso"
    ARQUIVADO = "arquivado"
    FINALIZADO = "finalizado"


def _normalizar_numero(valor: Optional[str]) -> Optional[str]:
    if valor is None:
        return None
    if not validar_numero_cnj(valor):
        raise ValueError(MENSAGEM_CNJ_INVALIDO)
    return limpar_numero_cnj(valor)


def _validar_data_opcional(valor: Optional[str], campo: str) -> Optional[str]:
    if not valor:
        return None
    if not validar_data(valor):
        raise ValueError(f"{campo} deve estar no formato YYYY-MM-DD")
    return valor


def _texto_obrigatorio(valor: str, mensagem: str) -> str:
    if not valor or not valor.strip():
        raise ValueError(mensagem)
    return valor.strip()


class ProcessoCreate(BaseModel):
    """Model for case creation requests"""

    numero_processo: str = Field(..., description="Número CNJ, com ou sem formatação")
    cliente: str = Field(..., description="Nome do cliente")
    status_processo: StatusProcesso = StatusProcesso.ATIVO
    data_abertura: str = Field(..., description="Data de abertura (YYYY-MM-DD)")
    data_fechamento: Optional[str] = Field(default=None, description="Data de fechamento (YYYY-MM-DD)")
    advogado_responsavel: str = Field(..., description="Advogado responsável")

    @field_validator("numero_processo")
    @classmethod
    def numero_cnj_valido(cls, valor: str) -> str:
        if not valor or not valor.strip():
            raise ValueError("Número do processo é obrigatório")
        return _normalizar_numero(valor)

    @field_validator("cliente")
    @classmethod
    def cliente_obrigatorio(cls, valor: str) -> str:
        return _texto_obrigatorio(valor, "Nome do cliente é obrigatório")

    @field_validator("advogado_responsavel")
    @classmethod
    def advogado_obrigatorio(cls, valor: str) -> str:
        return _texto_obrigatorio(valor, "Advogado responsável é obrigatório")

    @field_validator("data_abertura")
    @classmethod
    def abertura_iso(cls, valor: str) -> str:
        if not validar_data(valor):
            raise ValueError("Data de abertura é obrigatória (YYYY-MM-DD)")
        return valor

    @field_validator("data_fechamento")
    @classmethod
    def fechamento_iso(cls, valor: Optional[str]) -> Optional[str]:
        return _validar_data_opcional(valor, "Data de fechamento")

    @model_validator(mode="after")
    def fechamento_apos_abertura(self) -> "ProcessoCreate":
        if self.data_fechamento and not validar_intervalo_datas(self.data_abertura, self.data_fechamento):
            raise ValueError("Data de fechamento deve ser posterior à data de abertura")
        return self


class ProcessoUpdate(BaseModel):
    """Partial update; only informed fields are written"""

    numero_processo: Optional[str] = None
    cliente: Optional[str] = None
    status_processo: Optional[StatusProcesso] = None
    data_abertura: Optional[str] = None
    data_fechamento: Optional[str] = None
    advogado_responsavel: Optional[str] = None

    @field_validator("numero_processo")
    @classmethod
    def numero_cnj_valido(cls, valor: Optional[str]) -> Optional[str]:
        return _normalizar_numero(valor)

    @field_validator("cliente")
    @classmethod
    def cliente_obrigatorio(cls, valor: Optional[str]) -> Optional[str]:
        if valor is None:
            return None
        return _texto_obrigatorio(valor, "Nome do cliente é obrigatório")

    @field_validator("advogado_responsavel")
    @classmethod
    def advogado_obrigatorio(cls, valor: Optional[str]) -> Optional[str]:
        if valor is None:
            return None
        return _texto_obrigatorio(valor, "Advogado responsável é obrigatório")

    @field_validator("data_abertura")
    @classmethod
    def abertura_iso(cls, valor: Optional[str]) -> Optional[str]:
        return _validar_data_opcional(valor, "Data de abertura")

    @field_validator("data_fechamento")
    @classmethod
    def fechamento_iso(cls, valor: Optional[str]) -> Optional[str]:
        return _validar_data_opcional(valor, "Data de fechamento")

    @model_validator(mode="after")
    def fechamento_apos_abertura(self) -> "ProcessoUpdate":
        if self.data_abertura and self.data_fechamento:
            if not validar_intervalo_datas(self.data_abertura, self.data_fechamento):
                raise ValueError("Data de fechamento deve ser posterior à data de abertura")
        return self

    def to_update_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True, mode="json")


class Processo(BaseModel):
    """Stored case as returned by the repository (null text fields read as empty)"""

    id: str
    numero_processo: str = ""
    cliente: str = ""
    status_processo: str = StatusProcesso.ATIVO.value
    data_abertura: str = ""
    data_fechamento: Optional[str] = None
    advogado_responsavel: str = ""
    data_criacao: Optional[str] = None

    @field_validator(
        "numero_processo", "cliente", "status_processo", "data_abertura", "advogado_responsavel",
        mode="before",
    )
    @classmethod
    def nulo_usa_padrao(cls, valor: Any, info: ValidationInfo) -> Any:
        if valor is None:
            return cls.model_fields[info.field_name].default
        return valor


class ProcessoExibicao(Processo):
    """Case plus the values derived for display"""

    numero_formatado: str
    numero_valido: bool
    classe_status: str
    cor_status: str
