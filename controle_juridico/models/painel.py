"""
Painel and CNJ utility models
"""

from typing import Optional

from pydantic import BaseModel, Field


class ResumoPainel(BaseModel):
    """Dashboard counters"""

    total_tarefas: int
    tarefas_pendentes: int
    tarefas_vencidas: int
    total_processos: int
    processos_ativos: int
    gerado_em: str


class ValidarCNJRequest(BaseModel):
    numero: str = Field(..., description="Número CNJ, com ou sem formatação")
    validar_ano: bool = Field(default=False, description="Exige ano entre 1998 e o ano atual")


class ComponentesCNJResponse(BaseModel):
    sequencial: str
    digito_verificador: str
    ano: str
    segmento: str
    tribunal: str
    origem: str


class ValidarCNJResponse(BaseModel):
    numero_limpo: str
    valido: bool
    formatado: str
    componentes: Optional[ComponentesCNJResponse] = None


class ClassesExibicaoResponse(BaseModel):
    """Display tokens and CSS classes for a status and/or priority label"""

    classe_status: str
    cor_status: str
    classe_prioridade: str
    cor_prioridade: str
