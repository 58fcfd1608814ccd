"""
Painel, display class and CNJ utility routes
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends

from controle_juridico.models.painel import (
    ClassesExibicaoResponse,
    ComponentesCNJResponse,
    ResumoPainel,
    ValidarCNJRequest,
    ValidarCNJResponse,
)
from controle_juridico.services.classes_display import (
    obter_classe_prioridade,
    obter_classe_status,
    obter_cor_classe,
)
from controle_juridico.services.painel_service import PainelService
from controle_juridico.validators.cnj_validator import (
    decompor_numero_cnj,
    formatar_numero_cnj,
    limpar_numero_cnj,
    validar_numero_cnj,
)
from .dependencies import get_agora, get_painel_service

router = APIRouter(tags=["painel"])


@router.get("/painel/resumo", response_model=ResumoPainel, summary="Resumo do painel")
async def resumo_painel(
    service: PainelService = Depends(get_painel_service),
    agora: datetime = Depends(get_agora),
) -> ResumoPainel:
    """Tarefas pendentes e vencidas, processos ativos e totais."""
    return await service.resumo(agora)


@router.post("/cnj/validar", response_model=ValidarCNJResponse, summary="Validar número CNJ")
async def validar_cnj(request: ValidarCNJRequest) -> ValidarCNJResponse:
    """
    Valida o dígito verificador e devolve o número limpo, formatado e seus campos.

    Nunca retorna erro para números malformados: `valido` fica `false`.
    """
    componentes = decompor_numero_cnj(request.numero)
    return ValidarCNJResponse(
        numero_limpo=limpar_numero_cnj(request.numero),
        valido=validar_numero_cnj(request.numero, validar_ano=request.validar_ano),
        formatado=formatar_numero_cnj(request.numero),
        componentes=ComponentesCNJResponse(**componentes._asdict()) if componentes else None,
    )


@router.get("/classes", response_model=ClassesExibicaoResponse, summary="Classes de exibição")
async def classes_exibicao(
    status: Optional[str] = None,
    prioridade: Optional[str] = None,
) -> ClassesExibicaoResponse:
    """
    Token e classes CSS para um status (de tarefa ou processo) e uma prioridade.

    Rótulos ausentes ou desconhecidos devolvem `neutral`.
    """
    classe_status = obter_classe_status(status)
    classe_prioridade = obter_classe_prioridade(prioridade)
    return ClassesExibicaoResponse(
        classe_status=classe_status,
        cor_status=obter_cor_classe(classe_status),
        classe_prioridade=classe_prioridade,
        cor_prioridade=obter_cor_classe(classe_prioridade),
    )
