"""
Processo routes
CRUD de processos judiciais identificados pelo número CNJ
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from controle_juridico.models.error import HTTP_ERROR_RESPONSES
from controle_juridico.models.processo import ProcessoCreate, ProcessoExibicao, ProcessoUpdate
from controle_juridico.services.processo_service import ProcessoService, montar_exibicao
from .dependencies import get_processo_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/processos",
    tags=["processos"],
    responses={
        404: HTTP_ERROR_RESPONSES[404],
        500: HTTP_ERROR_RESPONSES[500],
        503: HTTP_ERROR_RESPONSES[503],
    },
)


@router.get("", response_model=List[ProcessoExibicao], summary="Listar processos")
async def listar_processos(
    service: ProcessoService = Depends(get_processo_service),
) -> List[ProcessoExibicao]:
    """
    **Lista os processos por data de abertura (mais recentes primeiro).**

    O número CNJ é devolvido limpo (`numero_processo`) e formatado
    (`numero_formatado`). Falhas do banco retornam lista vazia.
    """
    return await service.listar_exibicao()


@router.post(
    "",
    response_model=ProcessoExibicao,
    status_code=201,
    summary="Cadastrar processo",
    responses={400: HTTP_ERROR_RESPONSES[400]},
)
async def criar_processo(
    dados: ProcessoCreate,
    service: ProcessoService = Depends(get_processo_service),
) -> ProcessoExibicao:
    """Cadastra processo. Números CNJ inválidos são rejeitados com 422."""
    processo = await service.criar(dados)
    return montar_exibicao(processo)


@router.patch("/{processo_id}", response_model=ProcessoExibicao, summary="Atualizar processo")
async def atualizar_processo(
    processo_id: str,
    dados: ProcessoUpdate,
    service: ProcessoService = Depends(get_processo_service),
) -> ProcessoExibicao:
    logger.info(f"✏️ Atualizando processo {processo_id}")
    processo = await service.atualizar(processo_id, dados)
    return montar_exibicao(processo)


@router.delete("/{processo_id}", status_code=204, summary="Excluir processo")
async def excluir_processo(
    processo_id: str,
    service: ProcessoService = Depends(get_processo_service),
) -> Response:
    await service.excluir(processo_id)
    return Response(status_code=204)
