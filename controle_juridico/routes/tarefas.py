"""
Tarefa routes
CRUD de tarefas jurídicas com situação de prazo para exibição
"""

import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, Response

from controle_juridico.models.error import HTTP_ERROR_RESPONSES
from controle_juridico.models.tarefa import TarefaCreate, TarefaExibicao, TarefaUpdate
from controle_juridico.services.tarefa_service import TarefaService, montar_exibicao
from .dependencies import get_agora, get_tarefa_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/tarefas",
    tags=["tarefas"],
    responses={
        404: HTTP_ERROR_RESPONSES[404],
        500: HTTP_ERROR_RESPONSES[500],
        503: HTTP_ERROR_RESPONSES[503],
    },
)


@router.get("", response_model=List[TarefaExibicao], summary="Listar tarefas")
async def listar_tarefas(
    service: TarefaService = Depends(get_tarefa_service),
    agora: datetime = Depends(get_agora),
) -> List[TarefaExibicao]:
    """
    **Lista as tarefas, mais recentes primeiro.**

    Cada tarefa inclui `prazo_info` (vencida, dias_restantes) e as classes
    de exibição de status e prioridade. Falhas do banco retornam lista vazia.
    """
    return await service.listar_exibicao(agora)


@router.post(
    "",
    response_model=TarefaExibicao,
    status_code=201,
    summary="Criar tarefa",
    responses={400: HTTP_ERROR_RESPONSES[400]},
)
async def criar_tarefa(
    dados: TarefaCreate,
    service: TarefaService = Depends(get_tarefa_service),
    agora: datetime = Depends(get_agora),
) -> TarefaExibicao:
    """Cria uma tarefa. O prazo não pode ser anterior a hoje, exceto para tarefas concluídas."""
    logger.info(f"➕ Criando tarefa: {dados.nome}")
    tarefa = await service.criar(dados, agora)
    return montar_exibicao(tarefa, agora)


@router.patch("/{tarefa_id}", response_model=TarefaExibicao, summary="Atualizar tarefa")
async def atualizar_tarefa(
    tarefa_id: str,
    dados: TarefaUpdate,
    service: TarefaService = Depends(get_tarefa_service),
    agora: datetime = Depends(get_agora),
) -> TarefaExibicao:
    logger.info(f"✏️ Atualizando tarefa {tarefa_id}")
    tarefa = await service.atualizar(tarefa_id, dados, agora)
    return montar_exibicao(tarefa, agora)


@router.post(
    "/{tarefa_id}/alternar-conclusao",
    response_model=TarefaExibicao,
    summary="Marcar/desmarcar tarefa como concluída",
)
async def alternar_conclusao(
    tarefa_id: str,
    service: TarefaService = Depends(get_tarefa_service),
    agora: datetime = Depends(get_agora),
) -> TarefaExibicao:
    tarefa = await service.alternar_conclusao(tarefa_id, agora)
    return montar_exibicao(tarefa, agora)


@router.delete("/{tarefa_id}", status_code=204, summary="Excluir tarefa")
async def excluir_tarefa(
    tarefa_id: str,
    service: TarefaService = Depends(get_tarefa_service),
) -> Response:
    await service.excluir(tarefa_id)
    return Response(status_code=204)
