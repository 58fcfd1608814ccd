"""
Tarefa Service
Regras de negócio das tarefas jurídicas sobre o repositório
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from controle_juridico.models.tarefa import (
    StatusTarefa,
    Tarefa,
    TarefaCreate,
    TarefaExibicao,
    TarefaUpdate,
)
from controle_juridico.services.classes_display import (
    obter_classe_prioridade,
    obter_classe_status_tarefa,
    obter_cor_classe,
)
from controle_juridico.services.errors import PersistenciaError, ValidacaoError
from controle_juridico.services.prazo_service import calcular_prazo
from controle_juridico.services.repositorio import TarefaRepository
from controle_juridico.validators.date_validator import converter_data

logger = logging.getLogger(__name__)


def montar_exibicao(tarefa: Dict[str, Any], agora: datetime) -> TarefaExibicao:
    """Attach deadline facts and display classes to a stored task"""
    base = Tarefa(**tarefa)
    classe_status = obter_classe_status_tarefa(base.status)
    classe_prioridade = obter_classe_prioridade(base.prioridade)
    return TarefaExibicao(
        **base.model_dump(),
        prazo_info=calcular_prazo(base.prazo, agora),
        classe_status=classe_status,
        classe_prioridade=classe_prioridade,
        cor_status=obter_cor_classe(classe_status),
        cor_prioridade=obter_cor_classe(classe_prioridade),
    )


class TarefaService:
    """Task use cases"""

    def __init__(self, repositorio: TarefaRepository):
        self.repositorio = repositorio

    async def listar(self) -> List[Dict[str, Any]]:
        """
        List tasks; backend failures degrade to an empty list

        Returns:
            Task documents, most recent first
        """
        try:
            return await self.repositorio.listar()
        except PersistenciaError as e:
            logger.warning(f"⚠️ Erro ao carregar tarefas, retornando lista vazia: {e}")
            return []

    async def listar_exibicao(self, agora: datetime) -> List[TarefaExibicao]:
        exibicao = []
        for tarefa in await self.listar():
            try:
                exibicao.append(montar_exibicao(tarefa, agora))
            except ValidationError as e:
                logger.warning(f"⚠️ Tarefa ignorada, documento malformado ({tarefa.get('id')}): {e}")
        return exibicao

    async def criar(self, dados: TarefaCreate, agora: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Create a task

        Raises:
            ValidacaoError: If the deadline is in the past for an open task
        """
        agora = agora or datetime.now()
        prazo = converter_data(dados.prazo)
        if prazo and prazo < agora.date() and dados.status != StatusTarefa.CONCLUIDA:
            raise ValidacaoError(
                "Prazo não pode ser anterior à data atual",
                details={"campo": "prazo", "valor": dados.prazo},
            )

        registro = dados.model_dump(mode="json")
        if dados.status == StatusTarefa.CONCLUIDA:
            registro["data_conclusao"] = self._timestamp(agora)

        return await self.repositorio.criar(registro)

    async def atualizar(
        self, tarefa_id: str, dados: TarefaUpdate, agora: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """Apply a partial update, stamping/clearing data_conclusao on status change"""
        parcial = dados.to_update_dict()
        if "status" in parcial:
            parcial.update(self._conclusao(parcial["status"], agora))
        return await self.repositorio.atualizar(tarefa_id, parcial)

    async def alternar_conclusao(self, tarefa_id: str, agora: Optional[datetime] = None) -> Dict[str, Any]:
        """Toggle a task between concluida and pendente"""
        atual = await self.repositorio.obter(tarefa_id)
        novo_status = (
            StatusTarefa.PENDENTE.value
            if atual.get("status") == StatusTarefa.CONCLUIDA.value
            else StatusTarefa.CONCLUIDA.value
        )
        parcial = {"status": novo_status, **self._conclusao(novo_status, agora)}
        return await self.repositorio.atualizar(tarefa_id, parcial)

    async def excluir(self, tarefa_id: str) -> None:
        await self.repositorio.excluir(tarefa_id)

    def _conclusao(self, status: str, agora: Optional[datetime]) -> Dict[str, Any]:
        if status == StatusTarefa.CONCLUIDA.value:
            return {"data_conclusao": self._timestamp(agora or datetime.now())}
        return {"data_conclusao": None}

    @staticmethod
    def _timestamp(agora: datetime) -> str:
        if agora.tzinfo is None:
            return agora.isoformat()
        return agora.astimezone(timezone.utc).isoformat()
