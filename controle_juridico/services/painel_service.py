"""
Painel Service
Contadores do painel inicial (tarefas pendentes/vencidas, processos ativos)
"""

import logging
from datetime import datetime
from typing import Optional

from controle_juridico.models.painel import ResumoPainel
from controle_juridico.models.processo import StatusProcesso
from controle_juridico.models.tarefa import StatusTarefa
from controle_juridico.services.prazo_service import is_data_vencida
from controle_juridico.services.processo_service import ProcessoService
from controle_juridico.services.tarefa_service import TarefaService

logger = logging.getLogger(__name__)


class PainelService:
    def __init__(self, tarefa_service: TarefaService, processo_service: ProcessoService):
        self.tarefa_service = tarefa_service
        self.processo_service = processo_service

    async def resumo(self, agora: Optional[datetime] = None) -> ResumoPainel:
        """
        Build the dashboard counters from a single clock snapshot

        Args:
            agora: Reference instant for overdue checks

        Returns:
            ResumoPainel
        """
        agora = agora or datetime.now()
        tarefas = await self.tarefa_service.listar()
        processos = await self.processo_service.listar()

        pendentes = sum(1 for t in tarefas if t.get("status") == StatusTarefa.PENDENTE.value)
        vencidas = sum(
            1 for t in tarefas
            if t.get("status") != StatusTarefa.CONCLUIDA.value and is_data_vencida(t.get("prazo"), agora)
        )
        ativos = sum(1 for p in processos if p.get("status_processo") == StatusProcesso.ATIVO.value)

        logger.debug(f"Painel: {pendentes} pendentes, {vencidas} vencidas, {ativos} processos ativos")

        return ResumoPainel(
            total_tarefas=len(tarefas),
            tarefas_pendentes=pendentes,
            tarefas_vencidas=vencidas,
            total_processos=len(processos),
            processos_ativos=ativos,
            gerado_em=agora.isoformat(),
        )
