"""
Processo Service
Casos de uso dos processos judiciais
"""

import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from controle_juridico.models.processo import (
    Processo,
    ProcessoCreate,
    ProcessoExibicao,
    ProcessoUpdate,
)
from controle_juridico.services.classes_display import obter_classe_status_processo, obter_cor_classe
from controle_juridico.services.errors import PersistenciaError, ValidacaoError
from controle_juridico.services.repositorio import ProcessoRepository
from controle_juridico.validators.cnj_validator import formatar_numero_cnj, validar_numero_cnj
from controle_juridico.validators.date_validator import validar_data, validar_intervalo_datas

logger = logging.getLogger(__name__)


def montar_exibicao(processo: Dict[str, Any]) -> ProcessoExibicao:
    """Attach formatted CNJ number and display class to a stored case"""
    base = Processo(**processo)
    classe_status = obter_classe_status_processo(base.status_processo)
    return ProcessoExibicao(
        **base.model_dump(),
        numero_formatado=formatar_numero_cnj(base.numero_processo),
        numero_valido=validar_numero_cnj(base.numero_processo),
        classe_status=classe_status,
        cor_status=obter_cor_classe(classe_status),
    )


class ProcessoService:
    """Case use cases"""

    def __init__(self, repositorio: ProcessoRepository):
        self.repositorio = repositorio

    async def listar(self) -> List[Dict[str, Any]]:
        """List cases; backend failures degrade to an empty list"""
        try:
            return await self.repositorio.listar()
        except PersistenciaError as e:
            logger.warning(f"⚠️ Erro ao carregar processos, retornando lista vazia: {e}")
            return []

    async def listar_exibicao(self) -> List[ProcessoExibicao]:
        exibicao = []
        for processo in await self.listar():
            try:
                exibicao.append(montar_exibicao(processo))
            except ValidationError as e:
                logger.warning(f"⚠️ Processo ignorado, documento malformado ({processo.get('id')}): {e}")
        return exibicao

    async def criar(self, dados: ProcessoCreate) -> Dict[str, Any]:
        logger.info(f"➕ Cadastrando processo: {formatar_numero_cnj(dados.numero_processo)}")
        return await self.repositorio.criar(dados.model_dump(mode="json"))

    async def atualizar(self, processo_id: str, dados: ProcessoUpdate) -> Dict[str, Any]:
        """
        Apply a partial update

        When only one of the dates is sent, the closing/opening order is
        checked against the stored record.

        Raises:
            ValidacaoError: If data_fechamento ends up before data_abertura
        """
        parcial = dados.to_update_dict()
        abertura = parcial.get("data_abertura")
        fechamento = parcial.get("data_fechamento")

        if bool(abertura) != bool(fechamento):
            atual = await self.repositorio.obter(processo_id)
            abertura = abertura or atual.get("data_abertura")
            fechamento = fechamento or atual.get("data_fechamento")
            datas_validas = validar_data(abertura) and validar_data(fechamento)
            if datas_validas and not validar_intervalo_datas(abertura, fechamento):
                raise ValidacaoError(
                    "Data de fechamento deve ser posterior à data de abertura",
                    details={"data_abertura": abertura, "data_fechamento": fechamento},
                )

        return await self.repositorio.atualizar(processo_id, parcial)

    async def excluir(self, processo_id: str) -> None:
        await self.repositorio.excluir(processo_id)
