"""
Prazo Service
Fatos derivados do prazo de uma tarefa (vencimento e dias restantes)
"""

import logging
from datetime import datetime, time, timedelta
from typing import Optional

from pydantic import BaseModel

from controle_juridico.validators.date_validator import converter_data

logger = logging.getLogger(__name__)

FIM_DO_DIA = time(23, 59, 59)
MS_POR_DIA = 24 * 60 * 60 * 1000


class PrazoInfo(BaseModel):
    """Situação do prazo calculada no momento da leitura (nunca persistida)"""

    vencida: bool = False
    dias_restantes: int = 0


def _agora(agora: Optional[datetime]) -> datetime:
    return agora if agora is not None else datetime.now()


def fim_do_dia(data_str: Optional[str], agora: Optional[datetime] = None) -> Optional[datetime]:
    """
    Converte YYYY-MM-DD para o instante 23:59:59 do mesmo dia

    O resultado usa o fuso de ``agora`` quando ele for aware;
    caso contrário é um datetime local (naive).

    Returns:
        datetime ou None se a data for vazia/inválida
    """
    data = converter_data(data_str)
    if data is None:
        if data_str:
            logger.debug(f"Prazo ignorado, data inválida: {data_str!r}")
        return None

    fim = datetime.combine(data, FIM_DO_DIA)
    if agora is not None and agora.tzinfo is not None:
        fim = fim.replace(tzinfo=agora.tzinfo)
    return fim


def is_data_vencida(data_str: Optional[str], agora: Optional[datetime] = None) -> bool:
    """
    Verifica se o prazo já passou

    Args:
        data_str: Data do prazo (YYYY-MM-DD)
        agora: Instante de referência (padrão: relógio do sistema)

    Returns:
        True se o fim do dia do prazo é anterior a ``agora``
    """
    agora = _agora(agora)
    fim = fim_do_dia(data_str, agora)
    if fim is None:
        return False
    return fim < agora


def dias_restantes(data_str: Optional[str], agora: Optional[datetime] = None) -> int:
    """
    Dias inteiros até o fim do dia do prazo, arredondados para cima

    Args:
        data_str: Data do prazo (YYYY-MM-DD)
        agora: Instante de referência (padrão: relógio do sistema)

    Returns:
        Número de dias (negativo para prazos passados, 0 se data vazia)
    """
    agora = _agora(agora)
    fim = fim_do_dia(data_str, agora)
    if fim is None:
        return 0

    diferenca_ms = (fim - agora) // timedelta(milliseconds=1)
    return -(-diferenca_ms // MS_POR_DIA)


def calcular_prazo(data_str: Optional[str], agora: Optional[datetime] = None) -> PrazoInfo:
    """Calcula vencimento e dias restantes a partir do mesmo instante"""
    agora = _agora(agora)
    return PrazoInfo(
        vencida=is_data_vencida(data_str, agora),
        dias_restantes=dias_restantes(data_str, agora),
    )
