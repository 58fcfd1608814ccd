"""
Validador de Datas
"""

from datetime import date, datetime
from typing import Optional

FORMATO_ISO = "%Y-%m-%d"


def converter_data(data_str: Optional[str], formato: str = FORMATO_ISO) -> Optional[date]:
    """
    Converte string em date sem lançar exceção

    Args:
        data_str: String da data
        formato: Formato esperado (default: YYYY-MM-DD)

    Returns:
        date convertida ou None se vazia/inválida
    """
    if not data_str:
        return None

    try:
        return datetime.strptime(str(data_str).strip(), formato).date()
    except ValueError:
        return None


def validar_data(data_str: Optional[str], formato: str = FORMATO_ISO) -> bool:
    """
    Valida se string é uma data válida

    Args:
        data_str: String da data
        formato: Formato esperado (default: YYYY-MM-DD)

    Returns:
        True se válida, False caso contrário
    """
    return converter_data(data_str, formato) is not None


def validar_intervalo_datas(
    data_inicial: Optional[str],
    data_final: Optional[str],
    formato: str = FORMATO_ISO
) -> bool:
    """
    Valida se data_final >= data_inicial

    Args:
        data_inicial: Data inicial
        data_final: Data final
        formato: Formato esperado

    Returns:
        True se intervalo válido, False caso contrário
    """
    dt_inicial = converter_data(data_inicial, formato)
    dt_final = converter_data(data_final, formato)
    if dt_inicial is None or dt_final is None:
        return False
    return dt_final >= dt_inicial
