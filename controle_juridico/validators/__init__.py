"""
Validadores de número CNJ e datas
"""

from .cnj_validator import (
    ComponentesCNJ,
    calcular_digito_verificador,
    decompor_numero_cnj,
    formatar_numero_cnj,
    limpar_numero_cnj,
    validar_numero_cnj,
)
from .date_validator import converter_data, validar_data, validar_intervalo_datas

__all__ = [
    "ComponentesCNJ",
    "calcular_digito_verificador",
    "decompor_numero_cnj",
    "formatar_numero_cnj",
    "limpar_numero_cnj",
    "validar_numero_cnj",
    "converter_data",
    "validar_data",
    "validar_intervalo_datas",
]
