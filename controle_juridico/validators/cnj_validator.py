"""
Validador de Número CNJ
Formato de exibição: NNNNNNN-DD.AAAA.J.TR.O
"""

import logging
import re
from datetime import date
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)

TAMANHO_NUMERO_CNJ = 17
ANO_MINIMO_CNJ = 1998
PESOS_CNJ = [2, 3, 4, 5, 6, 7, 8, 9]

_NAO_DIGITOS = re.compile(r"\D")


class ComponentesCNJ(NamedTuple):
    """Campos posicionais de um número CNJ (apenas dígitos)"""

    sequencial: str
    digito_verificador: str
    ano: str
    segmento: str
    tribunal: str
    origem: str

    @property
    def base_calculo(self) -> str:
        """Todos os campos exceto o dígito verificador, na ordem do número"""
        return f"{self.sequencial}{self.ano}{self.segmento}{self.tribunal}{self.origem}"


def limpar_numero_cnj(numero: Optional[str]) -> str:
    """
    Remove tudo que não for dígito decimal

    Args:
        numero: Número digitado pelo usuário, com ou sem separadores

    Returns:
        Apenas os dígitos, sem restrição de tamanho
    """
    if not numero:
        return ""
    return _NAO_DIGITOS.sub("", str(numero))


def decompor_numero_cnj(numero: Optional[str]) -> Optional[ComponentesCNJ]:
    """
    Separa o número nos campos CNJ

    Returns:
        ComponentesCNJ ou None se o número não tiver 17 dígitos
    """
    digitos = limpar_numero_cnj(numero)
    if len(digitos) != TAMANHO_NUMERO_CNJ:
        return None

    return ComponentesCNJ(
        sequencial=digitos[0:7],
        digito_verificador=digitos[7:9],
        ano=digitos[9:13],
        segmento=digitos[13:14],
        tribunal=digitos[14:16],
        origem=digitos[16:],
    )


def calcular_digito_verificador(base: str) -> str:
    """
    Calcula o dígito verificador (módulo 97)

    Cada dígito da base é multiplicado pelo ciclo de pesos 2..9,
    da esquerda para a direita. O resultado é 98 - (soma % 97),
    sempre com dois dígitos.

    Args:
        base: Sequencial + ano + segmento + tribunal + origem

    Returns:
        Dígito verificador com 2 caracteres
    """
    soma = sum(
        int(digito) * PESOS_CNJ[indice % len(PESOS_CNJ)]
        for indice, digito in enumerate(base)
    )
    return f"{98 - (soma % 97):02d}"


def validar_numero_cnj(
    numero_cnj: Optional[str],
    *,
    validar_ano: bool = False,
    ano_atual: Optional[int] = None,
) -> bool:
    """
    Valida número de processo no padrão CNJ

    Args:
        numero_cnj: Número do processo (com ou sem formatação)
        validar_ano: Exige ano de ajuizamento entre 1998 e o ano atual
        ano_atual: Limite superior do ano (padrão: ano corrente)

    Returns:
        True se válido, False caso contrário
    """
    componentes = decompor_numero_cnj(numero_cnj)
    if componentes is None:
        return False

    if validar_ano:
        limite = ano_atual if ano_atual is not None else date.today().year
        if not ANO_MINIMO_CNJ <= int(componentes.ano) <= limite:
            logger.debug(f"Ano fora do intervalo: {componentes.ano}")
            return False

    digito_calculado = calcular_digito_verificador(componentes.base_calculo)
    return componentes.digito_verificador == digito_calculado


def formatar_numero_cnj(numero: Optional[str]) -> Optional[str]:
    """
    Formata número CNJ para exibição (NNNNNNN-DD.AAAA.J.TR.O)

    Números que não têm 17 dígitos são devolvidos sem alteração.
    """
    componentes = decompor_numero_cnj(numero)
    if componentes is None:
        return numero

    return (
        f"{componentes.sequencial}-{componentes.digito_verificador}."
        f"{componentes.ano}.{componentes.segmento}."
        f"{componentes.tribunal}.{componentes.origem}"
    )
