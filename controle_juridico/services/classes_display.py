"""
Mapeamento de status e prioridade para classes de exibição
"""

from typing import Any, Dict

CLASSE_NEUTRA = "neutral"

CLASSES_STATUS_TAREFA: Dict[str, str] = {
    "pendente": "pending",
    "em_andamento": "in-progress",
    "concluida": "done",
    "cancelada": "cancelled",
}

CLASSES_STATUS_PROCESSO: Dict[str, str] = {
    "ativo": "active",
    "suspenso": "suspended",
    "arquivado": "archived",
    "finalizado": "finalized",
}

CLASSES_PRIORIDADE: Dict[str, str] = {
    "baixa": "low",
    "media": "medium",
    "alta": "high",
    "urgente": "urgent",
}

# Classes CSS (Tailwind) por token
CORES_POR_CLASSE: Dict[str, str] = {
    "pending": "bg-yellow-100 text-yellow-800 border-yellow-200",
    "in-progress": "bg-blue-100 text-blue-800 border-blue-200",
    "done": "bg-green-100 text-green-800 border-green-200",
    "cancelled": "bg-red-100 text-red-800 border-red-200",
    "active": "bg-green-100 text-green-800 border-green-200",
    "suspended": "bg-yellow-100 text-yellow-800 border-yellow-200",
    "archived": "bg-gray-100 text-gray-800 border-gray-200",
    "finalized": "bg-blue-100 text-blue-800 border-blue-200",
    "low": "bg-green-100 text-green-800 border-green-200",
    "medium": "bg-yellow-100 text-yellow-800 border-yellow-200",
    "high": "bg-orange-100 text-orange-800 border-orange-200",
    "urgent": "bg-red-100 text-red-800 border-red-200",
    CLASSE_NEUTRA: "bg-gray-100 text-gray-800 border-gray-200",
}


def _buscar(tabela: Dict[str, str], valor: Any, padrao: str = CLASSE_NEUTRA) -> str:
    # Enums (str, Enum) chegam aqui junto com strings puras
    chave = getattr(valor, "value", valor)
    if not isinstance(chave, str):
        return padrao
    return tabela.get(chave, padrao)


def obter_classe_status_tarefa(status: Any) -> str:
    return _buscar(CLASSES_STATUS_TAREFA, status)


def obter_classe_status_processo(status: Any) -> str:
    return _buscar(CLASSES_STATUS_PROCESSO, status)


def obter_classe_status(status: Any) -> str:
    """Status de tarefa ou de processo (os rótulos não se sobrepõem)"""
    return _buscar({**CLASSES_STATUS_TAREFA, **CLASSES_STATUS_PROCESSO}, status)


def obter_classe_prioridade(prioridade: Any) -> str:
    return _buscar(CLASSES_PRIORIDADE, prioridade)


def obter_cor_classe(classe: Any) -> str:
    """Classes CSS para um token de exibição; token desconhecido usa cinza"""
    return _buscar(CORES_POR_CLASSE, classe, CORES_POR_CLASSE[CLASSE_NEUTRA])
