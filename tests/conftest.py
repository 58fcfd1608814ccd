# -*- coding: utf-8 -*-
"""
Configurações e fixtures compartilhadas para testes
"""

import pytest
from datetime import datetime
from typing import Any, Dict, List
from unittest.mock import AsyncMock, MagicMock

from controle_juridico.core.config import Settings
from controle_juridico.services.repositorio import ProcessoRepository, TarefaRepository


# ============ NÚMEROS CNJ CONHECIDOS ============

# Calculados à mão com o ciclo de pesos 2..9
# base 123456701234567, pesos 2,3,4,5,6,7,8,9,2,3,4,5,6,7,8
# soma = 336, 336 % 97 = 45, 98 - 45 = 53
CNJ_VALIDO = "12345675301234567"
CNJ_VALIDO_FORMATADO = "1234567-53.0123.4.56.7"
# base 123456720208261, soma = 294, 294 % 97 = 3, 98 - 3 = 95
CNJ_VALIDO_ANO_2020 = "12345679520208261"
# base toda zero, soma = 0, 98 - 0 = 98
CNJ_ZEROS_VALIDO = "00000009800000000"


# ============ FIXTURES DE CONFIGURAÇÃO ============

@pytest.fixture
def settings():
    """Settings de teste, sem depender de variáveis de ambiente"""
    return Settings(
        MONGODB_URI="mongodb://localhost:27017",
        MONGODB_DATABASE="test_db",
        ENVIRONMENT="test",
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def agora_fixo():
    """Instante de referência fixo: 15/03/2024 10:00"""
    return datetime(2024, 3, 15, 10, 0, 0)


# ============ FIXTURES DE MONGODB ============

class FakeCursor:
    """Cursor assíncrono mínimo (find().sort() + async for)"""

    def __init__(self, documents: List[Dict[str, Any]]):
        self.documents = documents
        self.sort_args = None

    def sort(self, *args):
        self.sort_args = args
        return self

    def __aiter__(self):
        self._iter = iter(self.documents)
        return self

    async def __anext__(self):
        try:
            return next(self._iter)
        except StopIteration:
            raise StopAsyncIteration


@pytest.fixture
def mock_collection():
    """Collection motor mockada"""
    collection = MagicMock()
    collection.insert_one = AsyncMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.find_one_and_update = AsyncMock(return_value=None)
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))
    collection.create_index = AsyncMock()
    collection.find = MagicMock(return_value=FakeCursor([]))
    return collection


def _conectar(repositorio, collection):
    repositorio.collection = collection
    repositorio._connected = True
    return repositorio


@pytest.fixture
def tarefa_repository(settings, mock_collection):
    return _conectar(TarefaRepository(settings), mock_collection)


@pytest.fixture
def processo_repository(settings, mock_collection):
    return _conectar(ProcessoRepository(settings), mock_collection)


# ============ DOCUMENTOS DE EXEMPLO ============

@pytest.fixture
def tarefa_doc():
    return {
        "id": "a1b2c3",
        "nome": "Protocolar contestação",
        "descricao": "Prazo de 15 dias",
        "prazo": "2024-03-20",
        "status": "pendente",
        "prioridade": "alta",
        "categoria": "peticao",
        "data_criacao": "2024-03-01T12:00:00+00:00",
        "data_conclusao": None,
    }


@pytest.fixture
def processo_doc():
    return {
        "id": "p1",
        "numero_processo": CNJ_VALIDO,
        "cliente": "João da Silva",
        "status_processo": "ativo",
        "data_abertura": "2024-01-10",
        "data_fechamento": None,
        "advogado_responsavel": "Dra. Maria Santos",
        "data_criacao": "2024-01-10T09:00:00+00:00",
    }
