# -*- coding: utf-8 -*-
"""
Testes dos endpoints REST (tarefas, processos, painel, CNJ e health)
O MongoDB é substituído pela collection mockada do conftest.
"""

import pytest
from fastapi.testclient import TestClient

from controle_juridico.main import create_app
from controle_juridico.routes.dependencies import (
    get_agora,
    get_connection_status,
    get_processo_repository,
    get_tarefa_repository,
)
from conftest import CNJ_VALIDO, CNJ_VALIDO_ANO_2020, CNJ_VALIDO_FORMATADO, FakeCursor


@pytest.fixture
def app(settings, tarefa_repository, processo_repository, agora_fixo):
    app = create_app(settings)
    app.dependency_overrides[get_tarefa_repository] = lambda: tarefa_repository
    app.dependency_overrides[get_processo_repository] = lambda: processo_repository
    app.dependency_overrides[get_agora] = lambda: agora_fixo
    return app


@pytest.fixture
def client(app):
    # sem "with": o lifespan (conexão real ao MongoDB) não é executado
    return TestClient(app)


@pytest.mark.api
class TestHealth:

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health_conectado(self, app, client):
        app.dependency_overrides[get_connection_status] = lambda: True

        data = client.get("/health").json()

        assert data["status"] == "healthy"
        assert data["mongodb"] == "connected"

    def test_health_sem_mongodb(self, client):
        data = client.get("/health").json()

        assert data["status"] == "unhealthy"
        assert data["mongodb"] == "disconnected"


@pytest.mark.api
class TestTarefasEndpoints:

    def test_listar(self, client, mock_collection, tarefa_doc):
        mock_collection.find.return_value = FakeCursor([tarefa_doc])

        response = client.get("/tarefas")

        assert response.status_code == 200
        tarefa = response.json()[0]
        assert tarefa["id"] == "a1b2c3"
        assert tarefa["prazo_info"] == {"vencida": False, "dias_restantes": 6}
        assert tarefa["classe_status"] == "pending"
        assert tarefa["classe_prioridade"] == "high"

    def test_listar_documento_com_nulos(self, client, mock_collection):
        mock_collection.find.return_value = FakeCursor([{"id": "x", "nome": "n", "descricao": None, "prazo": None}])

        response = client.get("/tarefas")

        assert response.status_code == 200
        tarefa = response.json()[0]
        assert tarefa["descricao"] == ""
        assert tarefa["prazo_info"] == {"vencida": False, "dias_restantes": 0}
        assert tarefa["cor_status"] == "bg-yellow-100 text-yellow-800 border-yellow-200"

    def test_atualizar_nome_em_branco(self, client, mock_collection):
        response = client.patch("/tarefas/a1b2c3", json={"nome": "   "})

        assert response.status_code == 422
        mock_collection.find_one_and_update.assert_not_awaited()

    def test_listar_com_falha_do_banco(self, client, mock_collection):
        mock_collection.find.side_effect = RuntimeError("conexão perdida")

        response = client.get("/tarefas")

        assert response.status_code == 200
        assert response.json() == []

    def test_criar(self, client, mock_collection):
        response = client.post("/tarefas", json={
            "nome": "Protocolar contestação",
            "prazo": "2024-03-15",
            "prioridade": "urgente",
            "categoria": "peticao",
        })

        assert response.status_code == 201
        data = response.json()
        assert len(data["id"]) == 32
        assert data["status"] == "pendente"
        assert data["prazo_info"] == {"vencida": False, "dias_restantes": 1}
        assert data["classe_prioridade"] == "urgent"
        mock_collection.insert_one.assert_awaited_once()

    def test_criar_prazo_passado(self, client, mock_collection):
        response = client.post("/tarefas", json={"nome": "x", "prazo": "2024-03-01"})

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["retry_allowed"] is False
        assert data["path"] == "/tarefas"
        mock_collection.insert_one.assert_not_awaited()

    def test_criar_sem_nome(self, client):
        response = client.post("/tarefas", json={"nome": "  ", "prazo": "2024-03-20"})
        assert response.status_code == 422

    def test_atualizar(self, client, mock_collection, tarefa_doc):
        mock_collection.find_one_and_update.return_value = {**tarefa_doc, "prioridade": "baixa"}

        response = client.patch("/tarefas/a1b2c3", json={"prioridade": "baixa"})

        assert response.status_code == 200
        assert response.json()["classe_prioridade"] == "low"
        assert mock_collection.find_one_and_update.call_args.args[1] == {"$set": {"prioridade": "baixa"}}

    def test_atualizar_inexistente(self, client):
        response = client.patch("/tarefas/nao-existe", json={"nome": "Outro"})

        assert response.status_code == 404
        data = response.json()
        assert data["status"] == "error"
        assert data["error_code"] == "NOT_FOUND"
        assert data["details"] == {"id": "nao-existe"}

    def test_alternar_conclusao(self, client, mock_collection, tarefa_doc):
        mock_collection.find_one.return_value = tarefa_doc
        mock_collection.find_one_and_update.return_value = {
            **tarefa_doc,
            "status": "concluida",
            "data_conclusao": "2024-03-15T10:00:00",
        }

        response = client.post("/tarefas/a1b2c3/alternar-conclusao")

        assert response.status_code == 200
        assert response.json()["classe_status"] == "done"
        parcial = mock_collection.find_one_and_update.call_args.args[1]["$set"]
        assert parcial == {"status": "concluida", "data_conclusao": "2024-03-15T10:00:00"}

    def test_excluir(self, client, mock_collection):
        response = client.delete("/tarefas/a1b2c3")

        assert response.status_code == 204
        mock_collection.delete_one.assert_awaited_once_with({"id": "a1b2c3"})

    def test_excluir_erro_inesperado_permite_retry(self, client, mock_collection):
        mock_collection.delete_one.side_effect = RuntimeError("socket fechado")

        response = client.delete("/tarefas/a1b2c3")

        assert response.status_code == 500
        assert response.json()["error_code"] == "UNKNOWN_ERROR"
        assert response.json()["retry_allowed"] is True


@pytest.mark.api
class TestProcessosEndpoints:

    def test_listar(self, client, mock_collection, processo_doc):
        mock_collection.find.return_value = FakeCursor([processo_doc, {**processo_doc, "id": "p2", "numero_processo": "999"}])

        processos = client.get("/processos").json()

        assert processos[0]["numero_formatado"] == CNJ_VALIDO_FORMATADO
        assert processos[0]["numero_valido"] is True
        assert processos[0]["classe_status"] == "active"
        assert processos[1]["numero_formatado"] == "999"
        assert processos[1]["numero_valido"] is False

    def test_criar(self, client, mock_collection):
        response = client.post("/processos", json={
            "numero_processo": CNJ_VALIDO_FORMATADO,
            "cliente": "Empresa X Ltda",
            "data_abertura": "2024-02-01",
            "advogado_responsavel": "Dr. Pedro",
        })

        assert response.status_code == 201
        data = response.json()
        assert data["numero_processo"] == CNJ_VALIDO
        assert data["numero_formatado"] == CNJ_VALIDO_FORMATADO
        assert data["status_processo"] == "ativo"
        assert mock_collection.insert_one.call_args.args[0]["numero_processo"] == CNJ_VALIDO

    def test_criar_numero_invalido(self, client, mock_collection):
        response = client.post("/processos", json={
            "numero_processo": "12345678901234567",
            "cliente": "Empresa X Ltda",
            "data_abertura": "2024-02-01",
            "advogado_responsavel": "Dr. Pedro",
        })

        assert response.status_code == 422
        mock_collection.insert_one.assert_not_awaited()

    def test_atualizar_status(self, client, mock_collection, processo_doc):
        mock_collection.find_one_and_update.return_value = {**processo_doc, "status_processo": "suspenso"}

        response = client.patch("/processos/p1", json={"status_processo": "suspenso"})

        assert response.status_code == 200
        assert response.json()["classe_status"] == "suspended"

    @pytest.mark.parametrize("corpo", [{"cliente": "  "}, {"advogado_responsavel": ""}])
    def test_atualizar_nao_apaga_campo_obrigatorio(self, client, mock_collection, corpo):
        response = client.patch("/processos/p1", json=corpo)

        assert response.status_code == 422
        mock_collection.find_one_and_update.assert_not_awaited()

    def test_atualizar_fechamento_antes_da_abertura_gravada(self, client, mock_collection, processo_doc):
        mock_collection.find_one.return_value = processo_doc

        response = client.patch("/processos/p1", json={"data_fechamento": "2000-01-01"})

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"
        mock_collection.find_one_and_update.assert_not_awaited()

    def test_excluir_inexistente(self, client, mock_collection):
        mock_collection.delete_one.return_value.deleted_count = 0

        response = client.delete("/processos/nao-existe")

        assert response.status_code == 404
        assert response.json()["error_code"] == "NOT_FOUND"


@pytest.mark.api
class TestPainelECNJ:

    def test_resumo(self, client, mock_collection, tarefa_doc, processo_doc):
        mock_collection.find.side_effect = [
            FakeCursor([tarefa_doc, {**tarefa_doc, "id": "t2", "prazo": "2024-03-01"}]),
            FakeCursor([processo_doc]),
        ]

        data = client.get("/painel/resumo").json()

        assert data["total_tarefas"] == 2
        assert data["tarefas_pendentes"] == 2
        assert data["tarefas_vencidas"] == 1
        assert data["processos_ativos"] == 1
        assert data["gerado_em"] == "2024-03-15T10:00:00"

    def test_validar_cnj_formatado(self, client):
        data = client.post("/cnj/validar", json={"numero": CNJ_VALIDO_FORMATADO}).json()

        assert data["numero_limpo"] == CNJ_VALIDO
        assert data["valido"] is True
        assert data["formatado"] == CNJ_VALIDO_FORMATADO
        assert data["componentes"]["ano"] == "0123"

    def test_validar_cnj_com_ano(self, client):
        data = client.post("/cnj/validar", json={"numero": CNJ_VALIDO, "validar_ano": True}).json()
        assert data["valido"] is False

        data = client.post("/cnj/validar", json={"numero": CNJ_VALIDO_ANO_2020, "validar_ano": True}).json()
        assert data["valido"] is True
        assert data["componentes"]["tribunal"] == "26"

    def test_classes_exibicao(self, client):
        data = client.get("/classes", params={"status": "arquivado", "prioridade": "urgente"}).json()

        assert data["classe_status"] == "archived"
        assert data["cor_status"] == "bg-gray-100 text-gray-800 border-gray-200"
        assert data["classe_prioridade"] == "urgent"
        assert data["cor_prioridade"] == "bg-red-100 text-red-800 border-red-200"

    def test_classes_exibicao_status_de_tarefa(self, client):
        assert client.get("/classes", params={"status": "concluida"}).json()["classe_status"] == "done"

    def test_classes_exibicao_desconhecidas(self, client):
        data = client.get("/classes").json()

        assert data["classe_status"] == "neutral"
        assert data["classe_prioridade"] == "neutral"

    def test_validar_cnj_tamanho_invalido(self, client):
        data = client.post("/cnj/validar", json={"numero": "123-4"}).json()

        assert data["valido"] is False
        assert data["numero_limpo"] == "1234"
        assert data["formatado"] == "123-4"
        assert data["componentes"] is None


@pytest.mark.api
def test_repositorio_indisponivel(settings):
    """Sem repositórios configurados, as rotas respondem 503"""
    client = TestClient(create_app(settings))

    response = client.get("/tarefas")

    assert response.status_code == 503
    assert response.json()["error_code"] == "SERVICE_UNAVAILABLE"
    assert response.json()["retry_allowed"] is True
