"""
Repositórios MongoDB
Persistência de tarefas e processos (create/list/update/delete)
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple
from uuid import uuid4

import pymongo
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ReturnDocument

from controle_juridico.core.config import Settings
from controle_juridico.services.errors import (
    ConfiguracaoBackendError,
    PersistenciaError,
    RegistroNaoEncontradoError,
    ValidacaoError,
    classificar_erro,
)

logger = logging.getLogger(__name__)

# Campos que o cliente não pode sobrescrever num update
CAMPOS_PROTEGIDOS = ("_id", "id", "data_criacao")


class RepositorioMongo:
    """Base repository: one collection, ordered listing, typed errors"""

    nome_registro = "Registro"
    campos_obrigatorios: Tuple[str, ...] = ()
    campo_ordenacao = "data_criacao"

    def __init__(self, settings: Settings, collection_name: str):
        self.settings = settings
        self.collection_name = collection_name
        self.client: Optional[AsyncIOMotorClient] = None
        self.collection: Optional[AsyncIOMotorCollection] = None
        self._owns_client = False
        self._connected = False

    async def connect(self, client: Optional[AsyncIOMotorClient] = None):
        """
        Connect to MongoDB

        Args:
            client: Shared client; when omitted a new one is created and owned
        """
        try:
            if client is None:
                client = AsyncIOMotorClient(
                    self.settings.MONGODB_URI,
                    **self.settings.get_mongodb_connection_options()
                )
                self._owns_client = True
                await client.admin.command("ping")

            self.client = client
            self.collection = client[self.settings.MONGODB_DATABASE][self.collection_name]

            await self._create_indexes()

            self._connected = True
            logger.info(f"✅ {self.nome_registro}: collection '{self.collection_name}' pronta")

        except Exception as e:
            logger.error(f"❌ Failed to connect to MongoDB ({self.collection_name}): {e}")
            raise classificar_erro(e) from e

    async def disconnect(self):
        """Disconnect from MongoDB"""
        if self.client and self._owns_client:
            self.client.close()
        self._connected = False
        logger.info(f"📴 {self.nome_registro}: desconectado")

    def is_connected(self) -> bool:
        return self._connected and self.collection is not None

    async def _create_indexes(self):
        try:
            await self.collection.create_index([("id", pymongo.ASCENDING)], unique=True)
            await self.collection.create_index([(self.campo_ordenacao, pymongo.DESCENDING)])
        except Exception as e:
            logger.warning(f"⚠️ Failed to create indexes on {self.collection_name}: {e}")

    def _get_collection(self) -> AsyncIOMotorCollection:
        if not self.is_connected():
            raise ConfiguracaoBackendError(
                f"Repositório de {self.nome_registro.lower()}s não conectado ao MongoDB"
            )
        return self.collection

    def _nao_encontrado(self, registro_id: str) -> RegistroNaoEncontradoError:
        return RegistroNaoEncontradoError(
            f"{self.nome_registro} '{registro_id}' não encontrado(a)",
            details={"id": registro_id},
        )

    def _falha(self, operacao: str, exc: Exception) -> PersistenciaError:
        erro = classificar_erro(exc)
        if erro is not exc:
            logger.error(f"❌ Falha ao {operacao} {self.nome_registro.lower()}: {exc}")
        return erro

    def validar_obrigatorios(self, registro: Dict[str, Any], apenas_informados: bool = False) -> None:
        """
        Raise ValidacaoError listing the required fields that are missing or blank

        Args:
            registro: Record (or partial update) to check
            apenas_informados: Only check required fields present in ``registro``
        """
        faltando = [
            campo for campo in self.campos_obrigatorios
            if (not apenas_informados or campo in registro)
            and (registro.get(campo) is None or not str(registro.get(campo)).strip())
        ]
        if faltando:
            raise ValidacaoError(
                f"Campos obrigatórios ausentes: {', '.join(faltando)}",
                details={"campos": faltando},
            )

    async def criar(self, registro: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new record

        Args:
            registro: Record fields (without id)

        Returns:
            Stored record with generated ``id`` and ``data_criacao``
        """
        self.validar_obrigatorios(registro)
        collection = self._get_collection()

        documento = {
            **{k: v for k, v in registro.items() if k not in CAMPOS_PROTEGIDOS},
            "id": uuid4().hex,
            "data_criacao": datetime.now(timezone.utc).isoformat(),
        }

        try:
            # insert_one adds _id to the dict it receives
            await collection.insert_one(dict(documento))
        except Exception as e:
            raise self._falha("criar", e) from e

        logger.info(f"✅ {self.nome_registro} criado(a): {documento['id']}")
        return documento

    async def listar(self) -> List[Dict[str, Any]]:
        """List all records, most recent first"""
        collection = self._get_collection()

        try:
            cursor = collection.find({}, {"_id": 0}).sort(self.campo_ordenacao, -1)
            return [documento async for documento in cursor]
        except Exception as e:
            raise self._falha("listar", e) from e

    async def obter(self, registro_id: str) -> Dict[str, Any]:
        collection = self._get_collection()

        try:
            documento = await collection.find_one({"id": registro_id}, {"_id": 0})
        except Exception as e:
            raise self._falha("obter", e) from e

        if not documento:
            raise self._nao_encontrado(registro_id)
        return documento

    async def atualizar(self, registro_id: str, parcial: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply a partial update

        Returns:
            Updated stored record
        """
        campos = {k: v for k, v in parcial.items() if k not in CAMPOS_PROTEGIDOS}
        self.validar_obrigatorios(campos, apenas_informados=True)
        if not campos:
            return await self.obter(registro_id)

        collection = self._get_collection()

        try:
            documento = await collection.find_one_and_update(
                {"id": registro_id},
                {"$set": campos},
                projection={"_id": 0},
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            raise self._falha("atualizar", e) from e

        if not documento:
            logger.warning(f"⚠️ {self.nome_registro} {registro_id} not found for update")
            raise self._nao_encontrado(registro_id)

        logger.info(f"✅ {self.nome_registro} atualizado(a): {registro_id} ({', '.join(campos)})")
        return documento

    async def excluir(self, registro_id: str) -> None:
        collection = self._get_collection()

        try:
            resultado = await collection.delete_one({"id": registro_id})
        except Exception as e:
            raise self._falha("excluir", e) from e

        if resultado.deleted_count == 0:
            raise self._nao_encontrado(registro_id)

        logger.info(f"🗑️ {self.nome_registro} excluído(a): {registro_id}")


class TarefaRepository(RepositorioMongo):
    nome_registro = "Tarefa"
    campos_obrigatorios = ("nome", "prazo")
    campo_ordenacao = "data_criacao"

    def __init__(self, settings: Settings):
        super().__init__(settings, settings.MONGODB_COLLECTION_TAREFAS)


class ProcessoRepository(RepositorioMongo):
    nome_registro = "Processo"
    campos_obrigatorios = ("numero_processo", "cliente", "data_abertura", "advogado_responsavel")
    campo_ordenacao = "data_abertura"

    def __init__(self, settings: Settings):
        super().__init__(settings, settings.MONGODB_COLLECTION_PROCESSOS)
