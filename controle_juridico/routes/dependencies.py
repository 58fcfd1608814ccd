"""
Common dependencies for FastAPI routes
Provides dependency injection for repositories, services and the clock
"""

from datetime import datetime
from typing import Optional

from fastapi import Depends, HTTPException

from controle_juridico.services.painel_service import PainelService
from controle_juridico.services.processo_service import ProcessoService
from controle_juridico.services.repositorio import ProcessoRepository, TarefaRepository
from controle_juridico.services.tarefa_service import TarefaService


# Global instances (will be set during app startup)
_tarefa_repository: Optional[TarefaRepository] = None
_processo_repository: Optional[ProcessoRepository] = None


def set_repositories(
    tarefa_repository: Optional[TarefaRepository],
    processo_repository: Optional[ProcessoRepository],
) -> None:
    """Set the global repository instances"""
    global _tarefa_repository, _processo_repository
    _tarefa_repository = tarefa_repository
    _processo_repository = processo_repository


def get_tarefa_repository() -> TarefaRepository:
    """
    Dependency to get the TarefaRepository instance

    Raises:
        HTTPException: If the repository is not available
    """
    if not _tarefa_repository:
        raise HTTPException(status_code=503, detail="Tarefa repository not available")
    return _tarefa_repository


def get_processo_repository() -> ProcessoRepository:
    if not _processo_repository:
        raise HTTPException(status_code=503, detail="Processo repository not available")
    return _processo_repository


def get_connection_status() -> bool:
    """
    Check if both repositories are connected

    Returns:
        bool: True if connected, False otherwise
    """
    return bool(
        _tarefa_repository and _tarefa_repository.is_connected()
        and _processo_repository and _processo_repository.is_connected()
    )


def get_tarefa_service(
    repositorio: TarefaRepository = Depends(get_tarefa_repository),
) -> TarefaService:
    return TarefaService(repositorio)


def get_processo_service(
    repositorio: ProcessoRepository = Depends(get_processo_repository),
) -> ProcessoService:
    return ProcessoService(repositorio)


def get_painel_service(
    tarefa_service: TarefaService = Depends(get_tarefa_service),
    processo_service: ProcessoService = Depends(get_processo_service),
) -> PainelService:
    return PainelService(tarefa_service, processo_service)


def get_agora() -> datetime:
    """Clock read once per request; overridden in tests"""
    return datetime.now()
