"""
Routes package initialization
Exports all routers for the FastAPI application
"""

from .health import router as health_router
from .tarefas import router as tarefas_router
from .processos import router as processos_router
from .painel import router as painel_router

__all__ = ["health_router", "tarefas_router", "processos_router", "painel_router"]
