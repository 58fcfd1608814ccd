"""
Controle Jurídico - tarefas e processos com validação de número CNJ
"""

__version__ = "1.0.0"
