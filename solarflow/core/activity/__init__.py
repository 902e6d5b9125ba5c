"""
Domínio de Atividades - Trilha de auditoria.

A trilha (`audit.AuditTrail`) converte eventos dos outros domínios em
atividades; os services de consulta ficam em `use_cases`.
"""

from .entities import ActivityAction, ActivityEntity
from .dtos import CreateActivityInputDTO

__all__ = [
    "ActivityAction",
    "ActivityEntity",
    "CreateActivityInputDTO",
]
