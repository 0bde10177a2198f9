"""
Domain Services - Serviços de lógica de negócio pura (sem conhecimento de APIs externas)
"""

from domain.services.administrative_code_matcher import AdministrativeCodeMatcher

__all__ = [
    'AdministrativeCodeMatcher'
]
