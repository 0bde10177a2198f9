"""
Output Port: Reference Dataset Loader
Contrato para a tabela de códigos administrativos (código, nome)
"""
from abc import ABC, abstractmethod
from typing import List

from domain.entities.reference_row import ReferenceRow


class IReferenceDatasetLoader(ABC):
    """Interface para carregamento da tabela de referência"""

    @abstractmethod
    async def load(self) -> List[ReferenceRow]:
        """
        Carrega todas as linhas na ordem do dataset

        Returns:
            Lista de ReferenceRow (nome em maiúsculas, código de largura fixa)

        Raises:
            SourceUnavailableException: Falha de fetch ou parse
        """
        raise NotImplementedError
