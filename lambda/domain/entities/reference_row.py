"""
ReferenceRow Entity - uma unidade administrativa da tabela de referência Kemendagri
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ReferenceRow:
    """Par (código, nome) imutável; nome já normalizado em maiúsculas"""
    code: str
    name: str

    @classmethod
    def from_raw(cls, code: str, name: str) -> 'ReferenceRow':
        """Normaliza o nome para comparação case-insensitive (somente upper)"""
        return cls(code=code, name=(name or "").upper())
