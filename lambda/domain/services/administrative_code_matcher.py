"""
Administrative Code Matcher - converte fragmentos de endereço em código ADM4

Estratégia em duas fases:
1. Match direto: primeira linha cujo nome é igual ao fragmento de village
2. Fallback hierárquico: province → regency → district → village, cada passo
   filtrando por nome, prefixo do código pai e convenção de sufixo de zeros
"""
from typing import Optional, Sequence, Type

from domain.entities.address_fragments import AddressFragments
from domain.entities.reference_row import ReferenceRow
from domain.exceptions import (
    CodeNotResolvableException,
    DistrictNotFoundException,
    ProvinceNotFoundException,
    RegencyNotFoundException,
    VillageNotFoundException,
)
from domain.value_objects.administrative_code import AdministrativeTier
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


# Ordem do pipeline: cada passo consome o código resolvido no passo anterior
_FALLBACK_STEPS = (
    (AdministrativeTier.PROVINCE, ProvinceNotFoundException),
    (AdministrativeTier.REGENCY, RegencyNotFoundException),
    (AdministrativeTier.DISTRICT, DistrictNotFoundException),
    (AdministrativeTier.VILLAGE, VillageNotFoundException),
)


class AdministrativeCodeMatcher:
    """
    Resolve o código administrativo mais específico para um endereço

    Nomes não são únicos na tabela de referência: empates são resolvidos
    pela ordem do dataset (primeiro encontrado vence). Essa ordem não é
    garantida entre snapshots do dataset.
    """

    @staticmethod
    def match(fragments: AddressFragments, rows: Sequence[ReferenceRow]) -> str:
        """
        Resolve o código ADM4 para os fragmentos informados

        Args:
            fragments: Fragmentos normalizados (upper) do reverse geocoding
            rows: Tabela de referência completa (somente leitura)

        Returns:
            Código do village resolvido

        Raises:
            CodeNotResolvableException: subclasse específica do nível que falhou
        """
        direct = AdministrativeCodeMatcher.find_direct(fragments.village, rows)
        if direct is not None:
            logger.info("Direct village match", village=fragments.village, code=direct.code)
            return direct.code

        logger.info(
            "Village not found directly, trying hierarchical fallback",
            village=fragments.village
        )
        return AdministrativeCodeMatcher.resolve_hierarchically(fragments, rows)

    @staticmethod
    def find_direct(village: Optional[str], rows: Sequence[ReferenceRow]) -> Optional[ReferenceRow]:
        """Primeira linha (ordem do dataset) com nome igual ao village"""
        if village is None:
            return None
        return next((row for row in rows if row.name == village), None)

    @staticmethod
    def resolve_hierarchically(fragments: AddressFragments, rows: Sequence[ReferenceRow]) -> str:
        """
        Percorre os quatro níveis de cima para baixo

        Falha no primeiro nível sem match (fail-fast), sem varrer os seguintes.
        """
        parent_code = None
        for tier, exception_class in _FALLBACK_STEPS:
            row = AdministrativeCodeMatcher._resolve_tier(
                rows=rows,
                tier=tier,
                name=getattr(fragments, tier.value),
                parent_code=parent_code,
                exception_class=exception_class
            )
            logger.debug("Tier resolved", tier=tier.value, code=row.code)
            parent_code = row.code

        return parent_code

    @staticmethod
    def _resolve_tier(
        rows: Sequence[ReferenceRow],
        tier: AdministrativeTier,
        name: Optional[str],
        parent_code: Optional[str],
        exception_class: Type[CodeNotResolvableException]
    ) -> ReferenceRow:
        details = {"tier": tier.value, "fragment": name, "parent_code": parent_code}

        if name is None:
            raise exception_class(
                f"{tier.value.capitalize()} fragment was not provided by geocoding",
                details={**details, "reason": "missing_fragment"}
            )

        for row in rows:
            if row.name == name and tier.matches(row.code) and tier.is_child_of(row.code, parent_code):
                return row

        raise exception_class(
            f"{tier.value.capitalize()} not found",
            details={**details, "reason": "no_match"}
        )
