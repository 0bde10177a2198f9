"""
Value Object para códigos administrativos indonésios (Kemendagri)

Códigos de largura fixa onde a contenção hierárquica é um prefixo:
    31000000    provinsi      (termina com seis zeros)
    31710000    kabupaten/kota (termina com quatro zeros, não seis)
    31710600    kecamatan     (termina com dois zeros, não quatro)
    3171061001  kelurahan/desa (não termina com dois zeros)
"""
from enum import Enum
from typing import Optional

from domain.constants import AdministrativeCodeFormat as Fmt


class AdministrativeTier(str, Enum):
    """Níveis da hierarquia administrativa (province → village)"""

    PROVINCE = "province"
    REGENCY = "regency"
    DISTRICT = "district"
    VILLAGE = "village"

    @property
    def parent_prefix_length(self) -> Optional[int]:
        """Quantidade de dígitos compartilhados com o código do nível pai"""
        return {
            AdministrativeTier.PROVINCE: None,
            AdministrativeTier.REGENCY: Fmt.PROVINCE_PREFIX_LENGTH,
            AdministrativeTier.DISTRICT: Fmt.REGENCY_PREFIX_LENGTH,
            AdministrativeTier.VILLAGE: Fmt.DISTRICT_PREFIX_LENGTH,
        }[self]

    def matches(self, code: str) -> bool:
        """Verifica se o código segue a convenção de sufixo de zeros deste nível"""
        if self is AdministrativeTier.PROVINCE:
            return code.endswith(Fmt.PROVINCE_SUFFIX)
        if self is AdministrativeTier.REGENCY:
            return code.endswith(Fmt.REGENCY_SUFFIX) and not code.endswith(Fmt.PROVINCE_SUFFIX)
        if self is AdministrativeTier.DISTRICT:
            return code.endswith(Fmt.DISTRICT_SUFFIX) and not code.endswith(Fmt.REGENCY_SUFFIX)
        return not code.endswith(Fmt.DISTRICT_SUFFIX)

    def is_child_of(self, code: str, parent_code: Optional[str]) -> bool:
        """Verifica contenção por prefixo em relação ao código pai já resolvido"""
        length = self.parent_prefix_length
        if length is None:
            return True
        if parent_code is None:
            return False
        return code[:length] == parent_code[:length]


# Padding por quantidade de segmentos no formato pontuado (11 / 11.01 / 11.01.01 / 11.01.01.2001)
_DOTTED_PADDING = {
    1: Fmt.PROVINCE_SUFFIX,
    2: Fmt.REGENCY_SUFFIX,
    3: Fmt.DISTRICT_SUFFIX,
    4: "",
}

# Menor código em largura fixa (província: 2 dígitos + sufixo)
_FIXED_WIDTH_MIN = Fmt.PROVINCE_PREFIX_LENGTH + len(Fmt.PROVINCE_SUFFIX)


class AdministrativeCode:
    """Helpers de classificação e conversão de códigos administrativos"""

    @staticmethod
    def is_code(raw: str) -> bool:
        """True se o campo parece um código (dígitos, opcionalmente pontuados)"""
        if not raw:
            return False
        compact = raw.strip().replace(Fmt.DOTTED_SEPARATOR, "")
        return compact.isdigit()

    @staticmethod
    def tier_of(code: str) -> AdministrativeTier:
        """Classifica um código de largura fixa em seu nível"""
        for tier in (
            AdministrativeTier.PROVINCE,
            AdministrativeTier.REGENCY,
            AdministrativeTier.DISTRICT,
        ):
            if tier.matches(code):
                return tier
        return AdministrativeTier.VILLAGE

    @staticmethod
    def from_dotted(raw: str) -> str:
        """
        Converte código pontuado para largura fixa

        Província vem sem ponto no dataset ("11") e é tratada como um
        único segmento. Códigos sem ponto com 8+ dígitos já estão em
        largura fixa e passam direto.

        Example:
            >>> AdministrativeCode.from_dotted("31.71.06")
            '31710600'
            >>> AdministrativeCode.from_dotted("11")
            '11000000'
        """
        raw = raw.strip()
        if Fmt.DOTTED_SEPARATOR not in raw:
            if len(raw) >= _FIXED_WIDTH_MIN and raw.isdigit():
                return raw
            if len(raw) != Fmt.PROVINCE_PREFIX_LENGTH:
                raise ValueError(f"Invalid administrative code: {raw}")

        segments = raw.split(Fmt.DOTTED_SEPARATOR)
        padding = _DOTTED_PADDING.get(len(segments))
        if padding is None or not all(s.isdigit() for s in segments):
            raise ValueError(f"Invalid administrative code: {raw}")
        return "".join(segments) + padding

    @staticmethod
    def to_dotted(code: str) -> str:
        """
        Converte código de largura fixa para o formato pontuado usado pelo BMKG

        Example:
            >>> AdministrativeCode.to_dotted("3171061001")
            '31.71.06.1001'
        """
        tier = AdministrativeCode.tier_of(code)
        segments = [code[:2]]
        if tier is not AdministrativeTier.PROVINCE:
            segments.append(code[2:4])
        if tier in (AdministrativeTier.DISTRICT, AdministrativeTier.VILLAGE):
            segments.append(code[4:6])
        if tier is AdministrativeTier.VILLAGE:
            segments.append(code[6:])
        return Fmt.DOTTED_SEPARATOR.join(segments)
