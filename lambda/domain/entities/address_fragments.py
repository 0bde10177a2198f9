"""
AddressFragments Entity - nomes dos quatro níveis extraídos do reverse geocoding
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from domain.constants import Geocoding


def _first_present(address: Dict[str, Any], fields: Iterable[str]) -> Optional[str]:
    for field in fields:
        value = address.get(field)
        if value:
            return str(value).upper()
    return None


@dataclass(frozen=True)
class AddressFragments:
    """
    Fragmentos de endereço normalizados (upper) por nível

    Campos ausentes permanecem None: o matcher precisa distinguir
    "fragmento presente sem match" de "fragmento nunca fornecido".
    """
    province: Optional[str] = None
    regency: Optional[str] = None
    district: Optional[str] = None
    village: Optional[str] = None

    @classmethod
    def from_address(cls, address: Dict[str, Any]) -> 'AddressFragments':
        """
        Extrai fragmentos do objeto `address` do Nominatim

        Prioridade:
            province ← state
            regency  ← city, county
            district ← suburb, city_district
            village  ← village, neighbourhood
        """
        return cls(
            province=_first_present(address, Geocoding.PROVINCE_FIELDS),
            regency=_first_present(address, Geocoding.REGENCY_FIELDS),
            district=_first_present(address, Geocoding.DISTRICT_FIELDS),
            village=_first_present(address, Geocoding.VILLAGE_FIELDS),
        )

    def to_dict(self) -> dict:
        """Converte para dicionário"""
        return {
            'province': self.province,
            'regency': self.regency,
            'district': self.district,
            'village': self.village
        }
