"""
Testes Unitários - AddressFragments
Extração dos fragmentos a partir do objeto address do Nominatim
"""
from domain.entities.address_fragments import AddressFragments


def test_extracts_and_uppercases_all_tiers():
    address = {
        "state": "Daerah Khusus Ibukota Jakarta",
        "city": "Jakarta Selatan",
        "suburb": "Kebayoran Baru",
        "village": "Gunung",
        "country": "Indonesia",
    }

    fragments = AddressFragments.from_address(address)

    assert fragments.province == "DAERAH KHUSUS IBUKOTA JAKARTA"
    assert fragments.regency == "JAKARTA SELATAN"
    assert fragments.district == "KEBAYORAN BARU"
    assert fragments.village == "GUNUNG"


def test_field_priority_prefers_first_present():
    """REGRA: city antes de county, suburb antes de city_district"""
    address = {
        "state": "Jawa Barat",
        "city": "Kota Bandung",
        "county": "Bandung",
        "suburb": "Coblong",
        "city_district": "Other",
        "village": "Dago",
        "neighbourhood": "RW 01",
    }

    fragments = AddressFragments.from_address(address)

    assert fragments.regency == "KOTA BANDUNG"
    assert fragments.district == "COBLONG"
    assert fragments.village == "DAGO"


def test_falls_back_to_secondary_fields():
    address = {
        "state": "Jawa Barat",
        "county": "Bogor",
        "city_district": "Cibinong",
        "neighbourhood": "Pakansari",
    }

    fragments = AddressFragments.from_address(address)

    assert fragments.regency == "BOGOR"
    assert fragments.district == "CIBINONG"
    assert fragments.village == "PAKANSARI"


def test_absent_and_empty_fields_are_none():
    fragments = AddressFragments.from_address({"state": "Bali", "village": ""})

    assert fragments.province == "BALI"
    assert fragments.regency is None
    assert fragments.district is None
    assert fragments.village is None


def test_to_dict():
    fragments = AddressFragments(province="BALI", village="UBUD")

    assert fragments.to_dict() == {
        "province": "BALI",
        "regency": None,
        "district": None,
        "village": "UBUD",
    }
