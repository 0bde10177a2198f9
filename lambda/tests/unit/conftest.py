"""
Configurações e fixtures compartilhadas para testes unitários
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from domain.entities.reference_row import ReferenceRow
from domain.value_objects.coordinates import Coordinates


@pytest.fixture
def jakarta_rows():
    """Cadeia mínima Jakarta: province → regency → district → village"""
    return [
        ReferenceRow("31000000", "DKI JAKARTA"),
        ReferenceRow("31710000", "JAKARTA SELATAN"),
        ReferenceRow("31710600", "KEBAYORAN BARU"),
        ReferenceRow("3171061001", "GUNUNG"),
    ]


@pytest.fixture
def jakarta_coordinates():
    return Coordinates(latitude=-6.2297, longitude=106.7997)


@pytest.fixture
def make_http_response():
    """
    Factory fixture para respostas aiohttp usadas como async context manager

    Usage:
        response = make_http_response(status=200, json_data={...})
        mock_session.get = MagicMock(return_value=response)
    """
    def _make(status: int = 200, json_data=None, text_data: str = "", json_error: Exception = None):
        response = AsyncMock()
        response.status = status
        response.request_info = MagicMock()
        response.history = ()
        if json_error is not None:
            response.json = AsyncMock(side_effect=json_error)
        else:
            response.json = AsyncMock(return_value=json_data)
        response.text = AsyncMock(return_value=text_data)
        response.__aenter__ = AsyncMock(return_value=response)
        # False: exceções levantadas dentro do `async with` não são suprimidas
        response.__aexit__ = AsyncMock(return_value=False)
        return response

    return _make


@pytest.fixture
def mock_http_client():
    """JsonHttpClient substituído por mocks assíncronos"""
    client = MagicMock()
    client.get_json = AsyncMock()
    client.get_text = AsyncMock()
    return client
