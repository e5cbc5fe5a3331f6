"""ViaCEP Client: tests against an httpx.MockTransport (no network).

Tests cover:
    - URL built as {base}{cep}/json/ with the normalized CEP
    - 200 with a valid body decodes into ViaCepAddress (Portuguese aliases mapped)
    - Transport error, non-200, non-JSON body and {"erro": true} all raise AddressLookupError
"""

import asyncio

import httpx
import pytest

from app.core.errors import AddressLookupError
from app.core.postal_code import PostalCode
from app.infrastructure.http_client import HttpClientManager
from app.infrastructure.viacep_client import ViaCepClient

BASE_URL = "http://viacep.test/ws/"

VIACEP_BODY = {
    "cep": "01001-000",
    "logradouro": "Praça da Sé",
    "complemento": "lado ímpar",
    "bairro": "Sé",
    "localidade": "São Paulo",
    "uf": "SP",
    "ibge": "3550308",
    "gia": "1004",
    "ddd": "11",
    "siafi": "7107",
}


def _client(handler) -> ViaCepClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ViaCepClient(http_client, BASE_URL)


async def test_get_address_success():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json=VIACEP_BODY)

    address = await _client(handler).get_address(PostalCode("01001000"))

    assert seen == ["http://viacep.test/ws/01001-000/json/"]
    assert address.city == "São Paulo"
    assert address.state == "SP"
    assert address.street == "Praça da Sé"
    assert address.district == "Sé"


async def test_transport_error_raises_lookup_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(AddressLookupError) as exc_info:
        await _client(handler).get_address(PostalCode("01001-000"))
    assert "transport error" in exc_info.value.reason


@pytest.mark.parametrize("status", [400, 404, 500, 503])
async def test_non_200_raises_lookup_error(status):
    def handler(request):
        return httpx.Response(status, json={"erro": True})

    with pytest.raises(AddressLookupError):
        await _client(handler).get_address(PostalCode("01001-000"))


async def test_non_json_body_raises_lookup_error():
    def handler(request):
        return httpx.Response(200, text="<html>oops</html>")

    with pytest.raises(AddressLookupError) as exc_info:
        await _client(handler).get_address(PostalCode("01001-000"))
    assert "invalid response body" in exc_info.value.reason


async def test_unknown_cep_body_raises_lookup_error():
    """ViaCEP answers unknown CEPs with 200 {"erro": true}."""
    def handler(request):
        return httpx.Response(200, json={"erro": "true"})

    with pytest.raises(AddressLookupError):
        await _client(handler).get_address(PostalCode("99999-999"))


async def test_empty_city_raises_lookup_error():
    def handler(request):
        return httpx.Response(200, json={**VIACEP_BODY, "localidade": ""})

    with pytest.raises(AddressLookupError):
        await _client(handler).get_address(PostalCode("01001-000"))


async def test_slow_answer_through_shared_client_succeeds():
    """A delayed but valid ViaCEP answer is an address, not a lookup failure."""
    async def handler(request):
        await asyncio.sleep(0.3)
        return httpx.Response(200, json={"localidade": "Recife", "uf": "PE"})

    manager = HttpClientManager()
    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler), timeout=manager.client.timeout,
    )
    try:
        address = await ViaCepClient(http_client, BASE_URL).get_address(
            PostalCode("50000-000"),
        )
    finally:
        await http_client.aclose()
        await manager.close()
    assert address.city == "Recife"
