"""ViaCEP Client: resolves a postal code to an address over HTTP.

Invariants:
    - GET {base_url}{cep}/json/, nothing else
    - Transport error, non-200 status, non-JSON body and schema mismatch all raise
      AddressLookupError (one failure kind, the caller cannot tell them apart)
    - No retries: the request-scoped deadline bounds the call

Design Decisions:
    - Folding all failure modes into one error keeps the caller-facing contract
      simple (ADR: "can not find zipcode" for any address failure)
    - The failure reason is still logged and carried in AddressLookupError.reason
"""

import logging

import httpx
from pydantic import ValidationError as SchemaValidationError

from app.core.errors import AddressLookupError
from app.core.postal_code import PostalCode
from app.schemas.viacep import ViaCepAddress

logger = logging.getLogger(__name__)


class ViaCepClient:
    """AddressLookup implementation backed by viacep.com.br."""

    def __init__(self, http_client: httpx.AsyncClient, base_url: str):
        self.http_client = http_client
        self.base_url = base_url

    def build_url(self, postal_code: PostalCode) -> str:
        return f"{self.base_url}{postal_code}/json/"

    async def get_address(self, postal_code: PostalCode) -> ViaCepAddress:
        url = self.build_url(postal_code)
        try:
            response = await self.http_client.get(url)
        except httpx.HTTPError as e:
            logger.warning(
                f"ViaCEP request failed: {e!r}", extra={"cep": str(postal_code)},
            )
            raise AddressLookupError(f"transport error: {e}") from e

        if response.status_code != 200:
            logger.warning(
                f"ViaCEP returned status {response.status_code}",
                extra={"cep": str(postal_code), "status_code": response.status_code},
            )
            raise AddressLookupError("failed to fetch address")

        try:
            return ViaCepAddress.model_validate(response.json())
        except (ValueError, SchemaValidationError) as e:
            logger.warning(
                f"ViaCEP body could not be decoded: {e}",
                extra={"cep": str(postal_code)},
            )
            raise AddressLookupError(f"invalid response body: {e}") from e
