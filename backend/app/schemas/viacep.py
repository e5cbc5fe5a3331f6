"""ViaCEP Schemas: decoded address payload returned by the address lookup service.

Invariants:
    - city (localidade) and state (uf) are required and non-empty
    - ViaCEP answers {"erro": true} with HTTP 200 for unknown CEPs: that body
      fails validation, so it folds into the same lookup failure as a 404

Design Decisions:
    - Portuguese wire names kept as aliases, English attribute names in Python
    - populate_by_name: tests and fakes can build addresses with attribute names
"""

from pydantic import BaseModel, ConfigDict, Field


class ViaCepAddress(BaseModel):
    """Address resolved from a postal code."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    cep: str = ""
    street: str = Field("", alias="logradouro")
    complement: str = Field("", alias="complemento")
    district: str = Field("", alias="bairro")
    city: str = Field(alias="localidade", min_length=1)
    state: str = Field(alias="uf", min_length=2)
    ibge: str = ""
    gia: str = ""
    siafi: str = ""
    ddd: str = ""
