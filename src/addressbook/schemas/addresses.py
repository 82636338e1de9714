"""Pydantic models describing the JSON shape of address documents.

Each optional field declares its default here, so a record missing
``addressLineDetail``, ``provinceOrState``, ``country`` or
``suburbOrDistrict`` (or any ``code``/``name``/``line`` sub-field) loads with
empty strings. ``id``, ``type``, ``cityOrTown``, ``postalCode`` and
``lastUpdated`` are required.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from ..models.domain import Address, CodeAndName, LineDetail


class CodeAndNameModel(BaseModel):
    code: str = ""
    name: str = ""

    def to_domain(self) -> CodeAndName:
        return CodeAndName(code=self.code, name=self.name)


class LineDetailModel(BaseModel):
    line1: str = ""
    line2: str = ""

    def to_domain(self) -> LineDetail:
        return LineDetail(line1=self.line1, line2=self.line2)


class AddressModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    address_type: CodeAndNameModel = Field(..., alias="type")
    line_detail: LineDetailModel = Field(default_factory=LineDetailModel, alias="addressLineDetail")
    province_or_state: CodeAndNameModel = Field(default_factory=CodeAndNameModel, alias="provinceOrState")
    country: CodeAndNameModel = Field(default_factory=CodeAndNameModel)
    city_or_town: str = Field(..., alias="cityOrTown")
    postal_code: str = Field(..., alias="postalCode")
    suburb_or_district: str = Field(default="", alias="suburbOrDistrict")
    last_updated: str = Field(..., alias="lastUpdated")

    def to_domain(self) -> Address:
        return Address(
            id=self.id,
            address_type=self.address_type.to_domain(),
            line_detail=self.line_detail.to_domain(),
            province_or_state=self.province_or_state.to_domain(),
            country=self.country.to_domain(),
            city_or_town=self.city_or_town,
            postal_code=self.postal_code,
            suburb_or_district=self.suburb_or_district,
            last_updated=self.last_updated,
        )


AddressDocument = TypeAdapter(list[AddressModel])
