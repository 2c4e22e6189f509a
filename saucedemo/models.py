"""Records exchanged between test data, page objects and scenarios."""

from pydantic import BaseModel, ConfigDict, Field


class ProductRecord(BaseModel):
    """A product as rendered on a page: every field is the verbatim text"""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    price: str


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    password: str


class CheckoutDetails(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    postal_code: str = Field(alias="postalCode")
