"""
==============================================================================
Perfume Models Module
==============================================================================

Pydantic models for catalog records and create payloads.

The wire and snapshot formats use the camelCase key ``originalPrice``;
models accept either that alias or the snake_case field name.

==============================================================================
"""

from typing import Annotated, Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Whole numbers stay integers so prices are written back as given (450000, not 450000.0)
Price = Union[int, Annotated[float, Field(allow_inf_nan=False)]]


class Perfume(BaseModel):
    """
    Perfume record stored in the catalog.

    Only ``id`` is checked. Every other field is kept as stored, so
    snapshots written by older versions (for example ``price: null``)
    load unchanged.

    Attributes:
        id: Unique identifier, generated by the store
        name: Display name
        brand: Fragrance house
        description: Marketing copy
        price: Current price
        original_price: Price before discount (``originalPrice`` on the wire)
        image: Image URL
        badge: Optional label such as "Limited Edition"
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
    )

    id: str = Field(..., min_length=1, description="Unique perfume id")
    name: Any = Field(default=None, description="Perfume name")
    brand: Any = Field(default=None, description="Brand")
    description: Any = Field(default=None, description="Description")
    price: Any = Field(default=None, description="Current price")
    original_price: Any = Field(
        default=None,
        alias="originalPrice",
        description="Price before discount"
    )
    image: Any = Field(default=None, description="Image URL")
    badge: Any = Field(default=None, description="Badge label")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the wire field names."""
        return self.model_dump(by_alias=True, mode="json")


class PerfumeCreate(BaseModel):
    """
    Payload for adding a perfume.

    Prices are coerced to numbers; booleans are rejected. Descriptive
    fields are stored as sent. Falsy ``originalPrice`` and ``badge`` become
    null. Any client-supplied ``id`` is ignored.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    name: Any = None
    brand: Any = None
    description: Any = None
    price: Price
    original_price: Optional[Price] = Field(default=None, alias="originalPrice")
    image: Any = None
    badge: Any = None

    @field_validator("price", "original_price", mode="before")
    @classmethod
    def reject_bool(cls, value: Any) -> Any:
        """Booleans are not prices, even though they compare as integers."""
        if isinstance(value, bool):
            raise ValueError("Input should be a valid number")
        return value

    @field_validator("original_price", "badge", mode="before")
    @classmethod
    def empty_to_none(cls, value: Any) -> Any:
        """Treat falsy optional values (0, "", null) as absent."""
        if not value:
            return None
        return value

    def to_perfume(self, perfume_id: str) -> Perfume:
        """Build the stored record under the given id."""
        return Perfume(id=perfume_id, **self.model_dump())
