from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class PriceDTO(BaseModel):
    """Body of ``GET {base_url}/{product}.json``; only ``price`` is read."""

    model_config = ConfigDict(extra="ignore", strict=True)

    price: Decimal = Field(..., ge=0)
