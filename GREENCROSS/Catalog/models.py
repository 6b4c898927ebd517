# Catalog/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Literal


Category = Literal[
    "flower",
    "edibles",
    "concentrates",
    "vapes",
    "pre-rolls",
    "topicals",
    "accessories",
]

Strain = Literal["indica", "sativa", "hybrid", "cbd"]


class Product(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    price: float = Field(..., ge=0)
    category: Category  # enforce allowed values
    strain: Optional[Strain] = None  # accessories and topicals carry no strain
    weight_label: Optional[str] = None
    thc_percent: Optional[float] = None
    cbd_percent: Optional[float] = None
    featured: bool = False
    description: str = Field(..., min_length=1, max_length=500)
    image_url: str


# Query filters accept "all" on top of the enum values
CategoryFilter = Literal["all", "flower", "edibles", "concentrates", "vapes", "pre-rolls", "topicals", "accessories"]
StrainFilter = Literal["all", "indica", "sativa", "hybrid", "cbd"]
