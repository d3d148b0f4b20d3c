from pydantic import BaseModel, ConfigDict, Field
from typing import List

class Deal(BaseModel):
    # Strings de exibição, não necessariamente numéricas ("N/A" quando ausente)
    model_config = ConfigDict(frozen=True)

    price: str = "N/A"
    discount: str = "N/A"
    store: str = "Unknown Store"
    link: str = "#"

class GameDeals(BaseModel):
    name: str
    image_url: str
    historical_low: str = ""
    deals: List[Deal] = Field(default_factory=list)
