from pydantic import BaseModel
from typing import List, Optional

class CatalogOption(BaseModel):
    value: str
    label: str
    delivery_window: Optional[str] = None

class CatalogResponse(BaseModel):
    count: int
    options: List[CatalogOption]
