"""Response schemas for the disease search endpoint."""

from pydantic import BaseModel


class DiseaseSearchItem(BaseModel):
    name: str
    code: str
    category: str
    aliases: list[str] = []


class DiseaseSearchResponse(BaseModel):
    items: list[DiseaseSearchItem] = []
