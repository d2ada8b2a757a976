"""Catalog import schemas — the JSON document loaded into the directory mirror."""


from datetime import datetime

from pydantic import Field

from app.domain.place import PlaceType
from app.schemas.common import CamelModel

class CatalogBuilding(CamelModel):
    upn: str
    display_name: str
    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country_or_region: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)

class CatalogPlace(CamelModel):
    upn: str
    display_name: str
    place_type: PlaceType
    building_upn: str
    floor: str | None = None
    label: str | None = None
    capacity: int | None = Field(default=None, ge=0)
    has_video: bool = False
    has_audio: bool = False
    has_display: bool = False
    is_wheelchair_accessible: bool = False
    fully_enclosed: bool = False
    surface_hub: bool = False
    whiteboard_camera: bool = False
    tags: list[str] = []
    latitude: float | None = None
    longitude: float | None = None

class CatalogReservation(CamelModel):
    id: str | None = None
    place_upn: str
    start: datetime
    end: datetime
    subject: str | None = None

class DirectoryCatalog(CamelModel):
    buildings: list[CatalogBuilding] = []
    places: list[CatalogPlace] = []
    reservations: list[CatalogReservation] = []
