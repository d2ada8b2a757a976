"""Place (room / workspace) schemas."""


from app.domain.place import Place, PlaceType
from app.schemas.common import CamelModel

class PlaceFilter(CamelModel):
    """Amenity filter shared by room and workspace listings.

    A False flag means "no constraint on this attribute", not "exclude places
    that have it". An empty search string likewise matches every place.
    """

    has_video: bool = False
    has_audio: bool = False
    has_display: bool = False
    is_wheelchair_accessible: bool = False
    fully_enclosed: bool = False
    surface_hub: bool = False
    whiteboard_camera: bool = False
    display_name_search_string: str | None = None

class ExchangePlace(CamelModel):
    identity: str
    display_name: str
    place_type: PlaceType
    building_upn: str
    floor: str | None = None
    label: str | None = None
    capacity: int | None = None
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

    @classmethod
    def from_place(cls, place: Place) -> "ExchangePlace":
        return cls(
            identity=place.upn,
            display_name=place.display_name,
            place_type=PlaceType(place.place_type),
            building_upn=place.building_upn,
            floor=place.floor,
            label=place.label,
            capacity=place.capacity,
            has_video=place.has_video,
            has_audio=place.has_audio,
            has_display=place.has_display,
            is_wheelchair_accessible=place.is_wheelchair_accessible,
            fully_enclosed=place.fully_enclosed,
            surface_hub=place.surface_hub,
            whiteboard_camera=place.whiteboard_camera,
            tags=list(place.tags or []),
            latitude=place.latitude,
            longitude=place.longitude,
        )

class ExchangePlacesResponse(CamelModel):
    exchange_places_list: list[ExchangePlace]
    skip_token: str | None = None
