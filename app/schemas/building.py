"""Building request and response schemas."""


from app.domain.building import Building
from app.schemas.common import CamelModel

class GeoDistanceQuery(CamelModel):
    """`?sourceGeoCoordinates=lat,long&distanceFromSource=miles`, already validated.

    The coordinate string is kept verbatim so the directory service receives
    exactly what the caller sent.
    """

    source_geo_coordinates: str
    distance_from_source: float | None = None

class BuildingBasicInfo(CamelModel):
    identity: str
    display_name: str
    distance_from_source: float | None = None

    @classmethod
    def from_building(cls, building: Building, distance: float | None = None) -> "BuildingBasicInfo":
        return cls(
            identity=building.upn,
            display_name=building.display_name,
            distance_from_source=distance,
        )

class BasicBuildingsResponse(CamelModel):
    building_info_list: list[BuildingBasicInfo]
    total_record_count: int

class BuildingSearchInfo(CamelModel):
    building_info_list: list[BuildingBasicInfo]
    total_record_count: int
    search_string: str
    top_count: int
    skip: int

class BuildingDetail(CamelModel):
    identity: str
    display_name: str
    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country_or_region: str | None = None
    latitude: float | None = None
    longitude: float | None = None

    @classmethod
    def from_building(cls, building: Building) -> "BuildingDetail":
        return cls(
            identity=building.upn,
            display_name=building.display_name,
            street=building.street,
            city=building.city,
            state=building.state,
            postal_code=building.postal_code,
            country_or_region=building.country_or_region,
            latitude=building.latitude,
            longitude=building.longitude,
        )
