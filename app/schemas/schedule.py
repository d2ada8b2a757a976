"""Workspace schedule schemas."""


from app.schemas.common import CamelModel

class WorkspacesSchedule(CamelModel):
    """Reserved / available seats across a building's workspaces, as percentages."""

    building_upn: str
    start: str
    end: str
    reserved: float
    available: float
