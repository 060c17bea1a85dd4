from datetime import date

from pydantic import BaseModel, Field


class DiscoveryRequest(BaseModel):
    family_id: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    radius_km: float = Field(..., gt=0)
    week_theme: str = "education"
    week_start_date: date
    refresh: bool = False
