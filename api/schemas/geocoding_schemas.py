from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class LatLng(BaseModel):
	lat: float
	lng: float


class Viewport(BaseModel):
	northeast: LatLng
	southwest: LatLng


class Geometry(BaseModel):
	model_config = ConfigDict(extra="allow")

	location: LatLng
	location_type: Optional[str] = None
	viewport: Optional[Viewport] = None


class GeocodeResult(BaseModel):
	model_config = ConfigDict(extra="allow")

	geometry: Geometry
	formatted_address: Optional[str] = None
	place_id: Optional[str] = None
	types: List[str] = Field(default_factory=list)
	address_components: List[Dict[str, Any]] = Field(default_factory=list)


class GeocodeResponse(BaseModel):
	"""Parsed body of a Geocoding API reply."""

	model_config = ConfigDict(extra="allow")

	status: str
	results: List[GeocodeResult] = Field(default_factory=list)
	error_message: Optional[str] = None


class ComponentFilter(BaseModel):
	component: str = Field(..., description="route | locality | administrative_area | postal_code | country")
	value: str


class GeocodeRequest(BaseModel):
	address: str
	bounds: Optional[List[List[float]]] = Field(default=None, description="[[sw_lat, sw_lng], [ne_lat, ne_lng]]")
	language: Optional[str] = Field(default=None, description="e.g., en")
	region: Optional[str] = Field(default=None, description="e.g., au")
	components: Optional[List[ComponentFilter]] = None
	api_key: Optional[str] = Field(default=None, description="Google Maps API key (falls back to server configuration)")
	simplify: bool = True
	check_status: bool = Field(default=True, description="Fail when the service reports a non-OK status")
