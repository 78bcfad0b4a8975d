"""
Systems API module for locating star systems in galactic space.
"""
import logging
from typing import TYPE_CHECKING

from api.handle_requests import ParseError
from data.models.system import Point, StarSystem

if TYPE_CHECKING:
    from api.client import ApiClient

class SystemsAPI:
    """Systems endpoints."""

    def __init__(self, client: 'ApiClient'):
        self.client = client

    def sphere_systems(self, center: Point, radius: int) -> list[StarSystem]:
        """
        Fetch all known systems within radius of center.
        GET /api-v1/sphere-systems?x=&y=&z=&radius=
        """
        query = {"x": center.x, "y": center.y, "z": center.z, "radius": radius}
        payload = self.client.http.get_json("api-v1/sphere-systems", params=query)
        if not isinstance(payload, list):
            raise ParseError(f"Expected a JSON array of systems, got {type(payload).__name__}")
        for s in payload:
            if not isinstance(s, dict) or not isinstance(s.get("name"), str):
                raise ParseError(f"System object has no string 'name': {s!r}")
        systems = [StarSystem.from_dict(s) for s in payload]
        logging.info(f"EDSM returned {len(systems)} systems around {center} (radius {radius})")
        return systems

    def fetch_systems_in_sphere(self, center: Point, radius: int) -> list[str]:
        """Names of the systems within radius of center, in response order."""
        return [s.name for s in self.sphere_systems(center, radius)]
