"""
API Client module providing centralized access to EDSM API endpoints.
"""

from api.handle_requests import RequestHandler
from api.systems import SystemsAPI

EDSM_API_URL = "https://www.edsm.net"


class ApiClient:
    """Root client that centralizes sub-APIs and holds shared HTTP/session state."""

    def __init__(self, api_url: str = EDSM_API_URL):
        self.http = RequestHandler(api_url)
        self.systems = SystemsAPI(self)
