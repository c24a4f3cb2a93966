from app.common.config import Settings
from app.common.models import UpstreamVerifyResponse
import httpx

APP_KEY_HEADER = "X-Moltbook-App-Key"

class MoltbookClient:
    """Single-shot caller for the Moltbook identity verification API."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport = None):
        self.settings = settings
        self.transport = transport

    async def verify_identity(self, token) -> UpstreamVerifyResponse:
        # raises httpx.HTTPError on transport failure or non-2xx, ValueError on a malformed body
        headers = {APP_KEY_HEADER: self.settings.app_key, "Content-Type": "application/json"}
        async with httpx.AsyncClient(timeout=self.settings.timeout, transport=self.transport) as client:
            r = await client.post(self.settings.verify_url, json={"token": token}, headers=headers)
            r.raise_for_status()
            return UpstreamVerifyResponse.model_validate(r.json())
