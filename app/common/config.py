from pydantic import BaseModel, ConfigDict
from typing import Optional
import os

DEFAULT_VERIFY_URL = "https://www.moltbook.com/api/v1/agents/verify-identity"

class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    app_key: Optional[str] = None
    verify_url: str = DEFAULT_VERIFY_URL
    # None means the outbound call waits indefinitely
    timeout: Optional[float] = None

    @property
    def use_mock(self) -> bool:
        return not self.app_key or not self.app_key.strip()

    @classmethod
    def from_env(cls) -> "Settings":
        timeout = os.getenv("MOLTBOOK_TIMEOUT", "").strip()
        return cls(
            app_key=os.getenv("MOLTBOOK_APP_KEY"),
            verify_url=os.getenv("MOLTBOOK_VERIFY_URL", DEFAULT_VERIFY_URL),
            timeout=float(timeout) if timeout else None,
        )
