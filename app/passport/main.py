from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from app.common.config import Settings
from app.common.logging_conf import setup_logging
from app.common.models import AgentProfile, UpstreamAgent, VerifyRequest, VerifyResponse
from app.common.moltbook_client import MoltbookClient
import httpx, json, os

log = setup_logging()

MOCK_AGENT = AgentProfile(
    id="mock-agent-123",
    name="TestAgent007",
    karma=888,
    posts=42,
    comments=156,
    owner_x_handle="@testuser_mock",
    is_claimed=True,
)
MOCK_MESSAGE = (
    "MOCK VERIFICATION SUCCESS (real key pending approval). "
    "Your fake karma is 888. You would be granted access!"
)
MOCK_BANNER = (
    "Moltbook Passport service is running (MOCK MODE - no real key set yet). "
    "POST /verify with any token to get mock agent data."
)
LIVE_BANNER = 'Moltbook Passport service is running. POST /verify { "token": "..." } to verify agent identity.'

def reply(status_code: int, **fields) -> JSONResponse:
    body = VerifyResponse(**fields).model_dump(exclude_none=True)
    return JSONResponse(body, status_code=status_code)

def failure(status_code: int, error: str) -> JSONResponse:
    return reply(status_code, success=False, error=error)

class VerificationHandler:
    def __init__(self, settings: Settings, client: MoltbookClient):
        self.settings = settings
        self.client = client

    async def verify(self, raw: bytes) -> JSONResponse:
        try:
            body = json.loads(raw)
        except ValueError:
            return failure(400, "Invalid JSON format")

        payload = VerifyRequest.model_validate(body) if isinstance(body, dict) else VerifyRequest()
        if not payload.has_token:
            return failure(400, "Missing token")

        if self.settings.use_mock:
            log.info("[MOCK] Verifying token (fake success)")
            return reply(200, success=True, agent=MOCK_AGENT, message=MOCK_MESSAGE)

        try:
            data = await self.client.verify_identity(payload.token)
            if data.accepted:
                agent = UpstreamAgent.model_validate(data.agent).to_profile()
        except httpx.HTTPStatusError as e:
            log.error("Verification failed: %s", e.response.text or e)
            return failure(500, "Server error, please try again later or check the token")
        except (httpx.HTTPError, ValueError) as e:
            log.error("Verification failed: %s", e)
            return failure(500, "Server error, please try again later or check the token")

        if not data.accepted:
            log.warning("Upstream rejected token")
            return failure(401, "Token is invalid or expired")

        log.info("Verified agent %s (%s)", agent.name, agent.id)
        return reply(
            200,
            success=True,
            agent=agent,
            message=f"Welcome, {agent.name}! Your karma is {agent.karma}.",
        )

def create_app(settings: Settings = None, transport: httpx.AsyncBaseTransport = None) -> FastAPI:
    settings = settings or Settings.from_env()
    handler = VerificationHandler(settings, MoltbookClient(settings, transport=transport))
    app = FastAPI(title="Moltbook-Passport")
    app.state.settings = settings
    app.state.handler = handler
    log.info("Passport starting in %s mode", "MOCK" if settings.use_mock else "live")

    @app.middleware("http")
    async def catch_all(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            log.exception("Global error")
            return failure(500, "Internal server error")

    @app.get("/", response_class=PlainTextResponse)
    def index():
        return MOCK_BANNER if settings.use_mock else LIVE_BANNER

    @app.get("/healthz")
    def healthz():
        return {"status": "ok", "mode": "mock" if settings.use_mock else "live"}

    @app.post("/verify")
    async def verify(request: Request):
        return await app.state.handler.verify(await request.body())

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.passport.main:app", host="0.0.0.0", port=int(os.getenv("PORT", "8080")), log_config=None)
