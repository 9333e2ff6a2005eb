import contextlib
from typing import Optional

from fastapi import FastAPI

from wellness.clients.sheets import SheetsWebhookClient
from wellness.config import Settings
from wellness.logging_config import get_logger, setup_logging
from wellness.mcp_server import create_mcp_server
from wellness.middleware import add_cors

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    sheets: Optional[SheetsWebhookClient] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level, settings.log_file)

    if sheets is None:
        sheets = SheetsWebhookClient(settings.sheets_webapp_url, timeout=settings.sheets_timeout)
    if not settings.sheets_webapp_url:
        logger.warning("SHEETS_WEBAPP_URL is not set; responses will not be submitted")

    mcp = create_mcp_server(settings, sheets)

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI):
        async with mcp.session_manager.run():
            yield
        # Let in-flight submissions finish before shutdown
        await sheets.drain()

    app = FastAPI(title="Financial Wellness Questionnaire MCP", lifespan=lifespan)
    app.state.sheets = sheets
    add_cors(app, settings.cors_allow_origins)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.mount("/", mcp.streamable_http_app())

    return app
