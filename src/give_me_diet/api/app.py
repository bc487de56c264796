"""FastAPI application factory."""

import logging
from dataclasses import replace

from fastapi import FastAPI, HTTPException, Request

from give_me_diet.api.summary_models import SummaryRequest, SummaryResponse
from give_me_diet.app_logging import configure_logging
from give_me_diet.containers import AppContainer
from give_me_diet.errors import GmdError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/summary")
    async def summary(payload: SummaryRequest, request: Request) -> SummaryResponse:
        """Summarize the posted documents as one merged log."""
        state_container: AppContainer = request.app.state.container
        diary_service = state_container.diary_service
        if payload.strict is not None:
            diary_service = replace(diary_service, strict_separators=payload.strict)
        documents = [
            (f"document {index}", text)
            for index, text in enumerate(payload.documents, start=1)
        ]
        try:
            result = diary_service.summarize_documents(documents)
        except GmdError as exc:
            logger.info("Rejected summary request: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return SummaryResponse.from_summary(
            result, state_container.settings.empty_cell
        )

    return app
