import logging
import os
import uuid

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.agents.newsletter.application import (
    NewsletterOrchestrator,
    build_newsletter_orchestrator,
)
from src.agents.newsletter.interface import (
    ErrorResponseModel,
    NewsletterRequestModel,
    NewsletterResponseModel,
    build_error_payload,
    build_newsletter_response_payload,
    to_company_profile,
)
from src.shared.kernel.tools.logger import get_logger, log_context, log_event

logger = get_logger(__name__)

app = FastAPI(
    title="Newsletter Assembler API",
    version="1.0",
    description="Researches a company and writes a newsletter article about it",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_newsletter_orchestrator() -> NewsletterOrchestrator:
    return build_newsletter_orchestrator()


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    log_event(
        logger,
        event="newsletter_request_failed",
        message="newsletter request body rejected",
        level=logging.WARNING,
        error_code="NEWSLETTER_REQUEST_INVALID",
        fields={"error_count": len(exc.errors())},
    )
    return JSONResponse(status_code=500, content=build_error_payload())


@app.get("/")
async def health_check():
    return {"status": "ok"}


@app.post(
    "/api/generate-newsletter",
    response_model=NewsletterResponseModel,
    responses={500: {"model": ErrorResponseModel}},
)
async def generate_newsletter(
    body: NewsletterRequestModel,
    orchestrator: NewsletterOrchestrator = Depends(get_newsletter_orchestrator),
):
    with log_context(request_id=uuid.uuid4().hex, company=body.company_name):
        try:
            supplied_profile = (
                to_company_profile(body.company_data)
                if body.company_data is not None
                else None
            )
            output = await orchestrator.run(
                company_name=body.company_name,
                supplied_profile=supplied_profile,
                currency=body.currency,
            )
        except Exception as exc:
            # Internal detail stays in the logs.
            log_event(
                logger,
                event="newsletter_request_failed",
                message="newsletter generation failed",
                level=logging.ERROR,
                error_code="NEWSLETTER_REQUEST_FAILED",
                fields={"error_type": exc.__class__.__name__, "exception": str(exc)},
                exc_info=True,
            )
            return JSONResponse(status_code=500, content=build_error_payload())

    return build_newsletter_response_payload(output)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
