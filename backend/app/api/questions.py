"""
Questions API router for AI-powered question generation.

This module provides the endpoint that generates multiple-choice questions about
a topic using the requested provider (Google or a custom OpenAI-compatible one).
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.dependencies import get_question_router
from app.exceptions import RequestParseError, ValidationException, classify_error
from app.schemas import ErrorResponse, GenerateQuestionsRequest
from app.services.question_service import QuestionGenerationRouter


router = APIRouter()
logger = logging.getLogger(__name__)


async def _read_generation_request(http_request: Request) -> GenerateQuestionsRequest:
    """
    Decode the body into a generation request.

    Any JSON value is accepted; only an object contributes fields, so arrays,
    strings and null end up as a request without a topic.

    Raises:
        RequestParseError: If the body is empty or not valid JSON
    """
    raw_body = await http_request.body()
    try:
        payload: Any = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RequestParseError(
            "Failed to parse request body as JSON.",
            details={"error": str(e)}
        )
    return GenerateQuestionsRequest.model_validate(payload if isinstance(payload, dict) else {})


@router.post(
    "/generate-questions",
    status_code=status.HTTP_200_OK,
    responses={
        200: {"description": "Array of multiple-choice questions"},
        400: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": GenerateQuestionsRequest.model_json_schema(by_alias=True)}
            },
        }
    }
)
async def generate_questions(
    http_request: Request,
    question_router: QuestionGenerationRouter = Depends(get_question_router)
):
    """
    Generate multiple-choice questions about a topic.

    The provider output is returned as parsed; failures are reported with a
    classified, user-safe message and never with raw provider internals beyond
    the ``details`` field.
    """
    provider = None
    try:
        request = await _read_generation_request(http_request)
        provider = request.provider
        questions = await run_in_threadpool(question_router.generate_questions, request)
        return JSONResponse(status_code=status.HTTP_200_OK, content=questions)

    except ValidationException as e:
        logger.warning(f"Rejected question generation request: {e.message}", extra={"details": e.details})
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": e.message})

    except Exception as e:
        logger.error(
            f"Error generating questions: {e}",
            extra={"provider": provider, "error_type": type(e).__name__},
            exc_info=True
        )
        classified = classify_error(e)
        return JSONResponse(status_code=classified.http_status, content=classified.to_response_body())
