"""
Request body reading and decoding into a UserModelMetricsPayload.

Only the first MAX_PAYLOAD_BYTES of a body are read; anything after that is
ignored, so an oversized body usually surfaces as a parse error on the
truncated prefix.
"""

import logging

from fastapi import Request
from pydantic import ValidationError
from starlette.requests import ClientDisconnect

from ingest.errors import PayloadParseError, PayloadReadError
from models.metrics import UserModelMetricsPayload

logger = logging.getLogger(__name__)

MAX_PAYLOAD_BYTES = 2 * 1024


async def read_payload(request: Request, limit: int = MAX_PAYLOAD_BYTES) -> bytes:
    buffer = bytearray()
    try:
        async for chunk in request.stream():
            buffer.extend(chunk[: limit - len(buffer)])
            if len(buffer) >= limit:
                break
    except ClientDisconnect as exc:
        logger.error("Failed to read payload: client disconnected")
        raise PayloadReadError() from exc

    if not buffer:
        logger.error("Failed to read payload: empty body")
        raise PayloadReadError()
    return bytes(buffer)


def parse_user_model_metrics(data: bytes) -> UserModelMetricsPayload:
    logger.debug("Parsing user model metrics payload: %r", data)
    try:
        return UserModelMetricsPayload.model_validate_json(data)
    except ValidationError as exc:
        diagnostic = describe_validation_error(exc)
        logger.error("Failed to extract user model metrics payload: %s", diagnostic)
        raise PayloadParseError(diagnostic) from exc


def describe_validation_error(exc: ValidationError) -> str:
    """One-line summary of a pydantic error, e.g. `user_id: Input should be a valid string`."""
    parts = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)
