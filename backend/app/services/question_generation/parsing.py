"""
Parsing helpers for provider output.

Models rarely return exactly what was asked for, so everything here is tolerant:
JSON may be surrounded by prose, a chat-completions body may arrive framed as
server-sent events, and message content may be a string or a list of chunks.
"""

import json
import logging
import re
from typing import Any, Optional

from app.exceptions import MalformedResponseError, UpstreamParseError


logger = logging.getLogger(__name__)

# Greedy: first "[" through last "]"
_JSON_ARRAY_PATTERN = re.compile(r"\[.*\]", flags=re.S)
_LINE_SPLIT_PATTERN = re.compile(r"\r?\n")
_DATA_PREFIX_PATTERN = re.compile(r"^data:\s*")
_STREAM_SENTINEL = "[DONE]"


def extract_questions(raw_text: str) -> Any:
    """
    Extract the question array from raw model output.

    Takes the span from the first "[" to the last "]" when there is one,
    otherwise the whole text, and parses it as JSON. Elements are returned as
    parsed; shape checks are left to the caller.

    Raises:
        MalformedResponseError: If the candidate text is not valid JSON
    """
    raw_text = raw_text or ""
    match = _JSON_ARRAY_PATTERN.search(raw_text)
    json_string = match.group(0) if match else raw_text

    try:
        return json.loads(json_string)
    except json.JSONDecodeError as e:
        logger.warning(
            "Failed to parse model output as JSON",
            extra={"error": str(e), "response_preview": raw_text[:500]}
        )
        raise MalformedResponseError(
            "Failed to parse AI response as JSON.",
            details={"error": str(e)}
        )


def parse_sse_aware_json(raw: str) -> Any:
    """
    Decode a response body that may be plain JSON or an event stream.

    Plain JSON is tried first. Otherwise the last non-empty ``data:`` payload
    (ignoring the ``[DONE]`` sentinel) is parsed.

    Raises:
        UpstreamParseError: If the body is empty or no payload is valid JSON
    """
    trimmed = (raw or "").strip()
    if not trimmed:
        raise UpstreamParseError("Custom API response was empty.")

    try:
        return json.loads(trimmed)
    except json.JSONDecodeError:
        pass

    payload = _last_data_payload(trimmed)
    if payload is None:
        raise UpstreamParseError(
            "Custom API returned an unreadable response.",
            details={"response_preview": trimmed[:500]}
        )

    try:
        return json.loads(payload)
    except json.JSONDecodeError as e:
        raise UpstreamParseError(
            f"Failed to parse custom API event stream payload as JSON: {e}",
            details={"payload_preview": payload[:500]}
        )


def _last_data_payload(body: str) -> Optional[str]:
    payloads = [
        _DATA_PREFIX_PATTERN.sub("", line)
        for line in (part.strip() for part in _LINE_SPLIT_PATTERN.split(body))
        if line.startswith("data:")
    ]
    payloads = [p for p in payloads if p and p != _STREAM_SENTINEL]
    return payloads[-1] if payloads else None


def normalize_content(content: Any) -> str:
    """
    Reduce chat message content to a single string.

    A string is returned unchanged. A list of chunks contributes each chunk's
    own string value, its ``text`` field or its ``content`` field, joined with
    newlines. Anything else yields an empty string.
    """
    if isinstance(content, str):
        return content

    if isinstance(content, list):
        parts = [_chunk_text(chunk) for chunk in content]
        return "\n".join(part for part in parts if part).strip()

    return ""


def _chunk_text(chunk: Any) -> str:
    if isinstance(chunk, str):
        return chunk
    if isinstance(chunk, dict):
        if isinstance(chunk.get("text"), str):
            return chunk["text"]
        if isinstance(chunk.get("content"), str):
            return chunk["content"]
    return ""
