import logging

import requests
from pydantic import ValidationError

from tkb.errors import MalformedResponseError, RateLimitedError, UpstreamError
from tkb.schema import GenerateContentResponse

logger = logging.getLogger(__name__)

RATE_LIMIT_CODE = "429"


def build_payload(prompt):
    return {"contents": [{"parts": [{"text": prompt}]}]}


def _is_rate_limited(status_code, body):
    if status_code == 429:
        return True
    if not isinstance(body, dict):
        return False
    # Gemini nests the code under "error"; older proxies put it at the top level
    codes = [body.get("code")]
    if isinstance(body.get("error"), dict):
        codes.append(body["error"].get("code"))
    return any(c is not None and str(c) == RATE_LIMIT_CODE for c in codes)


def call(prompt, settings):
    """POST the prompt to Gemini and return the decoded JSON body."""
    logger.info("Calling Gemini model %s", settings.model)
    try:
        r = requests.post(
            settings.endpoint,
            json=build_payload(prompt),
            headers={
                "Content-Type": "application/json",
                "x-goog-api-key": settings.api_key,
            },
            timeout=settings.request_timeout,
        )
    except requests.RequestException as e:
        raise UpstreamError(f"Gemini request failed: {e}") from e

    ok = 200 <= r.status_code < 300
    try:
        body = r.json()
    except ValueError as e:
        if r.status_code == 429:
            raise RateLimitedError("Gemini rate limit reached, try again later") from e
        if ok:
            raise MalformedResponseError("Gemini returned a non-JSON body") from e
        raise UpstreamError(f"Gemini returned HTTP {r.status_code}", status_code=r.status_code) from e

    if _is_rate_limited(r.status_code, body):
        raise RateLimitedError("Gemini rate limit reached, try again later")
    if not ok:
        raise UpstreamError(f"Gemini returned HTTP {r.status_code}", status_code=r.status_code)

    return body


def extract(body):
    """Return candidates[0].content.parts[0].text from a generateContent body."""
    try:
        text = GenerateContentResponse.model_validate(body).answer_text()
    except ValidationError as e:
        raise MalformedResponseError(f"Unexpected Gemini response shape: {e.error_count()} validation error(s)") from e
    logger.debug("Gemini answer:\n%s", text)
    return text
