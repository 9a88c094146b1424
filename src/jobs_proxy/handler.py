"""Jobs proxy: forwards job reads and writes to SheetDB."""

import json
import logging

from .config import SHEETDB_URL_ENV, get_sheetdb_url, get_timeout
from .models import ProxyRequest, ProxyResponse
from .sheetdb_client import SheetDBClient, SheetDBError

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ("GET", "POST")

# Let the CDN serve a cached list for 60s, then refresh in the background
CACHE_CONTROL = "s-maxage=60, stale-while-revalidate"

CONFIG_ERROR = (
    f"Server Configuration Error: Missing {SHEETDB_URL_ENV} environment variable."
)
FETCH_ERROR = "Failed to fetch jobs"
SAVE_ERROR = "Failed to save job"
INVALID_BODY_ERROR = "Invalid JSON body"

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}


async def handle(request: ProxyRequest) -> ProxyResponse:
    """Handle one request to /api/jobs."""
    api_url = get_sheetdb_url()
    if not api_url:
        return _error(500, CONFIG_ERROR)

    method = request.method.upper()
    if method == "GET":
        return await _list_jobs(api_url)
    if method == "POST":
        return await _create_job(api_url, request.body)

    return ProxyResponse(
        status_code=405,
        headers={"Allow": ", ".join(ALLOWED_METHODS)},
        body=f"Method {request.method} Not Allowed",
        is_json=False,
    )


async def _list_jobs(api_url: str) -> ProxyResponse:
    try:
        async with SheetDBClient(api_url, timeout=get_timeout()) as client:
            jobs = await client.list_jobs()
    except SheetDBError as e:
        logger.exception("GET Error: %s", e)
        return _error(500, FETCH_ERROR)

    return ProxyResponse.from_json(
        200, jobs, headers={**CORS_HEADERS, "Cache-Control": CACHE_CONTROL}
    )


async def _create_job(api_url: str, raw_body) -> ProxyResponse:
    try:
        job = json.loads(raw_body) if raw_body else None
    except ValueError:
        return _error(400, INVALID_BODY_ERROR)

    try:
        async with SheetDBClient(api_url, timeout=get_timeout()) as client:
            result = await client.create_job(job)
    except SheetDBError as e:
        logger.exception("POST Error: %s", e)
        return _error(500, SAVE_ERROR)

    return ProxyResponse.from_json(201, result, headers=dict(CORS_HEADERS))


def _error(status_code: int, message: str) -> ProxyResponse:
    response = ProxyResponse.error(status_code, message)
    response.headers.update(CORS_HEADERS)
    return response
