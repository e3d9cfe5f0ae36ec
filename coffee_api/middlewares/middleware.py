import time

from fastapi import Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from ..common.log import log_api_request, set_request_context


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tags each request with a short id and logs method, path, status and duration."""
    async def dispatch(
            self,
            request: Request,
            call_next: RequestResponseEndpoint
        ) -> Response:

        req_id = set_request_context()
        started = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        log_api_request(request.url.path, request.method, response.status_code, elapsed_ms)
        response.headers['X-Request-ID'] = req_id
        return response
