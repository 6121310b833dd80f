import json
import logging
from time import perf_counter
from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger("recipes_finder.request")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid4())
        request.state.request_id = request_id

        started = perf_counter()
        response = await call_next(request)
        duration_ms = (perf_counter() - started) * 1000

        payload = {
            "event": "request_completed",
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round(duration_ms, 2),
        }

        if response.status_code >= 500:
            logger.error(json.dumps(payload))
        elif response.status_code >= 400:
            logger.warning(json.dumps(payload))
        else:
            logger.info(json.dumps(payload))

        response.headers["X-Request-ID"] = request_id
        return response
