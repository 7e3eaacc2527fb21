import time

from starlette.middleware.base import BaseHTTPMiddleware

from ...utils.logging import get_logger

logger = get_logger("easy_doctor.http")


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        resp = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"http: {request.method} {request.url.path} -> {resp.status_code} ({elapsed_ms:.1f}ms)")
        return resp
