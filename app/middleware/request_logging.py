"""요청 로깅 미들웨어.

Request logging middleware.
Assigns a request id, logs method, path, status and duration for every
request, and ships the same event to Axiom when it is configured.
Sensitive fields in request bodies are masked before they are logged.
"""

import json
import logging
import re
import time
import uuid
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings
from app.logging_config import request_id_var

logger = logging.getLogger("app.request")

# 마스킹 대상 필드 패턴 — Fields to mask in request bodies
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

REQUEST_ID_HEADER: str = "X-Request-ID"


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(str(k)) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청을 로깅하는 미들웨어.

    Middleware logging every API request through the standard logger and,
    when AXIOM_API_TOKEN and AXIOM_DATASET are set, to Axiom.
    The request id is taken from the X-Request-ID header or generated,
    and echoed back on the response.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id: str = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        token = request_id_var.set(request_id)
        try:
            if request.url.path in _SKIP_PATHS:
                return await call_next(request)
            return await self._dispatch_logged(request, call_next, request_id)
        finally:
            request_id_var.reset(token)

    async def _dispatch_logged(
        self, request: Request, call_next: RequestResponseEndpoint, request_id: str
    ) -> Response:
        start_time = time.time()
        method = request.method
        path = request.url.path

        # Request body 읽기 — Read request body (only for methods with body)
        request_body: Any = None
        if method in ("POST", "PUT", "PATCH"):
            body_bytes = await request.body()
            if body_bytes:
                try:
                    request_body = mask_sensitive(json.loads(body_bytes))
                except (json.JSONDecodeError, UnicodeDecodeError):
                    request_body = "(non-json body)"

        status_code: int = 500
        error_detail: str | None = None
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            duration_ms = round((time.time() - start_time) * 1000, 2)
            log_event: dict[str, Any] = {
                "request_id": request_id,
                "method": method,
                "path": path,
                "status_code": status_code,
                "duration_ms": duration_ms,
            }
            if request_body is not None:
                log_event["request_body"] = request_body
            if error_detail:
                log_event["error"] = error_detail

            level = logging.WARNING if status_code >= 400 else logging.INFO
            logger.log(level, "%s %s -> %s (%.2f ms)", method, path, status_code, duration_ms)
            await self._ship(log_event)

    async def _ship(self, log_event: dict[str, Any]) -> None:
        if self._client is None:
            return
        try:
            # 동기 HTTP 호출은 스레드풀에서 실행 (The Axiom client blocks, keep it off the event loop)
            await run_in_threadpool(self._client.ingest_events, self._dataset, [log_event])
        except Exception:
            # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break a request on log failure
            logger.exception("Failed to ship request log to Axiom")
