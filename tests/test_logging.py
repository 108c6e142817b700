"""로깅 설정 및 마스킹 테스트."""

import logging
import threading

from app.logging_config import RequestIdFilter, configure_logging, request_id_var
from app.middleware.request_logging import RequestLoggingMiddleware, mask_sensitive


class TestRequestIdFilter:
    """요청 ID 필터 테스트."""

    def _record(self) -> logging.LogRecord:
        return logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

    def test_placeholder_outside_request(self):
        """요청 밖에서는 "-"."""
        record = self._record()
        assert RequestIdFilter().filter(record) is True
        assert record.request_id == "-"

    def test_uses_context_value(self):
        token = request_id_var.set("abc123")
        try:
            record = self._record()
            RequestIdFilter().filter(record)
            assert record.request_id == "abc123"
        finally:
            request_id_var.reset(token)

    def test_configure_logging_replaces_handlers(self):
        """반복 호출해도 핸들러는 하나."""
        configure_logging(logging.DEBUG)
        configure_logging("INFO")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.INFO


class TestMaskSensitive:
    """민감 필드 마스킹 테스트."""

    def test_masks_nested_keys(self):
        data = {"teamName": "X", "auth": {"password": "p", "apiKey": "k"}, "items": [{"token": "t"}]}
        assert mask_sensitive(data) == {
            "teamName": "X",
            "auth": {"password": "***", "apiKey": "***"},
            "items": [{"token": "***"}],
        }

    def test_leaves_scalars(self):
        assert mask_sensitive(7) == 7


class _RecordingClient:
    """ingest_events 호출을 기록하는 Axiom 클라이언트 대역."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.calls: list[tuple[str, list[dict]]] = []
        self.thread_ids: list[int] = []

    def ingest_events(self, dataset: str, events: list[dict]) -> None:
        self.thread_ids.append(threading.get_ident())
        if self.fail:
            raise ConnectionError("axiom unreachable")
        self.calls.append((dataset, events))


async def _noop_app(scope, receive, send) -> None:
    return None


class TestAxiomShipping:
    """Axiom 전송 테스트."""

    def _middleware(self, client: _RecordingClient) -> RequestLoggingMiddleware:
        middleware = RequestLoggingMiddleware(_noop_app)
        middleware._client = client
        middleware._dataset = "requests"
        return middleware

    async def test_ingest_runs_off_event_loop_thread(self):
        """동기 ingest_events는 이벤트 루프 스레드 밖에서 실행."""
        client = _RecordingClient()
        event = {"request_id": "abc", "status_code": 200}
        await self._middleware(client)._ship(event)

        assert client.calls == [("requests", [event])]
        assert client.thread_ids[0] != threading.get_ident()

    async def test_ingest_failure_is_logged_not_raised(self, caplog):
        """전송 실패는 예외 없이 로그만 남김."""
        client = _RecordingClient(fail=True)
        with caplog.at_level(logging.ERROR, logger="app.request"):
            await self._middleware(client)._ship({"request_id": "abc"})
        assert "Failed to ship request log to Axiom" in caplog.text

    async def test_no_client_skips_shipping(self):
        middleware = RequestLoggingMiddleware(_noop_app)
        middleware._client = None
        await middleware._ship({"request_id": "abc"})
