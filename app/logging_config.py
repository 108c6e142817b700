"""로깅 설정 모듈 — 요청 ID가 포함된 구조화 로그 포맷.

Logging configuration module.
Configures the root logger with a single-line structured format and a
filter that stamps every record with the current request id.
"""

import logging
import sys
from contextvars import ContextVar

# 요청 ID 컨텍스트 변수 — Request id for the request being handled
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)

LOG_FORMAT: str = "%(asctime)s | %(levelname)s | %(name)s | rid=%(request_id)s | %(message)s"


class RequestIdFilter(logging.Filter):
    """로그 레코드에 request_id를 주입하는 필터.

    Logging filter injecting the request id from the context variable,
    or "-" outside of a request.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True


def configure_logging(level: str | int = logging.INFO) -> None:
    """루트 로거를 설정합니다.

    Configure root logging with the structured format and request id filter.
    Existing root handlers are replaced so repeated calls do not duplicate output.
    """
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.addFilter(RequestIdFilter())

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel(level)
