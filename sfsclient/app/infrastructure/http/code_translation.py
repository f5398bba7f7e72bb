"""Pure translators from transport failures and HTTP status codes to Result values."""
from __future__ import annotations

import httpx

from sfsclient.app.constants import GENERIC_TRANSPORT_ERROR
from sfsclient.app.domain.result import Result, ResultCode

# 400 and 405 both map to HTTP_BAD_REQUEST.
_STATUS_FAILURES: dict[int, tuple[ResultCode, str]] = {
    400: (ResultCode.HTTP_BAD_REQUEST, "400 Bad Request"),
    404: (ResultCode.HTTP_NOT_FOUND, "404 Not Found"),
    405: (ResultCode.HTTP_BAD_REQUEST, "405 Method Not Allowed"),
    503: (ResultCode.HTTP_SERVICE_NOT_AVAILABLE, "503 Service Unavailable"),
}


def transport_error_to_result(error: BaseException | None, diagnostic_text: str = "") -> Result[str]:
    if isinstance(error, httpx.TimeoutException):
        code = ResultCode.HTTP_TIMEOUT
    else:
        code = ResultCode.CONNECTION_UNEXPECTED_ERROR
    return Result.failure(code, diagnostic_text or GENERIC_TRANSPORT_ERROR)


def http_status_to_result(status_code: int) -> Result[str]:
    if status_code == 200:
        return Result.success()
    if status_code in _STATUS_FAILURES:
        code, message = _STATUS_FAILURES[status_code]
        return Result.failure(code, message)
    return Result.failure(ResultCode.HTTP_UNEXPECTED, f"Unexpected HTTP code {status_code}")
