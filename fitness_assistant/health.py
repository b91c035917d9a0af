"""Health, readiness and liveness check responses."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Callable, Dict, Optional, Tuple

VERSION = "0.1.0"

HEALTHY = "healthy"
UNHEALTHY = "unhealthy"


@dataclass(frozen=True)
class CheckStatus:
    """Result of a single dependency check."""

    status: str
    message: Optional[str] = None


@dataclass(frozen=True)
class HealthResponse:
    """Body of a health endpoint response."""

    status: str
    version: str = VERSION
    checks: Optional[Dict[str, CheckStatus]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready mapping, leaving out absent optional fields."""
        body: Dict[str, Any] = {"status": self.status, "version": self.version}
        if self.checks is not None:
            body["checks"] = {
                name: _check_to_dict(check) for name, check in self.checks.items()
            }
        return body


def _check_to_dict(check: CheckStatus) -> Dict[str, Any]:
    result: Dict[str, Any] = {"status": check.status}
    if check.message is not None:
        result["message"] = check.message
    return result


def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy")


def liveness_check() -> HealthResponse:
    """Liveness probe: always alive while the process runs."""
    return HealthResponse(status="alive")


def readiness_check(probe: Callable[[], Any]) -> Tuple[HTTPStatus, HealthResponse]:
    """Run the database probe and report readiness.

    The probe signals failure by raising; its message is reported. Returns
    200 when ready and 503 when not.
    """
    try:
        probe()
    except Exception as exc:  # any probe failure means not ready
        db_check = CheckStatus(status=UNHEALTHY, message=str(exc))
    else:
        db_check = CheckStatus(status=HEALTHY)

    is_healthy = db_check.status == HEALTHY
    response = HealthResponse(
        status="ready" if is_healthy else "not_ready",
        checks={"database": db_check},
    )
    code = HTTPStatus.OK if is_healthy else HTTPStatus.SERVICE_UNAVAILABLE
    return code, response