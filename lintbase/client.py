"""Push reports to a LintBase dashboard over HTTP."""

import re

import httpx

from lintbase import __version__
from lintbase.core.models import Report
from lintbase.exceptions import ReportSaveError
from lintbase.utils.logging import logger

SCANS_ENDPOINT = "/api/scans"
ERROR_SNIPPET_CHARS = 120


class ReportClient:
    """Authenticated client for the dashboard's scan ingestion endpoint."""

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.url = base_url.rstrip("/") + SCANS_ENDPOINT
        self.token = token
        self.timeout = timeout
        self._transport = transport

    def save(self, report: Report) -> str | None:
        """POST the report. Returns the dashboard's scanId when it sends one."""
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
            "User-Agent": f"lintbase/{__version__}",
        }
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                resp = client.post(self.url, content=report.to_json(indent=None), headers=headers)
        except httpx.HTTPError as e:
            raise ReportSaveError(f"Could not reach {self.url}: {e}") from e

        if resp.is_success:
            try:
                data = resp.json()
            except ValueError:
                data = None
            scan_id = data.get("scanId") if isinstance(data, dict) else None
            logger.info("report saved (HTTP {status}, scanId={scan_id})", status=resp.status_code, scan_id=scan_id)
            return scan_id

        raise ReportSaveError(
            f"Dashboard rejected the report: {_error_message(resp)}",
            status_code=resp.status_code,
        )


def _error_message(resp: httpx.Response) -> str:
    """Prefer the JSON `error` field; fall back to status plus a body snippet."""
    try:
        data = resp.json()
    except ValueError:
        data = None

    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])

    if data is not None:
        return f"HTTP {resp.status_code}"

    snippet = re.sub(r"\s+", " ", resp.text[:ERROR_SNIPPET_CHARS])
    return f"HTTP {resp.status_code} - {snippet}"
