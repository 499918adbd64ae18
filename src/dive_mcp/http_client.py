"""Shared HTTP client used by the fetch tool."""

from dataclasses import dataclass, field
from typing import Dict, Optional

import requests


@dataclass
class HttpResponse:
    """Structured response from an outbound request."""
    success: bool
    status: Optional[int] = None
    reason: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    content: bytes = b""
    content_type: Optional[str] = None
    encoding: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.success and self.status is not None and 200 <= self.status < 300


class HttpClient:
    """One connection pool shared by every fetch invocation."""

    def __init__(self, timeout: float = 30.0, user_agent: Optional[str] = None):
        """
        Initialize HTTP client.

        Args:
            timeout: Seconds allowed per request (connect and read)
            user_agent: Default User-Agent header
        """
        self.timeout = timeout
        self.session = requests.Session()
        if user_agent:
            self.session.headers.update({'User-Agent': user_agent})

    def request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Optional[str] = None,
    ) -> HttpResponse:
        """
        Perform a request and collect status, headers and body.

        Per-call headers and body are passed to the session for this request
        only; the session itself is never modified here.

        Returns:
            HttpResponse; success=False only when no response was received
        """
        try:
            data = body.encode('utf-8') if body is not None else None
            response = self.session.request(
                method,
                url,
                headers=headers,
                data=data,
                timeout=self.timeout,
            )
        except requests.Timeout:
            return HttpResponse(success=False, error=f"Request timed out after {self.timeout}s")
        except requests.ConnectionError:
            return HttpResponse(success=False, error=f"Cannot reach {url}. Check network connectivity.")
        except requests.RequestException as e:
            return HttpResponse(success=False, error=str(e))
        except ValueError as e:
            # Header values outside latin-1, or a body that is not encodable
            return HttpResponse(success=False, error=f"Invalid request: {e}")

        content_type = response.headers.get('Content-Type')
        # Explicit charset only: get_encoding_from_headers defaults text/* to ISO-8859-1
        charset = None
        if content_type and "charset=" in content_type.lower():
            charset = requests.utils.get_encoding_from_headers(response.headers)

        return HttpResponse(
            success=True,
            status=response.status_code,
            reason=response.reason or "",
            headers=dict(response.headers),
            content=response.content,
            content_type=content_type,
            encoding=charset,
        )

    def close(self) -> None:
        self.session.close()
