"""TLS certificate validity and expiry check."""

import asyncio
import socket
import ssl
from dataclasses import dataclass
from datetime import UTC, datetime

import structlog

from api.config import get_settings

logger = structlog.get_logger(__name__)

CERT_DATE_FORMAT = "%b %d %H:%M:%S %Y %Z"


@dataclass
class SSLResult:
    """Certificate validity and days until expiry."""

    is_valid: bool
    days_remaining: int


def days_until(not_after: str, now: datetime | None = None) -> int:
    """Whole days from ``now`` until a certificate notAfter timestamp."""
    expires = datetime.strptime(not_after, CERT_DATE_FORMAT).replace(tzinfo=UTC)
    now = now or datetime.now(UTC)
    return (expires - now).days


def _read_certificate(hostname: str, port: int, timeout: float) -> dict:
    context = ssl.create_default_context()
    with socket.create_connection((hostname, port), timeout=timeout) as sock:
        with context.wrap_socket(sock, server_hostname=hostname) as tls:
            return tls.getpeercert()


async def check_ssl_certificate(
    hostname: str,
    port: int = 443,
    timeout: float | None = None,
) -> SSLResult | None:
    """
    Handshake with ``hostname`` and inspect its certificate.

    A certificate that fails verification yields ``is_valid=False``;
    a host that cannot be reached yields None.
    """
    settings = get_settings()
    timeout = timeout if timeout is not None else settings.ssl_timeout

    try:
        cert = await asyncio.to_thread(_read_certificate, hostname, port, timeout)
    except ssl.SSLCertVerificationError as e:
        logger.info("ssl_certificate_invalid", hostname=hostname, error=str(e))
        return SSLResult(is_valid=False, days_remaining=0)
    except (OSError, ssl.SSLError) as e:
        logger.warning("ssl_check_failed", hostname=hostname, error=str(e))
        return None

    not_after = cert.get("notAfter") if cert else None
    if not not_after:
        return None

    try:
        remaining = days_until(not_after)
    except ValueError as e:
        logger.warning("ssl_date_unparseable", hostname=hostname, not_after=not_after, error=str(e))
        return None

    return SSLResult(is_valid=remaining > 0, days_remaining=remaining)
