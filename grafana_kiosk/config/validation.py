"""URL validation for the Grafana kiosk launcher."""

import logging

from pydantic import AnyUrl, TypeAdapter, ValidationError

from .exceptions import URLValidationError

logger = logging.getLogger(__name__)

_url_adapter = TypeAdapter(AnyUrl)


def validate_url(url: str) -> str:
    """Check that ``url`` is a non-empty absolute URL with a host.

    The input string is returned untouched so query parameters and
    fragments reach the browser exactly as given.

    Args:
        url: Value of the ``-URL`` flag

    Returns:
        The same URL string

    Raises:
        URLValidationError: ``reason="missing"`` for an empty value,
            ``reason="malformed"`` when the value does not parse
    """
    if not url:
        raise URLValidationError("URL is required", url=url, reason=URLValidationError.MISSING)

    # AnyUrl strips surrounding whitespace, so reject it before parsing
    if url != url.strip():
        raise URLValidationError(
            f"Invalid URL: {url!r}",
            url=url,
            reason=URLValidationError.MALFORMED,
            validation_errors=["URL has leading or trailing whitespace"],
        )

    try:
        parsed = _url_adapter.validate_python(url)
    except ValidationError as e:
        raise URLValidationError(
            f"Invalid URL: {url}",
            url=url,
            reason=URLValidationError.MALFORMED,
            validation_errors=[err["msg"] for err in e.errors()],
        ) from e

    if not parsed.host:
        raise URLValidationError(
            f"Invalid URL: {url}",
            url=url,
            reason=URLValidationError.MALFORMED,
            validation_errors=["URL has no host"],
        )

    logger.debug(f"Validated URL {url} (scheme={parsed.scheme}, host={parsed.host})")
    return url


__all__ = ["validate_url"]
