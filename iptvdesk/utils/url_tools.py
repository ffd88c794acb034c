import logging
from typing import Optional, Union
from urllib.parse import SplitResult, parse_qs, urlsplit

from iptvdesk.dto.credentials import Credentials
from iptvdesk.enum.output_format import OutputFormat

logger = logging.getLogger(__name__)

PLAYLIST_TYPE = "m3u_plus"

# Schemes that must carry a host and whose empty path reads as "/".
_SPECIAL_SCHEMES = {"http", "https", "ws", "wss", "ftp"}


def _parse_absolute_url(url: str) -> Optional[SplitResult]:
    """Split an absolute URL, or return None when it is not one."""
    text: str = url.strip()
    try:
        parts: SplitResult = urlsplit(text)
        if parts.scheme in _SPECIAL_SCHEMES and not parts.netloc:
            # "http:/host" and "http:host" still name a host.
            remainder: str = text.split(":", 1)[1].lstrip("/\\")
            parts = urlsplit(f"{parts.scheme}://{remainder}")
        # Raises ValueError for a non-numeric or out-of-range port.
        parts.port
    except ValueError:
        logger.debug(f"Could not parse URL {url!r}")
        return None

    if not parts.scheme:
        logger.debug(f"URL {url!r} has no scheme")
        return None
    if parts.scheme in _SPECIAL_SCHEMES and not parts.hostname:
        logger.debug(f"URL {url!r} has no host")
        return None
    if parts.hostname and any(ch.isspace() for ch in parts.hostname):
        logger.debug(f"URL {url!r} has whitespace in its host")
        return None
    return parts


def normalize_base_url(base: str) -> str:
    """Drop a single trailing slash from a base URL."""
    return base[:-1] if base.endswith("/") else base


def replace_base_url(original_url: str, new_base_url: str) -> Optional[str]:
    """Swap scheme, host and port of ``original_url`` for ``new_base_url``.

    The path and query string are kept exactly as they appear in the original
    URL. Returns None when ``original_url`` is not an absolute URL.
    """
    parts = _parse_absolute_url(original_url)
    if parts is None:
        return None

    path: str = parts.path
    if not path and parts.scheme in _SPECIAL_SCHEMES:
        path = "/"
    search: str = f"?{parts.query}" if parts.query else ""
    return normalize_base_url(new_base_url) + path + search


def extract_credentials(text: str) -> Credentials:
    """Read the ``username`` and ``password`` query parameters of a URL.

    Either field is None when the key is missing; both are None when ``text``
    is not an absolute URL.
    """
    parts = _parse_absolute_url(text)
    if parts is None:
        return Credentials()

    params = parse_qs(parts.query, keep_blank_values=True)
    username: Optional[str] = params.get("username", [None])[0]
    password: Optional[str] = params.get("password", [None])[0]
    return Credentials(username=username, password=password)


def build_m3u(
    host: str, username: str, password: str, output: Union[OutputFormat, str]
) -> str:
    """Compose a ``get.php`` playlist URL.

    Credentials are inserted as given, without percent-encoding; playlist
    clients expect this exact format.
    """
    output_value: str = output.value if isinstance(output, OutputFormat) else output
    return (
        f"{normalize_base_url(host)}/get.php"
        f"?username={username}&password={password}"
        f"&type={PLAYLIST_TYPE}&output={output_value}"
    )


def format_access_lines(host: str, username: str, password: str) -> str:
    """Text block with the credentials and the server URL, one per line."""
    return f"Username: {username}\nPassword: {password}\nURL: {host}"


def format_xtream_lines(host: str, username: str, password: str) -> str:
    """Text block for Xtream Codes players: server, username, password."""
    return f"Server: {host}\nUsername: {username}\nPassword: {password}"
