import logging
from typing import List, Optional, Union

from iptvdesk.dao.host_storage.base import BaseHostStorage
from iptvdesk.dto.credentials import Credentials
from iptvdesk.dto.playlist import PlaylistDescriptor
from iptvdesk.enum.output_format import OutputFormat
from iptvdesk.utils.url_tools import (
    extract_credentials,
    format_access_lines,
    format_xtream_lines,
    replace_base_url,
)

logger = logging.getLogger(__name__)

DEFAULT_HOSTS: List[str] = [
    "http://sharkvpn.unilafour.xyz",
    "http://sharkvpn.unicrnh.xyz",
    "http://sharkvpn.unilasix.xyz",
    "http://sharkvpn.unilaseven.xyz",
]

INVALID_URL_HINT = "Invalid URL: paste a full address such as http://host/get.php?..."


class DeskState:
    """State behind the URL and Credentials tabs.

    The selected host is restored from ``storage`` when it is still one of
    ``hosts`` and written back on every change.
    """

    def __init__(
        self, hosts: List[str], storage: Optional[BaseHostStorage] = None
    ) -> None:
        if not hosts:
            raise ValueError("At least one target host must be configured.")

        self.hosts: List[str] = list(hosts)
        self.storage: Optional[BaseHostStorage] = storage
        self.host: str = self.hosts[0]
        self.original_url: str = ""
        self.username: str = ""
        self.password: str = ""
        self.output: OutputFormat = OutputFormat.TS

        if self.storage is not None:
            saved: Optional[str] = self.storage.get_selected_host()
            if saved in self.hosts:
                self.host = saved
            elif saved is not None:
                logger.info(f"Ignoring stored host '{saved}', no longer configured")

    def select_host(self, host: str) -> None:
        if host not in self.hosts:
            raise ValueError(f"Unknown host '{host}'")
        self.host = host
        if self.storage is not None:
            self.storage.save_selected_host(host)

    def _step_host(self, step: int) -> None:
        index: int = self.hosts.index(self.host)
        self.select_host(self.hosts[(index + step) % len(self.hosts)])

    def next_host(self) -> None:
        self._step_host(1)

    def previous_host(self) -> None:
        self._step_host(-1)

    def _apply_credentials(self, creds: Credentials) -> None:
        if creds.username:
            self.username = creds.username
        if creds.password:
            self.password = creds.password

    def set_original_url(self, text: str) -> None:
        """Store the pasted URL; credentials are re-read only when it changes."""
        if text == self.original_url:
            return
        self.original_url = text
        if text:
            self._apply_credentials(extract_credentials(text))

    def set_username(self, username: str) -> None:
        self.username = username

    def set_password(self, password: str) -> None:
        self.password = password

    def toggle_output(self) -> None:
        if self.output == OutputFormat.TS:
            self.output = OutputFormat.M3U8
        else:
            self.output = OutputFormat.TS

    def import_credentials(self, text: str) -> bool:
        creds: Credentials = extract_credentials(text)
        if creds.is_empty():
            return False
        self._apply_credentials(creds)
        return True

    def clear(self) -> None:
        self.original_url = ""

    @property
    def final_url(self) -> str:
        if not self.original_url:
            return ""
        return replace_base_url(self.original_url, self.host) or ""

    @property
    def has_error(self) -> bool:
        return bool(self.original_url) and not self.final_url

    @property
    def credentials(self) -> Credentials:
        return Credentials(username=self.username, password=self.password)

    def m3u_url(self, output: Union[OutputFormat, str]) -> str:
        return PlaylistDescriptor(self.host, self.credentials, output).url

    @property
    def selected_m3u_url(self) -> str:
        return self.m3u_url(self.output)

    @property
    def access_lines(self) -> str:
        return format_access_lines(self.host, self.username, self.password)

    @property
    def xtream_lines(self) -> str:
        return format_xtream_lines(self.host, self.username, self.password)

    def _host_line(self) -> str:
        position: int = self.hosts.index(self.host) + 1
        return f"Host: {self.host}  ({position}/{len(self.hosts)})"

    def render_url_tab(self) -> str:
        if self.has_error:
            final: str = INVALID_URL_HINT
        else:
            final = self.final_url or "Waiting for a URL..."
        lines: List[str] = [
            self._host_line(),
            "-" * 30,
            f"Original URL: {self.original_url}",
            f"Final URL:    {final}",
        ]
        return "\n".join(lines)

    def render_credentials_tab(self) -> str:
        lines: List[str] = [
            self._host_line(),
            "-" * 30,
            f"Username: {self.username}",
            f"Password: {self.password}",
            "",
            f"M3U (ts): {self.m3u_url(OutputFormat.TS)}",
            f"M3U8:     {self.m3u_url(OutputFormat.M3U8)}",
            "",
            f"Output:   {self.output.value}",
            f"Selected: {self.selected_m3u_url}",
            "",
            "Access data",
            self.access_lines,
            "",
            "Xtream Codes",
            self.xtream_lines,
        ]
        return "\n".join(lines)
