import dataclasses
from typing import Union

from iptvdesk.dto.credentials import Credentials
from iptvdesk.enum.output_format import OutputFormat
from iptvdesk.utils.url_tools import build_m3u


@dataclasses.dataclass(frozen=True)
class PlaylistDescriptor:
    host: str
    credentials: Credentials
    output: Union[OutputFormat, str] = OutputFormat.TS

    @property
    def url(self) -> str:
        return build_m3u(
            self.host,
            self.credentials.username or "",
            self.credentials.password or "",
            self.output,
        )
