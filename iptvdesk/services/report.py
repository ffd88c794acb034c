from rich.console import Console
from rich.table import Table
from rich.text import Text

from iptvdesk.enum.output_format import OutputFormat
from iptvdesk.services.desk import INVALID_URL_HINT, DeskState


def render_report(console: Console, state: DeskState) -> None:
    """Print every output the desk derives from the current state."""
    table = Table(title="Update URL", show_header=False, expand=False)
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")

    table.add_row("Host", state.host)
    if state.has_error:
        table.add_row("Final URL", Text(INVALID_URL_HINT, style="bold red"))
    else:
        table.add_row("Final URL", state.final_url)
    table.add_row("Username", state.username)
    table.add_row("Password", state.password)
    table.add_row("M3U (ts)", state.m3u_url(OutputFormat.TS))
    table.add_row("M3U8", state.m3u_url(OutputFormat.M3U8))
    table.add_row("Access data", state.access_lines)
    table.add_row("Xtream Codes", state.xtream_lines)

    console.print(table)
