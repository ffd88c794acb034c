import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()
logging.basicConfig(
    filename=os.getenv("IPTVDESK_LOG", "iptvdesk.log"),
    filemode="w",
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

from typing import List

from rich.console import Console

from iptvdesk.dao.host_storage.sqlite import HostStorageSQLite
from iptvdesk.services.cli import CLIService
from iptvdesk.services.desk import DEFAULT_HOSTS, DeskState
from iptvdesk.services.report import render_report

logger = logging.getLogger(__name__)


def load_hosts() -> List[str]:
    raw = os.getenv("IPTVDESK_HOSTS", "")
    hosts = [host.strip() for host in raw.split(",") if host.strip()]
    return hosts or list(DEFAULT_HOSTS)


def main():
    db_path = os.getenv(
        "IPTVDESK_DB", os.path.join(os.path.expanduser("~"), ".iptvdesk.sqlite3")
    )
    storage = HostStorageSQLite(db_path)
    state = DeskState(load_hosts(), storage=storage)

    try:
        if len(sys.argv) > 1:
            state.set_original_url(sys.argv[1].strip())
            render_report(Console(), state)
            if state.has_error:
                sys.exit(1)
            return

        cli_service = CLIService(state)
        cli_service.run()
    finally:
        storage.close()


if __name__ == "__main__":
    main()
