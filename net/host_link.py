# net/host_link.py
"""
Canale verso l'applicazione host.

Every user-driven change becomes a navigation to
    sphere://<module>/<param>/<value>
which the host intercepts. The opener is injectable; the default one hands
the URL to QDesktopServices.
"""
import logging
from typing import Callable, Optional

from PyQt5.QtCore import QUrl
from PyQt5.QtGui import QDesktopServices

log = logging.getLogger(__name__)

HOST_SCHEME = "sphere"


def format_param_value(value) -> str:
    """-5.0 -> '-5', 4.5 -> '4.5'; shortest round-trip form otherwise."""
    f = float(value)
    if f.is_integer():
        return str(int(f))
    return repr(f)


def _open_with_desktop(url: str) -> bool:
    return QDesktopServices.openUrl(QUrl(url))


class HostLink:
    def __init__(self, module: str = "comp", opener: Optional[Callable[[str], bool]] = None,
                 dry_run: bool = False):
        self.module = module
        self.opener = opener or _open_with_desktop
        self.dry_run = dry_run

    def url_for(self, param: str, value) -> str:
        if isinstance(value, bool):
            v = "1" if value else "0"
        else:
            v = format_param_value(value)
        return f"{HOST_SCHEME}://{self.module}/{param}/{v}"

    def send_param(self, param: str, value) -> str:
        url = self.url_for(param, value)
        if self.dry_run:
            log.info("dry-run: %s", url)
            return url
        log.debug("host <- %s", url)
        if self.opener(url) is False:
            log.warning("host did not accept %s", url)
        return url
