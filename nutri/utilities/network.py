"""Startup URL helpers for the estimator server."""
import socket
from typing import List

LOOPBACK = ("127.0.0.1", "localhost")


def get_local_ip() -> str:
    """Non-loopback address the OS would use for outbound traffic, else '127.0.0.1'.

    Connecting a UDP socket sends nothing; it only selects a source address.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
        try:
            s.connect(("8.8.8.8", 80))
            return str(s.getsockname()[0])
        except OSError:
            return "127.0.0.1"


def server_urls(host: str, port: int) -> List[str]:
    """URLs worth printing at startup: localhost, plus the LAN address when bound to all interfaces."""
    urls = [f"http://localhost:{port}"]
    if host in ("0.0.0.0", "::"):
        ip = get_local_ip()
        if ip not in LOOPBACK:
            urls.append(f"http://{ip}:{port}")
    elif host not in LOOPBACK:
        urls.append(f"http://{host}:{port}")
    return urls
