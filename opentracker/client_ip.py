import ipaddress
from typing import Optional, Sequence, Tuple

from fastapi import Request

from opentracker.schemas.config import IPNetwork


def split_host_port(addr: str) -> Tuple[str, str]:
    """Split ``host:port`` or ``[host]:port`` into its two parts.

    Raises ``ValueError`` when the port is missing, the host carries
    unbracketed colons, or brackets are unbalanced.
    """
    if addr.startswith("["):
        end = addr.find("]")
        if end < 0:
            raise ValueError(f"missing ']' in address {addr!r}")
        if end + 1 == len(addr):
            raise ValueError(f"missing port in address {addr!r}")
        if addr[end + 1] != ":":
            raise ValueError(f"unexpected text after ']' in address {addr!r}")
        host, port = addr[1:end], addr[end + 2:]
        if ":" in port:
            raise ValueError(f"too many colons in address {addr!r}")
        if "[" in host:
            raise ValueError(f"unexpected '[' in address {addr!r}")
    else:
        sep = addr.rfind(":")
        if sep < 0:
            raise ValueError(f"missing port in address {addr!r}")
        host, port = addr[:sep], addr[sep + 1:]
        if ":" in host:
            raise ValueError(f"too many colons in address {addr!r}")
        if "[" in host or "]" in host:
            raise ValueError(f"unexpected bracket in address {addr!r}")
    if "[" in port or "]" in port:
        raise ValueError(f"unexpected bracket in port of {addr!r}")
    return host, port


def remote_address(request: Request) -> str:
    client = request.scope.get("client")
    if not client:
        return ""
    host, port = client[0], client[1]
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def _peer_is_trusted(peer: str, networks: Sequence[IPNetwork]) -> bool:
    try:
        address = ipaddress.ip_address(peer)
    except ValueError:
        return False
    return any(address in network for network in networks)


def client_ip(
    forwarded_for: str,
    remote_addr: str,
    trusted_proxies: Optional[Sequence[IPNetwork]] = None,
) -> str:
    try:
        peer, _ = split_host_port(remote_addr)
    except ValueError:
        peer = remote_addr
    # The header is taken verbatim, chain included.
    if forwarded_for and (trusted_proxies is None or _peer_is_trusted(peer, trusted_proxies)):
        return forwarded_for
    return peer
