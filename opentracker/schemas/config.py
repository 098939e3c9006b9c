import ipaddress
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

IPNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]


class TrackerConfig(BaseModel):
    """Settings shared by every request served by one tracker."""

    model_config = ConfigDict(frozen=True)

    port: int
    domain: str
    path: str = "/pixel"
    host: str = "0.0.0.0"
    # None trusts X-Forwarded-For from any peer.
    trusted_proxies: Optional[Tuple[str, ...]] = None

    @field_validator("trusted_proxies")
    @classmethod
    def _check_networks(cls, value: Optional[Tuple[str, ...]]) -> Optional[Tuple[str, ...]]:
        if value is None:
            return value
        for entry in value:
            try:
                ipaddress.ip_network(entry, strict=False)
            except ValueError as exc:
                raise ValueError(f"invalid trusted proxy {entry!r}") from exc
        return value

    def proxy_networks(self) -> Optional[Tuple[IPNetwork, ...]]:
        if self.trusted_proxies is None:
            return None
        return tuple(ipaddress.ip_network(entry, strict=False) for entry in self.trusted_proxies)
