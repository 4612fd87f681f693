import ipaddress
import logging
import socket
from collections.abc import Callable, Iterable

import psutil

logger = logging.getLogger(__name__)

LOOPBACK_SUBNET = ipaddress.ip_network("127.0.0.0/8")

AddressProvider = Callable[[], Iterable[tuple[str, int]]]


def host_addresses() -> list[tuple[str, int]]:
    """Addresses bound to this host's interfaces, interface by interface."""
    try:
        interfaces = psutil.net_if_addrs()
    except OSError as e:
        logger.warning("Could not list network interfaces: %s", e)
        return []

    return [(snic.address, snic.family) for snics in interfaces.values() for snic in snics]


class NetworkInterfaceScanner:
    """Lists the addresses a remote client could reach this host on.

    ``provider`` blocks on the operating system, so async callers run
    ``scan`` in a worker thread.
    """

    def __init__(self, provider: AddressProvider = host_addresses):
        self._provider = provider

    def addresses(self) -> list[str]:
        """Non-loopback IPv4 addresses in provider order.

        IPv6 is skipped until the discovery announcer supports it.
        """
        result = []
        for address, family in self._provider():
            if family != socket.AF_INET:
                continue
            try:
                ip = ipaddress.IPv4Address(address)
            except ValueError:
                logger.debug("Skipping unparsable address %r", address)
                continue
            if ip in LOOPBACK_SUBNET:
                continue
            result.append(address)
        return result

    def scan(self) -> str:
        return ", ".join(self.addresses())
