"""IP address validators.

``ipv4`` accepts dotted-quad addresses only. ``ipv6`` accepts IPv6
addresses except the IPv4-mapped form (``::ffff:a.b.c.d``), which is
treated as neither family's canonical spelling.
"""

import ipaddress
from typing import Any

from ..results import Failure
from .helpers import check_text


def _parse(text: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address | None:
    try:
        return ipaddress.ip_address(text)
    except ValueError:
        return None


def _is_ipv4(text: str) -> bool:
    return isinstance(_parse(text), ipaddress.IPv4Address)


def _is_ipv6(text: str) -> bool:
    address = _parse(text)
    return isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped is None


def ip(value: Any, *params: Any) -> Failure | None:
    return check_text("ip", value, (), lambda text: _parse(text) is not None)


def ipv4(value: Any, *params: Any) -> Failure | None:
    return check_text("ipv4", value, (), _is_ipv4)


def ipv6(value: Any, *params: Any) -> Failure | None:
    return check_text("ipv6", value, (), _is_ipv6)
