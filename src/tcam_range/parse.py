import ipaddress
import re

from tcam_range.split_range import ALL_ONES, InvalidEncoding

NUMBER_RE = re.compile(r"(0x|)[0-9A-Fa-f]+")


def parse_bound(text):
    """
    Converts a command-line bound into an unsigned 32-bit integer.

    Accepted forms are a decimal literal, a hex literal (with a 0x prefix
    or containing a hex letter) and an IPv4 address in dotted decimal,
    which is read in network byte order ("10.0.0.1" -> 0x0a000001).

    Octets with leading zeros ("010.0.0.1") are rejected rather than read
    as octal or decimal, following ipaddress.IPv4Address.
    """
    text = text.strip()
    if NUMBER_RE.fullmatch(text):
        if text.startswith("0x"):
            value = int(text[2:], 16)
        elif text.isdigit():
            value = int(text, 10)
        else:
            value = int(text, 16)
    else:
        try:
            value = int(ipaddress.IPv4Address(text))
        except ipaddress.AddressValueError as e:
            raise InvalidEncoding(f"not a number or an IPv4 address: {text!r}") from e

    if value > ALL_ONES:
        raise InvalidEncoding(f"{text!r} does not fit in 32 bits")
    return value
