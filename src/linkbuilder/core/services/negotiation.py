"""Content negotiation for hypermedia links.

Clients opt in to links by naming ``hateoas`` in a media type of their
Accept header, e.g. ``application/hateoas+json``, or by flagging a
media type with a ``hateoas`` parameter, e.g.
``application/vnd.api+json; hateoas=true``. This is a heuristic
convention, not a registered media type. The media type test is a
permissive, case-insensitive substring match so vendor-suffixed types
are accepted; other parameters (``q``, ``charset``, ...) are ignored.
"""

HATEOAS_TOKEN = "hateoas"

_FALSE_VALUES = frozenset({"false", "0", "no", "off"})


def _flag_parameter(params: list[str]) -> bool:
    for param in params:
        name, _, value = param.partition("=")
        if name.strip().lower() != HATEOAS_TOKEN:
            continue
        if value.strip().strip('"').lower() not in _FALSE_VALUES:
            return True
    return False


def accepts_hateoas(header: str | None) -> bool:
    """Check whether an Accept header asks for hypermedia links.

    Never raises; absent or malformed input means links were not
    requested.

    Args:
        header: The raw Accept header value.

    Returns:
        True if any entry's media type contains the hateoas token or
        carries a ``hateoas`` flag parameter.
    """
    if not header or not isinstance(header, str) or not header.strip():
        return False

    for entry in header.split(","):
        media_type, *params = entry.split(";")
        if HATEOAS_TOKEN in media_type.strip().lower():
            return True
        if _flag_parameter(params):
            return True

    return False
