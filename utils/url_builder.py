from typing import Mapping, Optional
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit


def construct_url(base_url: str, params: Mapping[str, Optional[str]]) -> str:
    """
    Append ``params`` to ``base_url`` in iteration order. Absent or empty
    values are dropped; every value is fully percent-encoded.
    """
    query = "&".join(
        f"{name}={quote(str(value), safe='')}"
        for name, value in params.items()
        if value is not None and str(value) != ""
    )
    base = base_url.rstrip("?")
    if not query:
        return base
    return f"{base}?{query}"


def redact_url(url: str, secret_params=("key",)) -> str:
    parts = urlsplit(url)
    pairs = [
        (name, "***" if name in secret_params else value)
        for name, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(pairs, quote_via=quote, safe="*")))
