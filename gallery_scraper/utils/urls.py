from urllib.parse import parse_qs, urlparse


def canonical_resource_url(url: str) -> str:
    # Everything from the first "?" on is a resize/cache hint; the bare URL is the full image.
    return url.split("?", 1)[0]


def query_param(url: str, name: str) -> str | None:
    values = parse_qs(urlparse(url).query).get(name)
    return values[0] if values else None
