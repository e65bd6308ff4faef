"""
Input normalisation for profile fields.
"""
import re
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

_SCHEME_RE = re.compile(r'^[a-zA-Z][a-zA-Z0-9+.\-]*://')
# A scheme with no authority part, e.g. "mailto:" or "javascript:". A digit after the colon is a port.
_OPAQUE_SCHEME_RE = re.compile(r'^[a-zA-Z][a-zA-Z0-9+.\-]*:(?!\d)')
WEB_SCHEMES = ('http', 'https')
_WWW_RE = re.compile(r'^www\.(?!www\.)[a-z\-\d]{1,63}\.[a-z.\-\d]{2,63}$')
_TRACKING_PARAM_RE = re.compile(r'^utm_\w+$', re.IGNORECASE)
DEFAULT_PORTS = (80, 443)


def normalize_website(url):
    """
    Canonicalises a website URL on HTTPS.

    Adds the scheme when missing and upgrades http to https, lowercases the
    host, drops `www.`, default ports, `utm_*` parameters and the trailing
    slash, and sorts the query string. An empty value stays empty. Raises
    ValueError for URLs that cannot be parsed, for schemes other than http
    and https, and for URLs carrying credentials.
    """
    url = (url or '').strip()
    if not url:
        return ''

    if url.startswith('//'):
        url = f"https:{url}"
    elif not _SCHEME_RE.match(url):
        if _OPAQUE_SCHEME_RE.match(url):
            raise ValueError(f"Not a web URL: {url!r}")
        url = f"https://{url}"

    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    if scheme not in WEB_SCHEMES:
        raise ValueError(f"Unsupported scheme {scheme!r} in {url!r}")
    if parts.username is not None or parts.password is not None:
        raise ValueError(f"URL carries credentials: {url!r}")
    if scheme == 'http':
        scheme = 'https'

    host = (parts.hostname or '').rstrip('.')
    if not host:
        raise ValueError(f"URL has no host: {url!r}")
    if _WWW_RE.match(host):
        host = host[len('www.'):]
    if ':' in host: # IPv6 literal
        host = f"[{host}]"

    port = parts.port # ValueError for out-of-range or non-numeric ports
    netloc = host if port is None or port in DEFAULT_PORTS else f"{host}:{port}"

    path = re.sub(r'/{2,}', '/', parts.path).rstrip('/')

    query_pairs = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if not _TRACKING_PARAM_RE.match(key)
    ]
    query = urlencode(sorted(query_pairs))

    return urlunsplit((scheme, netloc, path, query, parts.fragment))


def normalize_skills(value):
    """
    Accepts a list of skills or one comma-delimited string and returns the
    trimmed, non-empty entries in their original order. Raises TypeError for
    any other input, including lists holding non-string entries.
    """
    if isinstance(value, str):
        items = value.split(',')
    elif isinstance(value, (list, tuple)):
        items = value
    else:
        raise TypeError(f"Skills must be a list or a comma-separated string, got {type(value).__name__}")
    for item in items:
        if not isinstance(item, str):
            raise TypeError(f"Each skill must be a string, got {type(item).__name__}")
    return [item.strip() for item in items if item.strip()]
