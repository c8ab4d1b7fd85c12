"""URL signing for Google Places Premier client IDs.

Premier requests carry a ``client`` parameter and an HMAC-SHA1 ``signature``
computed over the path and query of the URL with the account's url-safe
base64 private key. The signature has to be the last query parameter or the
API answers 403.
"""

import base64
import hashlib
import hmac
from urllib.parse import urlsplit


def decode_urlsafe_base64(content: str) -> bytes:
    """Decode url-safe base64 (``-`` and ``_`` alphabet), tolerating missing padding."""
    content = content.strip()
    content += "=" * (-len(content) % 4)
    return base64.urlsafe_b64decode(content)


def encode_urlsafe(content: str) -> str:
    """Translate standard base64 text to the url-safe alphabet."""
    return content.replace("+", "-").replace("/", "_")


def compute_signature(path_query: str, private_key: str) -> str:
    """Return the url-safe base64 HMAC-SHA1 signature of ``path_query``."""
    key = decode_urlsafe_base64(private_key)
    digest = hmac.new(key, path_query.encode("utf-8"), hashlib.sha1).digest()
    return encode_urlsafe(base64.b64encode(digest).decode("ascii"))


def sign_url(url: str, private_key: str) -> str:
    """Append ``signature`` as the final query parameter of ``url``."""
    parts = urlsplit(url)
    path_query = parts.path
    if parts.query:
        path_query = f"{path_query}?{parts.query}"
    signature = compute_signature(path_query, private_key)
    separator = "&" if parts.query else "?"
    return f"{url}{separator}signature={signature}"
