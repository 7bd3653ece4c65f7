# study_dashboard/client/navigation.py
"""The active token lives in the page URL as /token/<token>."""

from urllib.parse import quote, unquote, urlparse

TOKEN_SEGMENT = "token"


def path_for_token(token: str) -> str:
    return f"/{TOKEN_SEGMENT}/{quote(token, safe='')}"


def token_from_path(path: str) -> str | None:
    """Token from a URL or path such as https://host/token/STUDY001, else None."""
    segments = urlparse(path or "").path.split("/")
    if TOKEN_SEGMENT not in segments:
        return None
    idx = segments.index(TOKEN_SEGMENT)
    if idx + 1 >= len(segments) or not segments[idx + 1]:
        return None
    return unquote(segments[idx + 1])
