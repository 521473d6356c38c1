"""Song records served as JSON over HTTP(S), e.g. a storage backend's REST
endpoint or a raw file in a repository."""

import httpx

from ..exceptions import FetchError
from .base import SongSource


class HttpSource(SongSource):
    """Reads song records from http:// and https:// URLs."""

    @classmethod
    def can_handle(cls, location: str) -> bool:
        return location.startswith(("http://", "https://"))

    def fetch(self, location: str) -> str:
        try:
            resp = httpx.get(location, follow_redirects=True, timeout=15)
        except httpx.RequestError as exc:
            raise FetchError(location, 0) from exc
        if resp.status_code != 200:
            raise FetchError(location, resp.status_code)
        return resp.text
