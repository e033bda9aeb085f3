"""Shared test helpers."""

from typing import Any, Dict, List, Tuple

import httpx

Route = Tuple[int, Any]


def make_transport(routes: Dict[str, Route], seen: List[httpx.Request] | None = None) -> httpx.MockTransport:
    """
    MockTransport answering by URL path suffix.
    ex) make_transport({"/data/2.5/weather": (200, payload)})
    Unknown paths answer 404. Requests are appended to `seen` when given.
    """
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        for suffix, (status, body) in routes.items():
            if request.url.path.endswith(suffix):
                if isinstance(body, (bytes, str)):
                    return httpx.Response(status, content=body)
                return httpx.Response(status, json=body)
        return httpx.Response(404, json={"message": "not found"})

    return httpx.MockTransport(handler)
