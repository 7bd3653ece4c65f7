"""
cors.py
- Purpose: CORS for the dashboard API.
- Preflights are answered here (200, empty body) before routing, so the
  OPTIONS contract holds for browsers too, not only for bare OPTIONS calls.
"""

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response


class StudyStatusCORSMiddleware(CORSMiddleware):
    def preflight_response(self, request_headers: Headers) -> Response:
        resp = super().preflight_response(request_headers)
        if resp.status_code != 200:
            return resp
        # Starlette answers with a plain-text "OK"; keep its headers, drop the body.
        headers = {
            k: v for k, v in resp.headers.items() if k not in ("content-length", "content-type")
        }
        return Response(status_code=200, headers=headers)
