from __future__ import annotations

from typing import Any
from xml.etree import ElementTree

from fastapi import Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from petstore.schemas import ApiResponse

JSON = "application/json"
XML = "application/xml"


def _quality(params: list[str]) -> float:
    for param in params:
        key, _, value = param.strip().partition("=")
        if key.strip() == "q":
            try:
                return float(value)
            except ValueError:
                return 0.0
    return 1.0


def preferred_media_type(accept: str | None, produces: tuple[str, ...]) -> str:
    """Pick the best of ``produces`` for an Accept header.

    On equal quality the first match wins, scanning the header left to
    right and ``produces`` in order. A missing or unmatched header falls back
    to JSON when offered, otherwise to the first entry.
    """
    fallback = JSON if JSON in produces else produces[0]
    if not accept:
        return fallback

    best, best_q = fallback, 0.0
    for media_range in accept.split(","):
        media, *params = media_range.split(";")
        media = media.strip().lower()
        q = _quality(params)
        if q <= 0:
            continue
        for candidate in produces:
            if media in (candidate, "*/*", f"{candidate.split('/')[0]}/*") and q > best_q:
                best, best_q = candidate, q
    return best


def to_xml(root: str, payload: dict[str, Any]) -> bytes:
    element = ElementTree.Element(root)
    for key, value in payload.items():
        child = ElementTree.SubElement(element, key)
        if isinstance(value, bool):
            child.text = "true" if value else "false"
        else:
            child.text = str(value)
    return ElementTree.tostring(element, encoding="utf-8", xml_declaration=True)


def render(
    envelope: ApiResponse[Any],
    request: Request | None = None,
    produces: tuple[str, ...] = (JSON,),
) -> Response:
    """Turn a delegate envelope into the HTTP response.

    Status code and headers are taken verbatim; an empty body stays empty.
    """
    if envelope.body is None:
        return Response(status_code=envelope.status_code, headers=envelope.headers)

    accept = request.headers.get("accept") if request is not None else None
    media_type = preferred_media_type(accept, produces)

    if media_type == XML and isinstance(envelope.body, BaseModel):
        payload = envelope.body.model_dump(mode="json", by_alias=True, exclude_none=True)
        return Response(
            content=to_xml(type(envelope.body).__name__, payload),
            status_code=envelope.status_code,
            headers=envelope.headers,
            media_type=XML,
        )

    return JSONResponse(
        content=jsonable_encoder(envelope.body, by_alias=True),
        status_code=envelope.status_code,
        headers=envelope.headers,
    )
