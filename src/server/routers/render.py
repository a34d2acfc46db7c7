"""Render endpoint for the API."""

import warnings

from fastapi import APIRouter, HTTPException

from mdguide.exceptions import AnchorCollisionWarning, ParseError
from mdguide.parser import parse_document
from mdguide.renderer import render_document
from mdguide.schemas import RenderOptions
from mdguide.toc import build_toc, find_anchor_collisions
from mdguide.utils.logging_config import get_logger
from server.models import RenderRequest, RenderResponse

logger = get_logger(__name__)

router = APIRouter()


@router.post("/api/render", response_model=RenderResponse)
async def api_render(render_request: RenderRequest) -> RenderResponse:
    """Parse Markdown and render it back with an optional table of contents.

    **Raises**

    - **HTTPException**: **422** - the Markdown has an unterminated code fence

    """
    try:
        document = parse_document(render_request.markdown)
    except ParseError as exc:
        logger.warning("Rejected render request", extra={"error": str(exc)})
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    options = RenderOptions(
        include_toc=render_request.include_toc,
        toc_title=render_request.toc_title,
        toc_max_level=render_request.toc_max_level,
    )
    # Collisions are reported in the response body instead.
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", AnchorCollisionWarning)
        toc = build_toc(document)
        content = render_document(document, options)

    return RenderResponse(
        content=content,
        toc=toc,
        anchor_collisions=find_anchor_collisions(document),
    )
