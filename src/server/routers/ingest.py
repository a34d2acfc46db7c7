"""Ingest endpoints for the API."""

from typing import Union
from uuid import UUID

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse, JSONResponse, RedirectResponse

from mdguide.config import MDGUIDE_CACHE_PATH
from server.models import IngestErrorResponse, IngestRequest, IngestSuccessResponse
from server.query_processor import DIGEST_FILENAME, process_query

router = APIRouter()

COMMON_INGEST_RESPONSES: dict[int | str, dict[str, object]] = {
    status.HTTP_200_OK: {"model": IngestSuccessResponse, "description": "Successful ingestion"},
    status.HTTP_400_BAD_REQUEST: {"model": IngestErrorResponse, "description": "Bad request or processing error"},
}


@router.post("/api/ingest", responses=COMMON_INGEST_RESPONSES)
async def api_ingest(ingest_request: IngestRequest) -> JSONResponse:
    """Ingest a Markdown guide and return processed content.

    **This endpoint reads a URL or server-local path, parses the guide,**
    then returns a summary, the section tree, and the re-rendered Markdown.
    The full digest is stored in the local cache for download.

    **Parameters**

    - **ingest_request** (`IngestRequest`): Pydantic model containing ingestion parameters

    **Returns**

    - **JSONResponse**: Success response with ingestion results or error response with HTTP 400

    """
    response = await process_query(
        ingest_request.input_text,
        remove_toc=ingest_request.remove_toc,
        toc_title=ingest_request.toc_title,
        section_filter_mode=ingest_request.section_filter_mode.value,
        sections=ingest_request.sections,
    )
    if isinstance(response, IngestErrorResponse):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=response.model_dump())
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.model_dump())


@router.get("/api/download/file/{ingest_id}", response_model=None)
async def download_ingest(
    ingest_id: UUID,
) -> Union[RedirectResponse, FileResponse]:  # noqa: FA100 (future-rewritable-type-annotation) (pydantic)
    """Download the digest produced for an ingest ID.

    **Raises**

    - **HTTPException**: **404** - digest directory is missing or contains no digest file
    - **HTTPException**: **403** - the ingest ID resolves outside the cache directory

    """
    directory = (MDGUIDE_CACHE_PATH / str(ingest_id)).resolve()
    if not str(directory).startswith(str(MDGUIDE_CACHE_PATH.resolve())):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=f"Invalid ingest ID: {ingest_id!r}")

    digest = directory / DIGEST_FILENAME
    if not digest.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Digest {ingest_id!s} not found")

    return FileResponse(path=digest, media_type="text/plain", filename=digest.name)
