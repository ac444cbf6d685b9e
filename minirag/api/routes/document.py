"""Document and index endpoints."""

from fastapi import APIRouter, Depends

from minirag.api.dependencies import get_session
from minirag.api.schemas import (
    DimensionsRequest,
    DimensionsResponse,
    DocumentRequest,
    DocumentResponse,
    IndexEntryModel,
    IndexResponse,
)
from minirag.session import Session

router = APIRouter(tags=["index"])


@router.get("/document", response_model=DocumentResponse)
async def get_document(session: Session = Depends(get_session)) -> DocumentResponse:
    """Return the current document."""
    return DocumentResponse(text=session.document, chunk_count=len(session.index))


@router.put("/document", response_model=DocumentResponse)
async def set_document(
    request: DocumentRequest,
    session: Session = Depends(get_session),
) -> DocumentResponse:
    """Replace the document and rebuild the index.

    Args:
        request: New document text
        session: Session dependency

    Returns:
        The stored document and its chunk count
    """
    session.set_document(request.text)
    return DocumentResponse(text=session.document, chunk_count=len(session.index))


@router.put("/dimensions", response_model=DimensionsResponse)
async def set_dimensions(
    request: DimensionsRequest,
    session: Session = Depends(get_session),
) -> DimensionsResponse:
    """Change the embedding dimensionality and rebuild the index."""
    dimensions = session.set_dimensions(request.dimensions)
    return DimensionsResponse(dimensions=dimensions)


@router.get("/index", response_model=IndexResponse)
async def get_index(session: Session = Depends(get_session)) -> IndexResponse:
    """Return chunks, vectors and index entries for display."""
    index = session.index
    return IndexResponse(
        dimensions=session.dimensions,
        chunks=[entry.text for entry in index],
        vectors=[list(entry.vector) for entry in index],
        entries=[IndexEntryModel(**entry.to_dict()) for entry in index],
    )
