"""Query and answer endpoints."""

import asyncio

from fastapi import APIRouter, Depends, HTTPException

from minirag.api.dependencies import get_session
from minirag.api.schemas import (
    AnswerResponse,
    ErrorResponse,
    QueryAnswerResponse,
    QueryRequest,
    QueryResponse,
    RetrievalResultModel,
)
from minirag.session import QueryResult, Session

router = APIRouter(tags=["query"])


def _to_response(result: QueryResult) -> dict:
    return {
        "request_id": result.request_id,
        "query": result.query,
        "query_vector": list(result.query_vector),
        "results": [RetrievalResultModel(**r.to_dict()) for r in result.results],
    }


def _run_query(session: Session, request: QueryRequest) -> QueryResult:
    try:
        return session.query(request.query, k=request.top_k)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Query failed: {str(e)}",
        ) from e


@router.post(
    "/query",
    response_model=QueryResponse,
    responses={500: {"model": ErrorResponse}},
)
async def query(
    request: QueryRequest,
    session: Session = Depends(get_session),
) -> QueryResponse:
    """Retrieve the top chunks for a query.

    Retrieval results are returned immediately; the answer is committed
    later and can be polled from GET /answer.

    Args:
        request: Query request with text and optional top_k
        session: Session dependency

    Returns:
        Query vector and ranked results

    Raises:
        HTTPException: If retrieval fails
    """
    result = _run_query(session, request)
    return QueryResponse(**_to_response(result))


@router.post(
    "/query/answer",
    response_model=QueryAnswerResponse,
    responses={409: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def query_and_answer(
    request: QueryRequest,
    session: Session = Depends(get_session),
) -> QueryAnswerResponse:
    """Retrieve the top chunks and wait for the synthesized answer.

    Raises:
        HTTPException: 409 if a newer query superseded this one
    """
    result = _run_query(session, request)

    wrapped = asyncio.wrap_future(result.answer)
    await asyncio.wait({wrapped})
    if wrapped.cancelled():
        raise HTTPException(
            status_code=409,
            detail=f"Query #{result.request_id} was superseded by a newer query",
        )

    return QueryAnswerResponse(**_to_response(result), answer=wrapped.result())


@router.get("/answer", response_model=AnswerResponse)
async def get_answer(session: Session = Depends(get_session)) -> AnswerResponse:
    """Return the most recently committed answer."""
    return AnswerResponse(
        request_id=session.answer_request_id,
        answer=session.answer,
        pending=session.pending,
    )
