"""Pydantic schemas for API request/response models."""

import math
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from minirag.config import MAX_DIMENSIONS, MIN_DIMENSIONS


# ========== Request Schemas ==========


class DocumentRequest(BaseModel):
    """Request model for PUT /document."""

    text: str = Field(..., description="Document text to index")


class DimensionsRequest(BaseModel):
    """Request model for PUT /dimensions."""

    dimensions: int = Field(
        ...,
        ge=MIN_DIMENSIONS,
        le=MAX_DIMENSIONS,
        description="Embedding dimensionality",
    )


class QueryRequest(BaseModel):
    """Request model for /query endpoints."""

    query: str = Field(..., description="Query text")
    top_k: Optional[int] = Field(
        default=None, ge=1, le=50, description="Number of results to return"
    )


# ========== Response Schemas ==========


class IndexEntryModel(BaseModel):
    """Single index entry."""

    id: int = Field(..., description="Zero-based chunk position")
    text: str = Field(..., description="Chunk text")
    vector: List[float] = Field(..., description="Embedding vector")


class RetrievalResultModel(IndexEntryModel):
    """Index entry scored against a query."""

    similarity: Optional[float] = Field(
        ..., description="Cosine similarity (null when NaN)"
    )

    @field_validator("similarity", mode="before")
    @classmethod
    def nan_to_none(cls, v):
        """JSON has no NaN; render it as null."""
        if isinstance(v, float) and math.isnan(v):
            return None
        return v


class DocumentResponse(BaseModel):
    """Response model for /document."""

    text: str = Field(..., description="Current document text")
    chunk_count: int = Field(..., description="Number of chunks in the index")


class DimensionsResponse(BaseModel):
    """Response model for PUT /dimensions."""

    dimensions: int = Field(..., description="Effective dimensionality")


class IndexResponse(BaseModel):
    """Response model for GET /index."""

    dimensions: int = Field(..., description="Embedding dimensionality")
    chunks: List[str] = Field(default_factory=list, description="Chunk texts")
    vectors: List[List[float]] = Field(
        default_factory=list, description="Chunk vectors"
    )
    entries: List[IndexEntryModel] = Field(
        default_factory=list, description="Index entries"
    )


class QueryResponse(BaseModel):
    """Response model for POST /query."""

    request_id: int = Field(..., description="Query sequence number")
    query: str = Field(..., description="Query text")
    query_vector: List[float] = Field(..., description="Embedded query")
    results: List[RetrievalResultModel] = Field(
        default_factory=list, description="Results, most similar first"
    )


class AnswerResponse(BaseModel):
    """Response model for answer endpoints."""

    request_id: Optional[int] = Field(
        None, description="Query the answer belongs to"
    )
    answer: Optional[str] = Field(None, description="Committed answer")
    pending: bool = Field(..., description="Whether the latest answer is pending")


class QueryAnswerResponse(QueryResponse):
    """Response model for POST /query/answer."""

    answer: str = Field(..., description="Synthesized answer")


# ========== Error Schemas ==========


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")
