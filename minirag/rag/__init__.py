"""Retrieval and answer synthesis."""

from minirag.rag.answer_generator import AnswerSynthesizer
from minirag.rag.context_builder import ContextBuilder
from minirag.rag.retriever import DEFAULT_TOP_K, Retriever

__all__ = ["AnswerSynthesizer", "ContextBuilder", "DEFAULT_TOP_K", "Retriever"]
