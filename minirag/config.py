from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any
import json
import os
import re

import yaml


MIN_DIMENSIONS = 2
MAX_DIMENSIONS = 8

DEFAULT_DOCUMENT = (
    "RAG systems combine retrieval and generation for accurate AI responses. "
    "Vector databases enable efficient similarity search. "
    "Embedding models convert text to numerical vectors. "
    "Large Language Models use retrieved context to generate informed answers. "
    "RAG improves AI output by grounding responses in relevant information."
)


def clamp_dimensions(value: Any) -> int:
    """Coerce a dimensionality to an int within [2, 8]."""
    if isinstance(value, bool):
        raise ValueError(f"Dimensions must be an integer, got {value!r}")
    try:
        dimensions = int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Dimensions must be an integer, got {value!r}") from e
    return max(MIN_DIMENSIONS, min(MAX_DIMENSIONS, dimensions))


@dataclass(frozen=True)
class ChunkingConfig:
    delimiter: str = "."


@dataclass(frozen=True)
class EmbeddingConfig:
    dimensions: int = 4


@dataclass(frozen=True)
class RetrievalConfig:
    top_k: int = 3


@dataclass(frozen=True)
class AnswerConfig:
    delay_seconds: float = 1.5


@dataclass(frozen=True)
class APIConfig:
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"


@dataclass(frozen=True)
class AppConfig:
    document: str = DEFAULT_DOCUMENT
    chunking: ChunkingConfig = field(default_factory=ChunkingConfig)
    embedding: EmbeddingConfig = field(default_factory=EmbeddingConfig)
    retrieval: RetrievalConfig = field(default_factory=RetrievalConfig)
    answer: AnswerConfig = field(default_factory=AnswerConfig)
    api: APIConfig = field(default_factory=APIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_env_re = re.compile(r"\$\{([^:}]+):-?([^}]*)\}")


def _expand_env(value: Any) -> Any:
    """Expand ${VAR:-default} in strings inside dicts/lists."""
    if isinstance(value, str):
        return _env_re.sub(lambda m: os.environ.get(m.group(1), m.group(2)), value)
    if isinstance(value, dict):
        return {k: _expand_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand_env(v) for v in value]
    return value


def _coalesce(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _coalesce(merged[key], value)
        else:
            merged[key] = value
    return merged


def _from_dict(data: dict[str, Any]) -> AppConfig:
    embedding_data = dict(data.get("embedding", {}))
    embedding_data["dimensions"] = clamp_dimensions(
        embedding_data.get("dimensions", EmbeddingConfig.dimensions)
    )
    answer_data = dict(data.get("answer", {}))
    answer_data["delay_seconds"] = float(
        answer_data.get("delay_seconds", AnswerConfig.delay_seconds)
    )
    # Expanded env values arrive as strings
    retrieval_data = dict(data.get("retrieval", {}))
    retrieval_data["top_k"] = int(retrieval_data.get("top_k", RetrievalConfig.top_k))
    api_data = dict(data.get("api", {}))
    api_data["port"] = int(api_data.get("port", APIConfig.port))
    return AppConfig(
        document=str(data.get("document", DEFAULT_DOCUMENT)),
        chunking=ChunkingConfig(**data.get("chunking", {})),
        embedding=EmbeddingConfig(**embedding_data),
        retrieval=RetrievalConfig(**retrieval_data),
        answer=AnswerConfig(**answer_data),
        api=APIConfig(**api_data),
        logging=LoggingConfig(**data.get("logging", {})),
    )


def config_from_dict(data: dict[str, Any]) -> AppConfig:
    """Build a config from a (partial) dictionary merged over defaults."""
    merged = _coalesce(asdict(AppConfig()), _expand_env(data))
    return _from_dict(merged)


def load_config(path: str | Path | None) -> AppConfig:
    if path is None:
        return AppConfig()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".json"}:
        data = json.loads(raw)
    else:
        data = yaml.safe_load(raw) or {}

    return config_from_dict(data)


def apply_env_overrides(config: AppConfig) -> AppConfig:
    """Override config values from MINIRAG_* environment variables."""
    dimensions = os.getenv("MINIRAG_DIMENSIONS")
    if dimensions:
        config = replace(
            config, embedding=EmbeddingConfig(dimensions=clamp_dimensions(dimensions))
        )

    top_k = os.getenv("MINIRAG_TOP_K")
    if top_k:
        config = replace(config, retrieval=RetrievalConfig(top_k=int(top_k)))

    delay = os.getenv("MINIRAG_ANSWER_DELAY")
    if delay:
        config = replace(config, answer=AnswerConfig(delay_seconds=float(delay)))

    level = os.getenv("MINIRAG_LOG_LEVEL")
    if level:
        config = replace(config, logging=LoggingConfig(level=level))

    return config
