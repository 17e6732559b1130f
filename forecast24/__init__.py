from . import (
    canon,
    exceptions,
    types,
    utils,
    validate,
    ingest,
    transform,
    summary,
    config,
    client,
    dashboard,
)
from .summary import summarise

__all__ = [
    "canon",
    "exceptions",
    "types",
    "utils",
    "validate",
    "ingest",
    "transform",
    "summary",
    "config",
    "client",
    "dashboard",
    "summarise",
]
