from .base import BaseCompiler
from .elasticsearch import ElasticsearchCompiler, elasticsearch_compiler

__all__ = (
    "BaseCompiler",
    "ElasticsearchCompiler",
    "elasticsearch_compiler",
)
