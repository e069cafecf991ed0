"""MongoDB adapter for the forum query layer."""

from forum_query.adapters.mongodb.store import MongoDocumentStore, open_mongo_store
from forum_query.adapters.mongodb.query_translator import MongoQueryTranslator
from forum_query.adapters.mongodb.count_enricher import MongoCountEnricher

__all__ = [
    "MongoDocumentStore",
    "open_mongo_store",
    "MongoQueryTranslator",
    "MongoCountEnricher",
]
