"""
Shared pytest fixtures.

Provides an in-memory document store implementing IDocumentStore so the
listing flow can be tested without a MongoDB server.
"""

import re
from typing import Any, Dict, List, Optional

import pytest


def _matches_predicate(value: Any, predicate: Any) -> bool:
    if isinstance(predicate, dict) and predicate and all(k.startswith("$") for k in predicate):
        for op, operand in predicate.items():
            if op == "$in":
                if isinstance(value, list):
                    if not any(v in operand for v in value):
                        return False
                elif value not in operand:
                    return False
            elif op == "$all":
                if not isinstance(value, list) or not all(v in value for v in operand):
                    return False
            elif op == "$gte" and not (value is not None and value >= operand):
                return False
            elif op == "$gt" and not (value is not None and value > operand):
                return False
            elif op == "$lte" and not (value is not None and value <= operand):
                return False
            elif op == "$lt" and not (value is not None and value < operand):
                return False
            elif op == "$regex":
                flags = re.IGNORECASE if "i" in predicate.get("$options", "") else 0
                if not isinstance(value, str) or not re.search(operand, value, flags):
                    return False
        return True
    if isinstance(value, list):
        return predicate in value
    return value == predicate


def _matches(document: Dict[str, Any], filter: Dict[str, Any]) -> bool:
    return all(_matches_predicate(document.get(field), pred) for field, pred in filter.items())


class InMemoryDocumentStore:
    """IDocumentStore fake supporting the subset of queries the forum issues."""

    def __init__(self, collections: Optional[Dict[str, List[Dict[str, Any]]]] = None):
        self.collections: Dict[str, List[Dict[str, Any]]] = collections or {}
        self.calls: List[tuple] = []
        self.reverse_aggregation = False
        self.aggregate_error: Optional[Exception] = None

    async def find(self, collection, filter, sort=None, skip=0, limit=0):
        self.calls.append(("find", collection, filter, dict(sort or {}), skip, limit))
        docs = [dict(d) for d in self.collections.get(collection, []) if _matches(d, filter)]
        for field, direction in reversed(list((sort or {}).items())):
            docs.sort(key=lambda d: d.get(field), reverse=direction < 0)
        docs = docs[skip:]
        if limit:
            docs = docs[:limit]
        return docs

    async def find_one(self, collection, filter):
        self.calls.append(("find_one", collection, filter))
        for doc in self.collections.get(collection, []):
            if _matches(doc, filter):
                return dict(doc)
        return None

    async def aggregate(self, collection, pipeline):
        self.calls.append(("aggregate", collection, pipeline))
        if self.aggregate_error is not None:
            raise self.aggregate_error

        docs = list(self.collections.get(collection, []))
        for stage in pipeline:
            if "$match" in stage:
                docs = [d for d in docs if _matches(d, stage["$match"])]
            elif "$group" in stage:
                group_field = stage["$group"]["_id"].lstrip("$")
                counts: Dict[Any, int] = {}
                for d in docs:
                    key = d.get(group_field)
                    counts[key] = counts.get(key, 0) + 1
                docs = [{"_id": key, "count": count} for key, count in counts.items()]
        if self.reverse_aggregation:
            docs.reverse()
        return docs


QUESTION_IDS = [
    "3f1c2a9e-0b7d-4c55-9a1e-2d6f8b1c0a01",
    "7a2d4e61-5c3b-4f8a-b0d2-9e1f6a3c4b02",
    "c5e8f0a2-1d9b-4b7e-8f3a-6c2d1e0b9a03",
]


@pytest.fixture
def forum_store() -> InMemoryDocumentStore:
    """Store with three questions and answers for the first two."""
    q1, q2, q3 = QUESTION_IDS
    return InMemoryDocumentStore(
        {
            "questions": [
                {"_id": q1, "title": "How do React hooks work?", "score": 7,
                 "isAnswered": True, "tags": ["react", "hooks"], "createdAt": "2025-01-03"},
                {"_id": q2, "title": "Python asyncio basics", "score": 3,
                 "isAnswered": False, "tags": ["python"], "createdAt": "2025-01-01"},
                {"_id": q3, "title": "Sorting in MongoDB", "score": 12,
                 "isAnswered": False, "tags": ["mongodb"], "createdAt": "2025-01-02"},
            ],
            "answers": [
                {"_id": "a1", "questionId": q1, "content": "Hooks let you use state.", "createdAt": "2025-01-05"},
                {"_id": "a2", "questionId": q1, "content": "See the React docs.", "createdAt": "2025-01-04"},
                {"_id": "a3", "questionId": q2, "content": "Start with asyncio.run.", "createdAt": "2025-01-02"},
            ],
        }
    )


@pytest.fixture
def question_ids() -> List[str]:
    return list(QUESTION_IDS)
