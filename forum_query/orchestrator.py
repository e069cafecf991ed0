"""
Listing orchestrator - main entry point.

Coordinates translation, execution and count enrichment for the forum's
question and answer read endpoints.
"""

import logging
from typing import Any, Dict, List, Optional

from forum_query.core.interfaces import (
    ICountEnricher,
    IDocumentStore,
    IQueryTranslator,
    QueryParams,
)
from forum_query.core.models import ForumSettings
from forum_query.execution.executor import QueryExecutor
from forum_query.execution.result_formatter import ResultFormatter
from forum_query.query.identifiers import validate_identifier
from forum_query.query.translator import QueryTranslator

logger = logging.getLogger(__name__)

ANSWER_QUESTION_FIELD = "questionId"
ANSWERS_COUNT_FIELD = "answersCount"


class ListingOrchestrator:
    """
    Serves the forum's read endpoints over an injected document store.

    One orchestrator is built per request around that request's store, so
    nothing is shared between concurrent requests.
    """

    def __init__(
        self,
        store: IDocumentStore,
        query_translator: IQueryTranslator,
        count_enricher: ICountEnricher,
        questions_collection: str = "questions",
        answers_collection: str = "answers",
        max_limit: Optional[int] = None,
    ):
        """
        Initialize listing orchestrator.

        Args:
            store: Request-scoped document store
            query_translator: Database-specific query translator
            count_enricher: Database-specific count enricher
            questions_collection: Collection holding questions
            answers_collection: Collection holding answers
            max_limit: Largest page size a client may request
        """
        self.store = store
        self.query_translator = QueryTranslator(query_translator, max_limit=max_limit)
        self.query_executor = QueryExecutor(store)
        self.count_enricher = count_enricher

        self.questions_collection = questions_collection
        self.answers_collection = answers_collection

    @classmethod
    def from_mongodb(
        cls, store: IDocumentStore, settings: Optional[ForumSettings] = None
    ) -> "ListingOrchestrator":
        """
        Create orchestrator for MongoDB.

        Args:
            store: Request-scoped document store (usually a MongoDocumentStore)
            settings: Collection names and page size limits

        Returns:
            Configured ListingOrchestrator for MongoDB
        """
        from forum_query.adapters.mongodb import MongoCountEnricher, MongoQueryTranslator

        settings = settings or ForumSettings()
        return cls(
            store=store,
            query_translator=MongoQueryTranslator(default_limit=settings.default_limit),
            count_enricher=MongoCountEnricher(store),
            questions_collection=settings.questions_collection,
            answers_collection=settings.answers_collection,
            max_limit=settings.max_limit,
        )

    async def list_questions(self, params: QueryParams) -> List[Dict[str, Any]]:
        """
        List one page of questions with their answer counts.

        Args:
            params: Query-string parameters in the `action_field[_operator]` form

        Returns:
            Questions of the page, each with an `answersCount` field

        Raises:
            QueryValidationError: If the parameters cannot be translated
        """
        spec = self.query_translator.translate(params)
        questions = await self.query_executor.fetch_page(self.questions_collection, spec)
        enriched = await self.count_enricher.enrich(
            questions,
            collection=self.answers_collection,
            foreign_key=ANSWER_QUESTION_FIELD,
            count_field=ANSWERS_COUNT_FIELD,
        )
        return ResultFormatter.format_documents(enriched)

    async def get_question(self, question_id: str) -> Dict[str, Any]:
        """
        Fetch a single question.

        Raises:
            InvalidIdentifierError: If `question_id` is not a UUID
            DocumentNotFoundError: If no question has this id
        """
        validate_identifier(question_id, label="question ID")
        question = await self.query_executor.fetch_by_id(self.questions_collection, question_id)
        return ResultFormatter.format_document(question)

    async def list_answers(self, question_id: str) -> List[Dict[str, Any]]:
        """
        List the answers of a question, oldest first.

        Raises:
            InvalidIdentifierError: If `question_id` is not a UUID
        """
        validate_identifier(question_id, label="question ID")
        answers = await self.store.find(
            self.answers_collection,
            {ANSWER_QUESTION_FIELD: question_id},
            sort={"createdAt": 1},
        )
        return ResultFormatter.format_documents(answers)
