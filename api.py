"""
FastAPI REST API for the forum's question listings.

Translates listing query strings to MongoDB queries and returns pages of
questions with their answer counts.
"""

import logging
from typing import Any, AsyncIterator, Dict, List, Union

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.datastructures import QueryParams

from forum_query import ListingOrchestrator
from forum_query.adapters.mongodb import MongoDocumentStore, open_mongo_store
from forum_query.core.errors import DocumentNotFoundError, QueryValidationError
from forum_query.core.models import ForumSettings

load_dotenv()

settings = ForumSettings.from_env()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger("forum_query.api")

app = FastAPI(
    title="Forum Query API",
    description="Filter, sort and paginate forum questions",
    version="1.0.0",
)
app.add_middleware(CORSMiddleware, allow_origins=settings.cors_origins)


async def get_store() -> AsyncIterator[MongoDocumentStore]:
    """Open a MongoDB connection for the current request and close it afterwards."""
    async with open_mongo_store(settings.mongo_uri, settings.database_name) as store:
        yield store


def get_orchestrator(store: MongoDocumentStore = Depends(get_store)) -> ListingOrchestrator:
    """Build the orchestrator around the request's store."""
    return ListingOrchestrator.from_mongodb(store, settings)


def query_params_to_mapping(query_params: QueryParams) -> Dict[str, Union[str, List[str]]]:
    """
    Flatten request query parameters.

    Keys given once map to their value; repeated keys map to the list of
    all their values, in request order.
    """
    mapping: Dict[str, Union[str, List[str]]] = {}
    for key in query_params.keys():
        values = query_params.getlist(key)
        mapping[key] = values[0] if len(values) == 1 else values
    return mapping


@app.exception_handler(QueryValidationError)
async def handle_validation_error(request: Request, exc: QueryValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(DocumentNotFoundError)
async def handle_not_found(request: Request, exc: DocumentNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": str(exc)})


@app.exception_handler(Exception)
async def handle_server_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Something went wrong on the server."})


@app.get("/questions")
async def list_questions(
    request: Request,
    orchestrator: ListingOrchestrator = Depends(get_orchestrator),
) -> List[Dict[str, Any]]:
    """
    List questions.

    Accepts `filter_<field>[_<op>]`, `sort_<field>`, `skip` and `limit`
    query parameters; every question carries an `answersCount`.
    """
    return await orchestrator.list_questions(query_params_to_mapping(request.query_params))


@app.get("/questions/{question_id}")
async def get_question(
    question_id: str,
    orchestrator: ListingOrchestrator = Depends(get_orchestrator),
) -> Dict[str, Any]:
    """Get a single question by id."""
    return await orchestrator.get_question(question_id)


@app.get("/questions/{question_id}/answers")
async def list_answers(
    question_id: str,
    orchestrator: ListingOrchestrator = Depends(get_orchestrator),
) -> List[Dict[str, Any]]:
    """List the answers of a question, oldest first."""
    return await orchestrator.list_answers(question_id)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
