"""
Shared data models for the forum query layer.
"""

import os
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator


class SortKey(BaseModel):
    """`sort_<field>` query key."""

    kind: Literal["sort"] = "sort"
    field: str


class SkipKey(BaseModel):
    """`skip[_*]` query key."""

    kind: Literal["skip"] = "skip"


class LimitKey(BaseModel):
    """`limit[_*]` query key."""

    kind: Literal["limit"] = "limit"


class FilterKey(BaseModel):
    """`filter_<field>[_<operator>]` query key."""

    kind: Literal["filter"] = "filter"
    field: str
    operator: Optional[str] = None


ParsedKey = Annotated[
    Union[SortKey, SkipKey, LimitKey, FilterKey],
    Field(discriminator="kind"),
]


class QuerySpec(BaseModel):
    """Structured find() arguments produced from a query string."""

    filter: Dict[str, Any] = Field(default_factory=dict)
    sort: Dict[str, int] = Field(default_factory=dict)  # insertion order is sort priority
    skip: int = Field(default=0, ge=0)
    limit: int = Field(default=20, gt=0)


class ForumSettings(BaseModel):
    """Runtime configuration, read from the environment."""

    mongo_uri: str = "mongodb://localhost:27017"
    database_name: str = "Forum"
    questions_collection: str = "questions"
    answers_collection: str = "answers"
    default_limit: int = Field(default=20, gt=0)
    max_limit: Optional[int] = Field(default=100, gt=0)
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    log_level: str = "INFO"
    api_host: str = "0.0.0.0"
    api_port: int = 5501

    @model_validator(mode="after")
    def _default_limit_within_max(self) -> "ForumSettings":
        if self.max_limit is not None and self.default_limit > self.max_limit:
            raise ValueError(
                f"default_limit ({self.default_limit}) must not exceed max_limit ({self.max_limit})"
            )
        return self

    @classmethod
    def from_env(cls) -> "ForumSettings":
        """
        Build settings from environment variables.

        Call `dotenv.load_dotenv()` first to pick up a local `.env` file.
        Unset variables keep their defaults.
        """
        values: Dict[str, Any] = {}
        env_map = {
            "MONGO_URI": "mongo_uri",
            "MONGO_DATABASE": "database_name",
            "QUESTIONS_COLLECTION": "questions_collection",
            "ANSWERS_COLLECTION": "answers_collection",
            "LISTING_DEFAULT_LIMIT": "default_limit",
            "LISTING_MAX_LIMIT": "max_limit",
            "LOG_LEVEL": "log_level",
            "API_HOST": "api_host",
            "API_PORT": "api_port",
        }
        for env_name, field_name in env_map.items():
            raw = os.getenv(env_name)
            if raw is not None and raw != "":
                values[field_name] = raw

        origins = os.getenv("CORS_ORIGINS")
        if origins:
            values["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

        return cls(**values)
