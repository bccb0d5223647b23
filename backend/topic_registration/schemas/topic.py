"""
Schémas Pydantic pour les sujets et les fenêtres de dates.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel


class TopicCreate(BaseModel):
    content: Any = None
    acronym: Optional[str] = None
    active: Optional[bool] = None


class TopicUpdate(BaseModel):
    """Seuls les champs fournis sont modifiés."""
    content: Any = None
    acronym: Optional[str] = None
    active: Optional[bool] = None


class TopicResponse(BaseModel):
    topic_id: int
    active: Optional[bool]
    content: Any
    acronym: Optional[str]
    secret_link: Optional[str]
    createdAt: datetime
    updatedAt: datetime

    model_config = {"from_attributes": True}


class TopicEnvelope(BaseModel):
    topic: TopicResponse


class TopicList(BaseModel):
    topics: List[TopicResponse]


class TopicDateCreate(BaseModel):
    dates: Any = None


class TopicDateResponse(BaseModel):
    id: int
    dates: Any
    createdAt: datetime
    updatedAt: datetime

    model_config = {"from_attributes": True}


class TopicDateEnvelope(BaseModel):
    topicDate: TopicDateResponse


class LatestTopicDate(BaseModel):
    """Liste à un élément (la fenêtre la plus récente) ou vide."""
    topicDate: List[TopicDateResponse]
