from __future__ import annotations
import logging
from typing import Any, List
from ideawall.data.idea_repo import IdeaRepo
from ideawall.errors import ValidationError
from ideawall.models.idea import Idea

logger = logging.getLogger(__name__)

EMPTY_TEXT_MESSAGE = "Idea text cannot be empty."

class IdeaService:
    def __init__(self, idea_repo: IdeaRepo):
        self.idea_repo = idea_repo

    def list_ideas(self) -> List[Idea]:
        return self.idea_repo.list_all()

    def create_idea(self, raw_text: Any) -> Idea:
        text = raw_text.strip() if isinstance(raw_text, str) else ""
        if not text:
            logger.info("Rejected idea with empty or missing text")
            raise ValidationError(EMPTY_TEXT_MESSAGE)
        return self.idea_repo.create(text)
