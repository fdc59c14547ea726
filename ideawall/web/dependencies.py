from __future__ import annotations
from ideawall.config import settings
from ideawall.data.idea_repo import IdeaRepo
from ideawall.service.idea_service import IdeaService

def get_idea_service() -> IdeaService:
    return IdeaService(IdeaRepo(settings.DB_PATH))
