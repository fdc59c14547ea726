from __future__ import annotations
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from ideawall.service.idea_service import IdeaService
from ideawall.web.dependencies import get_idea_service

API_PATH = "/api/ideas"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

router = APIRouter()

@router.options(API_PATH)
def preflight():
    return Response(status_code=204, headers=CORS_HEADERS)

@router.get(API_PATH)
def list_ideas(idea_service: IdeaService = Depends(get_idea_service)):
    ideas = idea_service.list_ideas()
    return JSONResponse({"success": True, "data": [i.to_dict() for i in ideas]}, headers=CORS_HEADERS)

@router.post(API_PATH)
async def create_idea(request: Request, idea_service: IdeaService = Depends(get_idea_service)):
    """Create an idea from a ``{"text": ...}`` JSON body.

    A body that is not valid JSON, or not an object, is treated the same as a
    missing ``text`` field.
    """
    try:
        body = await request.json()
    except ValueError:
        body = None
    raw_text = body.get("text") if isinstance(body, dict) else None
    idea = await run_in_threadpool(idea_service.create_idea, raw_text)
    return JSONResponse({"success": True, "data": idea.to_dict()}, headers=CORS_HEADERS)
