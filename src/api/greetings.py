"""Greeting API routes — CRUD over /api/greetings plus lookup by language code."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from src.api.languages import get_language_repository
from src.api.schemas import GreetingByLanguageResponse, GreetingResponse, GreetingWrite
from src.db.connection import ConstraintViolation, Database, get_db
from src.db.models import GreetingRepository, GreetingStore, LanguageStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/greetings", tags=["greetings"])


def get_greeting_repository(db: Database = Depends(get_db)) -> GreetingStore:
    return GreetingRepository(db)


def _require_fields(body: GreetingWrite, action: str) -> tuple[str, str]:
    if not (body.language_id or "").strip():
        logger.warning("Invalid greeting %s request: language id is empty", action)
        raise HTTPException(status_code=400, detail="LanguageId is required")
    if not (body.greeting_text or "").strip():
        logger.warning("Invalid greeting %s request: greeting text is empty", action)
        raise HTTPException(status_code=400, detail="GreetingText is required")
    return body.language_id, body.greeting_text


@router.get("", response_model=list[GreetingResponse])
def list_greetings(repo: GreetingStore = Depends(get_greeting_repository)) -> list:
    logger.info("Retrieving all greetings")
    return repo.get_all()


@router.get("/by-language/{language_code}", response_model=GreetingByLanguageResponse)
def get_greeting_by_language(
    language_code: str,
    formal: bool | None = None,
    greetings: GreetingStore = Depends(get_greeting_repository),
    languages: LanguageStore = Depends(get_language_repository),
) -> GreetingByLanguageResponse:
    """Pick one greeting for a language code; informal wins unless `formal` is given.

    The language name is fetched with a second, separate read. If the language
    disappears in between, the lookup is reported as not found.
    """
    logger.info("Retrieving greeting for language code %s, formal: %s", language_code, formal)

    greeting = greetings.get_by_language_code(language_code, formal)
    if greeting is None:
        logger.warning("No greeting found for language code %s", language_code)
        raise HTTPException(
            status_code=404, detail=f"No greeting found for language: {language_code}"
        )

    language = languages.get_by_id(greeting.language_id)
    if language is None:
        logger.warning("Language %s vanished during greeting lookup", greeting.language_id)
        raise HTTPException(
            status_code=404, detail=f"No greeting found for language: {language_code}"
        )

    return GreetingByLanguageResponse(
        language=language.name,
        language_code=language.code,
        greeting_text=greeting.greeting_text,
        formal=greeting.formal,
    )


@router.get("/{greeting_id}", response_model=GreetingResponse)
def get_greeting(
    greeting_id: str, repo: GreetingStore = Depends(get_greeting_repository)
):
    greeting = repo.get_by_id(greeting_id)
    if greeting is None:
        logger.warning("Greeting with id %s not found", greeting_id)
        raise HTTPException(status_code=404, detail="Greeting not found")
    return greeting


@router.post("", status_code=201, response_model=GreetingResponse)
def create_greeting(
    body: GreetingWrite,
    response: Response,
    repo: GreetingStore = Depends(get_greeting_repository),
):
    language_id, text = _require_fields(body, "creation")
    logger.info("Creating greeting for language id %s", language_id)
    try:
        greeting_id = repo.create(language_id, text, body.formal)
    except ConstraintViolation as e:
        logger.error("Error creating greeting for language id %s: %s", language_id, e)
        raise HTTPException(
            status_code=400, detail="Failed to create greeting. The language may not exist."
        ) from e

    greeting = repo.get_by_id(greeting_id)
    if greeting is None:
        raise HTTPException(status_code=500, detail="Failed to retrieve created greeting")

    response.headers["Location"] = f"/api/greetings/{greeting_id}"
    return greeting


@router.put("/{greeting_id}", response_model=GreetingResponse)
def update_greeting(
    greeting_id: str,
    body: GreetingWrite,
    repo: GreetingStore = Depends(get_greeting_repository),
):
    language_id, text = _require_fields(body, "update")
    logger.info("Updating greeting with id %s", greeting_id)
    try:
        updated = repo.update(greeting_id, language_id, text, body.formal)
    except ConstraintViolation as e:
        logger.error("Error updating greeting with id %s: %s", greeting_id, e)
        raise HTTPException(status_code=400, detail="Failed to update greeting") from e

    if not updated:
        logger.warning("Greeting with id %s not found for update", greeting_id)
        raise HTTPException(status_code=404, detail="Greeting not found")

    greeting = repo.get_by_id(greeting_id)
    if greeting is None:
        raise HTTPException(status_code=500, detail="Failed to retrieve updated greeting")
    return greeting


@router.delete("/{greeting_id}", status_code=204)
def delete_greeting(
    greeting_id: str, repo: GreetingStore = Depends(get_greeting_repository)
) -> Response:
    logger.info("Deleting greeting with id %s", greeting_id)
    if not repo.delete(greeting_id):
        logger.warning("Greeting with id %s not found for deletion", greeting_id)
        raise HTTPException(status_code=404, detail="Greeting not found")
    return Response(status_code=204)
