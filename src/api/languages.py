"""Language API routes — CRUD over /api/languages."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from src.api.schemas import LanguageResponse, LanguageWrite
from src.db.connection import ConstraintViolation, Database, get_db
from src.db.models import LanguageRepository, LanguageStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/languages", tags=["languages"])


def get_language_repository(db: Database = Depends(get_db)) -> LanguageStore:
    return LanguageRepository(db)


def _require_name_and_code(body: LanguageWrite, action: str) -> tuple[str, str]:
    if not (body.name or "").strip() or not (body.code or "").strip():
        logger.warning("Invalid language %s request: name or code is empty", action)
        raise HTTPException(status_code=400, detail="Name and Code are required")
    return body.name, body.code


@router.get("", response_model=list[LanguageResponse])
def list_languages(repo: LanguageStore = Depends(get_language_repository)) -> list:
    logger.info("Retrieving all languages")
    return repo.get_all()


@router.get("/{language_id}", response_model=LanguageResponse)
def get_language(
    language_id: str, repo: LanguageStore = Depends(get_language_repository)
):
    language = repo.get_by_id(language_id)
    if language is None:
        logger.warning("Language with id %s not found", language_id)
        raise HTTPException(status_code=404, detail="Language not found")
    return language


@router.post("", status_code=201, response_model=LanguageResponse)
def create_language(
    body: LanguageWrite,
    response: Response,
    repo: LanguageStore = Depends(get_language_repository),
):
    name, code = _require_name_and_code(body, "creation")
    logger.info("Creating language with code %s", code)
    try:
        language_id = repo.create(name, code)
    except ConstraintViolation as e:
        logger.error("Error creating language with code %s: %s", code, e)
        raise HTTPException(
            status_code=400, detail="Failed to create language. It may already exist."
        ) from e

    language = repo.get_by_id(language_id)
    if language is None:
        raise HTTPException(status_code=500, detail="Failed to retrieve created language")

    response.headers["Location"] = f"/api/languages/{language_id}"
    return language


@router.put("/{language_id}", response_model=LanguageResponse)
def update_language(
    language_id: str,
    body: LanguageWrite,
    repo: LanguageStore = Depends(get_language_repository),
):
    name, code = _require_name_and_code(body, "update")
    logger.info("Updating language with id %s", language_id)
    try:
        updated = repo.update(language_id, name, code)
    except ConstraintViolation as e:
        logger.error("Error updating language with id %s: %s", language_id, e)
        raise HTTPException(status_code=400, detail="Failed to update language") from e

    if not updated:
        logger.warning("Language with id %s not found for update", language_id)
        raise HTTPException(status_code=404, detail="Language not found")

    language = repo.get_by_id(language_id)
    if language is None:
        raise HTTPException(status_code=500, detail="Failed to retrieve updated language")
    return language


@router.delete("/{language_id}", status_code=204)
def delete_language(
    language_id: str, repo: LanguageStore = Depends(get_language_repository)
) -> Response:
    logger.info("Deleting language with id %s", language_id)
    if not repo.delete(language_id):
        logger.warning("Language with id %s not found for deletion", language_id)
        raise HTTPException(status_code=404, detail="Language not found")
    return Response(status_code=204)
