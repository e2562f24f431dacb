"""Application layer - editing sessions and category submission."""

from catalog_console.application.category_service import (
    CategoryDraftService,
    CategoryRepository,
    DraftResult,
    DraftSession,
    DraftSessionRepository,
    SubmitResult,
    get_category_draft_service,
    get_category_repository,
    get_session_repository,
)

__all__ = [
    "CategoryDraftService",
    "CategoryRepository",
    "DraftResult",
    "DraftSession",
    "DraftSessionRepository",
    "SubmitResult",
    "get_category_draft_service",
    "get_category_repository",
    "get_session_repository",
]
