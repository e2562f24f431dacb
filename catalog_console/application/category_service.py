"""Category draft application service.

Owns the editing sessions of the admin console. Each session holds one
CatalogDraft; every edit runs a pure draft operation and stores the
returned draft. Submitting a session validates and finalizes its draft,
hands the record to the category repository and discards the session.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Callable
from uuid import uuid4

import structlog

from catalog_console.catalog.product_catalog import ProductCatalog, get_product_catalog
from catalog_console.domain.exceptions import (
    DomainError,
    DraftSessionNotFoundError,
    DraftValidationError,
    ProductNotInCatalogError,
)
from catalog_console.domain.finalization import finalize
from catalog_console.domain.identifiers import IdentifierGenerator, get_id_generator
from catalog_console.domain.mutations import (
    add_service_item,
    add_service_tab,
    remove_service_item,
    remove_service_tab,
    rename_service_tab,
    set_category_name,
    toggle_product_selection,
    update_service_item_field,
)
from catalog_console.domain.naming import resolve_category_name
from catalog_console.domain.validation import ValidationIssue, validate_draft
from catalog_console.domain.value_objects import (
    DEFAULT_CATEGORY_IMAGE,
    CatalogDraft,
    CategoryRecord,
    ServiceItemField,
)

logger = structlog.get_logger()


# ============================================================================
# Editing Session
# ============================================================================


@dataclass
class DraftSession:
    """One administrator's editing context.

    Attributes:
        id: Session identifier.
        draft: Current draft; replaced on every edit.
        created_at: When the session started.
        updated_at: When the draft last changed.
    """

    id: str
    draft: CatalogDraft = field(default_factory=CatalogDraft.empty)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def start(cls) -> "DraftSession":
        """Start a session with an empty draft."""
        return cls(id=str(uuid4()))

    def replace_draft(self, draft: CatalogDraft) -> bool:
        """Store the next draft.

        Args:
            draft: Draft returned by an operation.

        Returns:
            True if the draft changed.
        """
        if draft is self.draft:
            return False
        self.draft = draft
        self.updated_at = datetime.now(timezone.utc)
        return True


# ============================================================================
# In-Memory Repositories
# ============================================================================


class DraftSessionRepository:
    """In-memory repository for editing sessions.

    Sessions that have not been edited for ``ttl_minutes`` are treated
    as abandoned: reads drop them, and ``cleanup_expired`` sweeps the
    rest.
    """

    def __init__(self, ttl_minutes: int = 120) -> None:
        """Initialize repository.

        Args:
            ttl_minutes: Idle time after which a session expires.
        """
        self._sessions: dict[str, DraftSession] = {}
        self.ttl_minutes = ttl_minutes

    def _is_expired(self, session: DraftSession, now: datetime) -> bool:
        return now - session.updated_at > timedelta(minutes=self.ttl_minutes)

    def save(self, session: DraftSession) -> None:
        """Save a session."""
        self._sessions[session.id] = session

    def get(self, session_id: str) -> DraftSession | None:
        """Get session by ID.

        Returns:
            The session, or None if unknown or expired.
        """
        session = self._sessions.get(session_id)
        if session is None:
            return None

        if self._is_expired(session, datetime.now(timezone.utc)):
            del self._sessions[session_id]
            return None

        return session

    def cleanup_expired(self) -> int:
        """Remove expired sessions.

        Returns:
            Number of sessions removed.
        """
        now = datetime.now(timezone.utc)
        expired = [
            session_id
            for session_id, session in self._sessions.items()
            if self._is_expired(session, now)
        ]
        for session_id in expired:
            del self._sessions[session_id]

        if expired:
            logger.info("Expired draft sessions removed", count=len(expired))

        return len(expired)

    def delete(self, session_id: str) -> bool:
        """Delete a session.

        Returns:
            True if the session existed.
        """
        return self._sessions.pop(session_id, None) is not None

    def count(self) -> int:
        """Number of open sessions."""
        return len(self._sessions)


class CategoryRepository:
    """In-memory store of finalized categories, in submission order."""

    def __init__(self) -> None:
        self._records: dict[str, CategoryRecord] = {}

    def save(self, record: CategoryRecord) -> None:
        """Save a finalized category."""
        self._records[record.id] = record

    def get(self, category_id: str) -> CategoryRecord | None:
        """Get category by ID."""
        return self._records.get(category_id)

    def list_all(
        self, page: int = 1, page_size: int = 20
    ) -> tuple[list[CategoryRecord], int]:
        """List categories with pagination."""
        records = list(self._records.values())
        total = len(records)
        start = (page - 1) * page_size
        end = start + page_size
        return records[start:end], total


# Global repository instances
_session_repo: DraftSessionRepository | None = None
_category_repo: CategoryRepository | None = None


def get_session_repository() -> DraftSessionRepository:
    """Get session repository singleton."""
    global _session_repo
    if _session_repo is None:
        from catalog_console.infrastructure.config import settings

        _session_repo = DraftSessionRepository(
            ttl_minutes=settings.draft_session_ttl_minutes
        )
    return _session_repo


def get_category_repository() -> CategoryRepository:
    """Get category repository singleton."""
    global _category_repo
    if _category_repo is None:
        _category_repo = CategoryRepository()
    return _category_repo


# ============================================================================
# Service Result Types
# ============================================================================


@dataclass
class DraftResult:
    """Result of reading or editing a session's draft."""

    session: DraftSession | None = None
    changed: bool = False
    dangling_products: list[str] = field(default_factory=list)
    success: bool = True
    error: str | None = None
    error_code: str | None = None


@dataclass
class SubmitResult:
    """Result of submitting a session."""

    record: CategoryRecord | None = None
    issues: list[ValidationIssue] = field(default_factory=list)
    success: bool = True
    error: str | None = None
    error_code: str | None = None


# ============================================================================
# Category Draft Service
# ============================================================================


class CategoryDraftService:
    """Application service for composing categories.

    Orchestrates the flow:
    1. Start a session with an empty draft
    2. Apply edits (tabs, items, product selection, name)
    3. Submit: validate, finalize, persist, discard the session
    """

    def __init__(
        self,
        session_repo: DraftSessionRepository | None = None,
        category_repo: CategoryRepository | None = None,
        catalog: ProductCatalog | None = None,
        ids: IdentifierGenerator | None = None,
        validate_prices: bool = True,
        category_image: str = DEFAULT_CATEGORY_IMAGE,
        request_id: str | None = None,
    ) -> None:
        """Initialize service.

        Args:
            session_repo: Session repository.
            category_repo: Persistence collaborator for finalized records.
            catalog: Product catalog; the current singleton if omitted.
            ids: Identifier generator; the process-wide one if omitted.
            validate_prices: Reject submissions with invalid prices.
            category_image: Placeholder image for new categories.
            request_id: Request ID for correlation.
        """
        self.session_repo = session_repo or get_session_repository()
        self.category_repo = category_repo or get_category_repository()
        self.catalog = catalog if catalog is not None else get_product_catalog()
        self.ids = ids or get_id_generator()
        self.validate_prices = validate_prices
        self.category_image = category_image
        self.request_id = request_id

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def _load(self, session_id: str) -> DraftSession:
        session = self.session_repo.get(session_id)
        if session is None:
            raise DraftSessionNotFoundError(session_id)
        return session

    def _draft_result(self, session: DraftSession, changed: bool = False) -> DraftResult:
        return DraftResult(
            session=session,
            changed=changed,
            dangling_products=self.catalog.dangling(session.draft.selected_products),
        )

    @staticmethod
    def _error_result(error: DomainError) -> DraftResult:
        return DraftResult(
            success=False,
            error=error.message,
            error_code=error.error_code,
        )

    def start_session(self) -> DraftResult:
        """Start a new editing session with an empty draft.

        Returns:
            DraftResult with the new session.
        """
        self.session_repo.cleanup_expired()
        session = DraftSession.start()
        self.session_repo.save(session)

        logger.info(
            "Draft session started",
            session_id=session.id,
            request_id=self.request_id,
        )

        return self._draft_result(session)

    def get_session(self, session_id: str) -> DraftResult:
        """Get a session and its current draft.

        Args:
            session_id: Session identifier.

        Returns:
            DraftResult with the session and any dangling product ids.
        """
        try:
            return self._draft_result(self._load(session_id))
        except DomainError as e:
            return self._error_result(e)

    def discard_session(self, session_id: str) -> DraftResult:
        """Discard a session without submitting it.

        Args:
            session_id: Session identifier.

        Returns:
            DraftResult with the discarded session.
        """
        try:
            session = self._load(session_id)
        except DomainError as e:
            return self._error_result(e)

        self.session_repo.delete(session_id)
        logger.info(
            "Draft session discarded",
            session_id=session_id,
            request_id=self.request_id,
        )
        return DraftResult(session=session)

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def _apply(
        self,
        session_id: str,
        operation: Callable[[CatalogDraft], CatalogDraft],
        action: str,
        **log_context: object,
    ) -> DraftResult:
        """Run one draft operation against a session and store the result."""
        try:
            session = self._load(session_id)
            changed = session.replace_draft(operation(session.draft))
        except DomainError as e:
            logger.warning(
                "Draft edit rejected",
                action=action,
                session_id=session_id,
                error_code=e.error_code,
                error=e.message,
                request_id=self.request_id,
                **log_context,
            )
            return self._error_result(e)

        if not changed:
            logger.debug(
                "Draft edit had no effect",
                action=action,
                session_id=session_id,
                request_id=self.request_id,
                **log_context,
            )
        return self._draft_result(session, changed=changed)

    def set_name(self, session_id: str, name: str) -> DraftResult:
        """Set the category name as typed."""
        return self._apply(
            session_id,
            lambda draft: set_category_name(draft, name),
            "set_name",
        )

    def add_tab(self, session_id: str) -> DraftResult:
        """Append a new service tab."""
        return self._apply(
            session_id,
            lambda draft: add_service_tab(draft, self.ids),
            "add_tab",
        )

    def rename_tab(self, session_id: str, tab_id: str, name: str) -> DraftResult:
        """Rename a service tab; unknown tabs are ignored."""
        return self._apply(
            session_id,
            lambda draft: rename_service_tab(draft, tab_id, name),
            "rename_tab",
            tab_id=tab_id,
        )

    def remove_tab(self, session_id: str, tab_id: str) -> DraftResult:
        """Remove a service tab and its items; unknown tabs are ignored."""
        return self._apply(
            session_id,
            lambda draft: remove_service_tab(draft, tab_id),
            "remove_tab",
            tab_id=tab_id,
        )

    def add_item(self, session_id: str, tab_id: str) -> DraftResult:
        """Append an empty service item to a tab; unknown tabs are ignored."""
        return self._apply(
            session_id,
            lambda draft: add_service_item(draft, tab_id, self.ids),
            "add_item",
            tab_id=tab_id,
        )

    def update_item(
        self,
        session_id: str,
        tab_id: str,
        item_id: str,
        item_field: ServiceItemField | str,
        value: str,
    ) -> DraftResult:
        """Set one field of a service item; unknown tabs/items are ignored."""
        return self._apply(
            session_id,
            lambda draft: update_service_item_field(draft, tab_id, item_id, item_field, value),
            "update_item",
            tab_id=tab_id,
            item_id=item_id,
            field=ServiceItemField.parse(item_field).value,
        )

    def remove_item(self, session_id: str, tab_id: str, item_id: str) -> DraftResult:
        """Remove a service item; unknown tabs/items are ignored."""
        return self._apply(
            session_id,
            lambda draft: remove_service_item(draft, tab_id, item_id),
            "remove_item",
            tab_id=tab_id,
            item_id=item_id,
        )

    def toggle_product(self, session_id: str, product_id: str) -> DraftResult:
        """Select or deselect a product.

        Only products the catalog knows can be selected. A selected id
        that has since left the catalog can always be deselected.
        """

        def operation(draft: CatalogDraft) -> CatalogDraft:
            if not draft.is_selected(product_id) and product_id not in self.catalog:
                raise ProductNotInCatalogError(product_id)
            return toggle_product_selection(draft, product_id)

        return self._apply(session_id, operation, "toggle_product", product_id=product_id)

    # ------------------------------------------------------------------
    # Naming and Submission
    # ------------------------------------------------------------------

    def preview_name(self, session_id: str) -> tuple[DraftResult, str | None]:
        """Resolve the name the category would get if submitted now.

        Returns:
            Tuple of (DraftResult, resolved name or None on error).
        """
        result = self.get_session(session_id)
        if not result.success or result.session is None:
            return result, None
        return result, resolve_category_name(result.session.draft, self.catalog)

    def submit(self, session_id: str) -> SubmitResult:
        """Finalize a session's draft and persist the record.

        The session is discarded once the record is saved; a failed
        submission leaves it open for further edits.

        Args:
            session_id: Session identifier.

        Returns:
            SubmitResult with the persisted record, or the validation
            issues that blocked submission.
        """
        try:
            session = self._load(session_id)
            if self.validate_prices:
                issues = validate_draft(session.draft)
                if issues:
                    raise DraftValidationError(session_id, issues)
        except DraftValidationError as e:
            logger.warning(
                "Draft submission rejected",
                session_id=session_id,
                issue_count=len(e.issues),
                request_id=self.request_id,
            )
            return SubmitResult(
                issues=e.issues,
                success=False,
                error=e.message,
                error_code=e.error_code,
            )
        except DomainError as e:
            return SubmitResult(success=False, error=e.message, error_code=e.error_code)

        dangling = self.catalog.dangling(session.draft.selected_products)
        record = finalize(session.draft, self.catalog, self.ids, image=self.category_image)
        self.category_repo.save(record)
        self.session_repo.delete(session_id)

        logger.info(
            "Category created",
            category_id=record.id,
            name=record.name,
            name_derived=not session.draft.name.strip(),
            product_count=record.product_count,
            tab_count=len(record.service_tabs),
            service_count=record.service_count,
            pruned_products=dangling,
            session_id=session_id,
            request_id=self.request_id,
        )

        return SubmitResult(record=record)

    def get_category(self, category_id: str) -> CategoryRecord | None:
        """Get a finalized category by ID."""
        return self.category_repo.get(category_id)

    def list_categories(
        self, page: int = 1, page_size: int = 20
    ) -> tuple[list[CategoryRecord], int]:
        """List finalized categories with pagination."""
        return self.category_repo.list_all(page, page_size)


# ============================================================================
# Service Factory
# ============================================================================


def get_category_draft_service(request_id: str | None = None) -> CategoryDraftService:
    """Get category draft service instance.

    Args:
        request_id: Request ID for correlation.

    Returns:
        CategoryDraftService configured from settings.
    """
    from catalog_console.infrastructure.config import settings

    return CategoryDraftService(
        validate_prices=settings.validate_prices,
        category_image=settings.category_placeholder_image,
        request_id=request_id,
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
