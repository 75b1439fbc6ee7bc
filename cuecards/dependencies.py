"""
FastAPI dependencies for database sessions and view sessions.
"""

import uuid
from collections import OrderedDict
from functools import lru_cache
from typing import Generator, Optional
from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from cuecards.clipboard import ExportController, MemoryClipboard
from cuecards.db.engine import SessionLocal
from cuecards.logging import get_logger
from cuecards.settings import get_settings

logger = get_logger(__name__)


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency.
    
    Yields a database session and ensures it's closed after the request.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


class CardView:
    """A card opened at a score, with its own clipboard and copy states."""

    def __init__(self, view_id: str, card_id: str, controller: ExportController, clipboard: MemoryClipboard):
        self.view_id = view_id
        self.card_id = card_id
        self.controller = controller
        self.clipboard = clipboard


class ViewRegistry:
    """
    In-process store of open views, keyed by view id.
    
    Each view owns its controller; nothing is shared between views. At most
    `max_views` are kept: opening one more evicts the least recently used
    view and cancels its pending timers.
    """

    def __init__(self, max_views: int = 500):
        self.max_views = max(1, max_views)
        self._views: OrderedDict[str, CardView] = OrderedDict()

    def open(self, card_id: str, sample_answers: list, score: Optional[str] = None) -> CardView:
        settings = get_settings()
        clipboard = MemoryClipboard(max_history=settings.CLIPBOARD_HISTORY or 20)
        controller = ExportController(
            sample_answers,
            clipboard,
            score=score or settings.DEFAULT_SCORE,
            reset_delay=settings.copy_reset_seconds,
        )
        view = CardView(uuid.uuid4().hex, card_id, controller, clipboard)
        self._views[view.view_id] = view
        
        while len(self._views) > self.max_views:
            old_id, old_view = self._views.popitem(last=False)
            old_view.controller.copies.reset()
            logger.info(f"Evicted view {old_id} for card {old_view.card_id}")
        
        return view

    def get(self, view_id: str) -> Optional[CardView]:
        view = self._views.get(view_id)
        if view is not None:
            self._views.move_to_end(view_id)
        return view

    def close(self, view_id: str) -> bool:
        view = self._views.pop(view_id, None)
        if view is None:
            return False
        view.controller.copies.reset()
        return True

    def __len__(self) -> int:
        return len(self._views)


@lru_cache()
def get_view_registry() -> ViewRegistry:
    """Process-wide view registry."""
    return ViewRegistry(max_views=get_settings().MAX_OPEN_VIEWS or 500)


def get_view(
    view_id: str,
    registry: ViewRegistry = Depends(get_view_registry),
) -> CardView:
    """Resolve a view id from the path, 404 if unknown."""
    view = registry.get(view_id)
    if view is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"View {view_id} not found"
        )
    return view
