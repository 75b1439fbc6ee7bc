"""
View session endpoints: open a card at a score and drive copy actions.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from cuecards.clipboard import ALL_ITEMS
from cuecards.db import crud
from cuecards.dependencies import CardView, ViewRegistry, get_db, get_view, get_view_registry
from cuecards.logging import get_logger
from cuecards.schemas import ClipboardOut, CopyResult, ScoreChange, ViewCreate, ViewOut

logger = get_logger(__name__)

router = APIRouter(prefix="/v1/views", tags=["views"])


def view_out(view: CardView) -> ViewOut:
    return ViewOut(
        view_id=view.view_id,
        card_id=view.card_id,
        score=view.controller.score,
        statuses=view.controller.statuses(),
    )


@router.post("", response_model=ViewOut, status_code=status.HTTP_201_CREATED)
async def open_view(
    body: ViewCreate,
    db: Session = Depends(get_db),
    registry: ViewRegistry = Depends(get_view_registry),
):
    """
    Open a card at a score (default score from settings).
    
    The view keeps its own copy acknowledgments until it is closed.
    """
    sample_answers = crud.get_sample_answers(db, body.card_id)
    if sample_answers is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Card {body.card_id} not found"
        )
    
    view = registry.open(body.card_id, sample_answers, score=body.score)
    logger.info(f"Opened view {view.view_id} for card {body.card_id} at {view.controller.score}")
    return view_out(view)


@router.get("/{view_id}", response_model=ViewOut)
async def read_view(view: CardView = Depends(get_view)):
    """Current score and acknowledgment states."""
    return view_out(view)


@router.put("/{view_id}/score", response_model=ViewOut)
async def change_score(body: ScoreChange, view: CardView = Depends(get_view)):
    """Switch the active score. Every "copied" state resets at once."""
    view.controller.select_score(body.score)
    return view_out(view)


@router.post("/{view_id}/copy/{item}", response_model=CopyResult)
async def copy(item: str, view: CardView = Depends(get_view)):
    """
    Copy one answer (`item` = question index) or all answers (`item` = all).
    
    `copied` is false when the item is already acknowledged, has nothing
    to export at the active score, or the clipboard write failed.
    """
    controller = view.controller
    
    if item == ALL_ITEMS:
        copied = await controller.copy_all()
        key = ALL_ITEMS
    else:
        try:
            index = int(item)
            copied = await controller.copy_item(index)
        except (ValueError, IndexError):
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Invalid copy item {item!r}"
            )
        key = index
    
    return CopyResult(
        view_id=view.view_id,
        item=str(key),
        copied=copied,
        status=controller.status(key).value,
    )


@router.get("/{view_id}/clipboard", response_model=ClipboardOut)
async def read_clipboard(view: CardView = Depends(get_view)):
    """Text most recently copied in this view."""
    return ClipboardOut(
        view_id=view.view_id,
        text=view.clipboard.text,
        writes=view.clipboard.writes,
    )


@router.delete("/{view_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_view(
    view_id: str,
    registry: ViewRegistry = Depends(get_view_registry),
):
    """Close a view and drop its pending timers."""
    if not registry.close(view_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"View {view_id} not found"
        )
