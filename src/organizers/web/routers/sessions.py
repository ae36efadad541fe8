"""Editing session endpoints.

Each session wraps one ``LayoutEditor``. Editing actions always answer
200 with ``applied`` telling whether anything changed; invalid actions
are no-ops, not errors.
"""

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import Response

from organizers.application.config import load_design_from_dict
from organizers.application.dtos import LayoutDocument
from organizers.domain.services.geometry import compute_drag_range, find_touching_blocks
from organizers.web.dependencies import SessionStoreDep, SettingsDep
from organizers.web.routers.designs import render_export
from organizers.web.schemas.requests import (
    CreateSessionRequest,
    DragRequest,
    LoadSessionRequest,
    MaterialRequest,
    SelectRequest,
)
from organizers.web.schemas.responses import (
    ActionResultSchema,
    DragRangeSchema,
    ErrorResponseSchema,
    QuoteSchema,
    SessionSchema,
)

router = APIRouter(
    prefix="/sessions",
    tags=["sessions"],
    responses={404: {"model": ErrorResponseSchema}},
)


def _result(store: SessionStoreDep, session_id: str, applied: bool) -> ActionResultSchema:
    return ActionResultSchema(
        applied=applied,
        session=SessionSchema.from_editor(session_id, store.get(session_id)),
    )


@router.post("", response_model=SessionSchema, status_code=status.HTTP_201_CREATED)
async def create_session(request: CreateSessionRequest, store: SessionStoreDep) -> SessionSchema:
    """Start a session with one compartment covering the drawer."""
    session_id, editor = store.create(request.dimensions.to_domain(), request.material)
    return SessionSchema.from_editor(session_id, editor)


@router.post("/load", response_model=SessionSchema, status_code=status.HTTP_201_CREATED)
async def load_session(request: LoadSessionRequest, store: SessionStoreDep) -> SessionSchema:
    """Start a session from a stored design document."""
    document = LayoutDocument.from_config(load_design_from_dict(request.design))
    session_id, editor = store.load(document)
    return SessionSchema.from_editor(session_id, editor)


@router.get("/{session_id}", response_model=SessionSchema)
async def get_session(session_id: str, store: SessionStoreDep) -> SessionSchema:
    return SessionSchema.from_editor(session_id, store.get(session_id))


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: str, store: SessionStoreDep) -> Response:
    store.delete(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{session_id}/select", response_model=ActionResultSchema)
async def select_block(
    session_id: str, request: SelectRequest, store: SessionStoreDep
) -> ActionResultSchema:
    applied = store.get(session_id).select(request.block_id)
    return _result(store, session_id, applied)


@router.post("/{session_id}/add-row", response_model=ActionResultSchema)
async def add_row(session_id: str, store: SessionStoreDep) -> ActionResultSchema:
    applied = store.get(session_id).add_row()
    return _result(store, session_id, applied)


@router.post("/{session_id}/add-column", response_model=ActionResultSchema)
async def add_column(session_id: str, store: SessionStoreDep) -> ActionResultSchema:
    applied = store.get(session_id).add_column()
    return _result(store, session_id, applied)


@router.get("/{session_id}/lines/{line_id}/range", response_model=DragRangeSchema)
async def get_drag_range(
    session_id: str, line_id: str, store: SessionStoreDep
) -> DragRangeSchema:
    """Legal drag range for a split line, for drawing drag guides."""
    editor = store.get(session_id)
    line = editor.layout.split_line(line_id)
    if line is None:
        raise HTTPException(
            status_code=404,
            detail={"error": f"Split line not found: {line_id}", "error_type": "not_found"},
        )
    bounds = compute_drag_range(line, editor.blocks)
    return DragRangeSchema(
        line_id=line_id,
        position=line.position,
        lower=bounds.lower,
        upper=bounds.upper,
        affected_ids=[b.id for b in find_touching_blocks(editor.blocks, line)],
    )


@router.post("/{session_id}/drag", response_model=ActionResultSchema)
async def drag_line(
    session_id: str, request: DragRequest, store: SessionStoreDep
) -> ActionResultSchema:
    """Drag a split line to ``position`` and release it.

    The position is snapped and clamped to the legal range, just as a live
    pointer drag would be, before the move is committed.
    """
    editor = store.get(session_id)
    applied = False
    if editor.begin_drag(request.line_id) is not None:
        editor.drag_to(request.position)
        applied = editor.end_drag()
    return _result(store, session_id, applied)


@router.post("/{session_id}/undo", response_model=ActionResultSchema)
async def undo(session_id: str, store: SessionStoreDep) -> ActionResultSchema:
    applied = store.get(session_id).undo()
    return _result(store, session_id, applied)


@router.post("/{session_id}/redo", response_model=ActionResultSchema)
async def redo(session_id: str, store: SessionStoreDep) -> ActionResultSchema:
    applied = store.get(session_id).redo()
    return _result(store, session_id, applied)


@router.post("/{session_id}/clear", response_model=ActionResultSchema)
async def clear(session_id: str, store: SessionStoreDep) -> ActionResultSchema:
    applied = store.get(session_id).clear()
    return _result(store, session_id, applied)


@router.put("/{session_id}/material", response_model=ActionResultSchema)
async def set_material(
    session_id: str, request: MaterialRequest, store: SessionStoreDep
) -> ActionResultSchema:
    applied = store.get(session_id).set_material(request.material)
    return _result(store, session_id, applied)


@router.get("/{session_id}/quote", response_model=QuoteSchema)
async def quote(session_id: str, store: SessionStoreDep, settings: SettingsDep) -> QuoteSchema:
    return QuoteSchema.from_quote(store.get(session_id).quote(), settings.pricing.currency)


@router.get("/{session_id}/export")
async def export_session(
    session_id: str,
    store: SessionStoreDep,
    format_name: str = Query(default="json", alias="format"),
) -> Response:
    return render_export(store.get(session_id).export(), format_name)
