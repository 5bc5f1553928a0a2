from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from flowgraph.editor import (
    DeleteIntent,
    DispatchResult,
    InsertIntent,
    RedoIntent,
    RelabelIntent,
    UndoIntent,
    WorkflowEditor,
)
from flowgraph.errors import (
    CannotDeleteRoot,
    DuplicateIdentifier,
    InvalidBranchKey,
    InvalidKind,
    NodeNotFound,
    SlotOccupied,
    TerminalNode,
)

from backend.app.api.schemas import (
    DeleteRequest,
    DispatchResponse,
    ErrorDetail,
    InsertRequest,
    RelabelRequest,
    SaveResponse,
    TreeEntry,
    TreeResponse,
    WorkflowState,
)
from backend.app.dependencies import get_editor, get_editor_lock

router = APIRouter()

_STATUS_BY_ERROR = {
    NodeNotFound: 404,
    SlotOccupied: 409,
    CannotDeleteRoot: 409,
    TerminalNode: 409,
    DuplicateIdentifier: 409,
    InvalidKind: 422,
    InvalidBranchKey: 422,
}


def _state(editor: WorkflowEditor) -> WorkflowState:
    exported = editor.get_live_store().to_dict()
    return WorkflowState(
        root=exported["root"],
        nodes=exported["nodes"],
        can_undo=editor.can_undo(),
        can_redo=editor.can_redo(),
    )


def _respond(editor: WorkflowEditor, result: DispatchResult):
    body = DispatchResponse(ok=result.ok, workflow=_state(editor))
    status = 200

    if result.error is not None:
        body.error = ErrorDetail(
            kind=result.error.kind,
            message=str(result.error),
            advisory=result.error.advisory,
        )
        status = _STATUS_BY_ERROR.get(type(result.error), 200)

    return JSONResponse(status_code=status, content=body.model_dump())


def _dispatch(editor: WorkflowEditor, intent):
    with get_editor_lock():
        result = editor.dispatch(intent)
        return _respond(editor, result)


@router.get("/", response_model=WorkflowState)
def workflow_state(editor: WorkflowEditor = Depends(get_editor)):
    return _state(editor)


@router.get("/tree", response_model=TreeResponse)
def workflow_tree(editor: WorkflowEditor = Depends(get_editor)):
    entries = [
        TreeEntry(
            id=node.id,
            kind=node.kind.value,
            label=node.label,
            depth=depth,
            slot=slot,
            open_slots=[name for name, child in node.slots() if child is None],
        )
        for depth, slot, node in editor.get_live_store().walk()
    ]
    return TreeResponse(entries=entries)


@router.post("/insert", response_model=DispatchResponse)
def insert_node(request: InsertRequest, editor: WorkflowEditor = Depends(get_editor)):
    return _dispatch(
        editor,
        InsertIntent(
            parent_id=request.parent_id,
            kind=request.kind,
            branch_key=request.branch_key,
            label=request.label,
        ),
    )


@router.post("/delete", response_model=DispatchResponse)
def delete_node(request: DeleteRequest, editor: WorkflowEditor = Depends(get_editor)):
    return _dispatch(editor, DeleteIntent(node_id=request.node_id))


@router.post("/relabel", response_model=DispatchResponse)
def relabel_node(request: RelabelRequest, editor: WorkflowEditor = Depends(get_editor)):
    return _dispatch(
        editor,
        RelabelIntent(node_id=request.node_id, label=request.label),
    )


@router.post("/undo", response_model=DispatchResponse)
def undo(editor: WorkflowEditor = Depends(get_editor)):
    return _dispatch(editor, UndoIntent())


@router.post("/redo", response_model=DispatchResponse)
def redo(editor: WorkflowEditor = Depends(get_editor)):
    return _dispatch(editor, RedoIntent())


@router.post("/save", response_model=SaveResponse)
def save(editor: WorkflowEditor = Depends(get_editor)):
    with get_editor_lock():
        exported = editor.save()
        return SaveResponse(
            save_count=editor.save_indicator.save_count,
            export=exported,
        )
