from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel


class InsertRequest(BaseModel):
    parent_id: str
    kind: str
    branch_key: Optional[Union[bool, str]] = None
    label: Optional[str] = None


class DeleteRequest(BaseModel):
    node_id: str


class RelabelRequest(BaseModel):
    node_id: str
    label: str


class WorkflowNode(BaseModel):
    id: str
    kind: str
    label: str
    children: Dict[str, Optional[str]]


class WorkflowState(BaseModel):
    root: str
    nodes: Dict[str, WorkflowNode]
    can_undo: bool
    can_redo: bool


class ErrorDetail(BaseModel):
    kind: str
    message: str
    advisory: bool


class DispatchResponse(BaseModel):
    ok: bool
    workflow: WorkflowState
    error: Optional[ErrorDetail] = None


class SaveResponse(BaseModel):
    save_count: int
    export: Dict[str, Any]


class TreeEntry(BaseModel):
    id: str
    kind: str
    label: str
    depth: int
    slot: Optional[str] = None
    open_slots: List[str]


class TreeResponse(BaseModel):
    entries: List[TreeEntry]
