from functools import lru_cache
import logging
from threading import Lock
import time

from flowgraph.editor.workflow_editor import WorkflowEditor

from backend.app.config import AppConfig


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()


@lru_cache
def get_editor() -> WorkflowEditor:
    t0 = time.perf_counter()
    editor = WorkflowEditor(config=get_config().flowgraph)
    logging.getLogger("flowgraph.startup").info(
        "[startup] editor init in %.3fs, root=%s",
        time.perf_counter() - t0,
        editor.get_live_store().root_id,
    )
    return editor


@lru_cache
def get_editor_lock() -> Lock:
    return Lock()
