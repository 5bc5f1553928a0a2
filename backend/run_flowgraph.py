import json
import logging
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.app.config import AppConfig  # noqa: E402
from flowgraph.editor import (  # noqa: E402
    DeleteIntent,
    InsertIntent,
    RelabelIntent,
    UndoIntent,
    RedoIntent,
    WorkflowEditor,
)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    logger = logging.getLogger("flowgraph.run")
    start = time.perf_counter()
    config = AppConfig()

    editor = WorkflowEditor(config=config.flowgraph)
    root_id = editor.get_live_store().root_id

    def last_inserted() -> str:
        return editor.get_live_store().metadata["node_id"]

    # Start -> Check stock -> Branch(true: Ship -> End, false: Reorder)
    editor.dispatch(InsertIntent(parent_id=root_id, kind="action", label="Check stock"))
    check_id = last_inserted()
    editor.dispatch(InsertIntent(parent_id=check_id, kind="branch", label="In stock?"))
    branch_id = last_inserted()
    editor.dispatch(InsertIntent(parent_id=branch_id, kind="action", branch_key=True))
    ship_id = last_inserted()
    editor.dispatch(RelabelIntent(node_id=ship_id, label="Ship order"))
    editor.dispatch(InsertIntent(parent_id=ship_id, kind="end"))
    editor.dispatch(InsertIntent(parent_id=branch_id, kind="action", branch_key="false", label="Reorder"))

    # Rejected: the true slot is taken
    result = editor.dispatch(InsertIntent(parent_id=branch_id, kind="end", branch_key="true"))
    logger.info("occupied slot -> ok=%s error=%s", result.ok, result.error)

    editor.dispatch(DeleteIntent(node_id=branch_id))
    logger.info("after branch delete: %d nodes", editor.get_live_store().node_count())
    editor.dispatch(UndoIntent())
    logger.info("after undo: %d nodes", editor.get_live_store().node_count())
    editor.dispatch(RedoIntent())
    editor.dispatch(UndoIntent())

    for depth, slot, node in editor.get_live_store().walk():
        prefix = f"[{slot}] " if slot and slot != "next" else ""
        logger.info("%s%s%s (%s)", "  " * depth, prefix, node.label, node.kind.value)

    exported = editor.save()
    logger.info(json.dumps(exported, indent=2))
    logger.info(
        "done in %.3fs, can_undo=%s can_redo=%s",
        time.perf_counter() - start,
        editor.can_undo(),
        editor.can_redo(),
    )


if __name__ == "__main__":
    main()
