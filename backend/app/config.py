from dataclasses import dataclass
from dynaconf import Dynaconf
from backend.app.constants import DEFAULTS

from flowgraph.config.settings import (
    FactoryConfig,
    HistoryConfig,
    SaveConfig,
    FlowgraphConfig,
)

settings = Dynaconf(
    envvar_prefix="FLOWGRAPH",
    load_dotenv=True,
    settings_files=[],
)
for _key, _value in DEFAULTS.items():
    if settings.get(_key) is None:
        settings.set(_key, _value)


def _optional_depth(value):
    if value is None:
        return None
    depth = int(value)
    return depth if depth > 0 else None


@dataclass(frozen=True)
class AppConfig:
    # ---------------- App ----------------
    app_name: str = settings.get("APP_NAME", "flowgraph-backend")
    api_prefix: str = settings.get("API_PREFIX", "")
    log_level: str = settings.get("LOG_LEVEL", "INFO")

    # ---------------- Flowgraph Policy ----------------
    flowgraph: FlowgraphConfig = FlowgraphConfig(
        factory=FactoryConfig(
            id_length=settings.get("ID_LENGTH", 12),
            default_labels={"start": settings.get("START_LABEL", "Start")},
        ),
        history=HistoryConfig(
            max_depth=_optional_depth(settings.get("HISTORY_MAX_DEPTH", 0)),
        ),
        save=SaveConfig(
            confirmation_seconds=settings.get("SAVE_CONFIRMATION_SECONDS", 2.0),
        ),
    )
