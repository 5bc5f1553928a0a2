DEFAULTS = {
    # Application title reported by the API
    "APP_NAME": "flowgraph-backend",
    # Prefix for every API route
    "API_PREFIX": "",
    # Length of generated node ids (hex characters, minimum 8)
    "ID_LENGTH": 12,
    # Label given to the start node
    "START_LABEL": "Start",
    # Maximum undo snapshots kept (0 = unbounded)
    "HISTORY_MAX_DEPTH": 0,
    # How long the "saved" confirmation stays visible
    "SAVE_CONFIRMATION_SECONDS": 2.0,
    # Root log level for the backend process
    "LOG_LEVEL": "INFO",
}
