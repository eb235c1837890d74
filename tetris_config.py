
CONFIG = {
    "CELL_SIZE": 32,
    "FPS": 60,
    "PREVIEW_COUNT": 3,
    "BAG_SEED": None,
    "DROP_BASE_MS": 800,
    "DROP_STEP_MS": 50,
    "DROP_MIN_MS": 100,
    "LOG_LEVEL": "info",
    "USE_RICH": True,
}
