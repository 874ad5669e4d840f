
CONFIG = {
    "CELL_SIZE": 30,
    "DROP_INTERVAL_MS": 1000,
    "SPAWN_X": 4,
    "SPAWN_Y": 0,
    "FPS": 60,
    "SEED": None,
    "BORDER_WIDTH": 5,
    "CELL_OUTLINE_WIDTH": 2,
    "LOG_LEVEL": "INFO",
}
