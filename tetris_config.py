CONFIG = {
    "BOARD_WIDTH": 10,
    "BOARD_HEIGHT": 20,
    "CELL_SIZE": 32,
    "NORMAL_DROP_MS": 1000,
    "FAST_DROP_MS": 50,
    "POINTS_PER_LINE": 100,
    "SEED": None,
    "TARGET_FPS": 60,
    "LOG_LEVEL": "INFO",
}
