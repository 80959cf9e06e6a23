import os


class Config:
    SEARCH_DEADLINE_MS = int(os.getenv("SEARCH_DEADLINE_MS", "3000"))
    MAX_DEADLINE_MS = int(os.getenv("MAX_DEADLINE_MS", "30000"))
    MAX_EDGES = int(os.getenv("MAX_EDGES", "200000"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    METRICS_ENABLED = os.getenv("METRICS_ENABLED", "true").lower() in ("1", "true", "yes")
