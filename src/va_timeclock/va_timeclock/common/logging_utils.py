from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)
    # httpx logs every request at INFO; keep it quiet unless debugging.
    if str(level).upper() != "DEBUG":
        logging.getLogger("httpx").setLevel(logging.WARNING)
