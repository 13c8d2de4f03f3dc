import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    # urllib3 logs every connection at DEBUG; keep it quiet unless asked.
    if level != "DEBUG":
        logging.getLogger("urllib3").setLevel(logging.WARNING)
