import logging

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
HANDLER_NAME = "cartera"


def setup_logging(level: str = "INFO") -> None:
    """Configura el logger raíz (idempotente: uvicorn puede haberlo tocado antes)."""
    root = logging.getLogger()
    root.setLevel(level)
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
    # pymongo es muy ruidoso en DEBUG
    logging.getLogger("pymongo").setLevel("INFO" if level == "DEBUG" else level)
