import logging
import logging.handlers
import os

LOG_DIR = os.getenv("LOG_DIR", "./logs")
LOG_FILE = os.path.join(LOG_DIR, "catalog.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(log_file: str = LOG_FILE, level: str = LOG_LEVEL) -> logging.Logger:
    """Attach the catalog handlers (rotating file + stdout) to the root logger.

    Repeated calls replace the handlers installed earlier instead of stacking them.
    """
    os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT)

    # Загрузки и удаления изображений пишутся в файл, 5 архивов по 10 МБ
    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
    )
    console_handler = logging.StreamHandler()

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "catalog_handler", False):
            root_logger.removeHandler(handler)
            handler.close()

    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        handler.catalog_handler = True
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # SQL пишет сам движок, если включён SQL_ECHO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logging.getLogger(__name__).info("Catalog logging configured, writing to %s", log_file)
    return root_logger


configure_logging()
