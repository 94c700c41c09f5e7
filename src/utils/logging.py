import logging


class HealthCheckFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        return "/healthz" not in msg and "/_stcore/health" not in msg


def setup_logging():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    for logger_name in ["tornado.access", "streamlit.web.server", "httpx"]:
        logger = logging.getLogger(logger_name)
        logger.addFilter(HealthCheckFilter())
    # Every request line from httpx would otherwise be logged at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
