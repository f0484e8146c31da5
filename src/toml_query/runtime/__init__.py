from .logging import LOGGER_NAME, configure_logging, get_logger, log_action

__all__ = ["LOGGER_NAME", "configure_logging", "get_logger", "log_action"]
