import logging
import traceback
from typing import Dict, Any


class ErrorHandler:
    """Centralized error logging for the command pipelines."""

    def __init__(self, log_level: str = "WARNING"):
        self.logger = self._setup_logging(log_level)

    def _setup_logging(self, level: str) -> logging.Logger:
        """Configure the package logger once."""
        logger = logging.getLogger("clipsnip")
        logger.setLevel(getattr(logging, level.upper()))

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger

    def set_level(self, level: str) -> None:
        self.logger.setLevel(getattr(logging, level.upper()))

    def handle_error(self, error: Exception, context: Dict[str, Any]) -> Dict[str, Any]:
        """Log an error with its command context."""
        error_info = {
            "type": type(error).__name__,
            "message": str(error),
            "context": context,
            "traceback": traceback.format_exc() if self.logger.level <= logging.DEBUG else None
        }

        self.logger.error(
            "%s: %s | Context: %s", error_info["type"], error_info["message"], context
        )
        if error_info["traceback"]:
            self.logger.debug(error_info["traceback"])

        return error_info

    def collect_command_error(self, error: Exception, command: str, **details: Any) -> Dict[str, Any]:
        """Record an error raised while running a CLI command."""
        context = {"command": command, **details}
        return self.handle_error(error, context)

    def format_error_message(self, error: Exception) -> str:
        """One-line message shown to the user on stderr."""
        return f"❌ {error}"


# Global error handler instance
error_handler = ErrorHandler()
