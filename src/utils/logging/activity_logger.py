import json
import logging
from datetime import datetime
from typing import Optional, Dict, Any
from pathlib import Path
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler

from src.core.config import settings

# Configure logging
activity_log = logging.getLogger("activity_logger")
activity_log.setLevel(logging.INFO)


class ActivityLogger:
    """
    Logger for request activity in a narrative format.
    Logs are stored in <LOG_DIR>/activity/ with timestamped files.

    Entries describe what kind of request was made, never what the visitor
    typed: search text and other user input stay out of the logs.
    """

    def __init__(self, logs_dir: Optional[str] = None):
        """Initialize the activity logger."""
        # Create logs directory if it doesn't exist
        self.logs_dir = Path(logs_dir or settings.log_dir) / "activity"
        self.logs_dir.mkdir(parents=True, exist_ok=True)

        self.max_file_size = settings.activity_log_max_size_mb * 1024 * 1024
        self.rotation_when = settings.activity_log_rotation

        # Configure handlers
        self._configure_handlers()

    def _configure_handlers(self):
        """Configure file handlers for logging."""
        # Clear existing handlers
        if activity_log.handlers:
            activity_log.handlers.clear()

        formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S %z'
        )

        timed_handler = TimedRotatingFileHandler(
            filename=self.logs_dir / "activity.log",
            when=self.rotation_when,
            backupCount=30  # Keep logs for 30 days
        )
        timed_handler.setFormatter(formatter)
        activity_log.addHandler(timed_handler)

        size_handler = RotatingFileHandler(
            filename=self.logs_dir / "activity_size.log",
            maxBytes=self.max_file_size,
            backupCount=10  # Keep 10 backup files
        )
        size_handler.setFormatter(formatter)
        activity_log.addHandler(size_handler)

    async def log_activity(
        self,
        message: str,
        activity_type: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log a request activity in a narrative format.

        Args:
            message: The narrative description of the activity
            activity_type: The type of activity (optional)
            metadata: Additional contextual information (optional)
        """
        log_entry = {
            "timestamp": datetime.now().isoformat(),
            "message": message,
            "activity_type": activity_type,
            "metadata": metadata or {}
        }
        activity_log.info(json.dumps(log_entry))


# Global instance for convenience
logger_instance = ActivityLogger()
