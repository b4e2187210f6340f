"""
Standardized exception hierarchy for taskquest
Provides rich context, consistent logging, and user-friendly error messages

The gamification engine itself never raises: its inputs are preconditions.
These exceptions belong to the layers around it (task service, store, config).
"""

from datetime import datetime, timezone
from typing import Optional, Dict, Any
from uuid import uuid4
import logging

logger = logging.getLogger(__name__)


class TaskQuestError(Exception):
    """
    Base exception for all taskquest errors

    Provides:
    - Automatic timestamping
    - Request ID for tracing
    - User-friendly messages
    - Structured context
    - Automatic logging

    Example:
        raise TaskQuestError(
            message="Failed to save task list",
            operation="save_tasks",
            context={"task_count": 12}
        )
    """

    log_level: int = logging.ERROR

    def __init__(
        self,
        message: str,
        request_id: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        user_message: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.request_id = request_id or str(uuid4())
        self.operation = operation
        self.context = context or {}
        self.cause = cause
        self.user_message = user_message or "Something went wrong. Please try again."
        self.timestamp = datetime.now(timezone.utc)

        # Auto-log on creation
        self._log_error()

    def _log_error(self) -> None:
        """Log error with full context"""
        log_data = {
            "error_type": self.__class__.__name__,
            "error_message": self.message,  # Avoid conflict with logging's 'message' field
            "request_id": self.request_id,
            "operation": self.operation,
            "error_context": self.context,
            "timestamp": self.timestamp.isoformat()
        }

        if self.cause:
            log_data["cause"] = str(self.cause)
            logger.log(
                self.log_level,
                f"{self.__class__.__name__}: {self.message}",
                extra=log_data,
                exc_info=self.cause,
            )
        else:
            logger.log(self.log_level, f"{self.__class__.__name__}: {self.message}", extra=log_data)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize exception for display or export"""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "user_message": self.user_message,
            "request_id": self.request_id,
            "operation": self.operation,
            "timestamp": self.timestamp.isoformat(),
        }


# ==========================================
# Validation Errors (User Input)
# ==========================================

class ValidationError(TaskQuestError):
    """
    Raised when user input fails validation

    Examples:
    - Blank task title
    - Empty voice transcript

    Example:
        raise ValidationError(
            message="Transcript is empty",
            field="transcript",
            value="   "
        )
    """

    log_level = logging.WARNING

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        **kwargs
    ):
        self.field = field
        self.value = value
        super().__init__(
            message=message,
            user_message=f"Invalid {field}: {message}" if field else message,
            context={"field": field, "value": value},
            **kwargs
        )


# ==========================================
# Task Errors
# ==========================================

class TaskNotFoundError(TaskQuestError):
    """Requested task does not exist in the store"""

    log_level = logging.WARNING

    def __init__(self, task_id: str, **kwargs):
        self.task_id = task_id
        super().__init__(
            message=f"Task {task_id} not found",
            user_message=f"No task with id '{task_id}'.",
            context={"task_id": task_id},
            **kwargs
        )


class TaskAlreadyCompletedError(TaskQuestError):
    """Completion is a one-way transition; a task cannot be completed twice"""

    log_level = logging.WARNING

    def __init__(self, task_id: str, **kwargs):
        self.task_id = task_id
        super().__init__(
            message=f"Task {task_id} is already completed",
            user_message="That task is already done!",
            context={"task_id": task_id},
            **kwargs
        )


# ==========================================
# Storage Errors
# ==========================================

class StorageError(TaskQuestError):
    """Key-value store could not be read or written"""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        **kwargs
    ):
        self.path = path
        super().__init__(
            message=message,
            user_message="Could not access saved data.",
            context={"path": path},
            **kwargs
        )


# ==========================================
# Configuration Errors
# ==========================================

class ConfigurationError(TaskQuestError):
    """System configuration is invalid or missing"""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        **kwargs
    ):
        self.config_key = config_key
        super().__init__(
            message=message,
            user_message=f"Invalid configuration: {message}",
            context={"config_key": config_key},
            **kwargs
        )
