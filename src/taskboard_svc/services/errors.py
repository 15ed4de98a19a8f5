"""Exceptions raised by the service layer.

Routes translate them to HTTP responses: invalid input and conflicts are
400, missing records are 404, anything else is a 500.
"""


class InvalidInputError(ValueError):
    """Exception raised when a request passes schema validation but is still unusable."""
    pass


class EmptyUpdateError(InvalidInputError):
    """Exception raised when an update supplies no fields."""

    def __init__(self, message: str = "No fields to update"):
        super().__init__(message)


class ConflictError(ValueError):
    """Exception raised when a write would break a uniqueness rule or orphan data."""
    pass


class BoardTitleConflictError(ConflictError):
    """Exception raised when another board already uses the title."""
    pass


class StatusKeyConflictError(ConflictError):
    """Exception raised when the board already has a status with the key."""
    pass


class StatusLabelConflictError(ConflictError):
    """Exception raised when the board already has a status with the label."""
    pass


class StatusInUseError(ConflictError):
    """Exception raised when deleting a status that tasks still reference."""

    def __init__(self, status_key: str, task_count: int):
        self.status_key = status_key
        self.task_count = task_count
        super().__init__(
            f"Cannot delete status '{status_key}': {task_count} task(s) still use it. "
            "Move or delete the tasks first."
        )


class NotFoundError(ValueError):
    """Exception raised when an ID does not resolve to a record."""
    pass


class BoardNotFoundError(NotFoundError):
    def __init__(self, board_id: int):
        self.board_id = board_id
        super().__init__(f"Board with ID {board_id} not found")


class StatusNotFoundError(NotFoundError):
    def __init__(self, status_id: int):
        self.status_id = status_id
        super().__init__(f"Status with ID {status_id} not found")


class TaskNotFoundError(NotFoundError):
    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task with ID {task_id} not found")
