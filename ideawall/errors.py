from __future__ import annotations

class IdeaWallError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class ValidationError(IdeaWallError):
    status_code = 400

class StorageError(IdeaWallError):
    status_code = 500

class RoutingError(IdeaWallError):
    status_code = 405

class NotFoundError(IdeaWallError):
    status_code = 404
