"""Errors raised by skill discovery, installation and removal."""

from typing import Optional


class SkillError(Exception):
    """Base class for every skill management failure."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SkillNotFoundError(SkillError):
    """Raised when a local skill path does not exist."""
    def __init__(self, identifier: str, reason: str = ""):
        self.identifier = identifier
        super().__init__(reason or f"Skill path '{identifier}' not found")


class InvalidSkillError(SkillError):
    """Raised when a directory does not contain the manifest file."""
    def __init__(self, identifier: str, reason: str = ""):
        self.identifier = identifier
        super().__init__(reason or f"Path '{identifier}' does not contain a skill manifest")


class InvalidIdentifierError(InvalidSkillError):
    """Raised when an identifier is empty, absolute or leaves its root."""
    def __init__(self, identifier: str):
        super().__init__(identifier, f"Invalid skill identifier: '{identifier}'")


class NotInstalledError(SkillError):
    """Raised when removing a skill that is not in the store."""
    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Skill '{identifier}' is not installed")


class CopyFailedError(SkillError):
    """Raised when copying a skill into the store fails."""
    def __init__(self, identifier: str, cause: BaseException):
        self.identifier = identifier
        self.cause = cause
        super().__init__(f"Failed to install '{identifier}': {cause}")


class FetchFailedError(SkillError):
    """Raised when cloning a remote repository fails."""
    def __init__(self, url: str, stderr: Optional[str] = None):
        self.url = url
        self.stderr = (stderr or "").strip()
        detail = self.stderr or "unknown error"
        super().__init__(f"Git clone failed for {url}: {detail}")


class RemoveFailedError(SkillError):
    """Raised when an installed skill cannot be deleted."""
    def __init__(self, identifier: str, cause: BaseException):
        self.identifier = identifier
        self.cause = cause
        super().__init__(f"Failed to remove '{identifier}': {cause}")
