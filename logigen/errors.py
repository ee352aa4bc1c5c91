"""Exception hierarchy for logigen.

User errors (bad names, bad field lists, unsupported combinations, I/O
failures, closed input) derive directly from ``LogigenError``.
``InternalError`` marks consistency defects inside logigen itself, such as a resolved template that
is missing from the registry.
"""

from __future__ import annotations

from pathlib import Path


class LogigenError(Exception):
    """Base class for every error raised by logigen."""


class InvalidNameError(LogigenError):
    """Raised when a base name is empty or has no alphabetic characters."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Invalid name {name!r}: expected at least one alphabetic character"
        )


class InvalidFieldError(LogigenError):
    """Raised when a field segment has an empty name."""

    def __init__(self, segment: str, position: int) -> None:
        self.segment = segment
        self.position = position
        super().__init__(
            f"Invalid field #{position} {segment.strip()!r}: field name must not be empty"
        )


class TemplateNotFound(LogigenError):
    """Raised when no template matches a (type, framework, variant) combination."""

    def __init__(self, artifact_type: str, framework: str, variant: str) -> None:
        self.artifact_type = artifact_type
        self.framework = framework
        self.variant = variant
        super().__init__(
            f"No template found for type '{artifact_type}' "
            f"with framework '{framework}' ({variant})"
        )


class WriteError(LogigenError):
    """Raised when the write sink fails to create a directory or file."""

    def __init__(self, path: str | Path, cause: str | BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to write {self.path}: {cause}")


class InternalError(LogigenError):
    """A consistency defect inside logigen rather than a user error."""


class TemplateNotRegistered(InternalError):
    """Raised when the renderer is asked for a template id it does not have."""

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(f"Template '{template_id}' is not registered")


class RenderError(InternalError):
    """Raised when a template references a variable missing from the render config."""

    def __init__(self, template_id: str, reason: str) -> None:
        self.template_id = template_id
        self.reason = reason
        super().__init__(f"Failed to render '{template_id}': {reason}")


class InputAborted(LogigenError):
    """Raised when an interactive question gets no answer (end of input or Ctrl-C)."""

    def __init__(self, question_id: str) -> None:
        self.question_id = question_id
        super().__init__(
            f"No answer for '{question_id}': input was closed or interrupted "
            "(use --yes to accept the defaults)"
        )
