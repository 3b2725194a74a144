# pw_errors.py
# 审计过程中抛出的异常


class PwAuditError(Exception):
    """Base error for the audit engine and report writers."""


class InsufficientDataError(PwAuditError):
    """Raised when a password file holds fewer than two usable lines."""

    def __init__(self, filename, line_count):
        self.filename = filename
        self.line_count = line_count
        super().__init__(
            f"password file {filename} must contain at least 2 passwords (found {line_count})"
        )
