"""Exception types raised at the PitchForge service boundary."""


class PitchForgeError(Exception):
    """Base class for all PitchForge errors."""


class ValidationError(PitchForgeError):
    """Input has an invalid shape or an operation is not allowed."""


class InvalidTransitionError(ValidationError):
    """A pitch status change is not in the transition table."""

    def __init__(self, current: str, action: str):
        self.current = current
        self.action = action
        super().__init__(f"Cannot {action} a pitch in status '{current}'")


class NotFoundError(PitchForgeError):
    """A requested record does not exist in its repository."""

    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} not found: {record_id}")
