# Recoverable rule violations. Every engine entry point raises one of these
# before touching any state, so callers can retry with a different choice.
class NexusWarsError(Exception):
    """Base exception for rejected game actions."""

    pass


class InvalidPhase(NexusWarsError):
    """Raised when an action is attempted outside the phase it belongs to."""

    pass


class WrongTurn(NexusWarsError):
    """Raised when a player acts while the other player holds the turn."""

    pass


class IndexOutOfRange(NexusWarsError):
    """Raised when a die index or piece id does not resolve."""

    pass


class IllegalTarget(NexusWarsError):
    """Raised when the requested target is not legal for the selected die."""

    pass


class NoDieSelected(NexusWarsError):
    """Raised when a move is attempted before selecting a die."""

    pass


class InvariantViolation(AssertionError):
    """Internal bookkeeping is inconsistent. Indicates a bug, not a user error."""

    pass
