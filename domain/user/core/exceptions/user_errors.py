"""User domain exceptions."""


class UserDomainError(Exception):
    """Base exception for User domain errors."""

    pass


class InvalidCredentialError(UserDomainError):
    """Identity provider credential is unusable."""

    def __init__(self, reason: str):
        """Initialize with reason.

        Args:
            reason: Reason why the credential is invalid
        """
        self.reason = reason
        super().__init__(f"Invalid provider credential: {reason}")
