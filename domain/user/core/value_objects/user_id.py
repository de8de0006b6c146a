"""UserId value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """User identifier value object.

    Stable identifier of a user record, assigned at creation and immutable.
    Users created through a provider sign-in take the provider's external id,
    so the value is an opaque string rather than a UUID.

    Examples:
        >>> user_id = UserId("001234.abcd5678ef.0912")
        >>> str(user_id)
        '001234.abcd5678ef.0912'

        >>> UserId("")
        Traceback (most recent call last):
        ...
        ValueError: UserId cannot be empty
    """

    value: str

    def __post_init__(self) -> None:
        """Validate identifier."""
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("UserId cannot be empty")

        if len(self.value) > 255:
            raise ValueError(
                f"UserId too long ({len(self.value)} chars). Maximum 255 characters allowed"
            )

    def __str__(self) -> str:
        """String representation returns the raw value."""
        return self.value

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"UserId('{self.value}')"
