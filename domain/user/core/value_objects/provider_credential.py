"""ProviderCredential value object."""

from dataclasses import dataclass
from typing import Optional

from domain.user.core.exceptions.user_errors import InvalidCredentialError


@dataclass(frozen=True)
class ProviderCredential:
    """Credential issued by an external identity provider.

    Plain data structure decoupled from any platform sign-in SDK. It is
    transient: built from the provider response, consumed by the sign-in
    orchestrator, then discarded.

    Attributes:
        provider_identifier: Stable per-user identifier assigned by the provider
        email: Email shared by the provider. Apple only sends it on the
            first authorization, so it is optional.
        raw_user: Provider's opaque user string (Apple's ``user`` field)

    Examples:
        >>> cred = ProviderCredential("apple-u1", None, "apple-u1")
        >>> cred.resolved_email
        'apple-u1'

        >>> cred = ProviderCredential("apple-u1", "a@x.com", "apple-u1")
        >>> cred.resolved_email
        'a@x.com'
    """

    provider_identifier: str
    email: Optional[str]
    raw_user: str

    def __post_init__(self) -> None:
        """Validate required fields."""
        if not self.provider_identifier or not self.provider_identifier.strip():
            raise InvalidCredentialError("provider_identifier cannot be empty")

        if not self.raw_user or not self.raw_user.strip():
            raise InvalidCredentialError("raw_user cannot be empty")

    @property
    def has_email(self) -> bool:
        """True when the provider shared a non-blank email."""
        return bool(self.email and self.email.strip())

    @property
    def resolved_email(self) -> str:
        """Email used for identity resolution.

        Falls back to the raw user string when the provider withholds the
        email (repeat Apple sign-ins).
        """
        if self.has_email:
            return self.email  # type: ignore[return-value]
        return self.raw_user
