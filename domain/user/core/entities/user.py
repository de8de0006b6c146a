"""User entity - aggregate root."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from domain.user.core.value_objects.user_id import UserId


@dataclass
class User:
    """User aggregate root.

    Represents one durable account. The provider identifier
    (``apple_identifier``) is the reconciliation key for sign-ins.

    Invariants:
    - user_id is assigned at creation and immutable
    - apple_identifier is unique across users once non-empty (enforced by the store)
    - email is not unique and may be a relay address or a placeholder

    Examples:
        >>> user = User.create(UserId("u1"), "a@x.com", "apple-u1")
        >>> user.has_apple_identifier
        True

        >>> legacy = User(user_id=UserId("u2"), email="b@x.com")
        >>> legacy.link_apple_identifier("apple-u2")
        >>> legacy.apple_identifier
        'apple-u2'
    """

    user_id: UserId
    email: str = ""
    apple_identifier: str = ""
    _events: List[Any] = field(default_factory=list, init=False, repr=False)

    @staticmethod
    def create(user_id: UserId, email: str, apple_identifier: str) -> "User":
        """Factory method to create a new user.

        Args:
            user_id: Identifier for the new user (provider external id)
            email: Email or placeholder used at sign-in
            apple_identifier: Provider identifier to link

        Returns:
            New User instance with UserCreated event
        """
        from domain.user.core.events.user_created import UserCreated

        user = User(user_id=user_id, email=email, apple_identifier=apple_identifier)
        user._add_event(
            UserCreated.create(
                user_id=user_id,
                email=email,
                apple_identifier=apple_identifier,
            )
        )
        return user

    @property
    def has_apple_identifier(self) -> bool:
        """True when a provider identifier is linked."""
        return bool(self.apple_identifier)

    def link_apple_identifier(self, apple_identifier: str) -> None:
        """Attach or replace the provider identifier.

        Emits AppleIdentifierLinked. Does not touch any other field.

        Args:
            apple_identifier: Provider identifier to link

        Raises:
            ValueError: If apple_identifier is empty
        """
        from domain.user.core.events.apple_identifier_linked import AppleIdentifierLinked

        if not apple_identifier:
            raise ValueError("apple_identifier cannot be empty")

        previous = self.apple_identifier
        self.apple_identifier = apple_identifier

        self._add_event(
            AppleIdentifierLinked.create(
                user_id=self.user_id,
                previous_identifier=previous,
                apple_identifier=apple_identifier,
            )
        )

    def to_fields(self) -> Dict[str, Any]:
        """Document fields as stored (document id excluded)."""
        return {
            "email": self.email,
            "appleIdentifier": self.apple_identifier,
        }

    @staticmethod
    def from_document(document: Dict[str, Any]) -> "User":
        """Rebuild a user from a stored document.

        Missing fields default to empty strings (legacy records).
        """
        return User(
            user_id=UserId(str(document["id"])),
            email=document.get("email") or "",
            apple_identifier=document.get("appleIdentifier") or "",
        )

    def _add_event(self, event: Any) -> None:
        self._events.append(event)

    def collect_events(self) -> List[Any]:
        """Collect and clear domain events.

        Returns:
            List of domain events that occurred

        Examples:
            >>> user = User.create(UserId("u1"), "a@x.com", "apple-u1")
            >>> len(user.collect_events())
            1
            >>> user.collect_events()  # Events cleared after collection
            []
        """
        events = self._events.copy()
        self._events.clear()
        return events

    def __eq__(self, other: object) -> bool:
        """Equality based on user_id (aggregate identity)."""
        if not isinstance(other, User):
            return False
        return self.user_id == other.user_id

    def __hash__(self) -> int:
        """Hash based on user_id (aggregate identity)."""
        return hash(self.user_id)
