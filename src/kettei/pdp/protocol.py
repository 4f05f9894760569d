"""Protocol definition for voters.

Voters are independent units of policy logic composed by position in the
engine's voter list. They implement this protocol via structural subtyping,
without inheriting from our code.

Example voter:

    class OwnerVoter:
        name = "owner"

        def supports(self, attribute: str, subject: Any) -> bool:
            return attribute in ("edit", "delete")

        def vote_on_attribute(self, context: Any, attribute: str, subject: Any) -> Ballot:
            if subject.id == context.resource_owner:
                return Ballot.grant()
            return Ballot.deny("only the owner may " + attribute)
"""

from __future__ import annotations

__all__ = ["Voter"]

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from kettei.pdp.models import Ballot


@runtime_checkable
class Voter(Protocol):
    """Capability set every voter must implement.

    Thread-safety:
    - The engine never mutates voters and may call them from concurrent
      decide() calls; any internal state is the voter's responsibility.
    """

    def supports(self, attribute: str, subject: Any) -> bool:
        """Report whether this voter has an opinion on the attribute.

        Must be a pure predicate without side effects.

        Args:
            attribute: Attribute being checked (e.g. "read").
            subject: Opaque entity requesting access.

        Returns:
            True if vote_on_attribute() should be called for this attribute.
        """
        ...

    def vote_on_attribute(self, context: Any, attribute: str, subject: Any) -> "Ballot":
        """Vote on a supported attribute.

        May perform I/O. Must honor any cancellation or deadline carried by
        ``context``, which the engine passes through unchanged.

        Args:
            context: Ambient call context supplied by the caller of decide().
            attribute: Attribute being voted on.
            subject: Opaque entity requesting access.

        Returns:
            Ballot with the grant flag and an optional reason message.

        Raises:
            VoterError: Voting failed; ``reason`` is recorded if non-empty.
            Exception: Any other failure; aborts the decision.

        A return value that is not a Ballot (e.g. a bare bool) is treated as a
        failure of type TypeError.
        """
        ...
