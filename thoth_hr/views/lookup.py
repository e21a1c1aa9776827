"""Member lookups shared by every view that joins on ``member_id``.

Deleting a member never cascades, so any ``member_id`` may dangle. A miss
resolves to :data:`UNKNOWN_MEMBER` instead of raising.
"""

from typing import Iterable

from thoth_hr.models import Member

UNKNOWN_MEMBER = "Unknown"


class MemberDirectory:
    """Index of members by id."""

    def __init__(self, members: Iterable[Member]) -> None:
        self._by_id = {member.id: member for member in members}

    def get(self, member_id: str | None) -> Member | None:
        """Return the member with ``member_id``, or ``None``."""
        if member_id is None:
            return None
        return self._by_id.get(member_id)

    def name_of(self, member_id: str | None, default: str = UNKNOWN_MEMBER) -> str:
        """Return the member's name, or ``default`` for a missing member."""
        member = self.get(member_id)
        if member is None or not member.name:
            return default
        return member.name

    def __contains__(self, member_id: object) -> bool:
        return member_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)
