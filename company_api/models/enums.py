"""Enums for model fields."""

from enum import Enum


class CompanyStatus(str, Enum):
    """Lifecycle states of a company record."""

    ACTIVE = "active"
    DELETED = "deleted"

    def can_transition_to(self, target: "CompanyStatus") -> bool:
        """Check if a record in this state may move to ``target``.

        Deletion is terminal: the only legal move is active -> deleted.
        """
        return self == CompanyStatus.ACTIVE and target == CompanyStatus.DELETED

    @classmethod
    def sources_of(cls, target: "CompanyStatus") -> list["CompanyStatus"]:
        """Return every state that may transition into ``target``."""
        return [status for status in cls if status.can_transition_to(target)]
