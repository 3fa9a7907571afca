"""Vote entity.

Each user can cast one vote per suggestion. Votes are never updated or
removed.
"""

from datetime import datetime

from pydantic import Field

from menu.domain.model.common import DomainModel
from menu.domain.value import SuggestionId, UserId, VoteId


class Vote(DomainModel):
    """Vote ledger entry.

    Uniqueness of (suggestion_id, voter_id) is enforced by the store, not
    by this model.
    """

    id: VoteId
    suggestion_id: SuggestionId
    voter_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
