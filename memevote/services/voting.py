from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict

from marshmallow import ValidationError as SchemaValidationError
from sqlalchemy.exc import DisconnectionError, IntegrityError, OperationalError, SQLAlchemyError

from ..errors import DuplicateVoteError, StorageError, StorageUnavailableError, ValidationError
from ..schemas.vote import VoteSubmitSchema


@dataclass(frozen=True)
class VoteReceipt:
    email: str
    choice_id: str
    timestamp: datetime

    @property
    def message(self) -> str:
        return f"Vote for {self.choice_id} recorded successfully!"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class VoteService:
    """
    Validates a submission and records it in the vote store.

    Duplicate detection is left to the store's unique email index: the
    insert either commits or fails with IntegrityError, which is reported
    as DuplicateVoteError. There is no lookup before the insert.
    """

    def __init__(self, store, clock: Callable[[], datetime] = _utcnow):
        self.store = store
        self.clock = clock
        self.schema = VoteSubmitSchema()

    def submit(self, payload: Dict[str, Any]) -> VoteReceipt:
        """Submit a raw request body ({"email": ..., "choiceId": ...})."""
        try:
            data = self.schema.load(payload if isinstance(payload, dict) else {})
        except SchemaValidationError as e:
            raise ValidationError(details=e.messages) from e

        email = data["email"]
        choice_id = data["choice_id"]
        timestamp = self.clock()

        try:
            self.store.add_vote(email, choice_id, timestamp)
        except IntegrityError as e:
            raise DuplicateVoteError(email) from e
        except (OperationalError, DisconnectionError) as e:
            raise StorageUnavailableError() from e
        except SQLAlchemyError as e:
            raise StorageError("An error occurred while processing your vote.") from e

        return VoteReceipt(email=email, choice_id=choice_id, timestamp=timestamp)

    def submit_vote(self, email: str, choice_id: str) -> VoteReceipt:
        return self.submit({"email": email, "choiceId": choice_id})
