from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

from sqlalchemy.exc import DisconnectionError, OperationalError, SQLAlchemyError

from ..errors import StorageError, StorageUnavailableError


@dataclass(frozen=True)
class ChoiceCount:
    choice_id: str
    count: int


@dataclass(frozen=True)
class VoteLogEntry:
    email: str
    choice_id: str
    timestamp: datetime


@dataclass(frozen=True)
class Results:
    total_votes: int = 0
    counts_by_choice: List[ChoiceCount] = field(default_factory=list)
    all_votes: List[VoteLogEntry] = field(default_factory=list)


def _as_utc(ts: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored in UTC
    if ts is not None and ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


class ResultsService:
    """Read-only tallies over the vote store."""

    def __init__(self, store):
        self.store = store

    def get_results(self) -> Results:
        try:
            with self.store.snapshot():
                total_votes = self.store.count_votes()
                counts = [
                    ChoiceCount(choice_id=choice_id, count=count)
                    for choice_id, count in self.store.count_by_choice()
                ]
                votes = [
                    VoteLogEntry(email=email, choice_id=choice_id, timestamp=_as_utc(created_at))
                    for email, choice_id, created_at in self.store.list_votes()
                ]
        except (OperationalError, DisconnectionError) as e:
            raise StorageUnavailableError() from e
        except SQLAlchemyError as e:
            raise StorageError("An error occurred while fetching results.") from e

        return Results(total_votes=total_votes, counts_by_choice=counts, all_votes=votes)
