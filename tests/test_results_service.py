from datetime import timezone

import pytest
from sqlalchemy.exc import OperationalError, ProgrammingError

from memevote.errors import DuplicateVoteError, StorageError, StorageUnavailableError
from memevote.services import ChoiceCount, ResultsService


def _cast(vote_service, *votes):
    for email, choice_id in votes:
        vote_service.submit_vote(email, choice_id)


def test_empty_store(results_service):
    results = results_service.get_results()

    assert results.total_votes == 0
    assert results.counts_by_choice == []
    assert results.all_votes == []


def test_counts_sorted_by_votes_then_choice(vote_service, results_service):
    _cast(
        vote_service,
        ("a@x.com", "memeB"),
        ("b@x.com", "memeC"),
        ("c@x.com", "memeB"),
        ("d@x.com", "memeA"),
        ("e@x.com", "memeC"),
        ("f@x.com", "memeB"),
        ("g@x.com", "memeD"),
    )

    results = results_service.get_results()

    assert results.counts_by_choice == [
        ChoiceCount("memeB", 3),
        ChoiceCount("memeC", 2),
        ChoiceCount("memeA", 1),
        ChoiceCount("memeD", 1),
    ]


def test_totals_agree(vote_service, results_service):
    _cast(vote_service, ("a@x.com", "m1"), ("b@x.com", "m2"), ("c@x.com", "m1"))

    results = results_service.get_results()

    assert results.total_votes == 3
    assert sum(c.count for c in results.counts_by_choice) == results.total_votes
    assert len(results.all_votes) == results.total_votes


def test_vote_log_has_normalized_email_and_utc_timestamp(vote_service, results_service):
    vote_service.submit_vote(" Voter@Example.com", "memeA")

    (entry,) = results_service.get_results().all_votes

    assert entry.email == "voter@example.com"
    assert entry.choice_id == "memeA"
    assert entry.timestamp.tzinfo == timezone.utc


def test_duplicate_does_not_change_results(vote_service, results_service):
    vote_service.submit_vote("x@y.com", "memeA")
    with pytest.raises(DuplicateVoteError):
        vote_service.submit_vote("x@y.com", "memeB")

    results = results_service.get_results()

    assert results.total_votes == 1
    assert results.counts_by_choice == [ChoiceCount("memeA", 1)]


def test_query_failures_are_classified(store, app_ctx, monkeypatch):
    service = ResultsService(store)

    def lost_connection():
        raise OperationalError("SELECT", {}, Exception("server closed the connection"))

    monkeypatch.setattr(store, "count_votes", lost_connection)
    with pytest.raises(StorageUnavailableError):
        service.get_results()

    def bad_query():
        raise ProgrammingError("SELECT", {}, Exception("no such function"))

    monkeypatch.setattr(store, "count_votes", bad_query)
    with pytest.raises(StorageError):
        service.get_results()


def test_unready_store_is_unavailable(unavailable_app):
    service = unavailable_app.extensions["results_service"]

    with unavailable_app.app_context():
        with pytest.raises(StorageUnavailableError):
            service.get_results()
