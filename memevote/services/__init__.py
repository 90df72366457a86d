from .voting import VoteService, VoteReceipt  # noqa: F401
from .results import ResultsService, Results, ChoiceCount, VoteLogEntry  # noqa: F401

__all__ = [
    "VoteService",
    "VoteReceipt",
    "ResultsService",
    "Results",
    "ChoiceCount",
    "VoteLogEntry",
]
