from flask import Blueprint, current_app
from flasgger import swag_from

from ...errors import StorageError, StorageUnavailableError
from ...schemas.results import ResultsSchema

results_bp = Blueprint("results", __name__)
results_schema = ResultsSchema()


@results_bp.get("/results")
@swag_from({
    "tags": ["Results"],
    "summary": "Vote totals, per-meme counts and the full vote log",
    "description": (
        "voteCounts is sorted by count descending, ties by meme id ascending.\n"
        "allVotes has no guaranteed order."
    ),
    "responses": {
        200: {"description": "Results"},
        500: {"description": "Server error"},
        503: {"description": "Database not connected"},
    }
})
def results():
    service = current_app.extensions["results_service"]

    try:
        tally = service.get_results()

    except StorageUnavailableError as e:
        current_app.logger.error("Results unavailable, store not connected")
        return e.to_response()

    except StorageError as e:
        current_app.logger.exception("DB error fetching results")
        return e.to_response()

    return results_schema.dump(tally), 200
