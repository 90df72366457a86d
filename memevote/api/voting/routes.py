from flask import Blueprint, request, current_app
from flasgger import swag_from

from ...errors import (
    DuplicateVoteError,
    StorageError,
    StorageUnavailableError,
    ValidationError,
)
from ...schemas.vote import VoteReceiptSchema

voting_bp = Blueprint("voting", __name__)
vote_receipt_schema = VoteReceiptSchema()


@voting_bp.post("/vote")
@swag_from({
    "tags": ["Voting"],
    "summary": "Submit a vote (one per email address)",
    "parameters": [{
        "in": "body",
        "name": "body",
        "required": True,
        "schema": {
            "type": "object",
            "properties": {
                "email": {"type": "string", "example": "voter@example.com"},
                "choiceId": {"type": "string", "example": "meme1"},
            },
            "required": ["email", "choiceId"],
        },
    }],
    "responses": {
        201: {"description": "Vote recorded"},
        400: {"description": "Validation error"},
        409: {"description": "Email has already voted"},
        500: {"description": "Server error"},
        503: {"description": "Database not connected"},
    },
})
def submit_vote():
    payload = request.get_json(silent=True) or {}
    service = current_app.extensions["vote_service"]

    try:
        receipt = service.submit(payload)

    except ValidationError as e:
        current_app.logger.info("Rejected vote submission: %s", e.details)
        return e.to_response()

    except DuplicateVoteError as e:
        current_app.logger.warning("Duplicate vote attempt by %s", e.email)
        return e.to_response()

    except StorageUnavailableError as e:
        current_app.logger.error("Vote rejected, store unavailable")
        return e.to_response()

    except StorageError as e:
        current_app.logger.exception("DB error while submitting vote")
        return e.to_response()

    current_app.logger.info("Vote recorded for %s", receipt.choice_id)
    return vote_receipt_schema.dump({"message": receipt.message}), 201
