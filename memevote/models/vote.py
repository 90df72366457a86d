import uuid
from sqlalchemy import Uuid
from ..extensions import db


class Vote(db.Model):
    __tablename__ = "votes"

    id = db.Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # Stored trimmed + lowercased; one vote per email, enforced by the index
    email = db.Column(db.Text, nullable=False)
    choice_id = db.Column(db.Text, nullable=False, index=True)

    # Set by VoteService at insert time
    created_at = db.Column(db.DateTime(timezone=True), nullable=False)

    __table_args__ = (
        db.Index("uq_votes_email", "email", unique=True),
    )

    def __repr__(self) -> str:
        return f"<Vote {self.email} -> {self.choice_id}>"
