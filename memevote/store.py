from contextlib import contextmanager
from datetime import datetime

from sqlalchemy import func, text
from sqlalchemy.exc import SQLAlchemyError

from .errors import StorageUnavailableError
from .models.vote import Vote


class VoteStore:
    """
    Owns the connection to the votes table.

    Created once per application and handed to the services. ``init_app``
    creates the table (with its unique email index) and pings the database.
    While that has not succeeded each operation tries again first, and raises
    StorageUnavailableError if the database is still unreachable.
    ``close`` releases the engine's pooled connections.
    """

    def __init__(self, db, app=None):
        self.db = db
        self.app = None
        self.ready = False
        if app is not None:
            self.init_app(app)

    def init_app(self, app) -> None:
        self.app = app
        app.extensions["vote_store"] = self

        with app.app_context():
            self.connect()

    def connect(self) -> bool:
        """Create the table (if configured) and ping. Needs an app context."""
        try:
            if self.app.config.get("STORE_AUTO_CREATE", True):
                self.db.create_all()
            self.db.session.execute(text("SELECT 1"))
            self.ready = True
            self.app.logger.info(
                "Vote store connected: %s",
                self.db.engine.url.render_as_string(hide_password=True),
            )
        except SQLAlchemyError:
            self.db.session.rollback()
            self.app.logger.exception("Failed to initialize vote store")
        return self.ready

    @property
    def session(self):
        return self.db.session

    def _require_ready(self) -> None:
        # Retry the connection so the store recovers once the database is back
        if not self.ready and not self.connect():
            raise StorageUnavailableError()

    def add_vote(self, email: str, choice_id: str, created_at: datetime) -> Vote:
        self._require_ready()
        vote = Vote(email=email, choice_id=choice_id, created_at=created_at)
        try:
            self.session.add(vote)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        return vote

    def count_votes(self) -> int:
        self._require_ready()
        return self.session.query(func.count(Vote.id)).scalar() or 0

    def count_by_choice(self) -> list[tuple[str, int]]:
        """(choice_id, votes) pairs, most votes first, ties by choice_id."""
        self._require_ready()
        votes = func.count(Vote.id).label("votes")
        rows = (
            self.session.query(Vote.choice_id, votes)
            .group_by(Vote.choice_id)
            .order_by(votes.desc(), Vote.choice_id.asc())
            .all()
        )
        return [(row.choice_id, int(row.votes)) for row in rows]

    def list_votes(self) -> list[tuple[str, str, datetime]]:
        self._require_ready()
        rows = self.session.query(Vote.email, Vote.choice_id, Vote.created_at).all()
        return [(row.email, row.choice_id, row.created_at) for row in rows]

    @contextmanager
    def snapshot(self):
        """Run several reads on one session transaction, then end it."""
        self._require_ready()
        try:
            yield self
        finally:
            self.session.rollback()

    def close(self) -> None:
        if self.app is None:
            return
        with self.app.app_context():
            self.db.session.remove()
            self.db.engine.dispose()
        self.ready = False
        self.app.logger.info("Vote store connection closed")

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
        return False
