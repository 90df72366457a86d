import logging
import uuid
from flask import g, has_request_context, request
from flask.logging import default_handler

LOG_FORMAT = "[%(asctime)s] %(levelname)s request_id=%(request_id)s in %(module)s: %(message)s"


class RequestIdFilter(logging.Filter):
    """Stamp log records with the id of the request being served ("-" outside requests)."""

    def filter(self, record):
        rid = getattr(g, "request_id", None) if has_request_context() else None
        record.request_id = rid or "-"
        return True


def init_request_id(app):
    # default_handler is process-wide; install the filter once
    if not any(isinstance(f, RequestIdFilter) for f in default_handler.filters):
        default_handler.addFilter(RequestIdFilter())
        default_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    @app.before_request
    def _assign_request_id():
        g.request_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())

    @app.after_request
    def _add_request_id_header(response):
        if hasattr(g, "request_id"):
            response.headers["X-Request-Id"] = g.request_id
        return response
