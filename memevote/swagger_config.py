def swagger_template(app=None):
    title = "Meme Vote API"
    version = "1.0.0"

    if app:
        title = app.config.get("SWAGGER_TITLE", title)
        version = app.config.get("SWAGGER_VERSION", version)

    return {
        "swagger": "2.0",
        "info": {
            "title": title,
            "version": version,
            "description": "Submit one vote per email address and read the tallies.",
        },
        "basePath": "/",
        "definitions": {
            "MessageResponse": {
                "type": "object",
                "properties": {
                    "message": {"type": "string", "example": "Vote for meme1 recorded successfully!"},
                },
            },
            "ErrorResponse": {
                "type": "object",
                "properties": {
                    "success": {"type": "boolean", "example": False},
                    "error": {
                        "type": "object",
                        "properties": {
                            "code": {"type": "string", "example": "NOT_FOUND"},
                            "message": {"type": "string", "example": "Resource not found"},
                            "details": {"type": "object"}
                        }
                    },
                    "request_id": {"type": "string"}
                }
            }
        }
    }
