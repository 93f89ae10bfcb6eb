"""HTTP API package: FastAPI routes over the conversion pipeline.

WHY: The web page and other tools call the converter over HTTP instead
of loading espeak-ng themselves.

HOW: app.py defines the FastAPI app and endpoints; models.py holds the
Pydantic request/response schemas.

RULES:
- Routes only compose pipeline functions; no phonology lives here
"""
