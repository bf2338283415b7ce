"""Pydantic schemas for receiver responses."""

from pydantic import BaseModel


class AckResponse(BaseModel):
    """Acknowledgement sent before the event is dispatched."""

    ok: bool = True


class ErrorResponse(BaseModel):
    """Error answered to the webhook sender."""

    error: str
