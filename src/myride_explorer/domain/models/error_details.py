"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Error shown inline by a view, with the upstream HTTP status if known."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str
