"""Result envelopes shared by several endpoints."""

from pydantic import BaseModel, Field


class InsertResult(BaseModel):
    """Identifier assigned by the store to a newly inserted row."""

    insert_id: int = Field(..., alias="insertId", examples=[276])

    model_config = {"populate_by_name": True}


class UpdateResult(BaseModel):
    """Row counts reported after an ``UPDATE``.

    ``affectedRows`` counts rows matched by the statement and
    ``changedRows`` those whose values actually differed.
    """

    affected_rows: int = Field(..., alias="affectedRows")
    changed_rows: int = Field(..., alias="changedRows")

    model_config = {"populate_by_name": True}


class MessageResult(BaseModel):
    message: str = Field(..., examples=["Success"])


class ErrorResponse(BaseModel):
    """Body of every rejected request."""

    error: str
