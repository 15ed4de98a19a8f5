"""Path parameters shared by the routers."""

from typing import Annotated

from fastapi import Path

from ..schemas.fields import MAX_DB_INTEGER, MIN_DB_INTEGER

# Out-of-range ids fail validation instead of overflowing the database driver
RecordIdPath = Annotated[int, Path(ge=MIN_DB_INTEGER, le=MAX_DB_INTEGER)]
