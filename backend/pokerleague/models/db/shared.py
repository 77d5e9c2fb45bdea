from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

NonEmptyName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]


class BaseModelORM(BaseModel):
    model_config = ConfigDict(from_attributes=True)
