"""Base model emitting the camelCase JSON layout used by the store and the API."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # NaN and infinities serialise to JSON null and could not be loaded back
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)
