# 📄 File: sportclub/shared/core/schemas.py
# 🧭 Purpose (Layman Explanation):
# Common rules for every piece of JSON the API reads or writes: keys are written in camelCase
# and unexpected keys in a request are refused.
# 🧪 Purpose (Technical Summary):
# Pydantic base classes for API schemas. Responses serialize with camelCase aliases; requests
# accept camelCase (or snake_case by name) and forbid extra fields.
# 🔗 Dependencies:
# pydantic v2 (ConfigDict, alias generators)
# 🔄 Connected Modules / Calls From:
# All presentation/api/schemas modules

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema with camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """Base schema for request bodies; unknown keys are rejected."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        str_strip_whitespace=True,
    )
