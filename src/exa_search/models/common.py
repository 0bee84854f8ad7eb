from pydantic import BaseModel


class BasePydanticModel(BaseModel):
    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
        "use_enum_values": True,
    }

class WireModel(BaseModel):
    """Base for models parsed from server responses; unknown members are kept."""
    model_config = {
        "extra": "allow",
        "populate_by_name": True,
    }
