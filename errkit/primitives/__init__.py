from errkit.primitives.common import ErrkitBaseModel, Identified, new_id, utc_now

__all__ = [
    "ErrkitBaseModel",
    "Identified",
    "new_id",
    "utc_now",
]
