# boardlab_picker/core/types/json.py

"""JSON type definitions for type-safe JSON handling using Python 3.13 features."""

# JSON Type Usage Guide:
# - JSONDict: When you KNOW it's a dict with string keys (e.g., config files, catalog snapshots)
# - JSONList: When you KNOW it's a list (e.g., persisted history keys)
# - JSONType: When it could be either or you're accessing nested data

type JSONPrimitive = str | int | float | bool | None

type JSONType = JSONDict | JSONList | JSONPrimitive
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]

__all__ = ["JSONPrimitive", "JSONType", "JSONDict", "JSONList"]
