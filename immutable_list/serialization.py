import json
from .types import *
from .lists import AbstractList
from .factories import from_json


class ListJSONEncoder(json.JSONEncoder):
    """encodes immutable lists as json arrays and holes as null"""

    def default(self, o):
        if isinstance(o, AbstractList): return o.to_json()
        if o is ABSENT: return None
        return super().default(o)


def _revive(value: Any) -> Any:
    if isinstance(value, list): return from_json([_revive(item) for item in value])
    if isinstance(value, dict): return {key: _revive(item) for key, item in value.items()}
    return value


def dumps(obj: Any, **kwargs) -> str:
    """json.dumps that understands immutable lists"""
    kwargs.setdefault('cls', ListJSONEncoder)
    return json.dumps(obj, **kwargs)


def loads(text: Union[str, bytes], **kwargs) -> Any:
    """json.loads that turns every array into an immutable list"""
    return _revive(json.loads(text, **kwargs))
