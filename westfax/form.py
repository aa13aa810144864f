import json
from typing import IO, Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .models import FaxIdentifier, FaxIds


def is_many(values: Any) -> bool:
    """Lists, tuples, ranges and generators fan out; strings, dicts and fax ids are single values."""
    if isinstance(values, (str, bytes, bytearray, dict, FaxIdentifier)):
        return False
    return isinstance(values, Iterable)


def _as_list(values: Any) -> List[Any]:
    if is_many(values):
        return list(values)
    return [values]


def numbered_fields(prefix: str, values: Any) -> Dict[str, Any]:
    """
    Maps values onto 1-indexed field names, e.g. ``Numbers1``, ``Numbers2``.

    A scalar is treated as a single value.
    """
    return {f'{prefix}{index}': value for index, value in enumerate(_as_list(values), start=1)}


def _fax_id_payload(fax_id: Union[FaxIdentifier, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(fax_id, FaxIdentifier):
        return fax_id.as_dict()
    if isinstance(fax_id, dict):
        return fax_id
    raise TypeError(f'Fax id must be a string, dict or FaxIdentifier, got {type(fax_id)}: {fax_id}')


def _to_json(value: Any) -> str:
    return json.dumps(value, separators=(',', ':'), ensure_ascii=False)


def serialize_fax_id(fax_id: Union[str, FaxIdentifier, Dict[str, Any]]) -> str:
    if isinstance(fax_id, str):
        return fax_id
    return _to_json(_fax_id_payload(fax_id))


def serialize_fax_ids(fax_ids: FaxIds) -> str:
    """Serializes one or many fax ids into a single JSON text value."""
    if is_many(fax_ids):
        return _to_json([
            fax_id if isinstance(fax_id, str) else _fax_id_payload(fax_id)
            for fax_id in fax_ids
        ])
    return serialize_fax_id(fax_ids)


class FaxForm:
    """
        Ordered multipart form body.

        Text fields are sent as parts without a filename; file parts carry one.
    """

    def __init__(self):
        self._parts: List[Tuple[str, Tuple[Optional[str], Any]]] = []

    def add_field(self, name: str, value: Any):
        if isinstance(value, bool):
            value = str(value).lower()
        self._parts.append((name, (None, str(value))))
        return self

    def add_fields(self, fields: Dict[str, Any]):
        for name, value in fields.items():
            self.add_field(name, value)
        return self

    def add_file(self, name: str, filename: str, content: Union[bytes, IO[bytes]]):
        self._parts.append((name, (filename, content)))
        return self

    @property
    def fields(self) -> Dict[str, Any]:
        return {name: value for name, (_, value) in self._parts}

    @property
    def names(self) -> List[str]:
        return [name for name, _ in self._parts]

    def __contains__(self, name: str) -> bool:
        return name in self.names

    def as_files(self) -> Sequence[Tuple[str, Tuple[Optional[str], Any]]]:
        return list(self._parts)
