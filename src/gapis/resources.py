"""
Base for the API resource dataclasses and the generic wire transform.

Schemas only declare the fields that need converting, via the field helpers
below (timestamp(), int64(), byte_buffer(), duration(), nested(), output_only()).
Every other field passes straight through.  One pair of routines then handles
every schema, so there is no per-schema serialize/deserialize code to keep in step.
"""
from dataclasses import dataclass, field, fields
from collections.abc import Callable, Mapping
from functools import cache
from types import MappingProxyType
from typing import Any, Self
import sys

from . import codec

WIRE = "gapis.wire"

@dataclass(frozen=True)
class WireSpec():
    """
    How a single field is carried on the wire.
    kind: one of timestamp, int64, bytes, duration, nested or plain
    schema: nested schema class, or its name in the defining module
    repeated: JSON array of the kind
    mapped: JSON object of string to the kind
    readonly: output only, accepted from the server but never sent
    """
    kind: str = "plain"
    schema: type|str|None = None
    repeated: bool = False
    mapped: bool = False
    readonly: bool = False


def _wire_field(spec: WireSpec):
    return field(default=None, metadata={WIRE: spec})

def timestamp(repeated: bool = False, readonly: bool = False):
    return _wire_field(WireSpec("timestamp", repeated=repeated, readonly=readonly))

def int64(repeated: bool = False, mapped: bool = False, readonly: bool = False):
    return _wire_field(WireSpec("int64", repeated=repeated, mapped=mapped, readonly=readonly))

def byte_buffer(readonly: bool = False):
    return _wire_field(WireSpec("bytes", readonly=readonly))

def duration(readonly: bool = False):
    return _wire_field(WireSpec("duration", readonly=readonly))

def nested(schema: type|str, repeated: bool = False, mapped: bool = False, readonly: bool = False):
    """
    A field holding another resource (or a list / string keyed map of them).
    schema can be the class itself or, for forward references, its name.
    """
    return _wire_field(WireSpec("nested", schema, repeated=repeated, mapped=mapped, readonly=readonly))

def output_only():
    """A passthrough field that the server fills in and never accepts back."""
    return _wire_field(WireSpec(readonly=True))


_SCALARS: dict[str, tuple[Callable, Callable]] = {
    "timestamp": (codec.serialize_timestamp, codec.deserialize_timestamp),
    "int64": (codec.serialize_int64, codec.deserialize_int64),
    "bytes": (codec.serialize_bytes, codec.deserialize_bytes),
    "duration": (codec.serialize_duration, codec.deserialize_duration),
}

# wire string -> native, a native value is left alone
_NATIVE: dict[str, Callable[[Any], bool]] = {
    "timestamp": lambda v: not isinstance(v, str),
    "int64": lambda v: isinstance(v, int) and not isinstance(v, bool),
    "bytes": lambda v: isinstance(v, (bytes, bytearray, memoryview)),
    "duration": lambda v: True,
}

_registry: dict[str, type] = {}

def schema(name: str) -> type:
    """
    Look up a resource class by '<module>.<Class>' relative to the package,
    e.g. 'common.Policy' or 'dataproc.resources.Cluster'.
    """
    try:
        return _registry[name]
    except KeyError:
        raise ValueError(f"Unknown schema: {name}") from None


@cache
def _resolve(owner: type, ref: type|str) -> type:
    if not isinstance(ref, str):
        return ref
    found = getattr(sys.modules[owner.__module__], ref, None)
    if found is None:
        found = schema(ref)
    return found


class ApiResource():
    """
    Intended to be subclassed by a dataclass but isnt actually a dataclass.
    Every field defaults to None and None means 'not present', so nothing
    absent on the wire ever reappears as a null or a default.
    Keys the schema doesn't know about are held on the side and written back
    out untouched.
    """
    _unknown: Mapping[str, Any] = MappingProxyType({})

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        _registry[f"{cls.__module__.removeprefix(__package__ + '.')}.{cls.__qualname__}"] = cls

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        """
        Bring every converted field into native form in place.
        Wire strings become datetimes / ints / bytes and plain dicts in nested
        fields become resources, so Cls(**response) works as well as from_base().
        """
        for f in fields(self):
            spec = f.metadata.get(WIRE)
            value = getattr(self, f.name)
            if spec is not None and value is not None:
                setattr(self, f.name, _over(spec, value, lambda v: _to_native(type(self), spec, v)))

    @classmethod
    def from_base(cls, data: Mapping[str, Any]) -> Self:
        """
        Build from the decoded JSON of a response.  The mapping is not modified.
        """
        names = {f.name for f in fields(cls)}
        known = {k: v for k, v in data.items() if k in names}
        obj = cls(**known)
        if len(known) != len(data):
            obj._unknown = MappingProxyType({k: v for k, v in data.items() if k not in names})
        return obj

    def to_base(self, include_readonly: bool = True) -> dict:
        """
        The wire dict for this resource.  Fields left at None are skipped,
        empty lists and dicts are kept.  Builds new containers all the way down,
        the resource itself is left as is.
        """
        base = {k: _plain(v, include_readonly) for k, v in self._unknown.items()}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            spec = f.metadata.get(WIRE)
            if spec is None:
                base[f.name] = _plain(value, include_readonly)
            elif include_readonly or not spec.readonly:
                base[f.name] = _over(spec, value, lambda v: _to_wire(type(self), spec, v, include_readonly))
        return base

    def trim(self) -> dict:
        """
        Request body form: to_base() without any output only field, at any depth.
        """
        return self.to_base(include_readonly=False)


def _over(spec: WireSpec, value: Any, convert: Callable[[Any], Any]) -> Any:
    if spec.repeated:
        return [convert(v) for v in value]
    if spec.mapped:
        return {k: convert(v) for k, v in value.items()}
    return convert(value)

def _to_native(owner: type, spec: WireSpec, value: Any) -> Any:
    if spec.kind == "nested":
        cls = _resolve(owner, spec.schema)
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.from_base(value)
        raise TypeError(f"{owner.__name__}: expected {cls.__name__} or a mapping, got {type(value).__name__}")
    if spec.kind in _SCALARS and not _NATIVE[spec.kind](value):
        return _SCALARS[spec.kind][1](value)
    return value

def _to_wire(owner: type, spec: WireSpec, value: Any, include_readonly: bool) -> Any:
    native = _to_native(owner, spec, value)
    if spec.kind == "nested":
        return native.to_base(include_readonly)
    if spec.kind in _SCALARS:
        return _SCALARS[spec.kind][0](native)
    return _plain(native, include_readonly)

def _plain(value: Any, include_readonly: bool) -> Any:
    if isinstance(value, ApiResource):
        return value.to_base(include_readonly)
    if isinstance(value, list):
        return [_plain(v, include_readonly) for v in value]
    if isinstance(value, dict):
        return {k: _plain(v, include_readonly) for k, v in value.items()}
    return value


def serialize(resource: ApiResource) -> dict:
    """Wire form of a resource for sending, output only fields dropped."""
    return resource.trim()

def deserialize(cls: type|str, data: Mapping[str, Any]) -> ApiResource:
    """Native form of a wire dict.  cls may be a schema name for the registry."""
    if isinstance(cls, str):
        cls = schema(cls)
    return cls.from_base(data)
