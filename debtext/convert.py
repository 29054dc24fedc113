"""Conversion between deb822 paragraphs and dataclass instances.

A dataclass describes the fields of a paragraph. Each dataclass field maps
to a paragraph field of the same name, unless :func:`deb822_field` gives it
another key or custom conversion functions.
"""

from __future__ import annotations

import dataclasses
import inspect
import types
import typing
from collections.abc import Callable, Iterable
from typing import Any, Protocol, TypeVar, runtime_checkable

from .lossy import Paragraph

T = TypeVar("T")

_METADATA_KEY = "deb822"

_BUILTIN_TYPES: dict[str, Any] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "Any": Any,
    "typing.Any": Any,
}

_NONE_NAMES = frozenset({"None", "NoneType", "type(None)"})


@runtime_checkable
class ParagraphLike(Protocol):
    """The operations a paragraph type must offer for conversion."""

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of field ``name``, or ``default``."""
        ...

    def set(self, name: str, value: str) -> None:
        """Set field ``name`` to ``value``."""
        ...

    def remove(self, name: str) -> None:
        """Remove field ``name``."""
        ...

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> ParagraphLike:
        """Build a paragraph from ``(name, value)`` pairs."""
        ...


@dataclasses.dataclass(frozen=True)
class _FieldSpec:
    key: str | None
    deserialize: Callable[[str], Any] | None
    serialize: Callable[[Any], str] | None


def deb822_field(
    key: str | None = None,
    *,
    default: Any = dataclasses.MISSING,
    deserialize: Callable[[str], Any] | None = None,
    serialize: Callable[[Any], str] | None = None,
) -> Any:
    """Declare a dataclass field with deb822 conversion options.

    ``key`` is the paragraph field name (defaults to the attribute name),
    ``deserialize`` turns the text into a value and ``serialize`` turns the
    value back into text.
    """
    spec = _FieldSpec(key, deserialize, serialize)
    return dataclasses.field(default=default, metadata={_METADATA_KEY: spec})


def _spec(f: dataclasses.Field) -> _FieldSpec:
    return f.metadata.get(_METADATA_KEY, _FieldSpec(None, None, None))


def _key(f: dataclasses.Field) -> str:
    return _spec(f).key or f.name


def _split_top(text: str, sep: str) -> list[str]:
    """Split ``text`` at ``sep`` where it is not inside brackets."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in text:
        if ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
        if ch == sep and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    parts.append("".join(current).strip())
    return parts


def _lookup(cls: type, name: str) -> Any:
    """Find the object a type name in an annotation refers to."""
    if name in _BUILTIN_TYPES:
        return _BUILTIN_TYPES[name]
    if "[" in name:
        return name
    obj: Any = inspect.getmodule(cls)
    for part in name.split("."):
        obj = getattr(obj, part, None)
        if obj is None:
            return name
    return obj


def _parse_annotation(cls: type, text: str) -> tuple[Any, bool]:
    """Resolve a string annotation into its inner type and optionality."""
    text = text.strip()
    parts = _split_top(text, "|")
    if len(parts) == 1 and text.endswith("]"):
        for prefix in ("Optional[", "typing.Optional["):
            if text.startswith(prefix):
                inner, _ = _parse_annotation(cls, text[len(prefix):-1])
                return inner, True
        for prefix in ("Union[", "typing.Union["):
            if text.startswith(prefix):
                parts = _split_top(text[len(prefix):-1], ",")
                break
    if len(parts) > 1:
        rest = [p for p in parts if p not in _NONE_NAMES]
        optional = len(rest) != len(parts)
        if len(rest) == 1:
            inner, inner_optional = _parse_annotation(cls, rest[0])
            return inner, optional or inner_optional
        return Any, optional
    return _lookup(cls, text), False


def _unwrap_optional(tp: Any) -> tuple[Any, bool]:
    """Return the inner type of ``Optional[X]`` and whether it was optional."""
    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        optional = len(args) != len(typing.get_args(tp))
        if len(args) == 1:
            return args[0], optional
        return tp, optional
    return tp, False


def _field_type(cls: type, f: dataclasses.Field) -> tuple[Any, bool]:
    if isinstance(f.type, str):
        return _parse_annotation(cls, f.type)
    return _unwrap_optional(f.type)


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"invalid boolean: {text!r}")


def _deserialize(tp: Any, text: str) -> Any:
    if tp is str or tp is Any or isinstance(tp, str):
        return text
    if tp is bool:
        return _parse_bool(text)
    if tp in (int, float):
        return tp(text)
    parse = getattr(tp, "parse", None)
    if callable(parse):
        return parse(text)
    if isinstance(tp, type):
        return tp(text)
    return text


def _serialize(spec: _FieldSpec, value: Any) -> str:
    if spec.serialize is not None:
        return spec.serialize(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _require_dataclass_instance(obj: Any) -> None:
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"expected a dataclass instance, got {type(obj).__name__}")


def from_paragraph(cls: type[T], paragraph: ParagraphLike) -> T:
    """Build an instance of dataclass ``cls`` from ``paragraph``.

    Raises ValueError when a required field is missing or cannot be parsed.
    """
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise TypeError(f"expected a dataclass type, got {cls!r}")
    kwargs: dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        spec = _spec(f)
        key = _key(f)
        inner, optional = _field_type(cls, f)
        text = paragraph.get(key)
        if text is None:
            has_default = (
                f.default is not dataclasses.MISSING
                or f.default_factory is not dataclasses.MISSING
            )
            if has_default:
                continue
            if optional:
                kwargs[f.name] = None
                continue
            raise ValueError(f"missing field: {key}")
        if spec.deserialize is not None:
            kwargs[f.name] = spec.deserialize(text)
        else:
            kwargs[f.name] = _deserialize(inner, text)
    return cls(**kwargs)


def _pairs(obj: Any) -> Iterable[tuple[str, str | None]]:
    for f in dataclasses.fields(obj):
        value = getattr(obj, f.name)
        yield _key(f), None if value is None else _serialize(_spec(f), value)


def to_paragraph(obj: Any, paragraph_type: type = Paragraph) -> Any:
    """Build a new paragraph of ``paragraph_type`` from dataclass ``obj``.

    Fields whose value is None are left out.
    """
    _require_dataclass_instance(obj)
    return paragraph_type.from_pairs(
        (key, text) for key, text in _pairs(obj) if text is not None
    )


def update_paragraph(obj: Any, paragraph: ParagraphLike) -> None:
    """Write the values of dataclass ``obj`` into an existing paragraph.

    Fields whose value is None are removed from the paragraph.
    """
    _require_dataclass_instance(obj)
    for key, text in _pairs(obj):
        if text is None:
            paragraph.remove(key)
        else:
            paragraph.set(key, text)