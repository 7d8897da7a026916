"""Capability query over a class's declared attributes.

Answers "which public attributes of this class are declared as
``value_type`` and support both get and set?" without touching an
instance.  Declared means one of:

  - a dataclass field or annotated class attribute (``name: str``)
  - a ``property`` whose getter is annotated ``-> str``

Writable excludes frozen-dataclass fields and properties without a
setter.  ``ClassVar`` annotations and ``_private`` names never match.
``value_type | None`` counts as ``value_type``.

Annotations are resolved one at a time.  A name that only exists for
the type checker (``if TYPE_CHECKING:`` imports, locally scoped classes)
makes that single annotation unresolvable; it is then compared by its
source text, and skipped if that does not match either.
"""

from __future__ import annotations

import dataclasses
import inspect
import sys
import types
import typing
from dataclasses import dataclass
from typing import Any, Union

_UNRESOLVED = object()


@dataclass(frozen=True)
class AttributeAccessor:
    """A readable and writable attribute found by the capability query."""

    name: str
    declared_type: Any

    def get(self, obj: object) -> Any:
        return getattr(obj, self.name)

    def set(self, obj: object, value: Any) -> None:
        setattr(obj, self.name, value)


def get_read_and_writeable_properties_of_type(
    cls: type, value_type: type = str
) -> list[AttributeAccessor]:
    """Return accessors for every read/write attribute of *cls* declared as *value_type*.

    Annotated attributes come first (base classes before subclasses, in
    declaration order), followed by properties in the same order.

    >>> @dataclass
    ... class Person:
    ...     name: str
    ...     age: int = 0
    >>> [a.name for a in get_read_and_writeable_properties_of_type(Person)]
    ['name']
    """
    frozen_fields = _frozen_field_names(cls)
    accessors: list[AttributeAccessor] = []

    for name, (annotation, owner) in _class_annotations(cls).items():
        if name.startswith("_") or name in frozen_fields:
            continue
        # Annotated names shadowed by a property are judged as properties
        if isinstance(inspect.getattr_static(cls, name, None), property):
            continue
        resolved = _resolve(annotation, _module_globals(owner), dict(vars(owner)))
        if _matches(resolved, annotation, value_type):
            accessors.append(AttributeAccessor(name, _declared(resolved, annotation)))

    for name, prop in _public_properties(cls).items():
        if prop.fget is None or prop.fset is None:
            continue
        annotation = _own_annotations(prop.fget).get("return")
        if annotation is None:
            continue
        resolved = _resolve(annotation, getattr(prop.fget, "__globals__", {}), None)
        if _matches(resolved, annotation, value_type):
            accessors.append(AttributeAccessor(name, _declared(resolved, annotation)))

    return accessors


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _class_annotations(cls: type) -> dict[str, tuple[Any, type]]:
    """Raw annotations across the MRO with the class that declared each one.

    Subclass re-annotations replace the base entry but keep its position.
    """
    found: dict[str, tuple[Any, type]] = {}
    for klass in reversed(cls.__mro__):
        for name, annotation in _own_annotations(klass).items():
            found[name] = (annotation, klass)
    return found


def _own_annotations(obj: Any) -> dict[str, Any]:
    try:
        return dict(inspect.get_annotations(obj))
    except NameError:
        # Lazily evaluated annotations (3.14+) referencing undefined names
        import annotationlib

        return dict(annotationlib.get_annotations(obj, format=annotationlib.Format.STRING))


def _module_globals(klass: type) -> dict[str, Any]:
    module = sys.modules.get(klass.__module__)
    return vars(module) if module is not None else {}


def _resolve(annotation: Any, globalns: dict[str, Any], localns: dict[str, Any] | None) -> Any:
    """Evaluate a string annotation, or return ``_UNRESOLVED`` if that fails."""
    if not isinstance(annotation, str):
        return annotation
    try:
        return eval(annotation, globalns, localns)  # noqa: S307
    except Exception:
        # NameError for type-checking-only names; TypeError/SyntaxError for odd strings
        return _UNRESOLVED


def _matches(resolved: Any, raw: Any, value_type: type) -> bool:
    if resolved is _UNRESOLVED:
        return _raw_declares(raw, value_type)
    return _is_declared_as(resolved, value_type)


def _declared(resolved: Any, raw: Any) -> Any:
    return raw if resolved is _UNRESOLVED else resolved


def _raw_declares(raw: str, value_type: type) -> bool:
    """Match the source text of an annotation that could not be evaluated."""
    name = value_type.__name__
    compact = raw.replace(" ", "")
    return compact in {
        name,
        f"{name}|None",
        f"None|{name}",
        f"Optional[{name}]",
        f"typing.Optional[{name}]",
    }


def _is_declared_as(annotation: Any, value_type: type) -> bool:
    """True for ``value_type`` itself or an optional ``value_type``."""
    if annotation is value_type:
        return True
    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        return members == [value_type]
    return False


def _frozen_field_names(cls: type) -> set[str]:
    if not dataclasses.is_dataclass(cls):
        return set()
    # The frozen flag is only exposed through the dataclass parameters object
    params = getattr(cls, "__dataclass_params__", None)
    if params is None or not params.frozen:
        return set()
    return {f.name for f in dataclasses.fields(cls)}


def _public_properties(cls: type) -> dict[str, property]:
    """Collect properties across the MRO; subclass overrides win, base order is kept."""
    found: dict[str, property] = {}
    for klass in reversed(cls.__mro__):
        for name, member in vars(klass).items():
            if name.startswith("_"):
                continue
            if isinstance(member, property):
                found[name] = member
            elif name in found:
                # Overridden by a plain attribute further down the MRO
                del found[name]
    return found


__all__ = ["AttributeAccessor", "get_read_and_writeable_properties_of_type"]
