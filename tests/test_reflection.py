"""Tests for :mod:`opten_text.reflection` — the read/write attribute capability query."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Optional

from opten_text.reflection import AttributeAccessor, get_read_and_writeable_properties_of_type

if TYPE_CHECKING:
    from decimal import Decimal
    from typing import Self


@dataclass
class Article:
    title: str
    views: int
    summary: str | None = None
    legacy_summary: Optional[str] = None  # noqa: UP007
    tags: list[str] | None = None
    code: str | int = ""
    _slug: str = ""
    kind: ClassVar[str] = "article"


@dataclass
class FeaturedArticle(Article):
    teaser: str = ""


@dataclass(frozen=True)
class Snapshot:
    title: str
    views: int


class Profile:
    display_name: str

    def __init__(self) -> None:
        self.display_name = ""
        self._bio = ""
        self._handle = ""
        self._age = 0

    @property
    def bio(self) -> str | None:
        return self._bio

    @bio.setter
    def bio(self, value: str | None) -> None:
        self._bio = value

    @property
    def handle(self) -> str:
        return self._handle

    @property
    def age(self) -> int:
        return self._age

    @age.setter
    def age(self, value: int) -> None:
        self._age = value


class Unannotated:
    def __init__(self) -> None:
        self.name = "  x  "


@dataclass
class Order:
    name: str
    total: Decimal | None = None
    parent: Order | None = None
    note: str | None = None


class Ledger:
    """Mixes a type-checking-only property annotation with ordinary ones."""

    owner: str

    def __init__(self) -> None:
        self.owner = ""
        self._memo = ""

    @property
    def memo(self) -> str:
        return self._memo

    @memo.setter
    def memo(self, value: str) -> None:
        self._memo = value

    @property
    def link(self) -> Self:
        return self

    @link.setter
    def link(self, value: Self) -> None:
        pass


# Annotations whose defining module is gone: only the source text is left
Legacy = type(
    "Legacy",
    (),
    {
        "__annotations__": {
            "memo": "Optional[str]",
            "rate": "Decimal",
            "kind": "ClassVar[str]",
        },
        "__module__": "retired_billing_module",
    },
)


def _names(cls: type, value_type: type = str) -> list[str]:
    return [accessor.name for accessor in get_read_and_writeable_properties_of_type(cls, value_type)]


class TestCapabilityQuery:
    """
    REQUIREMENT: A class can be asked for its readable and writable attributes of one type.

    WHO: trim_all_string_properties and any other bulk attribute rewriters
    WHAT: str and optional-str declarations match; other types, unions with
          other types, ClassVars, private names, frozen fields, and
          setter-less properties do not; base-class attributes come first
    WHY: Writing to a read-only or non-text attribute would either fail
         or corrupt the record
    """

    def test_only_text_declarations_match(self) -> None:
        """
        When a dataclass mixes text, optional text, and other types
        Then only str and str | None fields are returned
        """
        result = _names(Article)

        assert result == ["title", "summary", "legacy_summary"], (
            f"Expected text fields only, got {result!r}"
        )

    def test_inherited_fields_come_before_subclass_fields(self) -> None:
        """Base-class fields are listed first, followed by the subclass's own."""
        result = _names(FeaturedArticle)

        assert result == ["title", "summary", "legacy_summary", "teaser"], (
            f"Expected base fields then 'teaser', got {result!r}"
        )

    def test_frozen_dataclass_has_no_writable_fields(self) -> None:
        """Fields of a frozen dataclass cannot be set and are excluded."""
        assert _names(Snapshot) == []

    def test_properties_need_a_setter(self) -> None:
        """
        When a class defines settable and read-only text properties
        Then only the settable ones are returned after annotated attributes
        """
        result = _names(Profile)

        assert result == ["display_name", "bio"], f"Expected settable text only, got {result!r}"

    def test_other_value_types_can_be_queried(self) -> None:
        """The query works for any declared type, not just str."""
        assert _names(Article, int) == ["views"]
        assert _names(Profile, int) == ["age"]

    def test_undeclared_instance_attributes_are_not_found(self) -> None:
        """Attributes assigned only in __init__ have no declared type and are skipped."""
        assert _names(Unannotated) == []

    def test_accessor_reads_and_writes_the_attribute(self) -> None:
        """The returned accessor gets and sets the attribute on an instance."""
        profile = Profile()
        accessor = AttributeAccessor("bio", str)

        accessor.set(profile, "hello")

        assert accessor.get(profile) == "hello"
        assert profile.bio == "hello"


class TestUnresolvableAnnotations:
    """
    REQUIREMENT: Annotations the runtime cannot evaluate never break the query.

    WHO: Records written with postponed annotations and TYPE_CHECKING imports
    WHAT: Each annotation is resolved on its own; one that cannot be evaluated
          is matched by its source text or skipped; the remaining text
          attributes are still found
    WHY: A record must not become untrimmable because an unrelated field
         uses a type that is imported only for the type checker
    """

    def test_type_checking_only_import_is_skipped(self) -> None:
        """
        When a dataclass annotates a field with a TYPE_CHECKING-only type
        Then the query returns the text fields without raising
        """
        result = _names(Order)

        assert result == ["name", "note"], f"Expected text fields only, got {result!r}"

    def test_locally_scoped_type_is_skipped(self) -> None:
        """A field typed with a class local to a function does not hide the other fields."""

        class Money:
            pass

        @dataclass
        class Line:
            label: str
            amount: Money | None = None

        assert _names(Line) == ["label"]

    def test_unresolvable_property_annotation_is_skipped(self) -> None:
        """A settable property annotated with a TYPE_CHECKING-only name is ignored."""
        result = _names(Ledger)

        assert result == ["owner", "memo"], f"Expected owner and memo, got {result!r}"

    def test_source_text_is_matched_when_evaluation_fails(self) -> None:
        """
        When no annotation on a class can be evaluated
        Then text declarations are still recognized from their source
        """
        accessors = get_read_and_writeable_properties_of_type(Legacy)

        assert [a.name for a in accessors] == ["memo"], (
            f"Expected only 'memo', got {[a.name for a in accessors]!r}"
        )
        assert accessors[0].declared_type == "Optional[str]"
