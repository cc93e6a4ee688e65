"""CFI taxonomy models: categories, groups and attribute label tables."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

# Reserved attribute-table key holding the facet's own label (e.g. "Voting Right").
OWN_LABEL_KEY = "_"

AttributeTable = Mapping[str, str]


def _read_only(value: Mapping) -> Mapping:
    return MappingProxyType(dict(value))


# Stored mappings are copied and wrapped, so the shared default taxonomy cannot be edited in place.
_Table = Annotated[AttributeTable, AfterValidator(_read_only)]


class Group(BaseModel):
    """Second-character facet: a name plus up to four attribute tables."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    name: str
    attribute1: _Table = Field(default_factory=dict)
    attribute2: _Table = Field(default_factory=dict)
    attribute3: _Table = Field(default_factory=dict)
    attribute4: _Table = Field(default_factory=dict)

    @property
    def attributes(self) -> tuple[AttributeTable, AttributeTable, AttributeTable, AttributeTable]:
        return (self.attribute1, self.attribute2, self.attribute3, self.attribute4)


class Category(BaseModel):
    """First-character facet: instrument superclass and its groups."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    name: str
    groups: Annotated[Mapping[str, Group], AfterValidator(_read_only)] = Field(default_factory=dict)


class Taxonomy(BaseModel):
    """
    Read-only CFI taxonomy.

    Lookups never fail: unknown characters resolve to None (entities)
    or empty string (names and labels).
    """

    model_config = ConfigDict(frozen=True, validate_default=True)

    version: str = ""
    categories: Annotated[Mapping[str, Category], AfterValidator(_read_only)] = Field(default_factory=dict)

    def category(self, char: str) -> Category | None:
        return self.categories.get(char)

    def group(self, category_char: str, group_char: str) -> Group | None:
        cat = self.categories.get(category_char)
        if cat is None:
            return None
        return cat.groups.get(group_char)

    def category_name(self, char: str) -> str:
        cat = self.category(char)
        return cat.name if cat is not None else ""

    def group_name(self, category_char: str, group_char: str) -> str:
        grp = self.group(category_char, group_char)
        return grp.name if grp is not None else ""

    def has_group(self, category_char: str, group_char: str) -> bool:
        return self.group(category_char, group_char) is not None
