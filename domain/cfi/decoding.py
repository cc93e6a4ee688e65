"""Label resolution and text rendering for CFI codes."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from domain.cfi.code import CfiCode
from domain.taxonomy.models import OWN_LABEL_KEY, Group, Taxonomy


class CodeFormat(str, Enum):
    """Rendering verbosity."""

    TAG = "tag"
    SHORT = "short"
    LONG = "long"

    @classmethod
    def _missing_(cls, value: object) -> "CodeFormat | None":
        # Names match case-insensitively, ignoring surrounding whitespace
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        return None


class DecodedAttribute(BaseModel):
    """One attribute position resolved against its group table."""

    model_config = ConfigDict(frozen=True)

    position: int  # 1..4
    char: str
    label: str  # the facet's own label, e.g. "Voting Right"
    value: str  # empty if the character is not in the table


class DecodedCode(BaseModel):
    """Fully resolved CFI code. Unknown parts are empty strings."""

    model_config = ConfigDict(frozen=True)

    tag: str
    category: str
    group: str
    attributes: tuple[DecodedAttribute, DecodedAttribute, DecodedAttribute, DecodedAttribute]

    @property
    def values(self) -> list[str]:
        return [a.value for a in self.attributes]


def category_name(code: CfiCode, taxonomy: Taxonomy) -> str:
    return taxonomy.category_name(code.category_char)


def group_name(code: CfiCode, taxonomy: Taxonomy) -> str:
    return taxonomy.group_name(code.category_char, code.group_char)


def decode_code(code: CfiCode, taxonomy: Taxonomy) -> DecodedCode:
    """Resolve category, group and the four attribute labels of `code`."""
    group = taxonomy.group(code.category_char, code.group_char)
    if group is None:
        group = Group(name="")
    attributes = tuple(
        DecodedAttribute(
            position=i,
            char=char,
            label=table.get(OWN_LABEL_KEY, ""),
            value=table.get(char, ""),
        )
        for i, (char, table) in enumerate(zip(code.attribute_chars, group.attributes), start=1)
    )
    return DecodedCode(
        tag=code.tag,
        category=taxonomy.category_name(code.category_char),
        group=group.name,
        attributes=attributes,
    )


def render_code(code: CfiCode, fmt: CodeFormat | str, taxonomy: Taxonomy) -> str:
    """
    Render `code` as text.

    - TAG: the six characters unchanged
    - SHORT: "<category>; <group>; <attr1>; <attr2>; <attr3>; <attr4>" (empty slots kept)
    - LONG: category, then the indented group, then one "<facet>: <value>" line per attribute

    Never fails for a constructed code; unknown lookups render as empty text.
    """
    fmt = CodeFormat(fmt)
    if fmt is CodeFormat.TAG:
        return code.tag

    decoded = decode_code(code, taxonomy)
    if fmt is CodeFormat.SHORT:
        return "; ".join([decoded.category, decoded.group, *decoded.values])

    lines = [decoded.category, f" {decoded.group}"]
    lines.extend(f"  {a.label}: {a.value}" for a in decoded.attributes)
    return "\n".join(lines)
