"""Parse the CFI taxonomy definition from a YAML dict."""

from typing import Any

from domain.taxonomy.models import OWN_LABEL_KEY, AttributeTable, Category, Group, Taxonomy

_ATTRIBUTE_FIELDS = ("attribute1", "attribute2", "attribute3", "attribute4")


def _check_facet_key(key: object, where: str, *, allow_own_label: bool = False) -> str:
    # Unquoted YAML keys can load as bools (no, off) or ints (1); only one-character strings pass.
    if not isinstance(key, str) or len(key) != 1:
        raise ValueError(f"{where}: key {key!r} must be a single character (quote it in YAML)")
    if allow_own_label and key == OWN_LABEL_KEY:
        return key
    if not ("A" <= key <= "Z"):
        raise ValueError(f"{where}: key {key!r} must be an uppercase ASCII letter")
    return key


def _parse_table(raw: object, where: str) -> AttributeTable:
    if not isinstance(raw, dict):
        raise ValueError(f"{where} must be a mapping")
    return {
        _check_facet_key(k, where, allow_own_label=True): str(v).strip()
        for k, v in raw.items()
    }


def _resolve_table(raw: object, shared: dict[str, AttributeTable], where: str) -> AttributeTable:
    if raw is None:
        return {}
    if isinstance(raw, str):
        if raw not in shared:
            raise ValueError(f"{where}: unknown attribute table {raw!r}. Available: {sorted(shared)}")
        return dict(shared[raw])
    return _parse_table(raw, where)


def _parse_group(raw: object, shared: dict[str, AttributeTable], where: str) -> Group:
    if not isinstance(raw, dict):
        raise ValueError(f"{where} must be a mapping")
    name = str(raw.get("name") or "").strip()
    if not name:
        raise ValueError(f"{where}: missing group name")
    tables = {field: _resolve_table(raw.get(field), shared, f"{where}.{field}") for field in _ATTRIBUTE_FIELDS}
    return Group(name=name, **tables)


def parse_taxonomy_config(data: dict[str, Any]) -> Taxonomy:
    """
    Parse pre-loaded YAML dict into a Taxonomy object.

    This is a pure function - it does NOT perform file I/O.
    The YAML loading happens in infrastructure.config.loader.

    Expected layout:
        version: "<dataset version>"
        tables:        # shared attribute tables, referenced by name
          <name>: {"_": <own label>, <char>: <label>, ...}
        categories:
          <char>:
            name: <category name>
            groups:
              <char>: {name: <group name>, attribute1: <table name | mapping>, ...}

    Args:
        data: Dictionary from yaml.safe_load()

    Returns:
        Taxonomy object

    Raises:
        ValueError: If required keys are missing or have wrong types
    """
    tables_raw = data.get("tables", {}) or {}
    categories_raw = data.get("categories", {}) or {}

    if not isinstance(tables_raw, dict):
        raise ValueError("tables must be a mapping")
    if not isinstance(categories_raw, dict):
        raise ValueError("categories must be a mapping")
    if not categories_raw:
        raise ValueError("categories must not be empty")

    shared = {str(name): _parse_table(table, f"tables.{name}") for name, table in tables_raw.items()}

    categories: dict[str, Category] = {}
    for cat_key, cat_raw in categories_raw.items():
        where = f"categories.{cat_key}"
        cat_char = _check_facet_key(cat_key, where)
        if not isinstance(cat_raw, dict):
            raise ValueError(f"{where} must be a mapping")
        cat_name = str(cat_raw.get("name") or "").strip()
        if not cat_name:
            raise ValueError(f"{where}: missing category name")

        groups_raw = cat_raw.get("groups", {}) or {}
        if not isinstance(groups_raw, dict):
            raise ValueError(f"{where}.groups must be a mapping")

        groups = {
            _check_facet_key(grp_key, f"{where}.groups"): _parse_group(grp_raw, shared, f"{where}.groups.{grp_key}")
            for grp_key, grp_raw in groups_raw.items()
        }
        categories[cat_char] = Category(name=cat_name, groups=groups)

    return Taxonomy(version=str(data.get("version", "")).strip(), categories=categories)
