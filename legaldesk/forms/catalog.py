"""Read-only catalog of fillable forms bundled with the package."""

import json
from pathlib import Path
from typing import Any

from legaldesk.forms.exceptions import ConfigurationMissingError
from legaldesk.forms.models import FULL_NAME_FLM, DirectField, FieldMapping, FormDefinition, FullNameSplit

_DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "uscis_forms.json"


class FormCatalog:
    """Lookup of form definitions by id, in catalog order."""

    def __init__(self, forms: list[FormDefinition]) -> None:
        self._forms = {form.id: form for form in forms}

    @classmethod
    def load(cls, path: Path | None = None) -> "FormCatalog":
        """Load the catalog from JSON (defaults to the bundled USCIS catalog).

        Raises:
            ConfigurationMissingError: if the file is unreadable or a mapping is malformed.
        """
        path = path or _DEFAULT_CATALOG_PATH
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationMissingError(f"Failed to load form catalog: {exc}") from exc
        return cls([_build_form(item) for item in raw.get("forms", [])])

    def get(self, form_id: str) -> FormDefinition:
        form = self._forms.get(form_id.strip().lower())
        if form is None:
            raise ConfigurationMissingError(f"Form {form_id} is not in the catalog.")
        return form

    def all(self) -> list[FormDefinition]:
        return list(self._forms.values())

    def categories(self) -> dict[str, list[FormDefinition]]:
        grouped: dict[str, list[FormDefinition]] = {}
        for form in self._forms.values():
            grouped.setdefault(form.category, []).append(form)
        return grouped


def _build_form(raw: dict[str, Any]) -> FormDefinition:
    form_id = raw["id"]
    field_map = {
        key: _build_mapping(value, form_id, key)
        for key, value in (raw.get("fieldMap") or {}).items()
    }
    return FormDefinition(
        id=form_id,
        name=raw["name"],
        title=raw["title"],
        description=raw.get("description", ""),
        category=raw.get("category", ""),
        pdf_url=raw.get("pdfUrl", ""),
        field_map=field_map,
    )


def _build_mapping(raw: Any, form_id: str, key: str) -> FieldMapping:
    if isinstance(raw, str):
        return DirectField(field=raw)
    if isinstance(raw, dict) and raw.get("type") == FULL_NAME_FLM:
        fields = raw.get("fields") or {}
        first = fields.get("first", "")
        if not first:
            raise ConfigurationMissingError(
                f"Form {form_id}: mapping for '{key}' has no first-name field"
            )
        return FullNameSplit(
            first_field=first,
            middle_field=fields.get("middle", ""),
            last_field=fields.get("last", ""),
        )
    mapping_type = raw.get("type") if isinstance(raw, dict) else type(raw).__name__
    raise ConfigurationMissingError(
        f"Form {form_id}: unsupported mapping type {mapping_type!r} for '{key}'"
    )
