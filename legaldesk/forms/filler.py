"""Fills AcroForm PDF templates from questionnaire answers.

Unlike text extraction, filling is best effort: each mapping entry is applied
on its own and an entry that cannot be written is logged and skipped.
"""

import io
from collections.abc import Mapping

from pypdf import PdfReader, PdfWriter

from legaldesk.forms.catalog import FormCatalog
from legaldesk.forms.exceptions import ConfigurationMissingError, FetchFailedError, FieldWriteError
from legaldesk.forms.fetcher import TemplateFetcher
from legaldesk.forms.mapping import split_name
from legaldesk.forms.models import Answer, DirectField, FieldMapping, FullNameSplit
from legaldesk.logging.logger import Log

_TEXT_FIELD = "/Tx"


class FormFiller:
    def __init__(self, catalog: FormCatalog, fetcher: TemplateFetcher) -> None:
        self._catalog = catalog
        self._fetcher = fetcher

    def fill(self, form_id: str, answers: Mapping[str, Answer]) -> bytes:
        """Fill the form's PDF template with *answers* and return the PDF bytes.

        Raises:
            ConfigurationMissingError: unknown form, or no template URL / field map.
            FetchFailedError: the template could not be downloaded or opened.
        """
        form = self._catalog.get(form_id)
        if not form.is_fillable:
            raise ConfigurationMissingError(
                f"PDF template for form {form.name} not found or is not configured for filling."
            )

        writer = self._open_template(self._fetcher.fetch(form.pdf_url), form.pdf_url)
        field_types = {
            name: field.get("/FT") for name, field in (writer.get_fields() or {}).items()
        }

        values: dict[str, str] = {}
        for key, mapping in form.field_map.items():
            answer = answers.get(key)
            if answer is None or answer == "":
                continue
            try:
                values.update(_entry_values(mapping, answer, field_types))
            except FieldWriteError as exc:
                Log.warning(f"Could not fill field for data key '{key}' on {form.name}: {exc}")

        for page in writer.pages:
            if "/Annots" in page:
                writer.update_page_form_field_values(page, values, auto_regenerate=True)
        Log.info(f"Filled {len(values)} fields on {form.name}")

        out = io.BytesIO()
        writer.write(out)
        return out.getvalue()

    @staticmethod
    def _open_template(pdf_bytes: bytes, pdf_url: str) -> PdfWriter:
        try:
            reader = PdfReader(io.BytesIO(pdf_bytes))
            if reader.is_encrypted:
                reader.decrypt("")
            return PdfWriter(clone_from=reader)
        except Exception as exc:
            raise FetchFailedError(f"Template at {pdf_url} could not be opened: {exc}") from exc


def _entry_values(
    mapping: FieldMapping,
    answer: Answer,
    field_types: Mapping[str, object],
) -> dict[str, str]:
    if isinstance(mapping, DirectField):
        _require_text_field(mapping.field, field_types)
        return {mapping.field: _as_text(answer)}

    if isinstance(mapping, FullNameSplit):
        parts = split_name(_as_text(answer))
        writes = {
            mapping.first_field: parts.first,
            mapping.middle_field: parts.middle,
            mapping.last_field: parts.last,
        }
        values: dict[str, str] = {}
        for field_name, value in writes.items():
            if not field_name:
                continue
            _require_text_field(field_name, field_types)
            values[field_name] = value
        return values

    raise FieldWriteError(f"unsupported mapping {mapping!r}")


def _require_text_field(name: str, field_types: Mapping[str, object]) -> None:
    if name not in field_types:
        raise FieldWriteError(f"no field named '{name}'")
    if field_types[name] != _TEXT_FIELD:
        raise FieldWriteError(f"field '{name}' is not a text field ({field_types[name]})")


def _as_text(answer: Answer) -> str:
    if isinstance(answer, bool):
        return "Yes" if answer else "No"
    return str(answer)
