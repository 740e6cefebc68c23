from dataclasses import dataclass, field

FULL_NAME_FLM = "FULL_NAME_FLM"

Answer = str | bool | int | float | None


@dataclass(frozen=True)
class DirectField:
    """Writes the answer as-is into one named text field."""

    field: str


@dataclass(frozen=True)
class FullNameSplit:
    """Splits a full-name answer into first/middle/last fields.

    An empty middle_field or last_field means that part is not written.
    """

    first_field: str
    middle_field: str = ""
    last_field: str = ""


FieldMapping = DirectField | FullNameSplit


@dataclass(frozen=True)
class NameParts:
    first: str
    middle: str
    last: str


@dataclass(frozen=True)
class FormDefinition:
    """A catalog entry for one fillable government form."""

    id: str
    name: str
    title: str
    description: str
    category: str
    pdf_url: str = ""
    field_map: dict[str, FieldMapping] = field(default_factory=dict)

    @property
    def is_fillable(self) -> bool:
        return bool(self.pdf_url and self.field_map)


@dataclass(frozen=True)
class FormCheckResult:
    """Questionnaire answers together with the completeness warnings found for them."""

    filled_data: dict[str, Answer]
    errors_and_warnings: list[str] = field(default_factory=list)
