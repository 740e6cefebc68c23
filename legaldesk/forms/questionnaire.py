import json
from collections.abc import Mapping

from legaldesk.database.models import NewDocument
from legaldesk.forms.models import Answer, FormCheckResult, FormDefinition

PRIMARY_NAME_KEYS = (
    "petitionerFullName",
    "applicantFullName",
    "sponsorFullName",
    "applicantName",
    "residentFullName",
    "n400FullName",
    "workerName",
    "employeeName",
    "clientName",
    "employerName",
)

# Forms whose catalog mapping names a single primary party.
_FORM_PRIMARY_NAME_KEY = {
    "i-130": "petitionerFullName",
    "i-864": "sponsorFullName",
    "i-9": "employeeName",
    "g-28": "clientName",
}

# Order in which a display name for the beneficiary is picked.
_BENEFICIARY_NAME_KEYS = (
    "beneficiaryFullName",
    "immigrantFullName",
    "applicantFullName",
    "applicantName",
    "workerName",
    "beneficiaryName",
    "residentFullName",
    "n400FullName",
)

FORM_DOCUMENT_TYPE = "Automated USCIS Form"


def check_questionnaire(form_id: str, answers: Mapping[str, Answer]) -> FormCheckResult:
    """Run local completeness checks over questionnaire answers.

    Forms with a known primary party must have that party's name filled;
    any other form needs at least one of PRIMARY_NAME_KEYS.
    """
    warnings: list[str] = []
    primary_key = _FORM_PRIMARY_NAME_KEY.get(form_id.strip().lower())
    keys = (primary_key,) if primary_key else PRIMARY_NAME_KEYS
    if not any(answers.get(key) for key in keys):
        warnings.append("Primary applicant/petitioner name is missing.")
    return FormCheckResult(filled_data=dict(answers), errors_and_warnings=warnings)


def summary_document(form: FormDefinition, result: FormCheckResult, user_id: str) -> NewDocument:
    """Build the draft document that records a generated form and its warnings."""
    primary_name = next(
        (str(result.filled_data[key]) for key in _BENEFICIARY_NAME_KEYS if result.filled_data.get(key)),
        "Beneficiary",
    )
    if result.errors_and_warnings:
        findings = "\n".join(f"- {item}" for item in result.errors_and_warnings)
    else:
        findings = "None found."
    content = (
        f"## Summary for {form.name}\n\n"
        f"### Form Data:\n```json\n{json.dumps(result.filled_data, indent=2)}\n```\n\n"
        f"### Errors & Warnings:\n{findings}"
    )
    return NewDocument(
        user_id=user_id,
        name=f"Generated {form.name} for {primary_name}",
        type=FORM_DOCUMENT_TYPE,
        state="USA-Federal",
        status="draft",
        source="generated",
        content=content,
    )
