"""Command-line entry point: ``legaldesk <command> ...``."""

import argparse
import json
import sys
from collections.abc import Sequence
from dataclasses import asdict
from datetime import date
from pathlib import Path

import psycopg
from psycopg_pool import PoolTimeout

from legaldesk.analysis.serialization import analysis_to_dict
from legaldesk.config.settings import Settings
from legaldesk.database.connection import close_pool, init_pool
from legaldesk.database.repositories.documents_repository import DocumentsRepository
from legaldesk.errors import RemoteServiceError, ValidationError
from legaldesk.extraction.exceptions import ExtractionError
from legaldesk.forms.catalog import FormCatalog
from legaldesk.forms.exceptions import FormError
from legaldesk.forms.fetcher import TemplateFetcher
from legaldesk.forms.filler import FormFiller
from legaldesk.forms.questionnaire import check_questionnaire, summary_document
from legaldesk.logging.logger import Log
from legaldesk.processor.exceptions import ProcessorError
from legaldesk.processor.file_loader import FileLoader
from legaldesk.processor.processor import build_driver
from legaldesk.services.drafting import drafted_document
from legaldesk.services.functions_client import FunctionsClient
from legaldesk.services.models import DEFAULT_OPTIONAL_CLAUSES, DraftRequest

# Most specific first; the first match titles the alert.
_ALERT_TITLES: tuple[tuple[type[Exception], str], ...] = (
    (ValidationError, "Invalid input"),
    (ExtractionError, "Could not read file"),
    (FormError, "Template unavailable"),
    (RemoteServiceError, "Service error"),
    (ProcessorError, "Not found"),
    (PoolTimeout, "Database unavailable"),
    (psycopg.Error, "Database error"),
    (ValueError, "Configuration error"),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="legaldesk", description="Legal practice AI tools")
    sub = parser.add_subparsers(dest="command", required=True)

    review = sub.add_parser("review", help="Analyze one or more contracts and save the results")
    review.add_argument("files", nargs="+", type=Path)
    review.add_argument("--jurisdiction", required=True)
    review.add_argument("--user-id", required=True, help="Owner of the saved documents")

    conflicts = sub.add_parser("conflicts", help="Run a conflict-of-interest check")
    conflicts.add_argument("--client", required=True)
    conflicts.add_argument("--summary", required=True)
    conflicts.add_argument("--opposing", default="", help='Comma-separated, e.g. "Acme, Bolt"')

    draft = sub.add_parser("draft", help="Draft a state-specific legal document")
    draft.add_argument("--type", required=True, dest="document_type", help='e.g. "Non-Disclosure Agreement"')
    draft.add_argument("--state", required=True, help='e.g. "USA-CA"')
    draft.add_argument("--effective-date", default=date.today().isoformat())
    draft.add_argument("--party-a", default="")
    draft.add_argument("--party-a-address", default="")
    draft.add_argument("--party-b", default="")
    draft.add_argument("--party-b-address", default="")
    draft.add_argument(
        "--clause", action="append", default=[], choices=DEFAULT_OPTIONAL_CLAUSES, dest="clauses"
    )
    draft.add_argument("--details", default="")
    draft.add_argument("--out", type=Path, help="Write the draft here instead of stdout")
    draft.add_argument("--user-id", default="", help="Also save the draft for this user")

    research = sub.add_parser("research", help="Research a legal question")
    research.add_argument("query")
    research.add_argument("--jurisdiction", required=True)

    fill = sub.add_parser("fill-form", help="Fill a government form PDF from answers JSON")
    fill.add_argument("--form-id", required=True)
    fill.add_argument("--answers", required=True, type=Path)
    fill.add_argument("--out", required=True, type=Path)
    fill.add_argument("--user-id", default="", help="Also save a summary document for this user")

    forms = sub.add_parser("forms", help="List the bundled form catalog")
    forms.add_argument("--category", default="")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    handlers = {
        "review": _review,
        "conflicts": _conflicts,
        "research": _research,
        "draft": _draft,
        "fill-form": _fill_form,
        "forms": _forms,
    }
    try:
        handlers[args.command](args, settings)
    except (
        ValidationError,
        RemoteServiceError,
        ExtractionError,
        FormError,
        ProcessorError,
        psycopg.Error,
        PoolTimeout,
        ValueError,
    ) as exc:
        print(f"{_alert_title(exc)}: {exc}", file=sys.stderr)
        return 1
    return 0


def _alert_title(exc: Exception) -> str:
    for exc_type, title in _ALERT_TITLES:
        if isinstance(exc, exc_type):
            return title
    return "Error"


def _review(args: argparse.Namespace, settings: Settings) -> None:
    loader = FileLoader()
    files = [loader.load(path) for path in args.files]
    init_pool(settings)
    try:
        driver = build_driver(settings, user_id=args.user_id)
        if len(files) == 1:
            result = driver.analyze_single(files[0], args.jurisdiction)
            output = {"documentId": result.document.id, **analysis_to_dict(result.analysis)}
            print(json.dumps(output, indent=2, ensure_ascii=False))
            return
        for progress in driver.run(files, args.jurisdiction):
            print(f"[{progress.processed}/{progress.total}] analyzed {progress.current_file}")
    finally:
        close_pool()


def _conflicts(args: argparse.Namespace, settings: Settings) -> None:
    client = FunctionsClient.from_settings(settings)
    found = client.smart_conflict_check(args.client, args.opposing, args.summary)
    if not found:
        print("No potential conflicts found.")
        return
    for conflict in found:
        parties = ", ".join(conflict.parties_involved)
        print(f"- {conflict.conflict_type}: {parties} ({conflict.reason})")


def _research(args: argparse.Namespace, settings: Settings) -> None:
    result = FunctionsClient.from_settings(settings).legal_research(args.query, args.jurisdiction)
    print(json.dumps(asdict(result), indent=2, ensure_ascii=False))


def _draft(args: argparse.Namespace, settings: Settings) -> None:
    request = DraftRequest(
        document_type=args.document_type,
        state=args.state,
        effective_date=args.effective_date,
        party_a_name=args.party_a,
        party_a_address=args.party_a_address,
        party_b_name=args.party_b,
        party_b_address=args.party_b_address,
        optional_clauses=tuple(args.clauses),
        custom_details=args.details,
    )
    client = FunctionsClient.from_settings(settings)
    if args.out is None:
        text = client.generate_document(request, on_chunk=_echo)
        print()
    else:
        text = client.generate_document(request)
        args.out.write_text(text, encoding="utf-8")
        print(f"Wrote {args.out} ({len(text)} chars)")

    if args.user_id:
        init_pool(settings)
        try:
            doc = DocumentsRepository().insert(drafted_document(request, text, args.user_id))
        finally:
            close_pool()
        print(f"Saved {request.document_name} as document {doc.id}")


def _echo(chunk: str) -> None:
    sys.stdout.write(chunk)
    sys.stdout.flush()


def _fill_form(args: argparse.Namespace, settings: Settings) -> None:
    try:
        answers = json.loads(args.answers.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ValidationError(f"Could not read answers from {args.answers}: {exc}") from exc
    if not isinstance(answers, dict):
        raise ValidationError("Answers file must contain a JSON object")

    check = check_questionnaire(args.form_id, answers)
    for warning in check.errors_and_warnings:
        print(f"warning: {warning}", file=sys.stderr)

    catalog = FormCatalog.load()
    filler = FormFiller(
        catalog,
        TemplateFetcher(settings.forms_proxy_url, settings.forms_timeout_seconds),
    )
    pdf_bytes = filler.fill(args.form_id, check.filled_data)
    args.out.write_bytes(pdf_bytes)
    print(f"Wrote {args.out} ({len(pdf_bytes)} bytes)")

    if args.user_id:
        init_pool(settings)
        try:
            doc = DocumentsRepository().insert(
                summary_document(catalog.get(args.form_id), check, args.user_id)
            )
        finally:
            close_pool()
        print(f"Saved summary document {doc.id}")


def _forms(args: argparse.Namespace, settings: Settings) -> None:
    _ = settings
    for category, forms in FormCatalog.load().categories().items():
        if args.category and category.lower() != args.category.lower():
            continue
        print(category)
        for form in forms:
            marker = "*" if form.is_fillable else " "
            print(f"  {marker} {form.id:<8} {form.name:<8} {form.title}")


if __name__ == "__main__":
    sys.exit(main())
