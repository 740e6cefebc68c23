import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import psycopg
import pytest
from psycopg_pool import PoolTimeout

from legaldesk.analysis.models import ContractAnalysis
from legaldesk.database.models import DocumentRecord
from legaldesk.errors import RemoteServiceError, ValidationError
from legaldesk.forms.exceptions import FetchFailedError
from legaldesk.main import build_parser, main
from legaldesk.processor.models import BatchProgress, SingleAnalysis
from legaldesk.services.models import Conflict, DraftRequest


@pytest.fixture(autouse=True)
def _quiet_log():
    with patch("legaldesk.main.Log"):
        yield


class TestParser:
    def test_review_requires_jurisdiction(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["review", "a.pdf", "--user-id", "u"])

    def test_conflicts_opposing_defaults_to_empty(self) -> None:
        args = build_parser().parse_args(["conflicts", "--client", "Acme", "--summary", "Merger"])
        assert args.opposing == ""


class TestConflictsCommand:
    @patch("legaldesk.main.FunctionsClient")
    def test_prints_conflicts(self, mock_client_cls: MagicMock, capsys) -> None:
        client = mock_client_cls.from_settings.return_value
        client.smart_conflict_check.return_value = [
            Conflict(
                conflict_type="Direct Adversity",
                parties_involved=("Acme", "Bolt"),
                reason="Bolt is a current client",
            )
        ]

        code = main(["conflicts", "--client", "Acme", "--summary", "Merger review", "--opposing", "Bolt"])

        assert code == 0
        client.smart_conflict_check.assert_called_once_with("Acme", "Bolt", "Merger review")
        assert "- Direct Adversity: Acme, Bolt (Bolt is a current client)" in capsys.readouterr().out

    @patch("legaldesk.main.FunctionsClient")
    def test_no_conflicts(self, mock_client_cls: MagicMock, capsys) -> None:
        mock_client_cls.from_settings.return_value.smart_conflict_check.return_value = []
        assert main(["conflicts", "--client", "Acme", "--summary", "Merger review"]) == 0
        assert "No potential conflicts found." in capsys.readouterr().out

    @patch("legaldesk.main.FunctionsClient")
    def test_validation_error_is_reported(self, mock_client_cls: MagicMock, capsys) -> None:
        mock_client_cls.from_settings.return_value.smart_conflict_check.side_effect = ValidationError(
            "Matter summary must be at least 5 characters."
        )

        code = main(["conflicts", "--client", "Acme", "--summary", "hi"])

        assert code == 1
        assert (
            capsys.readouterr().err.strip()
            == "Invalid input: Matter summary must be at least 5 characters."
        )

    @patch("legaldesk.main.FunctionsClient")
    def test_remote_error_is_reported(self, mock_client_cls: MagicMock, capsys) -> None:
        mock_client_cls.from_settings.return_value.smart_conflict_check.side_effect = (
            RemoteServiceError("quota exceeded", status_code=429)
        )
        assert main(["conflicts", "--client", "Acme", "--summary", "Merger review"]) == 1
        assert "Service error: quota exceeded" in capsys.readouterr().err


class TestReviewCommand:
    @patch("legaldesk.main.close_pool")
    @patch("legaldesk.main.init_pool")
    @patch("legaldesk.main.build_driver")
    def test_single_file_prints_analysis(
        self,
        mock_build_driver: MagicMock,
        mock_init_pool: MagicMock,
        mock_close_pool: MagicMock,
        tmp_path: Path,
        capsys,
    ) -> None:
        path = tmp_path / "nda.txt"
        path.write_text("Mutual NDA", encoding="utf-8")
        mock_build_driver.return_value.analyze_single.return_value = SingleAnalysis(
            analysis=ContractAnalysis(summary="Mutual NDA"),
            document=DocumentRecord(id="doc-1", user_id="u-1", name="Analysis of nda.txt", type="Contract Analysis"),
        )

        code = main(["review", str(path), "--jurisdiction", "Delaware", "--user-id", "u-1"])

        assert code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["documentId"] == "doc-1"
        assert output["summary"] == "Mutual NDA"
        mock_build_driver.assert_called_once()
        mock_close_pool.assert_called_once()

    @patch("legaldesk.main.close_pool")
    @patch("legaldesk.main.init_pool")
    @patch("legaldesk.main.build_driver")
    def test_batch_prints_progress(
        self,
        mock_build_driver: MagicMock,
        _init: MagicMock,
        _close: MagicMock,
        tmp_path: Path,
        capsys,
    ) -> None:
        paths = []
        for name in ("a.txt", "b.txt"):
            path = tmp_path / name
            path.write_text("text", encoding="utf-8")
            paths.append(str(path))
        mock_build_driver.return_value.run.return_value = iter(
            [
                BatchProgress(processed=1, total=2, current_file="a.txt"),
                BatchProgress(processed=2, total=2, current_file="b.txt"),
            ]
        )

        assert main(["review", *paths, "--jurisdiction", "Delaware", "--user-id", "u-1"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "[1/2] analyzed a.txt",
            "[2/2] analyzed b.txt",
        ]

    def test_missing_file_is_reported(self, tmp_path: Path, capsys) -> None:
        code = main(
            ["review", str(tmp_path / "missing.pdf"), "--jurisdiction", "Ohio", "--user-id", "u-1"]
        )
        assert code == 1
        assert "File not found" in capsys.readouterr().err


class TestFillFormCommand:
    @patch("legaldesk.main.FormFiller")
    def test_writes_pdf_and_warns(self, mock_filler_cls: MagicMock, tmp_path: Path, capsys) -> None:
        answers = tmp_path / "answers.json"
        answers.write_text(json.dumps({"beneficiaryFullName": "Ana Perez"}), encoding="utf-8")
        out = tmp_path / "out.pdf"
        mock_filler_cls.return_value.fill.return_value = b"%PDF-filled"

        code = main(["fill-form", "--form-id", "i-130", "--answers", str(answers), "--out", str(out)])

        assert code == 0
        assert out.read_bytes() == b"%PDF-filled"
        mock_filler_cls.return_value.fill.assert_called_once_with(
            "i-130", {"beneficiaryFullName": "Ana Perez"}
        )
        captured = capsys.readouterr()
        assert "warning: Primary applicant/petitioner name is missing." in captured.err

    @patch("legaldesk.main.FormFiller")
    def test_fetch_failure_is_reported(self, mock_filler_cls: MagicMock, tmp_path: Path, capsys) -> None:
        answers = tmp_path / "answers.json"
        answers.write_text("{}", encoding="utf-8")
        mock_filler_cls.return_value.fill.side_effect = FetchFailedError("proxy down")

        code = main(
            ["fill-form", "--form-id", "i-130", "--answers", str(answers), "--out", str(tmp_path / "o.pdf")]
        )

        assert code == 1
        assert "Template unavailable: proxy down" in capsys.readouterr().err

    @patch("legaldesk.main.close_pool")
    @patch("legaldesk.main.init_pool")
    @patch("legaldesk.main.DocumentsRepository")
    @patch("legaldesk.main.FormFiller")
    def test_saves_summary_document_for_user(
        self,
        mock_filler_cls: MagicMock,
        mock_repo_cls: MagicMock,
        _init: MagicMock,
        _close: MagicMock,
        tmp_path: Path,
    ) -> None:
        answers = tmp_path / "answers.json"
        answers.write_text(json.dumps({"petitionerFullName": "John Smith"}), encoding="utf-8")
        mock_filler_cls.return_value.fill.return_value = b"%PDF-filled"
        mock_repo_cls.return_value.insert.return_value = DocumentRecord(
            id="doc-9", user_id="u-1", name="x", type="Automated USCIS Form"
        )

        code = main(
            [
                "fill-form",
                "--form-id", "i-130",
                "--answers", str(answers),
                "--out", str(tmp_path / "o.pdf"),
                "--user-id", "u-1",
            ]
        )

        assert code == 0
        saved = mock_repo_cls.return_value.insert.call_args[0][0]
        assert saved.user_id == "u-1"
        assert saved.name == "Generated I-130 for Beneficiary"

    def test_invalid_answers_file(self, tmp_path: Path, capsys) -> None:
        answers = tmp_path / "answers.json"
        answers.write_text("[1, 2]", encoding="utf-8")
        code = main(
            ["fill-form", "--form-id", "i-130", "--answers", str(answers), "--out", str(tmp_path / "o.pdf")]
        )
        assert code == 1
        assert "Invalid input: Answers file must contain a JSON object" in capsys.readouterr().err


class TestFormsCommand:
    def test_lists_category(self, capsys) -> None:
        assert main(["forms", "--category", "family-based"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Family-Based\n")
        assert "* i-130" in out
        assert "Citizenship" not in out


class TestDatabaseErrors:
    @patch("legaldesk.main.close_pool")
    @patch("legaldesk.main.init_pool")
    @patch("legaldesk.database.repositories.documents_repository.DocumentsRepository.insert")
    @patch("legaldesk.processor.processor.AnalyzerFactory.create")
    def test_review_reports_failed_insert(
        self,
        mock_create_analyzer: MagicMock,
        mock_insert: MagicMock,
        _init: MagicMock,
        mock_close_pool: MagicMock,
        tmp_path: Path,
        capsys,
    ) -> None:
        path = tmp_path / "lease.txt"
        path.write_text("Lease terms", encoding="utf-8")
        mock_create_analyzer.return_value.analyze.return_value = ContractAnalysis(summary="Lease")
        mock_insert.side_effect = psycopg.OperationalError("connection refused")

        code = main(["review", str(path), "--jurisdiction", "CA", "--user-id", "u"])

        assert code == 1
        assert capsys.readouterr().err.strip() == "Database error: connection refused"
        mock_close_pool.assert_called_once()

    @patch("legaldesk.main.close_pool")
    @patch("legaldesk.main.init_pool")
    @patch("legaldesk.main.DocumentsRepository")
    @patch("legaldesk.main.FormFiller")
    def test_fill_form_reports_unreachable_database(
        self,
        mock_filler_cls: MagicMock,
        mock_repo_cls: MagicMock,
        _init: MagicMock,
        _close: MagicMock,
        tmp_path: Path,
        capsys,
    ) -> None:
        answers = tmp_path / "answers.json"
        answers.write_text(json.dumps({"petitionerFullName": "John Smith"}), encoding="utf-8")
        mock_filler_cls.return_value.fill.return_value = b"%PDF-filled"
        mock_repo_cls.return_value.insert.side_effect = PoolTimeout("couldn't get a connection")

        code = main(
            [
                "fill-form",
                "--form-id", "i-130",
                "--answers", str(answers),
                "--out", str(tmp_path / "o.pdf"),
                "--user-id", "not-a-uuid",
            ]
        )

        assert code == 1
        assert "Database unavailable: couldn't get a connection" in capsys.readouterr().err


class TestDraftCommand:
    @patch("legaldesk.main.FunctionsClient")
    def test_streams_draft_to_stdout(self, mock_client_cls: MagicMock, capsys) -> None:
        client = mock_client_cls.from_settings.return_value

        def generate(request: DraftRequest, on_chunk=None) -> str:
            for chunk in ("# Mutual NDA\n", "1. Definitions"):
                on_chunk(chunk)
            return "# Mutual NDA\n1. Definitions"

        client.generate_document.side_effect = generate

        code = main(
            [
                "draft",
                "--type", "Non-Disclosure Agreement",
                "--state", "USA-CA",
                "--effective-date", "2025-02-01",
                "--party-a", "Acme Corp",
                "--clause", "arbitration",
            ]
        )

        assert code == 0
        request = client.generate_document.call_args[0][0]
        assert request.party_a_name == "Acme Corp"
        assert request.optional_clauses == ("arbitration",)
        assert request.effective_date == "2025-02-01"
        assert capsys.readouterr().out == "# Mutual NDA\n1. Definitions\n"

    @patch("legaldesk.main.close_pool")
    @patch("legaldesk.main.init_pool")
    @patch("legaldesk.main.DocumentsRepository")
    @patch("legaldesk.main.FunctionsClient")
    def test_writes_file_and_saves_document(
        self,
        mock_client_cls: MagicMock,
        mock_repo_cls: MagicMock,
        _init: MagicMock,
        _close: MagicMock,
        tmp_path: Path,
        capsys,
    ) -> None:
        mock_client_cls.from_settings.return_value.generate_document.return_value = "# Lease"
        mock_repo_cls.return_value.insert.return_value = DocumentRecord(
            id="doc-3", user_id="u-1", name="x", type="Residential Lease"
        )
        out = tmp_path / "lease.md"

        code = main(
            [
                "draft",
                "--type", "Residential Lease",
                "--state", "USA-TX",
                "--party-b", "Jane Roe",
                "--out", str(out),
                "--user-id", "u-1",
            ]
        )

        assert code == 0
        assert out.read_text(encoding="utf-8") == "# Lease"
        saved = mock_repo_cls.return_value.insert.call_args[0][0]
        assert saved.name == "Party A & Jane Roe Residential Lease"
        assert saved.status == "drafted"
        assert saved.source == "generated"
        assert saved.content == "# Lease"
        assert "Saved Party A & Jane Roe Residential Lease as document doc-3" in capsys.readouterr().out

    def test_unknown_clause_is_rejected(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(
                ["draft", "--type", "NDA", "--state", "USA-CA", "--clause", "non-compete"]
            )
