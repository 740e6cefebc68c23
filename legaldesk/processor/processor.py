from collections.abc import Iterator, Sequence

from legaldesk.analysis.factory import AnalyzerFactory
from legaldesk.config.settings import Settings
from legaldesk.database.repositories.documents_repository import DocumentsRepository
from legaldesk.errors import ValidationError
from legaldesk.extraction.factory import TextExtractorFactory
from legaldesk.extraction.models import ProgressCallback, UploadedFile
from legaldesk.logging.logger import Log
from legaldesk.processor.models import BatchProgress, SingleAnalysis
from legaldesk.processor.pipeline import PipelineContext, PipelineStep
from legaldesk.processor.steps import AnalyzeStep, ExtractTextStep, PersistDocumentStep


class BatchAnalysisDriver:
    """Runs uploaded contracts through extract -> analyze -> persist.

    Files are processed strictly one at a time, in the order given. A failure
    stops the batch: documents already saved stay saved and later files are
    never attempted. There is no rollback and no retry.
    """

    def __init__(self, steps: Sequence[PipelineStep], user_id: str) -> None:
        self._steps = list(steps)
        self._user_id = user_id

    def analyze_single(
        self,
        file: UploadedFile,
        jurisdiction: str,
        on_progress: ProgressCallback | None = None,
    ) -> SingleAnalysis:
        """Process one file and return its analysis with the saved document."""
        context = PipelineContext(
            file=file,
            jurisdiction=jurisdiction,
            user_id=self._user_id,
            on_progress=on_progress,
        )
        Log.info(f"Processing {file.name}")
        for step in self._steps:
            try:
                context = step.run(context)
            except Exception as exc:
                Log.error(f"Step {type(step).__name__} failed for {file.name}: {exc}")
                raise

        if context.analysis is None or context.document is None:
            raise RuntimeError("pipeline finished without an analysis and a saved document")
        return SingleAnalysis(analysis=context.analysis, document=context.document)

    def run(
        self,
        files: Sequence[UploadedFile],
        jurisdiction: str,
        on_progress: ProgressCallback | None = None,
    ) -> Iterator[BatchProgress]:
        """Process *files* in order, yielding a BatchProgress after each one.

        Raises:
            ValidationError: immediately, when *files* is empty.
        """
        if not files:
            raise ValidationError("Please upload at least one file.")
        return self._iter_batch(list(files), jurisdiction, on_progress)

    def _iter_batch(
        self,
        files: list[UploadedFile],
        jurisdiction: str,
        on_progress: ProgressCallback | None,
    ) -> Iterator[BatchProgress]:
        total = len(files)
        Log.info(f"Starting batch of {total} files under {jurisdiction}")
        for index, file in enumerate(files, start=1):
            self.analyze_single(file, jurisdiction, on_progress=on_progress)
            yield BatchProgress(processed=index, total=total, current_file=file.name)
        Log.info(f"Batch complete: {total} files analyzed")


def build_driver(settings: Settings, user_id: str) -> BatchAnalysisDriver:
    """Build a BatchAnalysisDriver with all required adapters."""
    steps: list[PipelineStep] = [
        ExtractTextStep(TextExtractorFactory.create(settings)),
        AnalyzeStep(AnalyzerFactory.create(settings)),
        PersistDocumentStep(DocumentsRepository()),
    ]
    return BatchAnalysisDriver(steps=steps, user_id=user_id)
