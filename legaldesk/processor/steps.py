from legaldesk.analysis.base import BaseAnalyzer
from legaldesk.analysis.serialization import serialize_analysis
from legaldesk.database.models import CONTRACT_ANALYSIS_TYPE, NewDocument
from legaldesk.database.repositories.documents_repository import DocumentsRepository
from legaldesk.extraction.extractor import TextExtractor
from legaldesk.logging.logger import Log
from legaldesk.processor.pipeline import PipelineContext, PipelineStep


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: TextExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted_text = self._extractor.extract(
            context.file,
            on_progress=context.on_progress,
        )
        return context


class AnalyzeStep(PipelineStep):
    def __init__(self, analyzer: BaseAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.analysis = self._analyzer.analyze(context.extracted_text, context.jurisdiction)
        Log.info(f"Analyzed {context.file.name} under {context.jurisdiction}")
        return context


class PersistDocumentStep(PipelineStep):
    def __init__(self, doc_repo: DocumentsRepository) -> None:
        self._doc_repo = doc_repo

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.analysis is None:
            raise ValueError("PipelineContext.analysis must be set before persist")
        context.document = self._doc_repo.insert(
            NewDocument(
                user_id=context.user_id,
                name=f"Analysis of {context.file.name}",
                type=CONTRACT_ANALYSIS_TYPE,
                state=context.jurisdiction,
                status="reviewed",
                source="uploaded",
                content=serialize_analysis(context.analysis),
            )
        )
        Log.info(f"Saved document {context.document.id} for {context.file.name}")
        return context
