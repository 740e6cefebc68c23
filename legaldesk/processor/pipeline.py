from abc import ABC, abstractmethod
from dataclasses import dataclass

from legaldesk.analysis.models import ContractAnalysis
from legaldesk.database.models import DocumentRecord
from legaldesk.extraction.models import ProgressCallback, UploadedFile


@dataclass(slots=True)
class PipelineContext:
    file: UploadedFile
    jurisdiction: str
    user_id: str
    on_progress: ProgressCallback | None = None
    extracted_text: str = ""
    analysis: ContractAnalysis | None = None
    document: DocumentRecord | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
