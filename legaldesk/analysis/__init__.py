from legaldesk.analysis.analyzer import ContractAnalyzer
from legaldesk.analysis.base import BaseAnalyzer
from legaldesk.analysis.factory import AnalyzerFactory
from legaldesk.analysis.models import ContractAnalysis, KeyDate, Risk
from legaldesk.analysis.serialization import parse_analysis_content, serialize_analysis

__all__ = [
    "AnalyzerFactory",
    "BaseAnalyzer",
    "ContractAnalysis",
    "ContractAnalyzer",
    "KeyDate",
    "Risk",
    "parse_analysis_content",
    "serialize_analysis",
]
