from legaldesk.forms.catalog import FormCatalog
from legaldesk.forms.fetcher import TemplateFetcher
from legaldesk.forms.filler import FormFiller
from legaldesk.forms.mapping import split_name
from legaldesk.forms.questionnaire import check_questionnaire

__all__ = ["FormCatalog", "FormFiller", "TemplateFetcher", "check_questionnaire", "split_name"]
