from .client import TemplateStoreClient
from .fallback import FallbackTemplateLoader, fallback_templates
from .gallery import GalleryController
from .models import (
    ALL_CATEGORIES,
    CATEGORY_LABELS,
    Category,
    CreateOutcome,
    CreateResult,
    FetchResult,
    Template,
    TemplateDraft,
    TemplateForm,
    split_tags,
)

__all__ = [
    "ALL_CATEGORIES",
    "CATEGORY_LABELS",
    "Category",
    "CreateOutcome",
    "CreateResult",
    "FallbackTemplateLoader",
    "FetchResult",
    "GalleryController",
    "Template",
    "TemplateDraft",
    "TemplateForm",
    "TemplateStoreClient",
    "fallback_templates",
    "split_tags",
]
