from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from common import global_config

ALL_CATEGORIES = "all"
OTHER_CATEGORY = "other"


class Category(str, Enum):
    IMAGE = "image"
    CODE = "code"
    WRITING = "writing"
    BUSINESS = "business"


# Tab bar order, "all" first
CATEGORY_LABELS = [
    (ALL_CATEGORIES, "All Templates"),
    (Category.IMAGE.value, "Visuals"),
    (Category.CODE.value, "Engineering"),
    (Category.WRITING.value, "Content"),
    (Category.BUSINESS.value, "Business"),
]

KNOWN_CATEGORIES = frozenset(c.value for c in Category)


class _WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Template(_WireModel):
    # The store hands out Mongo-style "_id"
    id: Optional[Union[str, int]] = Field(
        default=None, validation_alias=AliasChoices("_id", "id")
    )
    title: str
    category: str = OTHER_CATEGORY
    prompt_content: str = ""
    tags: List[str] = Field(default_factory=list)
    # Name of the generation backend, e.g. "sdxl"
    generation_model: Optional[str] = Field(default=None, alias="modelConfig")
    preview_image: Optional[str] = None

    @field_validator("tags", mode="before")
    @classmethod
    def none_tags_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def is_visual(self) -> bool:
        return self.category == Category.IMAGE.value

    def target_model(self) -> str:
        return self.generation_model or global_config.editor.default_model

    def matches_category(self, category: str) -> bool:
        return category == ALL_CATEGORIES or self.category == category

    def matches_search(self, search: str) -> bool:
        if not search:
            return True
        needle = search.lower()
        if needle in self.title.lower():
            return True
        return any(needle in tag.lower() for tag in self.tags)


class TemplateDraft(_WireModel):
    """Body of a create request: exactly title, category, promptContent and tags."""

    title: str
    category: str
    prompt_content: str
    tags: List[str]

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


def split_tags(raw: str) -> List[str]:
    """Split a comma separated tag string, trimming each tag and dropping blanks."""
    tags = [tag.strip() for tag in raw.split(",")]
    return [tag for tag in tags if tag]


class TemplateForm(BaseModel):
    """What the user has typed into the create modal."""

    title: str = ""
    category: str = Category.IMAGE.value
    prompt_content: str = ""
    tags: str = ""

    def is_complete(self) -> bool:
        return bool(self.title) and bool(self.prompt_content)

    def to_draft(self) -> TemplateDraft:
        return TemplateDraft(
            title=self.title,
            category=self.category,
            prompt_content=self.prompt_content,
            tags=split_tags(self.tags),
        )


class FetchResult(BaseModel):
    ok: bool
    templates: List[Template] = Field(default_factory=list)
    error: Optional[str] = None


class CreateResult(BaseModel):
    ok: bool
    template: Optional[Template] = None
    error: Optional[str] = None


class CreateOutcome(str, Enum):
    CREATED = "created"
    INVALID = "invalid"
    FAILED = "failed"
