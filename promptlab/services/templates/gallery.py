"""
Gallery controller: template list, filters and the create modal.

One controller lives for one activation of the templates view. It fetches once
on ``load``; category and search changes only re-derive the visible subset.
"""

from typing import Callable, List, Optional, Union

from loguru import logger as log

from promptlab.services.identity import IdentityProvider
from promptlab.services.notices import NoticeBoard
from promptlab.services.templates.client import TemplateStoreClient
from promptlab.services.templates.fallback import fallback_templates
from promptlab.services.templates.models import (
    ALL_CATEGORIES,
    KNOWN_CATEGORIES,
    CreateOutcome,
    Template,
    TemplateForm,
)

CREATE_FAILED_NOTICE = "Failed to create template"


class GalleryController:
    def __init__(
        self,
        store: TemplateStoreClient,
        identity: IdentityProvider,
        notices: NoticeBoard,
        on_remix: Optional[Callable[[Template], bool]] = None,
    ):
        self.store = store
        self.identity = identity
        self.notices = notices
        self.on_remix = on_remix

        self.templates: List[Template] = []
        self.active_category: str = ALL_CATEGORIES
        self.search: str = ""

        self.loading = True
        self.is_modal_open = False
        self.creating = False
        self.form = TemplateForm()

    def load(self) -> None:
        """Fetch the list, falling back to demo content on any failure."""
        self.loading = True
        try:
            result = self.store.fetch_templates()
            if result.ok:
                self.templates = result.templates
            else:
                log.warning(
                    f"Failed to load templates ({result.error}); showing demo templates"
                )
                self.templates = fallback_templates()
        finally:
            self.loading = False

    def set_category(self, category: str) -> None:
        if category != ALL_CATEGORIES and category not in KNOWN_CATEGORIES:
            raise ValueError(f"Unknown template category: {category}")
        self.active_category = category

    def set_search(self, text: str) -> None:
        self.search = text

    def visible_templates(self) -> List[Template]:
        return [
            t
            for t in self.templates
            if t.matches_category(self.active_category)
            and t.matches_search(self.search)
        ]

    def is_empty(self) -> bool:
        return not self.visible_templates()

    def get_template(self, template_id: Union[str, int]) -> Optional[Template]:
        for template in self.templates:
            if template.id == template_id:
                return template
        return None

    def remix(self, template: Template) -> bool:
        if self.on_remix is None:
            log.warning("Remix requested but no handler is attached")
            return False
        return self.on_remix(template)

    # Create modal

    def open_create_modal(self) -> None:
        self.is_modal_open = True

    def close_create_modal(self) -> None:
        self.is_modal_open = False
        # The modal starts blank every time it is opened
        self.form = TemplateForm()

    def update_form(self, **fields) -> TemplateForm:
        self.form = self.form.model_copy(update=fields)
        return self.form

    def create(self, form: Optional[TemplateForm] = None) -> CreateOutcome:
        """
        Publish a template from the create form.

        Args:
            form: Form contents to submit; defaults to the form held by the modal

        Returns:
            CreateOutcome: INVALID when title or prompt content is missing (no
            request is made), FAILED when the store rejected it or no token was
            available, CREATED after a successful submit and re-fetch
        """
        if form is not None:
            self.form = form
        form = self.form
        if not form.is_complete():
            log.debug("Create skipped: title and prompt content are required")
            return CreateOutcome.INVALID

        self.creating = True
        try:
            try:
                token = self.identity.get_token()
            except Exception as e:
                log.error(f"Could not get a session token: {str(e)}")
                self.notices.notify(CREATE_FAILED_NOTICE, source="gallery")
                return CreateOutcome.FAILED

            if not token:
                log.error("Cannot create template without a session token")
                self.notices.notify(CREATE_FAILED_NOTICE, source="gallery")
                return CreateOutcome.FAILED

            result = self.store.create_template(form.to_draft(), token)
            if not result.ok:
                self.notices.notify(CREATE_FAILED_NOTICE, source="gallery")
                return CreateOutcome.FAILED
        finally:
            self.creating = False

        self.close_create_modal()
        self.load()
        return CreateOutcome.CREATED
