"""
Remix handoff between the template gallery and the editors.

The gallery does not know about editors; it calls ``RemixBridge.remix`` and
the bridge decides which editor, if any, receives the template.
"""

from typing import Callable

from loguru import logger as log
from pydantic import BaseModel, Field

from common import global_config
from promptlab.app.views import View
from promptlab.services.notices import NoticeBoard
from promptlab.services.templates.models import Template

UNSUPPORTED_REMIX_NOTICE = "Text/Code Enhancer coming soon! (Check 'Chat' tab)"


class EditorState(BaseModel):
    """Working state of the image-prompt editor, owned by the app."""

    prompt: str = ""
    model: str = Field(default_factory=lambda: global_config.editor.default_model)

    def set_prompt(self, prompt: str) -> None:
        self.prompt = prompt

    def set_model(self, model: str) -> None:
        self.model = model


class RemixBridge:
    def __init__(
        self,
        editor: EditorState,
        navigate: Callable[[View], None],
        notices: NoticeBoard,
    ):
        self.editor = editor
        self.navigate = navigate
        self.notices = notices

    def remix(self, template: Template) -> bool:
        """Hand a template to its editor. Returns False if no editor supports it."""
        if template.is_visual:
            self.editor.set_prompt(template.prompt_content)
            self.editor.set_model(template.target_model())
            log.debug(f"Remixing '{template.title}' into the image editor")
            self.navigate(View.IMAGE)
            return True

        log.debug(f"No editor for category '{template.category}' yet")
        self.notices.notify(UNSUPPORTED_REMIX_NOTICE, source="remix")
        return False
