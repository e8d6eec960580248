"""
Top-level app state: which view is active, the history overlay, and the
shared state the views hand to each other.

Nothing here survives a reload; a new router always starts at home.
"""

from typing import Any, Callable, Optional

from loguru import logger as log

from promptlab.app.views import Screen, View
from promptlab.services.identity import IdentityProvider
from promptlab.services.notices import NoticeBoard
from promptlab.services.remix import EditorState, RemixBridge
from promptlab.services.templates.client import TemplateStoreClient
from promptlab.services.templates.gallery import GalleryController
from promptlab.services.templates.models import CATEGORY_LABELS
from promptlab.utils.logging_config import setup_logging

setup_logging()


class ViewRouter:
    def __init__(
        self,
        identity: IdentityProvider,
        store: Optional[TemplateStoreClient] = None,
        notices: Optional[NoticeBoard] = None,
        gallery_factory: Optional[Callable[[], GalleryController]] = None,
    ):
        self.identity = identity
        self.store = store if store is not None else TemplateStoreClient()
        self.notices = notices if notices is not None else NoticeBoard()

        self.editor = EditorState()
        self.remix_bridge = RemixBridge(
            editor=self.editor, navigate=self.navigate, notices=self.notices
        )
        self._gallery_factory = gallery_factory or self._build_gallery

        self.current_view: View = View.HOME
        self.is_history_open = False
        self.gallery: Optional[GalleryController] = None

    def _build_gallery(self) -> GalleryController:
        return GalleryController(
            store=self.store,
            identity=self.identity,
            notices=self.notices,
            on_remix=self.remix_bridge.remix,
        )

    @staticmethod
    def _coerce_view(view: Any) -> View:
        try:
            return View(view)
        except ValueError:
            log.warning(f"Unknown view '{view}', showing home")
            return View.HOME

    def screen(self) -> Screen:
        if not self.identity.is_loaded:
            return Screen.LOADING
        if not self.identity.is_signed_in:
            return Screen.LOGIN
        return Screen(self.current_view.value)

    def navigate(self, view: Any) -> View:
        """Switch the active view. Entering the gallery starts a fresh one."""
        if self.screen() in (Screen.LOADING, Screen.LOGIN):
            log.warning(f"Ignoring navigation to '{view}' before sign-in")
            return self.current_view

        target = self._coerce_view(view)
        previous = self.current_view
        self.current_view = target

        if previous == View.TEMPLATES and target != View.TEMPLATES:
            self.gallery = None
        if target == View.TEMPLATES and (
            previous != View.TEMPLATES or self.gallery is None
        ):
            self.gallery = self._gallery_factory()
            self.gallery.load()

        log.debug(f"View: {previous.value} -> {target.value}")
        return target

    def open_history(self) -> None:
        self.is_history_open = True

    def close_history(self) -> None:
        self.is_history_open = False

    def render(self) -> dict[str, Any]:
        """Plain data describing what the shell should draw right now."""
        screen = self.screen()
        frame: dict[str, Any] = {"screen": screen.value}
        if screen in (Screen.LOADING, Screen.LOGIN):
            return frame

        frame["active_tab"] = self.current_view.value
        frame["is_history_open"] = self.is_history_open

        if screen == Screen.IMAGE:
            frame["editor"] = self.editor.model_dump()
        elif screen == Screen.TEMPLATES and self.gallery is not None:
            gallery = self.gallery
            frame["gallery"] = {
                "loading": gallery.loading,
                "categories": [
                    {"id": cat_id, "label": label} for cat_id, label in CATEGORY_LABELS
                ],
                "active_category": gallery.active_category,
                "search": gallery.search,
                "templates": [
                    t.model_dump(by_alias=True) for t in gallery.visible_templates()
                ],
                "is_modal_open": gallery.is_modal_open,
                "creating": gallery.creating,
            }

        notice = self.notices.current()
        if notice is not None:
            frame["notice"] = notice.message
        return frame
