import json
from pathlib import Path
from typing import List, Optional

from promptlab.services.templates.models import Template

DEFAULT_FALLBACK_FILE = Path(__file__).parent / "data" / "fallback_templates.json"


class FallbackTemplateLoader:
    """Demo templates shown when the template store cannot be reached."""

    def __init__(self, templates_file: Optional[Path] = None):
        if templates_file is None:
            self.templates_file = DEFAULT_FALLBACK_FILE
        else:
            self.templates_file = templates_file

        self.templates: List[Template] = []
        self._load_templates()

    def _load_templates(self):
        if not self.templates_file.exists():
            return

        with open(self.templates_file, "r") as f:
            data = json.load(f)
            # data is {"templates": [...]}
            self.templates = [
                Template.model_validate(t) for t in data.get("templates", [])
            ]

    def list_templates(self) -> List[Template]:
        # Copies, so a gallery can never edit the shared demo set
        return [t.model_copy(deep=True) for t in self.templates]


_default_loader: FallbackTemplateLoader | None = None


def fallback_templates() -> List[Template]:
    """The fixed demo set, loaded once per process."""
    global _default_loader
    if _default_loader is None:
        _default_loader = FallbackTemplateLoader()
    return _default_loader.list_templates()
