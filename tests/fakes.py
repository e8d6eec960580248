"""Stand-ins for the template store and identity provider used across tests."""

import time
from typing import List, Optional

import jwt

from promptlab.services.templates.models import (
    CreateResult,
    FetchResult,
    Template,
    TemplateDraft,
)


def make_token(sub: str = "user_123", email: str = "user@example.com", ttl: int = 3600) -> str:
    now = int(time.time())
    payload = {"sub": sub, "email": email, "iat": now, "exp": now + ttl}
    return jwt.encode(payload, "test-secret", algorithm="HS256")


def sample_templates() -> List[Template]:
    return [
        Template(id="a", title="Neon Alley", category="image", prompt_content="neon alley at night", tags=["SciFi", "neon"], generation_model="sdxl"),
        Template(id="b", title="Unit Test Writer", category="code", prompt_content="write pytest tests", tags=["python", "testing"]),
        Template(id="c", title="Cold Email", category="business", prompt_content="draft a cold email", tags=["sales"]),
        Template(id="d", title="Haiku Helper", category="writing", prompt_content="write a haiku", tags=["poetry", "Neon"]),
        Template(id="e", title="Watercolor Fox", category="image", prompt_content="a fox in watercolor", tags=[]),
        Template(id="f", title="Mystery Box", category="audio", prompt_content="a drum loop", tags=["beats"]),
    ]


class FakeStore:
    """Records calls instead of talking HTTP."""

    def __init__(self, templates: Optional[List[Template]] = None, fail_fetch=False, fail_create=False):
        self.templates = list(templates or [])
        self.fail_fetch = fail_fetch
        self.fail_create = fail_create
        self.fetch_calls = 0
        self.created: List[tuple[TemplateDraft, str]] = []

    def fetch_templates(self) -> FetchResult:
        self.fetch_calls += 1
        if self.fail_fetch:
            return FetchResult(ok=False, error="connection refused")
        return FetchResult(ok=True, templates=list(self.templates))

    def create_template(self, draft: TemplateDraft, token: str) -> CreateResult:
        self.created.append((draft, token))
        if self.fail_create:
            return CreateResult(ok=False, error="500 Server Error")
        template = Template(
            id=f"new-{len(self.created)}",
            title=draft.title,
            category=draft.category,
            prompt_content=draft.prompt_content,
            tags=draft.tags,
        )
        self.templates.append(template)
        return CreateResult(ok=True, template=template)


class FakeIdentity:
    def __init__(self, loaded=True, signed_in=True, token: Optional[str] = "token-abc"):
        self.is_loaded = loaded
        self.is_signed_in = signed_in
        self.token = token
        self.token_requests = 0

    def get_token(self) -> Optional[str]:
        self.token_requests += 1
        return self.token
