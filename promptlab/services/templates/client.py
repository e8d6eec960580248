"""HTTP client for the remote template store."""

from typing import Optional

import requests
from loguru import logger as log
from requests.exceptions import RequestException

from common import global_config
from promptlab.services.templates.models import (
    CreateResult,
    FetchResult,
    Template,
    TemplateDraft,
)


class TemplateStoreClient:
    """
    Wrapper around ``GET`` and ``POST`` on the templates collection.

    Failures never raise: every call returns a result object whose ``ok``
    flag tells the caller what happened.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.url = url or global_config.templates_url()
        self.timeout = (
            timeout if timeout is not None else global_config.templates_api.timeout_seconds
        )

    def fetch_templates(self) -> FetchResult:
        """
        Request the full template list.

        Returns:
            FetchResult: ``ok=True`` with the parsed templates, or ``ok=False``
            with a description of the network, HTTP or payload error
        """
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()

            data = response.json()
            if not isinstance(data, list):
                log.error(f"Template store returned {type(data).__name__}, expected a list")
                return FetchResult(ok=False, error="Unexpected response shape")

            templates = [Template.model_validate(item) for item in data]
            log.debug(f"Fetched {len(templates)} templates from {self.url}")
            return FetchResult(ok=True, templates=templates)

        except RequestException as e:
            log.error(f"Error fetching templates: {str(e)}")
            return FetchResult(ok=False, error=str(e))
        except ValueError as e:
            # Covers invalid JSON and pydantic ValidationError
            log.error(f"Invalid template payload: {str(e)}")
            return FetchResult(ok=False, error=str(e))

    def create_template(self, draft: TemplateDraft, token: str) -> CreateResult:
        """
        Submit a new template.

        Args:
            draft: The fields to publish
            token: Bearer token from the identity provider

        Returns:
            CreateResult: ``ok=True`` with the created template when the store
            echoes one back, otherwise ``ok=False`` with the error
        """
        try:
            response = requests.post(
                self.url,
                json=draft.to_payload(),
                headers={"Authorization": f"Bearer {token}"},
                timeout=self.timeout,
            )
            response.raise_for_status()

            created = None
            try:
                created = Template.model_validate(response.json())
            except ValueError:
                # The body is only informational; a re-fetch follows anyway
                log.debug("Create response did not contain a template body")

            log.debug(f"Template '{draft.title}' created")
            return CreateResult(ok=True, template=created)

        except RequestException as e:
            log.error(f"Error creating template: {str(e)}")
            return CreateResult(ok=False, error=str(e))
