from tests.test_template import TestTemplate
from common import global_config


class TestCommonHealthCheck(TestTemplate):
    """Test that the YAML configuration is loaded."""

    def test_config_health_check_enabled(self):
        """
        The config_health_check flag is set to True in global_config.yaml and
        should come through the YAML settings source.
        """
        assert global_config.config_health_check is True, (
            "The config_health_check flag should be set to True in global_config.yaml. "
            "This indicates that the YAML configuration is being properly loaded."
        )

    def test_template_store_defaults(self):
        assert global_config.templates_api.path == "/api/templates"
        assert global_config.templates_url().endswith("/api/templates")
        assert global_config.editor.default_model == "midjourney"
