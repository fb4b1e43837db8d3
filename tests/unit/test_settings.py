"""
Tests for configuration loading, client construction and logging setup.
"""
import logging

import httpx  # type: ignore
import pytest  # type: ignore

from zoomkit.config.settings import ZoomSettings, get_settings
from zoomkit.exceptions.zoom_exceptions import ZoomConfigurationError
from zoomkit.sources.client.zoom.zoom import ZoomClient, ZoomJWTConfig, ZoomRESTClientViaJWT
from zoomkit.sources.external.zoom.zoom import ZoomDataSource
from zoomkit.utils.logger import create_logger


class TestZoomSettings:

    def test_defaults(self):
        settings = ZoomSettings()
        assert settings.base_url == "https://api.zoom.us/v2"
        assert settings.timeout == 30.0
        assert not settings.has_credentials

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ZOOM_KEY", "key")
        monkeypatch.setenv("ZOOM_SECRET", "secret")
        monkeypatch.setenv("ZOOM_BASE_URL", "https://zoom.example.com/v2/")
        monkeypatch.setenv("ZOOM_TIMEOUT", "12.5")
        monkeypatch.setenv("ZOOM_LOG_LEVEL", "debug")

        settings = ZoomSettings.from_env(str(tmp_path / "missing.env"))
        assert settings.api_key == "key"
        assert settings.api_secret == "secret"
        assert settings.base_url == "https://zoom.example.com/v2"
        assert settings.timeout == 12.5
        assert settings.log_level == "DEBUG"
        assert settings.has_credentials

    def test_from_dotenv_file(self, monkeypatch, tmp_path):
        monkeypatch.delenv("ZOOM_KEY", raising=False)
        monkeypatch.delenv("ZOOM_SECRET", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("ZOOM_KEY=file-key\nZOOM_SECRET=file-secret\n")

        settings = ZoomSettings.from_env(str(env_file))
        assert settings.api_key == "file-key"
        assert settings.api_secret == "file-secret"

    def test_secret_hidden(self):
        settings = ZoomSettings(api_key="key", api_secret="s3cret")
        assert "s3cret" not in repr(settings)
        assert "api_secret" not in settings.to_dict()

    def test_invalid_timeout(self):
        with pytest.raises(ValueError):
            ZoomSettings(timeout=0)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestClientConstruction:

    def test_build_with_config(self):
        client = ZoomClient.build_with_config(ZoomJWTConfig(api_key="key", api_secret="secret", timeout=5))
        rest = client.get_client()
        assert isinstance(rest, ZoomRESTClientViaJWT)
        assert rest.credentials.api_key == "key"
        assert rest.timeout == 5
        assert rest.get_base_url() == "https://api.zoom.us/v2"

    def test_build_from_env_requires_credentials(self):
        with pytest.raises(ZoomConfigurationError):
            ZoomClient.build_from_env(ZoomSettings())

    @pytest.mark.asyncio
    async def test_build_from_env(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"id": "me"}))
        settings = ZoomSettings(api_key="key", api_secret="secret", base_url="https://zoom.test/v2")
        async with ZoomClient.build_from_env(settings, transport=transport) as client:
            result = await ZoomDataSource(client).get_zoom_room_account_profile()
        assert result.success
        assert result.data == {"id": "me"}
        assert client.get_client().client is None

    def test_build_from_env_applies_log_level(self):
        settings = ZoomSettings(api_key="key", api_secret="secret", log_level="debug")
        rest = ZoomClient.build_from_env(settings).get_client()
        assert rest.logger.name == "zoomkit"
        assert rest.logger.level == logging.DEBUG

    def test_data_source_requires_client(self):
        with pytest.raises(ValueError):
            ZoomDataSource(None)


class TestLogger:

    def test_create_logger_is_idempotent(self):
        first = create_logger("zoomkit.test", "DEBUG")
        second = create_logger("zoomkit.test", "DEBUG")
        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.DEBUG

    def test_level_from_settings(self, monkeypatch):
        monkeypatch.setenv("ZOOM_LOG_LEVEL", "WARNING")
        logger = create_logger("zoomkit.test.settings")
        assert logger.level == logging.WARNING
