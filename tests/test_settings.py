import pytest
from dxt_manifest.settings import ManifestSettings


ALIASES = [
    "DXT_VERSION",
    "DXT_MANIFEST_FILENAME",
    "DXT_MANIFEST_INDENT",
    "DXT_DESCRIPTOR_FILENAME",
    "DXT_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for alias in ALIASES:
        monkeypatch.delenv(alias, raising=False)


class TestManifestSettings:
    def test_default_values(self):
        settings = ManifestSettings()
        assert settings.DXT_VERSION == "0.1"
        assert settings.MANIFEST_FILENAME == "manifest.json"
        assert settings.MANIFEST_INDENT == 2
        assert settings.DESCRIPTOR_FILENAME == "package.json"
        assert settings.LOG_LEVEL == "WARNING"

    def test_custom_values(self, monkeypatch):
        monkeypatch.setenv("DXT_VERSION", "0.2")
        monkeypatch.setenv("DXT_MANIFEST_FILENAME", "dxt.json")
        monkeypatch.setenv("DXT_MANIFEST_INDENT", "4")
        monkeypatch.setenv("DXT_DESCRIPTOR_FILENAME", "project.json")
        monkeypatch.setenv("DXT_LOG_LEVEL", "debug")

        settings = ManifestSettings()
        assert settings.DXT_VERSION == "0.2"
        assert settings.MANIFEST_FILENAME == "dxt.json"
        assert settings.MANIFEST_INDENT == 4
        assert settings.DESCRIPTOR_FILENAME == "project.json"
        assert settings.LOG_LEVEL == "debug"

    def test_invalid_indent_fails(self, monkeypatch):
        monkeypatch.setenv("DXT_MANIFEST_INDENT", "two")
        with pytest.raises(Exception):
            ManifestSettings()
