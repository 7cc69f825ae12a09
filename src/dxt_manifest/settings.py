from pydantic_settings import BaseSettings
from pydantic import Field


class ManifestSettings(BaseSettings):
    # Document settings
    DXT_VERSION: str = Field("0.1", validation_alias="DXT_VERSION")
    MANIFEST_FILENAME: str = Field("manifest.json", validation_alias="DXT_MANIFEST_FILENAME")
    MANIFEST_INDENT: int = Field(2, validation_alias="DXT_MANIFEST_INDENT")

    # Project descriptor settings
    DESCRIPTOR_FILENAME: str = Field("package.json", validation_alias="DXT_DESCRIPTOR_FILENAME")

    # Logging
    LOG_LEVEL: str = Field("WARNING", validation_alias="DXT_LOG_LEVEL")
