from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


Platform = Literal["darwin", "win32", "linux"]
PLATFORMS: List[str] = ["darwin", "win32", "linux"]


class ServerType(str, Enum):
    NODE = "node"
    PYTHON = "python"
    BINARY = "binary"


class OptionType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DIRECTORY = "directory"
    FILE = "file"


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


def _string_or_none(value:Any) -> Optional[str]:
    return value if isinstance(value, str) else None


class DescriptorAuthor(FrozenModel):
    name: str = ""
    email: str = ""
    url: str = ""


class ProjectDescriptor(FrozenModel):
    """Normalized view of a package.json.

    ``author`` is always a DescriptorAuthor (email/url stay empty for the
    string form) and ``repository`` is always the bare URL string.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None
    main: Optional[str] = None
    author: Optional[DescriptorAuthor] = None
    repository: Optional[str] = None
    license: Optional[str] = None

    @field_validator("name", "version", "description", "main", "license", mode="before")
    @classmethod
    def drop_non_strings(cls, value:Any) -> Optional[str]:
        return _string_or_none(value)

    @field_validator("author", mode="before")
    @classmethod
    def normalize_author(cls, value:Any) -> Optional[Dict[str, str]]:
        if isinstance(value, str):
            return {"name": value}
        if isinstance(value, dict):
            return {
                key: value[key]
                for key in ("name", "email", "url")
                if isinstance(value.get(key), str)
            }
        return None

    @field_validator("repository", mode="before")
    @classmethod
    def normalize_repository(cls, value:Any) -> Optional[str]:
        if isinstance(value, dict):
            return _string_or_none(value.get("url"))
        return _string_or_none(value)


class McpConfig(FrozenModel):
    command: str
    args: List[str] = Field(default_factory=list)
    env: Dict[str, str] = Field(default_factory=dict)


class ToolRecord(FrozenModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None


class PromptRecord(FrozenModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    arguments: List[str] = Field(default_factory=list)
    text: str = Field(min_length=1)

    @field_validator("arguments")
    @classmethod
    def arguments_are_unique(cls, value:List[str]) -> List[str]:
        if len(set(value)) != len(value):
            raise ValueError("Argument names must be unique")
        return value


OptionDefault = Union[bool, int, float, str]


class UserConfigOption(FrozenModel):
    type: OptionType
    title: str
    description: str
    required: bool = False
    sensitive: bool = False
    default: Optional[OptionDefault] = None
    min: Optional[Union[int, float]] = None
    max: Optional[Union[int, float]] = None

    @model_validator(mode="after")
    def check_constraints(self) -> "UserConfigOption":
        if self.required and self.default is not None:
            raise ValueError("Required options cannot carry a default value")
        if self.type != OptionType.NUMBER and (self.min is not None or self.max is not None):
            raise ValueError("min/max are only allowed on number options")
        return self


class Runtimes(FrozenModel):
    python: Optional[str] = None
    node: Optional[str] = None


class Compatibility(FrozenModel):
    platforms: Optional[List[Platform]] = None
    runtimes: Optional[Runtimes] = None


class BasicInfo(FrozenModel):
    name: str
    display_name: str
    version: str
    description: str
    author_name: str


class AuthorInfo(FrozenModel):
    email: str = ""
    url: str = ""


class Urls(FrozenModel):
    homepage: str = ""
    documentation: str = ""
    support: str = ""


class VisualAssets(FrozenModel):
    icon: str = ""
    screenshots: List[str] = Field(default_factory=list)


class ServerConfig(FrozenModel):
    server_type: ServerType
    entry_point: str
    mcp_config: McpConfig


class Repository(FrozenModel):
    type: str = "git"
    url: str


class OptionalFields(FrozenModel):
    keywords: str = ""
    license: str = ""
    repository: Optional[Repository] = None
