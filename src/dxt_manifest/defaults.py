"""Default values derived from a project descriptor.

Everything here is pure: the same descriptor and path always produce the
same defaults, and no function in this module raises for any descriptor.
"""

from pathlib import PurePath
from typing import Optional

from .validators import SEMVER_PREFIX
from .types import (
    AuthorInfo,
    BasicInfo,
    McpConfig,
    OptionalFields,
    ProjectDescriptor,
    ServerConfig,
    ServerType,
    Urls,
    VisualAssets,
)

UNKNOWN_AUTHOR = "Unknown Author"
DEFAULT_VERSION = "1.0.0"
DEFAULT_DESCRIPTION = "A DXT extension"
DEFAULT_LICENSE = "MIT"

DIRNAME_PLACEHOLDER = "${__dirname}"
PYTHON_LIB_PATH = f"{DIRNAME_PLACEHOLDER}/server/lib"


def author_name(descriptor:ProjectDescriptor) -> str:
    return descriptor.author.name if descriptor.author else ""


def author_email(descriptor:ProjectDescriptor) -> str:
    return descriptor.author.email if descriptor.author else ""


def author_url(descriptor:ProjectDescriptor) -> str:
    return descriptor.author.url if descriptor.author else ""


def repository_url(descriptor:ProjectDescriptor) -> str:
    return descriptor.repository or ""


def _non_blank(value:Optional[str]) -> Optional[str]:
    return value if value and value.strip() else None


def default_version(descriptor:ProjectDescriptor) -> str:
    if descriptor.version and SEMVER_PREFIX.match(descriptor.version):
        return descriptor.version
    return DEFAULT_VERSION


def default_name(descriptor:ProjectDescriptor, resolved_path:str) -> str:
    return _non_blank(descriptor.name) or PurePath(resolved_path).name


def default_basic_info(descriptor:ProjectDescriptor, resolved_path:str) -> BasicInfo:
    name = default_name(descriptor, resolved_path)
    return BasicInfo(
        name=name,
        display_name=name,
        version=default_version(descriptor),
        description=_non_blank(descriptor.description) or DEFAULT_DESCRIPTION,
        author_name=_non_blank(author_name(descriptor)) or UNKNOWN_AUTHOR,
    )


def default_author_info(descriptor:ProjectDescriptor) -> AuthorInfo:
    return AuthorInfo(email=author_email(descriptor), url=author_url(descriptor))


def default_urls() -> Urls:
    return Urls()


def default_visual_assets() -> VisualAssets:
    return VisualAssets()


def default_entry_point(server_type:ServerType, descriptor:Optional[ProjectDescriptor] = None) -> str:
    match server_type:
        case ServerType.NODE:
            return (descriptor.main if descriptor else None) or "server/index.js"
        case ServerType.PYTHON:
            return "server/main.py"
        case ServerType.BINARY:
            return "server/my-server"
    raise ValueError(f"Unsupported server type: {server_type}")


def create_mcp_config(server_type:ServerType, entry_point:str) -> McpConfig:
    entry_path = f"{DIRNAME_PLACEHOLDER}/{entry_point}"
    match server_type:
        case ServerType.NODE:
            return McpConfig(command="node", args=[entry_path], env={})
        case ServerType.PYTHON:
            return McpConfig(command="python", args=[entry_path], env={"PYTHONPATH": PYTHON_LIB_PATH})
        case ServerType.BINARY:
            return McpConfig(command=entry_path, args=[], env={})
    raise ValueError(f"Unsupported server type: {server_type}")


def default_server_config(descriptor:Optional[ProjectDescriptor] = None) -> ServerConfig:
    server_type = ServerType.NODE
    entry_point = default_entry_point(server_type, descriptor)
    return ServerConfig(
        server_type=server_type,
        entry_point=entry_point,
        mcp_config=create_mcp_config(server_type, entry_point),
    )


def default_optional_fields(descriptor:ProjectDescriptor) -> OptionalFields:
    return OptionalFields(keywords="", license=descriptor.license or DEFAULT_LICENSE, repository=None)
