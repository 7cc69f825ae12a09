"""Folds collected fragments into the manifest document.

Every key goes through ``fold``: a list of ``(key, value, predicate)``
entries in output order, of which only the entries whose predicate holds
are kept. Nested records use the same fold so the omission rules live in
one place.
"""

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from .types import (
    AuthorInfo,
    BasicInfo,
    Compatibility,
    OptionalFields,
    PromptRecord,
    ServerConfig,
    ToolRecord,
    Urls,
    UserConfigOption,
    VisualAssets,
)

DXT_VERSION = "0.1"

Predicate = Callable[[Any], bool]
Entry = Tuple[str, Any, Predicate]


def always(value:Any) -> bool:
    return True


def non_empty(value:Any) -> bool:
    # 0 and False are real values (e.g. an option default), only emptiness is dropped
    if value is None:
        return False
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) > 0
    return True


def true_only(value:Any) -> bool:
    return value is True


def differs_from(other:Any) -> Predicate:
    return lambda value: non_empty(value) and value != other


def fold(entries:Iterable[Entry]) -> Dict[str, Any]:
    return {key: value for key, value, include in entries if include(value)}


def split_keywords(keywords:str) -> List[str]:
    return [keyword.strip() for keyword in keywords.split(",") if keyword.strip()]


def build_author(basic_info:BasicInfo, author_info:AuthorInfo) -> Dict[str, Any]:
    return fold([
        ("name", basic_info.author_name, always),
        ("email", author_info.email, non_empty),
        ("url", author_info.url, non_empty),
    ])


def build_server(server_config:ServerConfig) -> Dict[str, Any]:
    mcp_config = server_config.mcp_config
    return {
        "type": server_config.server_type.value,
        "entry_point": server_config.entry_point,
        "mcp_config": {
            "command": mcp_config.command,
            "args": list(mcp_config.args),
            "env": dict(mcp_config.env),
        },
    }


def build_tool(tool:ToolRecord) -> Dict[str, Any]:
    return fold([
        ("name", tool.name, always),
        ("description", tool.description, non_empty),
    ])


def build_prompt(prompt:PromptRecord) -> Dict[str, Any]:
    return fold([
        ("name", prompt.name, always),
        ("description", prompt.description, non_empty),
        ("arguments", list(prompt.arguments), non_empty),
        ("text", prompt.text, always),
    ])


def build_option(option:UserConfigOption) -> Dict[str, Any]:
    return fold([
        ("type", option.type.value, always),
        ("title", option.title, always),
        ("description", option.description, always),
        ("required", option.required, always),
        ("sensitive", option.sensitive, always),
        ("default", None if option.required else option.default, non_empty),
        ("min", option.min, non_empty),
        ("max", option.max, non_empty),
    ])


def build_compatibility(compatibility:Optional[Compatibility]) -> Optional[Dict[str, Any]]:
    if compatibility is None:
        return None
    runtimes = None
    if compatibility.runtimes is not None:
        runtimes = fold([
            ("python", compatibility.runtimes.python, non_empty),
            ("node", compatibility.runtimes.node, non_empty),
        ])
    return fold([
        ("platforms", list(compatibility.platforms or []), non_empty),
        ("runtimes", runtimes, non_empty),
    ])


def build_repository(optional_fields:OptionalFields) -> Optional[Dict[str, str]]:
    if optional_fields.repository is None:
        return None
    return {"type": optional_fields.repository.type, "url": optional_fields.repository.url}


def build_manifest(
    basic_info:BasicInfo,
    long_description:Optional[str],
    author_info:AuthorInfo,
    urls:Urls,
    visual_assets:VisualAssets,
    server_config:ServerConfig,
    tools:List[ToolRecord],
    tools_generated:bool,
    prompts:List[PromptRecord],
    prompts_generated:bool,
    compatibility:Optional[Compatibility],
    user_config:Mapping[str, UserConfigOption],
    optional_fields:OptionalFields,
    dxt_version:str = DXT_VERSION,
) -> Dict[str, Any]:
    return fold([
        ("dxt_version", dxt_version, always),
        ("name", basic_info.name, always),
        ("display_name", basic_info.display_name, differs_from(basic_info.name)),
        ("version", basic_info.version, always),
        ("description", basic_info.description, always),
        ("long_description", long_description, non_empty),
        ("author", build_author(basic_info, author_info), always),
        ("homepage", urls.homepage, non_empty),
        ("documentation", urls.documentation, non_empty),
        ("support", urls.support, non_empty),
        ("icon", visual_assets.icon, non_empty),
        ("screenshots", list(visual_assets.screenshots), non_empty),
        ("server", build_server(server_config), always),
        ("tools", [build_tool(tool) for tool in tools], non_empty),
        ("tools_generated", tools_generated, true_only),
        ("prompts", [build_prompt(prompt) for prompt in prompts], non_empty),
        ("prompts_generated", prompts_generated, true_only),
        ("compatibility", build_compatibility(compatibility), non_empty),
        ("user_config", {key: build_option(option) for key, option in user_config.items()}, non_empty),
        ("keywords", split_keywords(optional_fields.keywords), non_empty),
        ("license", optional_fields.license, non_empty),
        ("repository", build_repository(optional_fields), non_empty),
    ])
