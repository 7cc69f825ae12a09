from typing import Dict, FrozenSet, List, Optional, Tuple

from .collector import FieldCollector, RepeatingSection
from .defaults import (
    author_email,
    author_name,
    author_url,
    create_mcp_config,
    default_entry_point,
    default_name,
    repository_url,
    DEFAULT_LICENSE,
    DEFAULT_VERSION,
)
from .types import (
    AuthorInfo,
    BasicInfo,
    Compatibility,
    OptionalFields,
    OptionType,
    PLATFORMS,
    ProjectDescriptor,
    PromptRecord,
    Repository,
    Runtimes,
    ServerConfig,
    ServerType,
    ToolRecord,
    Urls,
    UserConfigOption,
    VisualAssets,
)
from . import validators

SERVER_TYPE_CHOICES = [
    (ServerType.NODE.value, "Node.js"),
    (ServerType.PYTHON.value, "Python"),
    (ServerType.BINARY.value, "Binary"),
]

OPTION_TYPE_CHOICES = [
    (OptionType.STRING.value, "String"),
    (OptionType.NUMBER.value, "Number"),
    (OptionType.BOOLEAN.value, "Boolean"),
    (OptionType.DIRECTORY.value, "Directory"),
    (OptionType.FILE.value, "File"),
]

PLATFORM_LABELS = {
    "darwin": "macOS (darwin)",
    "win32": "Windows (win32)",
    "linux": "Linux",
}


def prompt_basic_info(fields:FieldCollector, descriptor:ProjectDescriptor, resolved_path:str) -> BasicInfo:
    name = fields.text(
        "Extension name",
        default=default_name(descriptor, resolved_path),
        validator=validators.required("Name is required"),
    )
    author = fields.text(
        "Author name",
        default=author_name(descriptor),
        validator=validators.required("Author name is required"),
    )
    display_name = fields.text("Display name (optional)", default=name)
    version = fields.text("Version", default=descriptor.version or DEFAULT_VERSION, validator=validators.semver)
    description = fields.text(
        "Description",
        default=descriptor.description or "",
        validator=validators.required("Description is required"),
    )
    return BasicInfo(
        name=name,
        display_name=display_name,
        version=version,
        description=description,
        author_name=author,
    )


def prompt_long_description(fields:FieldCollector, description:str) -> Optional[str]:
    if not fields.confirm("Add a detailed long description?", default=False):
        return None
    return fields.text("Long description (supports basic markdown)", default=description)


def prompt_author_info(fields:FieldCollector, descriptor:ProjectDescriptor) -> AuthorInfo:
    email = fields.text("Author email (optional)", default=author_email(descriptor))
    url = fields.text("Author URL (optional)", default=author_url(descriptor))
    return AuthorInfo(email=email, url=url)


def prompt_urls(fields:FieldCollector) -> Urls:
    return Urls(
        homepage=fields.text(
            "Homepage URL (optional)",
            validator=validators.optional_url("Must be a valid URL (e.g., https://example.com)"),
        ),
        documentation=fields.text("Documentation URL (optional)", validator=validators.optional_url("Must be a valid URL")),
        support=fields.text("Support URL (optional)", validator=validators.optional_url("Must be a valid URL")),
    )


def _collect_screenshot(fields:FieldCollector, seen:FrozenSet[str]) -> Tuple[str, str]:
    screenshot = fields.text(
        "Screenshot file path (relative to manifest)",
        validator=validators.relative_path("Screenshot path is required"),
    )
    return screenshot, screenshot


SCREENSHOTS = RepeatingSection(
    collect_record=_collect_screenshot,
    gate_message="Add screenshots?",
    another_message="Add another screenshot?",
)


def prompt_visual_assets(fields:FieldCollector) -> VisualAssets:
    icon = fields.text("Icon file path (optional, relative to manifest)", validator=validators.relative_path())
    screenshots, _ = SCREENSHOTS.collect(fields)
    return VisualAssets(icon=icon, screenshots=screenshots)


def prompt_server_config(fields:FieldCollector, descriptor:Optional[ProjectDescriptor] = None) -> ServerConfig:
    server_type = ServerType(fields.choice("Server type", SERVER_TYPE_CHOICES, default=ServerType.NODE.value))
    entry_point = fields.text(
        "Entry point",
        default=default_entry_point(server_type, descriptor),
        validator=validators.required("Entry point is required"),
    )
    return ServerConfig(
        server_type=server_type,
        entry_point=entry_point,
        mcp_config=create_mcp_config(server_type, entry_point),
    )


def _collect_tool(fields:FieldCollector, seen:FrozenSet[str]) -> Tuple[ToolRecord, str]:
    name = fields.text("Tool name", validator=validators.required("Tool name is required"))
    description = fields.text("Tool description (optional)")
    return ToolRecord(name=name, description=description or None), name


TOOLS = RepeatingSection(
    collect_record=_collect_tool,
    gate_message="Does your MCP Server provide tools you want to advertise (optional)?",
    gate_default=True,
    another_message="Add another tool?",
)


def prompt_tools(fields:FieldCollector) -> Tuple[List[ToolRecord], bool]:
    tools, _ = TOOLS.collect(fields)
    if not tools:
        return tools, False
    tools_generated = fields.confirm("Does your server generate additional tools at runtime?", default=False)
    return tools, tools_generated


def _collect_argument(fields:FieldCollector, seen:FrozenSet[str]) -> Tuple[str, str]:
    argument = fields.text(
        "Argument name",
        validator=validators.unique(seen, "Argument name is required", "Argument names must be unique"),
    )
    return argument, argument


PROMPT_ARGUMENTS = RepeatingSection(
    collect_record=_collect_argument,
    gate_message="Does this prompt have arguments?",
    another_message="Add another argument?",
)


def _collect_prompt(fields:FieldCollector, seen:FrozenSet[str]) -> Tuple[PromptRecord, str]:
    name = fields.text("Prompt name", validator=validators.required("Prompt name is required"))
    description = fields.text("Prompt description (optional)")
    arguments, _ = PROMPT_ARGUMENTS.collect(fields)
    if arguments:
        message = f"Prompt text (use ${{arguments.name}} for arguments: {', '.join(arguments)})"
    else:
        message = "Prompt text"
    text = fields.text(message, validator=validators.required("Prompt text is required"))
    record = PromptRecord(
        name=name,
        description=description or None,
        arguments=arguments,
        text=text,
    )
    return record, name


PROMPTS = RepeatingSection(
    collect_record=_collect_prompt,
    gate_message="Does your MCP Server provide prompts you want to advertise (optional)?",
    another_message="Add another prompt?",
)


def prompt_prompts(fields:FieldCollector) -> Tuple[List[PromptRecord], bool]:
    prompts, _ = PROMPTS.collect(fields)
    if not prompts:
        return prompts, False
    prompts_generated = fields.confirm("Does your server generate additional prompts at runtime?", default=False)
    return prompts, prompts_generated


def prompt_platforms(fields:FieldCollector) -> Optional[List[str]]:
    if not fields.confirm("Specify supported platforms?", default=False):
        return None
    selected = [
        platform
        for platform in PLATFORMS
        if fields.confirm(f"Support {PLATFORM_LABELS[platform]}?", default=True)
    ]
    return selected or None


def prompt_runtimes(fields:FieldCollector, server_type:ServerType) -> Optional[Runtimes]:
    # binaries bring their own runtime
    if server_type == ServerType.BINARY:
        return None
    if not fields.confirm("Specify runtime version constraints?", default=False):
        return None
    if server_type == ServerType.PYTHON:
        python_version = fields.text(
            "Python version constraint (e.g., >=3.8,<4.0)",
            validator=validators.required("Python version constraint is required"),
        )
        return Runtimes(python=python_version)
    node_version = fields.text(
        "Node.js version constraint (e.g., >=16.0.0)",
        validator=validators.required("Node.js version constraint is required"),
    )
    return Runtimes(node=node_version)


def prompt_compatibility(fields:FieldCollector, server_type:ServerType) -> Optional[Compatibility]:
    if not fields.confirm("Add compatibility constraints?", default=False):
        return None
    platforms = prompt_platforms(fields)
    runtimes = prompt_runtimes(fields, server_type)
    return Compatibility(platforms=platforms, runtimes=runtimes)


def _prompt_option_default(fields:FieldCollector, option_type:OptionType):
    match option_type:
        case OptionType.BOOLEAN:
            return fields.confirm("Default value", default=False)
        case OptionType.NUMBER:
            raw = fields.text("Default value (number)", validator=validators.optional_number)
            return validators.parse_number(raw) if raw.strip() else None
        case _:
            return fields.text("Default value (optional)")


def _prompt_number_bounds(fields:FieldCollector) -> Dict[str, float]:
    bounds = {}
    if not fields.confirm("Add min/max constraints?", default=False):
        return bounds
    minimum = fields.text("Minimum value (optional)", validator=validators.optional_number)
    maximum = fields.text("Maximum value (optional)", validator=validators.optional_number)
    if minimum.strip():
        bounds["min"] = validators.parse_number(minimum)
    if maximum.strip():
        bounds["max"] = validators.parse_number(maximum)
    return bounds


def _collect_option(fields:FieldCollector, seen:FrozenSet[str]) -> Tuple[Tuple[str, UserConfigOption], str]:
    key = fields.text(
        "Configuration option key (unique identifier)",
        validator=validators.unique(seen, "Key is required", "Key must be unique"),
    )
    option_type = OptionType(fields.choice("Option type", OPTION_TYPE_CHOICES, default=OptionType.STRING.value))
    title = fields.text("Option title (human-readable name)", validator=validators.required("Title is required"))
    description = fields.text("Option description", validator=validators.required("Description is required"))
    required = fields.confirm("Is this option required?", default=False)
    sensitive = fields.confirm("Is this option sensitive (like a password)?", default=False)

    default = None
    if not required:
        default = _prompt_option_default(fields, option_type)
        if default == "":
            default = None

    bounds = _prompt_number_bounds(fields) if option_type == OptionType.NUMBER else {}

    option = UserConfigOption(
        type=option_type,
        title=title,
        description=description,
        required=required,
        sensitive=sensitive,
        default=default,
        **bounds,
    )
    return (key, option), key


USER_CONFIG = RepeatingSection(
    collect_record=_collect_option,
    gate_message="Add user-configurable options?",
    another_message="Add another configuration option?",
)


def prompt_user_config(fields:FieldCollector) -> Dict[str, UserConfigOption]:
    options, _ = USER_CONFIG.collect(fields)
    return dict(options)


def prompt_optional_fields(fields:FieldCollector, descriptor:ProjectDescriptor) -> OptionalFields:
    keywords = fields.text("Keywords (comma-separated, optional)", default="")
    license_name = fields.text("License", default=descriptor.license or DEFAULT_LICENSE)

    repository = None
    if fields.confirm("Add repository information?", default=bool(descriptor.repository)):
        url = fields.text("Repository URL", default=repository_url(descriptor))
        if url:
            repository = Repository(type="git", url=url)
    return OptionalFields(keywords=keywords, license=license_name, repository=repository)
