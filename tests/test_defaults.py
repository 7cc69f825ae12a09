import pytest
from dxt_manifest import defaults, validators
from dxt_manifest.types import ProjectDescriptor, ServerType


DESCRIPTORS = [
    ProjectDescriptor(),
    ProjectDescriptor(name="foo", version="2.1.0"),
    ProjectDescriptor(author="Jane Doe", license="Apache-2.0", main="dist/server.js"),
    ProjectDescriptor(
        name="bar",
        version="0.3.1-beta.1",
        description="Bar extension",
        author={"name": "Jane", "email": "jane@example.com", "url": "https://jane.dev"},
        repository={"type": "git", "url": "https://github.com/jane/bar"},
    ),
    ProjectDescriptor(name="", version="", description="", author={"email": "x@y.z"}),
    ProjectDescriptor(name="foo", version="latest", description="   "),
    ProjectDescriptor(name="   ", version="v2.0.0", author="  "),
    ProjectDescriptor(version="1.2", description="\n", author={"name": " "}),
]


class TestDefaultBasicInfo:
    def test_fallbacks(self):
        info = defaults.default_basic_info(ProjectDescriptor(), "/work/my-extension")
        assert info.name == "my-extension"
        assert info.display_name == "my-extension"
        assert info.version == "1.0.0"
        assert info.description == "A DXT extension"
        assert info.author_name == "Unknown Author"

    def test_descriptor_values_win(self):
        descriptor = ProjectDescriptor(name="foo", version="2.1.0", description="Foo", author="Jane")
        info = defaults.default_basic_info(descriptor, "/work/other")
        assert info.name == "foo"
        assert info.display_name == "foo"
        assert info.version == "2.1.0"
        assert info.description == "Foo"
        assert info.author_name == "Jane"

    def test_object_author_without_name_falls_back(self):
        info = defaults.default_basic_info(ProjectDescriptor(author={"email": "x@y.z"}), "/work/ext")
        assert info.author_name == "Unknown Author"

    @pytest.mark.parametrize("version", ["latest", "v2.0.0", "1.2", "*"])
    def test_invalid_version_falls_back(self, version):
        info = defaults.default_basic_info(ProjectDescriptor(name="foo", version=version), "/work/ext")
        assert info.version == "1.0.0"

    def test_blank_values_fall_back(self):
        descriptor = ProjectDescriptor(name="   ", description=" ", author="\t")
        info = defaults.default_basic_info(descriptor, "/work/ext")
        assert info.name == "ext"
        assert info.description == "A DXT extension"
        assert info.author_name == "Unknown Author"

    @pytest.mark.parametrize("descriptor", DESCRIPTORS)
    def test_defaults_satisfy_validators(self, descriptor):
        info = defaults.default_basic_info(descriptor, "/work/ext")
        assert validators.required("x")(info.name) is None
        assert validators.required("x")(info.author_name) is None
        assert validators.required("x")(info.description) is None
        assert validators.semver(info.version) is None


class TestDefaultAuthorInfo:
    def test_string_author_has_no_email_or_url(self):
        info = defaults.default_author_info(ProjectDescriptor(author="Jane <jane@example.com>"))
        assert info.email == ""
        assert info.url == ""

    def test_object_author(self):
        info = defaults.default_author_info(
            ProjectDescriptor(author={"name": "Jane", "email": "jane@example.com", "url": "https://jane.dev"})
        )
        assert info.email == "jane@example.com"
        assert info.url == "https://jane.dev"

    def test_no_author(self):
        info = defaults.default_author_info(ProjectDescriptor())
        assert info.email == ""
        assert info.url == ""


class TestEntryPoint:
    def test_node_uses_main(self):
        assert defaults.default_entry_point(ServerType.NODE, ProjectDescriptor(main="dist/index.js")) == "dist/index.js"

    def test_node_fallback(self):
        assert defaults.default_entry_point(ServerType.NODE, ProjectDescriptor()) == "server/index.js"
        assert defaults.default_entry_point(ServerType.NODE) == "server/index.js"

    def test_python_and_binary_ignore_main(self):
        descriptor = ProjectDescriptor(main="dist/index.js")
        assert defaults.default_entry_point(ServerType.PYTHON, descriptor) == "server/main.py"
        assert defaults.default_entry_point(ServerType.BINARY, descriptor) == "server/my-server"


class TestMcpConfig:
    def test_node(self):
        config = defaults.create_mcp_config(ServerType.NODE, "server/index.js")
        assert config.command == "node"
        assert config.args == ["${__dirname}/server/index.js"]
        assert config.env == {}

    def test_python_sets_library_path(self):
        config = defaults.create_mcp_config(ServerType.PYTHON, "server/main.py")
        assert config.command == "python"
        assert config.args == ["${__dirname}/server/main.py"]
        assert config.env == {"PYTHONPATH": "${__dirname}/server/lib"}

    def test_binary(self):
        config = defaults.create_mcp_config(ServerType.BINARY, "server/my-server")
        assert config.command == "${__dirname}/server/my-server"
        assert config.args == []
        assert config.env == {}

    def test_default_server_config(self):
        server = defaults.default_server_config(ProjectDescriptor(main="index.js"))
        assert server.server_type == ServerType.NODE
        assert server.entry_point == "index.js"
        assert server.mcp_config.args == ["${__dirname}/index.js"]


class TestOptionalFields:
    def test_license_fallback(self):
        fields = defaults.default_optional_fields(ProjectDescriptor())
        assert fields.license == "MIT"
        assert fields.keywords == ""
        assert fields.repository is None

    def test_repository_is_never_defaulted(self):
        fields = defaults.default_optional_fields(
            ProjectDescriptor(license="ISC", repository="https://github.com/a/b")
        )
        assert fields.license == "ISC"
        assert fields.repository is None

    def test_repository_url_helper(self):
        assert defaults.repository_url(ProjectDescriptor(repository={"url": "https://x"})) == "https://x"
        assert defaults.repository_url(ProjectDescriptor()) == ""
