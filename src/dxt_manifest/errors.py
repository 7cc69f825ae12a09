"""Exception hierarchy for manifest creation.

Validation rejections never show up here: they are handled inside the
collectors by asking the same question again.
"""


class DxtManifestError(Exception):
    """Base for all dxt-manifest exceptions."""

    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(message)
        self.message = message


class UserCancelled(DxtManifestError):
    """The respondent aborted the session (Ctrl-C, EOF, declined overwrite)."""

    def __init__(self, message: str = "Cancelled"):
        super().__init__(message)


class ManifestExistsError(DxtManifestError):
    """A manifest is already present and overwriting was not allowed."""

    def __init__(self, manifest_path: str):
        super().__init__(
            f"{manifest_path} already exists. Use --force to overwrite in non-interactive mode."
        )
        self.manifest_path = manifest_path
