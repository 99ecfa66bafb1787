"""Exception hierarchy for msdf-atlasgen."""


class AtlasGenError(Exception):
    """Base exception for all msdf-atlasgen errors."""

    pass


class InvalidConfigError(AtlasGenError):
    """Atlas configuration is missing a required value."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid configuration for '{field}': {reason}")


class MissingInputError(AtlasGenError):
    """Input font file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Font file not found: {path}")


class BinaryError(AtlasGenError):
    """Errors related to locating the msdf-atlas-gen executable."""

    pass


class UnsupportedPlatformError(BinaryError):
    """Running platform has no bundled msdf-atlas-gen build."""

    def __init__(self, system: str) -> None:
        self.system = system
        super().__init__(
            f"Unsupported platform '{system}': only Windows and Linux are supported"
        )


class BinaryNotFoundError(BinaryError):
    """Expected msdf-atlas-gen executable is absent."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Native binary not found: {path}")


class ToolError(AtlasGenError):
    """Errors raised while running msdf-atlas-gen."""

    pass


class ToolLaunchError(ToolError):
    """The operating system refused to start msdf-atlas-gen."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to launch '{path}': {reason}")


class ToolExecutionError(ToolError):
    """msdf-atlas-gen exited with a non-zero status."""

    def __init__(self, exit_code: int, stderr: str) -> None:
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(f"msdf-atlas-gen failed with exit code {exit_code}: {stderr}")


class OutputError(AtlasGenError):
    """Errors related to the atlas metadata written by msdf-atlas-gen."""

    pass


class MissingOutputError(OutputError):
    """msdf-atlas-gen reported success but wrote no JSON file."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Output JSON not generated: {path}")


class AtlasParseError(OutputError):
    """Atlas JSON is malformed or has no usable content."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse atlas JSON '{path}': {reason}")
