"""Atlas generation pipeline.

Runs binary discovery, argument building, the msdf-atlas-gen process and
result parsing in sequence on the calling thread.
"""

import tempfile
import time
import uuid
from pathlib import Path

import structlog

from msdf_atlasgen.config import AtlasConfig, GeneratorSettings
from msdf_atlasgen.core.arguments import build_arguments
from msdf_atlasgen.core.locator import BinaryLocator
from msdf_atlasgen.core.parser import parse_atlas_file
from msdf_atlasgen.core.runner import ProcessRunner
from msdf_atlasgen.domain import AtlasResult
from msdf_atlasgen.exceptions import InvalidConfigError, MissingInputError, MissingOutputError

logger = structlog.get_logger(__name__)


def temp_output_path(suffix: str) -> Path:
    """Return a unique atlas_<uuid><suffix> path in the temp directory."""
    return Path(tempfile.gettempdir()) / f"atlas_{uuid.uuid4()}{suffix}"


class AtlasGenerator:
    """Generates font atlases with msdf-atlas-gen.

    Holds no per-call state, so one instance may serve concurrent calls as
    long as they do not share explicit output paths.

    Example:
        generator = AtlasGenerator()
        result = generator.generate(AtlasConfig(font_path=Path("font.ttf")))
    """

    def __init__(
        self,
        settings: GeneratorSettings | None = None,
        locator: BinaryLocator | None = None,
        runner: ProcessRunner | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            settings: Application settings (defaults if None)
            locator: Binary locator (built from settings if None)
            runner: Process runner (a fresh ProcessRunner if None)
        """
        self.settings = settings or GeneratorSettings()
        self.locator = locator or BinaryLocator(config=self.settings.locator)
        self.runner = runner or ProcessRunner()

    def generate(self, config: AtlasConfig) -> AtlasResult:
        """Generate an atlas and parse its metadata.

        Args:
            config: Atlas configuration

        Returns:
            Parsed AtlasResult

        Raises:
            InvalidConfigError: If no font path is configured
            MissingInputError: If the font file does not exist
            UnsupportedPlatformError: If no binary is available for this platform
            BinaryNotFoundError: If the binary is absent
            ToolLaunchError: If the binary could not be started
            ToolExecutionError: If msdf-atlas-gen exits with a non-zero status
            MissingOutputError: If msdf-atlas-gen wrote no JSON file
            AtlasParseError: If the JSON file is malformed or empty
        """
        if config.font_path is None:
            raise InvalidConfigError("font_path", "a font file is required")

        if not config.font_path.is_file():
            raise MissingInputError(str(config.font_path))

        start_time = time.time()
        binary_path = self.locator.locate()

        image_path = config.output_image_path or temp_output_path(".png")
        json_path = config.output_json_path or temp_output_path(".json")

        args = build_arguments(config, image_path, json_path)

        logger.info(
            "Generating atlas",
            font=str(config.font_path),
            type=config.atlas_type.value,
            dimensions=f"{config.width}x{config.height}",
        )
        self.runner.run(binary_path, args)

        if not json_path.is_file():
            raise MissingOutputError(str(json_path))

        result = parse_atlas_file(json_path, image_path=image_path)

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            "Atlas generated",
            image=str(image_path),
            width=result.width,
            height=result.height,
            glyphs=len(result.glyphs),
            kerning=len(result.kerning),
            duration_ms=round(duration_ms, 2),
        )
        return result


def generate(config: AtlasConfig, settings: GeneratorSettings | None = None) -> AtlasResult:
    """Generate an atlas with a default AtlasGenerator."""
    return AtlasGenerator(settings).generate(config)
