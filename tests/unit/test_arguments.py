"""Unit tests for msdf-atlas-gen argument construction."""

from pathlib import Path

from msdf_atlasgen.config import AtlasConfig, AtlasType
from msdf_atlasgen.core.arguments import build_arguments, format_command_line

REQUIRED_FLAGS = [
    "-font",
    "-type",
    "-dimensions",
    "-size",
    "-pxrange",
    "-format",
    "-imageout",
    "-json",
]


def _flags(args: list[str]) -> list[str]:
    return [arg for arg in args if arg.startswith("-") and not arg.lstrip("-").isdigit()]


class TestBuildArguments:
    """Tests for build_arguments."""

    def test_full_argument_list(self):
        """Test exact arguments for a typical configuration."""
        config = AtlasConfig(
            font_path="Roboto-Regular.ttf",
            atlas_type=AtlasType.MTSDF,
            width=512,
            height=256,
            glyph_size=64,
            pixel_range=6,
        )
        args = build_arguments(config, Path("out.png"), Path("out.json"))

        assert args == [
            "-font", "Roboto-Regular.ttf",
            "-type", "mtsdf",
            "-dimensions", "512", "256",
            "-size", "64",
            "-pxrange", "6",
            "-format", "png",
            "-imageout", "out.png",
            "-json", "out.json",
        ]

    def test_required_flags_once_in_order(self):
        """Test each required flag appears exactly once in the fixed order."""
        config = AtlasConfig(font_path="font.ttf")
        args = build_arguments(config, Path("a.png"), Path("a.json"))

        assert _flags(args) == REQUIRED_FLAGS

    def test_charset_appended_when_configured(self):
        """Test -charset is the last flag when a charset file is set."""
        config = AtlasConfig(font_path="font.ttf", charset_file="charset.txt")
        args = build_arguments(config, Path("a.png"), Path("a.json"))

        assert _flags(args) == [*REQUIRED_FLAGS, "-charset"]
        assert args[-2:] == ["-charset", "charset.txt"]

    def test_charset_absent_when_not_configured(self):
        """Test -charset is omitted without a charset file."""
        config = AtlasConfig(font_path="font.ttf", charset_file="")
        args = build_arguments(config, Path("a.png"), Path("a.json"))

        assert "-charset" not in args

    def test_default_type_is_msdf(self):
        """Test the default atlas type is passed lower-cased."""
        args = build_arguments(AtlasConfig(font_path="font.ttf"), Path("a.png"), Path("a.json"))
        assert args[args.index("-type") + 1] == "msdf"

    def test_invalid_values_passed_through(self):
        """Test values are not validated beyond the config model."""
        config = AtlasConfig(font_path="font.ttf", glyph_size=-3, pixel_range=0)
        args = build_arguments(config, Path("a.png"), Path("a.json"))

        assert args[args.index("-size") + 1] == "-3"
        assert args[args.index("-pxrange") + 1] == "0"

    def test_paths_with_spaces_kept_whole(self):
        """Test a path with spaces stays a single argument."""
        config = AtlasConfig(font_path="My Fonts/Open Sans.ttf")
        args = build_arguments(config, Path("out dir/a.png"), Path("a.json"))

        assert args[args.index("-font") + 1] == str(Path("My Fonts/Open Sans.ttf"))
        assert args[args.index("-imageout") + 1] == str(Path("out dir/a.png"))


class TestFormatCommandLine:
    """Tests for format_command_line."""

    def test_quotes_arguments_with_spaces(self):
        """Test only arguments containing spaces are quoted."""
        line = format_command_line(["-font", "Open Sans.ttf", "-size", "48"])
        assert line == '-font "Open Sans.ttf" -size 48'

    def test_plain_arguments_unquoted(self):
        """Test arguments without spaces are joined as-is."""
        assert format_command_line(["-type", "msdf"]) == "-type msdf"
