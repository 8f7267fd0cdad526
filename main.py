"""
Number Spiral

A single-file Python CLI tool that lays out the integers 0..N as a square spiral
wound outward from a centre cell. Every cell value and the grid extent are
computed in closed form; the spiral is never walked step by step. Output is a
tab-separated text table, optionally also drawn to a PNG image via Pillow.

Usage:
    python main.py 18
    python main.py 100 --file spiral.png --antialias high --debug
    python main.py --import_settings settings.json
    python main.py 48 --export_settings settings.json
"""

import argparse
import json
import math
import os
import re
import sys
from enum import Enum
from typing import Dict, List, Optional, Tuple

from PIL import Image, ImageColor, ImageDraw, ImageFont


Grid = List[List[Optional[int]]]


# ---------------------------------------------------------------------------
# Region
# ---------------------------------------------------------------------------
class Region(Enum):
    """One of the four triangular sectors that meet at the centre cell.

    Sectors are bounded by the diagonals through the origin. Cells on a
    diagonal can be read as belonging to either neighbouring sector.
    """

    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"
    TOP = "top"


# ---------------------------------------------------------------------------
# RegionMath
# ---------------------------------------------------------------------------
class RegionMath:
    """Closed-form values on the axes and diagonals of the spiral.

    Both tables come from the first ring around the origin:

         6 *7* 8          *6* 7 *8*
        *5* 0 *1*          5  0  1
         4 *3* 2          *4* 3 *2*

    The left picture marks the midpoint cells, the right one the diagonal
    cells. Each diagonal is the counter-clockwise boundary of its region.
    """

    STARTING_NUMS: Dict[Region, int] = {
        Region.RIGHT: 1,
        Region.BOTTOM: 3,
        Region.LEFT: 5,
        Region.TOP: 7,
    }

    DIAG_STARTING_NUMS: Dict[Region, int] = {
        Region.RIGHT: 8,
        Region.TOP: 6,
        Region.LEFT: 4,
        Region.BOTTOM: 2,
    }

    def midpoint_value(self, region: Region, layer_index: int) -> int:
        """Return the value ``layer_index`` cells from the origin along an axis.

        Args:
            region: Region whose axis is followed.
            layer_index: Ring number (0 is the origin).

        Returns:
            The integer stored in that cell.
        """
        n = layer_index
        return self.STARTING_NUMS[region] * n + 4 * n * (n - 1)

    def diagonal_value(self, region: Region, layer_index: int) -> int:
        """Return the value on the counter-clockwise diagonal of ``region``.

        Args:
            region: Region whose bounding diagonal is followed.
            layer_index: Ring number (0 is the origin).

        Returns:
            The integer stored in that diagonal cell.
        """
        n = layer_index
        return 4 * n * (n - 1) + self.DIAG_STARTING_NUMS[region] * n


def _check_max_value(max_value: int) -> None:
    """Reject anything that is not a non-negative int."""
    if isinstance(max_value, bool) or not isinstance(max_value, int):
        raise TypeError(f"max_value must be an int, got {type(max_value).__name__}")
    if max_value < 0:
        raise ValueError(f"max_value must be >= 0, got {max_value}")


# ---------------------------------------------------------------------------
# ExtentSolver
# ---------------------------------------------------------------------------
class ExtentSolver:
    """Computes how many rings are needed in each direction for a maximum value.

    Every new ring starts in the RIGHT direction, so RIGHT always holds the
    largest count and each other direction has either the same count or one
    less.
    """

    def __init__(self, math_: Optional[RegionMath] = None) -> None:
        self._math: RegionMath = math_ or RegionMath()

    def right_layer_count(self, max_value: int) -> int:
        """Solve the ring-count quadratic for the RIGHT direction.

        The root ``sqrt(k^2 - 10k + 16*max_value + 9)`` is taken with
        ``math.isqrt``. The radicand and the offset ``5 - k`` are integers,
        so flooring the root first does not change the final floor division.

        Args:
            max_value: Largest integer to place (>= 0).

        Returns:
            Number of rings to the right of the centre.
        """
        k = self._math.STARTING_NUMS[Region.RIGHT]
        s = math.isqrt(k * k - 10 * k + 16 * max_value + 9)
        return (s - k + 5) // 8

    def layers_per_region(self, max_value: int) -> Dict[Region, int]:
        """Return the ring count needed in each direction to hold ``max_value``.

        Args:
            max_value: Largest integer to place (>= 0).

        Returns:
            Mapping of every Region to its ring count.

        Raises:
            TypeError: If max_value is not an int.
            ValueError: If max_value is negative.
        """
        _check_max_value(max_value)
        right = self.right_layer_count(max_value)

        extents: Dict[Region, int] = {Region.RIGHT: right}
        # RIGHT opens each ring one cell past its own diagonal, which the
        # quadratic already covers, so only the other three are checked here.
        for region in (Region.BOTTOM, Region.LEFT, Region.TOP):
            if max_value >= self._math.diagonal_value(region, right):
                extents[region] = right
            else:
                extents[region] = right - 1
        return extents


# ---------------------------------------------------------------------------
# GridProjector
# ---------------------------------------------------------------------------
class GridProjector:
    """Fills a rectangular grid with spiral values by direct formula.

    Cells are addressed relative to the centre: negative rows are above it,
    negative columns to its left.
    """

    def __init__(self, math_: Optional[RegionMath] = None) -> None:
        self._math: RegionMath = math_ or RegionMath()
        self._solver: ExtentSolver = ExtentSolver(self._math)

    @property
    def solver(self) -> ExtentSolver:
        """Return the extent solver used to size grids."""
        return self._solver

    def classify(self, rel_row: int, rel_col: int) -> Region:
        """Return the region a cell belongs to.

        Diagonal cells (``|rel_row| == |rel_col|``) always go to TOP or
        BOTTOM, never to LEFT or RIGHT.

        Args:
            rel_row: Row offset from the centre.
            rel_col: Column offset from the centre.

        Returns:
            The Region of the cell.
        """
        if abs(rel_row) >= abs(rel_col):
            return Region.TOP if rel_row < 0 else Region.BOTTOM
        return Region.LEFT if rel_col < 0 else Region.RIGHT

    def cell_value(self, rel_row: int, rel_col: int) -> int:
        """Return the integer at a cell, given its offset from the centre.

        Args:
            rel_row: Row offset from the centre.
            rel_col: Column offset from the centre.

        Returns:
            The spiral value of the cell.
        """
        region = self.classify(rel_row, rel_col)
        if region is Region.LEFT:
            return self._math.midpoint_value(Region.LEFT, -rel_col) - rel_row
        if region is Region.RIGHT:
            return self._math.midpoint_value(Region.RIGHT, rel_col) + rel_row
        if region is Region.TOP:
            return self._math.midpoint_value(Region.TOP, -rel_row) + rel_col
        return self._math.midpoint_value(Region.BOTTOM, rel_row) - rel_col

    def grid_shape(self, extents: Dict[Region, int]) -> Tuple[int, int, int, int]:
        """Derive grid dimensions and the centre position from an extent map.

        Args:
            extents: Ring counts per region.

        Returns:
            A (width, height, center_row, center_col) tuple.
        """
        width = extents[Region.LEFT] + extents[Region.RIGHT] + 1
        height = extents[Region.TOP] + extents[Region.BOTTOM] + 1
        return width, height, extents[Region.TOP], extents[Region.LEFT]

    def render_grid(self, max_value: int) -> Grid:
        """Build the grid holding every integer from 0 to ``max_value``.

        Each row splits into three spans: cells left of the left diagonal,
        the central span (TOP above the centre row, BOTTOM from it down) and
        cells right of the right diagonal. Values above ``max_value`` are
        stored as None so the grid stays rectangular.

        Args:
            max_value: Largest integer to place (>= 0).

        Returns:
            Rows of cell values, top row first.

        Raises:
            TypeError: If max_value is not an int.
            ValueError: If max_value is negative.
        """
        extents = self._solver.layers_per_region(max_value)
        width, height, center_row, center_col = self.grid_shape(extents)
        midpoint = self._math.midpoint_value

        grid: Grid = []
        for r in range(height):
            rel_row = r - center_row
            span = abs(rel_row)
            # Columns [lo, hi] are the central span, inclusive of diagonals.
            lo = max(center_col - span, 0)
            hi = min(center_col + span, width - 1)

            row: List[Optional[int]] = []
            for c in range(lo):
                row.append(midpoint(Region.LEFT, center_col - c) - rel_row)

            if rel_row < 0:
                base = midpoint(Region.TOP, span)
                sign = 1
            else:
                base = midpoint(Region.BOTTOM, span)
                sign = -1
            for c in range(lo, hi + 1):
                row.append(base + sign * (c - center_col))

            for c in range(hi + 1, width):
                row.append(midpoint(Region.RIGHT, c - center_col) + rel_row)

            grid.append([v if v <= max_value else None for v in row])
        return grid


# ---------------------------------------------------------------------------
# GridFormatter
# ---------------------------------------------------------------------------
class GridFormatter:
    """Renders a grid as delimiter-separated text, one line per row."""

    def format(self, grid: Grid, delimiter: str = "\t") -> str:
        """Join each row's cells with ``delimiter``; empty cells become "".

        Args:
            grid: Rows of cell values.
            delimiter: Separator placed between cells.

        Returns:
            The rows joined by newlines, without a trailing newline.
        """
        return "\n".join(
            delimiter.join("" if v is None else str(v) for v in row)
            for row in grid
        )


# ---------------------------------------------------------------------------
# ColorParser
# ---------------------------------------------------------------------------
class ColorParser:
    """Turns a colour option string into an RGB tuple.

    Accepts CSS colour names, hex codes (#RGB, #RRGGBB) and integer triples
    such as '255,128,0'.
    """

    def parse(self, color_str: str) -> Tuple[int, int, int]:
        """Parse a colour string.

        Args:
            color_str: The colour specification.

        Returns:
            An (R, G, B) tuple with components in [0, 255].

        Raises:
            ValueError: If the string is not a recognised colour.
        """
        s = color_str.strip()
        if "," in s:
            return self._parse_triple(s)
        try:
            rgb = ImageColor.getrgb(s)
        except (ValueError, AttributeError):
            raise ValueError(f"Invalid color specification: '{color_str}'")
        return (rgb[0], rgb[1], rgb[2])

    def _parse_triple(self, s: str) -> Tuple[int, int, int]:
        parts = [p.strip() for p in s.split(",")]
        if len(parts) != 3:
            raise ValueError(f"RGB triple needs 3 components, got {len(parts)}: '{s}'")
        try:
            r, g, b = (int(p) for p in parts)
        except ValueError:
            raise ValueError(f"RGB components must be integers: '{s}'")
        for v in (r, g, b):
            if not 0 <= v <= 255:
                raise ValueError(f"RGB values must be in [0, 255], got {v}: '{s}'")
        return (r, g, b)


# ---------------------------------------------------------------------------
# SpiralImageRenderer
# ---------------------------------------------------------------------------
class SpiralImageRenderer:
    """Draws a spiral grid as an image of numbered square cells.

    The canvas is drawn at an integer multiple of the target size and
    downsampled, which smooths cell borders and glyph edges.
    """

    # Anti-alias scale factors.
    AA_SCALES: Dict[str, int] = {
        "off": 1,
        "low": 2,
        "medium": 4,
        "high": 8,
    }

    # Glyph height as a fraction of the cell size.
    _TEXT_SCALE: float = 0.4

    def render(
        self,
        grid: Grid,
        cell_size: int,
        line_width: int,
        color_fill: Tuple[int, int, int],
        color_line: Tuple[int, int, int],
        color_text: Tuple[int, int, int],
        color_center: Tuple[int, int, int],
        color_background: Tuple[int, int, int],
        antialias: str,
    ) -> Tuple[Image.Image, int]:
        """Render the grid to a Pillow image.

        Args:
            grid: Rows of cell values; None cells are left as background.
            cell_size: Edge length of one cell in pixels.
            line_width: Cell outline width in pixels (0 = no outline).
            color_fill: Fill colour of numbered cells.
            color_line: Outline colour.
            color_text: Number colour.
            color_center: Fill colour of the cell holding 0.
            color_background: Canvas colour.
            antialias: Anti-alias level ('off', 'low', 'medium', 'high').

        Returns:
            A tuple of (image at target resolution, number of cells drawn).
        """
        k = self.AA_SCALES.get(antialias, 1)
        rows = len(grid)
        cols = len(grid[0]) if rows else 0
        width, height = cols * cell_size, rows * cell_size

        s_cell = cell_size * k
        s_lw = line_width * k
        img = Image.new("RGB", (cols * s_cell, rows * s_cell), color_background)
        draw = ImageDraw.Draw(img)
        font = self._font(max(int(s_cell * self._TEXT_SCALE), 1))

        cell_count = 0
        for r, row in enumerate(grid):
            for c, value in enumerate(row):
                if value is None:
                    continue
                x0, y0 = c * s_cell, r * s_cell
                box = (x0, y0, x0 + s_cell - 1, y0 + s_cell - 1)
                fill = color_center if value == 0 else color_fill
                if s_lw > 0:
                    draw.rectangle(box, fill=fill, outline=color_line, width=s_lw)
                else:
                    draw.rectangle(box, fill=fill)
                self._draw_label(draw, str(value), x0, y0, s_cell, font, color_text)
                cell_count += 1

        if k > 1:
            img = img.resize((width, height), Image.LANCZOS)

        return img, cell_count

    def _font(self, size: int) -> ImageFont.FreeTypeFont:
        """Return Pillow's built-in font at roughly ``size`` pixels."""
        return ImageFont.load_default(size=size)

    def _draw_label(
        self,
        draw: ImageDraw.ImageDraw,
        text: str,
        x0: int,
        y0: int,
        cell: int,
        font: ImageFont.FreeTypeFont,
        color: Tuple[int, int, int],
    ) -> None:
        """Draw ``text`` centred in the cell whose top-left corner is (x0, y0)."""
        left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
        tx = x0 + (cell - (right - left)) / 2.0 - left
        ty = y0 + (cell - (bottom - top)) / 2.0 - top
        draw.text((tx, ty), text, fill=color, font=font)


# ---------------------------------------------------------------------------
# SettingsManager
# ---------------------------------------------------------------------------
class SettingsManager:
    """JSON import/export of parameter sets with CLI-precedence logic.

    JSON values override argparse defaults; options given explicitly on the
    command line override JSON values.
    """

    # Keys that are persisted to JSON.
    _PERSISTED_KEYS: List[str] = [
        "max_value", "delimiter", "file", "cell_size", "line_width",
        "color_fill", "color_line", "color_text", "color_center",
        "color_background", "antialias", "debug",
    ]

    def export_settings(self, params: argparse.Namespace, path: str) -> None:
        """Write the persisted parameters to a JSON file.

        Args:
            params: The resolved argparse Namespace.
            path: Output JSON file path.

        Raises:
            OSError: If the file cannot be written.
        """
        data = {key: getattr(params, key, None) for key in self._PERSISTED_KEYS}
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def import_settings(self, path: str) -> Dict:
        """Load settings from a JSON file.

        Args:
            path: Path to the JSON settings file.

        Returns:
            The decoded settings dictionary.

        Raises:
            FileNotFoundError: If the file does not exist.
            json.JSONDecodeError: If the file is not valid JSON.
            ValueError: If the JSON document is not an object.
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Settings file must hold a JSON object: '{path}'")
        return data

    def merge_settings(
        self,
        defaults: argparse.Namespace,
        json_settings: Dict,
        explicit_keys: set,
    ) -> argparse.Namespace:
        """Merge JSON settings into the parsed arguments.

        Args:
            defaults: The argparse Namespace with default/CLI values.
            json_settings: Dictionary loaded from JSON.
            explicit_keys: Names of options given explicitly on the CLI.

        Returns:
            The merged Namespace.
        """
        for key in self._PERSISTED_KEYS:
            if key in json_settings and key not in explicit_keys:
                setattr(defaults, key, json_settings[key])
        return defaults


# ---------------------------------------------------------------------------
# Version helper
# ---------------------------------------------------------------------------
_RELEASE_HEADING = re.compile(r"^##\s+\[(\d+\.\d+\.\d+)\]")


def _changelog_version(fallback: str = "0.0.0") -> str:
    """Return the newest release number listed in CHANGELOG.md.

    Releases are listed newest first, so the first numbered heading wins.
    """
    changelog = os.path.join(os.path.dirname(os.path.abspath(__file__)), "CHANGELOG.md")
    try:
        with open(changelog, "r", encoding="utf-8") as fh:
            for line in fh:
                m = _RELEASE_HEADING.match(line)
                if m:
                    return m.group(1)
    except OSError:
        pass
    return fallback


def _with_extension(path: str, ext: str) -> str:
    """Append ``ext`` unless ``path`` already ends with it (case-insensitive)."""
    return path if path.lower().endswith(ext) else path + ext


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------
class Application:
    """Top-level entry point for Number Spiral.

    Orchestrates argument parsing, settings files, grid projection, text and
    image output, and the debug report.
    """

    VERSION:      str = _changelog_version("1.0.0")
    BUILD_DATE:   str = "2026-10-17"
    TITLE:        str = "Number Spiral"
    AUTHOR:       str = "Number Spiral contributors"
    BANNER_WIDTH: int = 60

    _COLOR_KEYS: Tuple[str, ...] = (
        "color_fill", "color_line", "color_text", "color_center", "color_background",
    )

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Execute the full application pipeline.

        Args:
            argv: Argument list to parse; defaults to ``sys.argv[1:]``.

        Returns:
            None
        """
        # Step 1: Parse CLI arguments and detect explicit keys
        args, explicit_keys = self._parse_args(argv)
        manager = SettingsManager()

        # Step 2: Import settings if requested
        if args.import_settings:
            import_path = _with_extension(args.import_settings, ".json")
            try:
                json_data = manager.import_settings(import_path)
            except FileNotFoundError:
                self._fail(f"Settings file not found: '{import_path}'")
            except json.JSONDecodeError as e:
                self._fail(f"Malformed JSON in settings file: {e}")
            except ValueError as e:
                self._fail(str(e))
            args = manager.merge_settings(args, json_data, explicit_keys)

        # Step 3: Validate the merged parameters
        if isinstance(args.max_value, bool) or not isinstance(args.max_value, int):
            self._fail(f"max_value must be an integer, got {args.max_value!r}")
        if args.max_value < 0:
            self._fail(f"max_value must be >= 0, got {args.max_value}")
        if args.antialias not in SpiralImageRenderer.AA_SCALES:
            valid_aa = ", ".join(sorted(SpiralImageRenderer.AA_SCALES))
            self._fail(f"Invalid antialias level '{args.antialias}'. Must be one of: {valid_aa}")
        for key, lowest in (("cell_size", 1), ("line_width", 0)):
            value = getattr(args, key)
            if isinstance(value, bool) or not isinstance(value, int) or value < lowest:
                self._fail(f"{key} must be an integer >= {lowest}, got {value!r}")
        if not isinstance(args.delimiter, str):
            self._fail(f"delimiter must be a string, got {args.delimiter!r}")
        if args.file is not None and not isinstance(args.file, str):
            self._fail(f"file must be a string, got {args.file!r}")
        colors = {}
        if args.file:
            for key in self._COLOR_KEYS:
                if not isinstance(getattr(args, key), str):
                    self._fail(f"{key} must be a string, got {getattr(args, key)!r}")
            parser = ColorParser()
            try:
                for key in self._COLOR_KEYS:
                    colors[key] = parser.parse(getattr(args, key))
            except ValueError as e:
                self._fail(str(e))

        # Step 4: Export settings if requested
        export_path = None
        if args.export_settings:
            export_path = _with_extension(args.export_settings, ".json")
            try:
                manager.export_settings(args, export_path)
            except OSError as e:
                self._fail(f"Cannot write settings file: {e}")

        # Step 5: Project the spiral
        projector = GridProjector()
        extents = projector.solver.layers_per_region(args.max_value)
        grid = projector.render_grid(args.max_value)

        # Step 6: Optional image output, saved before any text is printed
        out_file = None
        cell_count = None
        if args.file:
            out_file = _with_extension(args.file, ".png")
            img, cell_count = SpiralImageRenderer().render(
                grid=grid,
                cell_size=args.cell_size,
                line_width=args.line_width,
                antialias=args.antialias,
                **colors,
            )
            try:
                img.save(out_file, "PNG")
            except OSError as e:
                self._fail(f"Cannot write image file: {e}")

        # Step 7: Print the spiral
        delimiter = args.delimiter.replace("\\t", "\t")
        print(GridFormatter().format(grid, delimiter))

        # Step 8: Debug output
        if args.debug:
            self._print_banner()
            self._print_debug(
                max_value=args.max_value,
                extents=extents,
                shape=projector.grid_shape(extents),
                cell_count=cell_count,
                out_file=out_file,
                export_path=export_path,
            )

    def _fail(self, message: str) -> None:
        """Report an error on stderr and exit with status 1."""
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(1)

    def _parse_args(self, argv: Optional[List[str]]) -> Tuple[argparse.Namespace, set]:
        """Parse CLI arguments and detect which were explicitly provided.

        Returns:
            A tuple of (parsed Namespace, set of explicitly-provided key names).
        """
        args = self._build_parser().parse_args(argv)

        # Second parse with SUPPRESS defaults to detect explicit keys
        explicit_args = self._build_parser(suppress_defaults=True).parse_args(argv)
        explicit_keys = set(vars(explicit_args).keys())
        if explicit_args.max_value is None:
            explicit_keys.discard("max_value")

        return args, explicit_keys

    def _build_parser(self, suppress_defaults: bool = False) -> argparse.ArgumentParser:
        """Build the argparse ArgumentParser.

        Args:
            suppress_defaults: If True, set all defaults to SUPPRESS to
                detect explicitly-provided CLI args.

        Returns:
            A configured ArgumentParser.
        """
        banner = self._banner_text()

        class _BannerParser(argparse.ArgumentParser):
            """ArgumentParser that prints the banner before help text."""

            def print_help(self, file=None):
                if file is None:
                    file = sys.stdout
                file.write(banner + "\n\n")
                super().print_help(file)

        def d(value):
            return argparse.SUPPRESS if suppress_defaults else value

        parser = _BannerParser(
            description="Number Spiral - print the integers 0..N wound as a square spiral.",
        )
        # argparse runs a missing positional's string default through type=int,
        # so it cannot default to SUPPRESS; None marks it absent.
        parser.add_argument("max_value", type=int, nargs="?",
                            default=None if suppress_defaults else 24,
                            help="Largest number in the spiral (default: 24)")
        parser.add_argument("--delimiter", type=str, default=d("\t"),
                            help="Cell separator for text output (default: tab)")
        parser.add_argument("--file", type=str, default=d(None),
                            help="Also save the spiral as a PNG image")
        parser.add_argument("--cell_size", type=int, default=d(48),
                            help="Cell edge length in pixels (default: 48)")
        parser.add_argument("--line_width", type=int, default=d(2),
                            help="Cell outline width in pixels, 0 = none (default: 2)")
        parser.add_argument("--color_fill", type=str, default=d("white"),
                            help="Cell fill colour (default: white)")
        parser.add_argument("--color_line", type=str, default=d("dimgrey"),
                            help="Cell outline colour (default: dimgrey)")
        parser.add_argument("--color_text", type=str, default=d("black"),
                            help="Number colour (default: black)")
        parser.add_argument("--color_center", type=str, default=d("gold"),
                            help="Fill colour of the 0 cell (default: gold)")
        parser.add_argument("--color_background", type=str, default=d("lightgrey"),
                            help="Background colour (default: lightgrey)")
        parser.add_argument("--antialias", type=str, default=d("high"),
                            help="Anti-alias level: off, low, medium, high (default: high)")
        parser.add_argument("--debug", nargs="?", const=True, default=d(False),
                            type=self._parse_bool_flag,
                            help="Print the banner and a debug report")
        parser.add_argument("--export_settings", type=str, default=None,
                            help="Export parameters to a JSON file")
        parser.add_argument("--import_settings", type=str, default=None,
                            help="Import parameters from a JSON file")

        return parser

    _TRUE_WORDS = ("true", "1", "yes", "on")
    _FALSE_WORDS = ("false", "0", "no", "off")

    def _parse_bool_flag(self, value: str) -> bool:
        """Read ``--debug`` given bare or with an explicit yes/no word."""
        if isinstance(value, bool):
            return value
        word = value.strip().lower()
        if word in self._TRUE_WORDS:
            return True
        if word in self._FALSE_WORDS:
            return False
        raise argparse.ArgumentTypeError(f"Expected yes/no for --debug, got '{value}'")

    def _banner_text(self) -> str:
        """Build the application banner as a string."""
        inner = self.BANNER_WIDTH - 2
        lines = [
            "┌" + "─" * inner + "┐",
            f"│{'  Program:    ' + self.TITLE:<{inner}}│",
            f"│{'  Version:    ' + self.VERSION:<{inner}}│",
            f"│{'  Build Date: ' + self.BUILD_DATE:<{inner}}│",
            f"│{'  Author:     ' + self.AUTHOR:<{inner}}│",
            "└" + "─" * inner + "┘",
        ]
        return "\n".join(lines)

    def _print_banner(self) -> None:
        """Print the application banner to stdout."""
        print()
        print(self._banner_text())

    def _print_debug(
        self,
        max_value: int,
        extents: Dict[Region, int],
        shape: Tuple[int, int, int, int],
        cell_count: Optional[int],
        out_file: Optional[str],
        export_path: Optional[str],
    ) -> None:
        """Print the debug report to stdout.

        Args:
            max_value: The largest number placed.
            extents: Ring counts per region.
            shape: (width, height, center_row, center_col) of the grid.
            cell_count: Cells drawn to the image, or None without an image.
            out_file: Saved PNG path, if any.
            export_path: Saved settings path, if any.
        """
        width, height, center_row, center_col = shape
        layers = ", ".join(f"{region.value}={extents[region]}" for region in Region)
        print(f"\n  Max value:        {max_value}")
        print(f"  Layers:           {layers}")
        print(f"  Grid size:        {width} x {height}")
        print(f"  Centre cell:      (row {center_row}, col {center_col})")
        if cell_count is not None:
            print(f"  Cells drawn:      {cell_count}")
        for path in (out_file, export_path):
            if path:
                size_str = self._format_file_size(os.path.getsize(path))
                print(f"  Saved: {path} ({size_str})")
        print()

    def _format_file_size(self, size_bytes: int) -> str:
        """Size of a saved PNG or settings file for the debug report."""
        for unit, scale in (("MB", 1024 * 1024), ("KB", 1024)):
            if size_bytes >= scale:
                return f"{size_bytes / scale:.2f} {unit}"
        return f"{size_bytes} B"


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main() -> None:
    """Console entry point; the debug banner needs UTF-8 box-drawing glyphs."""
    if sys.stdout and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    Application().run()


if __name__ == "__main__":
    main()
