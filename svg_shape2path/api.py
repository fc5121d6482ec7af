"""High-level API: apply convertShapeToPath to whole SVG documents."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from xml.etree.ElementTree import Element, ElementTree

from svg_shape2path.config import Config
from svg_shape2path.exceptions import ConversionError, Shape2PathError
from svg_shape2path.log import set_package_level
from svg_shape2path.plugins import KeepSignal, Plugin, get_plugin
from svg_shape2path.svg.element import SVGItem
from svg_shape2path.svg.parser import parse_svg, parse_svg_string, tostring, write_svg

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of converting one document."""

    success: bool = True
    input_path: Path | None = None
    output_path: Path | None = None
    converted: int = 0
    removed: int = 0
    unchanged: int = 0
    errors: list[str] = field(default_factory=list)

    def record(self, signal: KeepSignal) -> None:
        if signal is KeepSignal.CONVERTED:
            self.converted += 1
        elif signal is KeepSignal.REMOVE:
            self.removed += 1
        else:
            self.unchanged += 1


class Shape2PathConverter:
    """Convert basic shapes to paths across SVG documents.

    Example:
        >>> converter = Shape2PathConverter(convert_arcs=True)
        >>> result = converter.convert_file("input.svg", "output.svg")
    """

    def __init__(
        self,
        convert_arcs: bool | None = None,
        config: Config | None = None,
        log_level: str | None = None,
    ) -> None:
        """Initialize converter.

        Args:
            convert_arcs: Convert circles and ellipses too. Overrides config.
            config: Settings; defaults to ``Config()``.
            log_level: Logging level name applied to the package logger.
                Handlers are left to the application.
        """
        config = config or Config()
        if convert_arcs is not None:
            config = replace(config, convert_arcs=convert_arcs)
        if log_level is not None:
            config = replace(config, log_level=log_level)
            set_package_level(log_level)
        self.config = config

        self.plugin: Plugin = get_plugin("convertShapeToPath")
        self.params = self.plugin.resolve_params(self.config.plugin_params)

    def convert_tree(self, tree: ElementTree | Element) -> ConversionResult:
        """Apply the plugin to every element of a tree in place.

        Elements the plugin marks for removal are detached from their parent
        and their subtrees are not visited.
        """
        root = tree.getroot() if isinstance(tree, ElementTree) else tree
        if root is None:
            raise ConversionError("Cannot convert an empty document")
        result = ConversionResult()

        signal = self._apply(root)
        if signal is KeepSignal.REMOVE:
            # The root has no parent to detach from
            logger.warning("Cannot remove root <%s>; keeping it", SVGItem(root).name)
            signal = KeepSignal.UNCHANGED
        result.record(signal)
        self._walk(root, result)

        logger.info(
            "Converted %d, removed %d, unchanged %d elements",
            result.converted,
            result.removed,
            result.unchanged,
        )
        return result

    def _apply(self, element: Element) -> KeepSignal:
        if not isinstance(element.tag, str):
            return KeepSignal.UNCHANGED
        return self.plugin.fn(SVGItem(element), self.params)

    def _walk(self, parent: Element, result: ConversionResult) -> None:
        for child in list(parent):
            signal = self._apply(child)
            result.record(signal)
            if signal is KeepSignal.REMOVE:
                parent.remove(child)
                continue
            self._walk(child, result)

    def convert_string(self, svg_content: str) -> tuple[str, ConversionResult]:
        """Convert SVG markup and return the new markup with the result.

        Raises:
            SVGParseError: If the markup cannot be parsed.
        """
        tree = parse_svg_string(svg_content)
        result = self.convert_tree(tree)
        return tostring(tree), result

    def convert_file(
        self, input_path: str | Path, output_path: str | Path
    ) -> ConversionResult:
        """Convert one SVG file.

        Failures are reported through ``ConversionResult.errors`` rather
        than raised.
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        try:
            tree = parse_svg(input_path)
            result = self.convert_tree(tree)
            write_svg(tree, output_path)
        except (Shape2PathError, OSError) as e:
            logger.error("Failed to convert %s: %s", input_path, e)
            return ConversionResult(
                success=False, input_path=input_path, errors=[str(e)]
            )

        result.input_path = input_path
        result.output_path = output_path
        return result
