# src/ldoc_gen/converter.py

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from time import monotonic

from ldoc_gen.annotations.aliases import extract_aliases
from ldoc_gen.chunking.chunking import assemble_chunks
from ldoc_gen.config import ConverterConfig
from ldoc_gen.errors import SourceParseError
from ldoc_gen.observability import names
from ldoc_gen.observability.base import MetricsHook, NoOpMetricsHook
from ldoc_gen.parsers.base import SourceParser
from ldoc_gen.parsers.lua_parser import LuaParser
from ldoc_gen.rendering.examples import rewrite_examples
from ldoc_gen.rendering.regroup import render_chunks

logger = logging.getLogger(__name__)


@dataclass
class ConversionReport:
    converted: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


class Converter:
    """Rewrites annotated Lua sources into LDoc-ready files.

    Files are handled one at a time. A file that cannot be read or parsed is
    logged and skipped; output directory and write failures propagate.
    """

    def __init__(
        self,
        config: ConverterConfig | None = None,
        parser: SourceParser | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config or ConverterConfig()
        self.parser = parser or LuaParser(strict=self.config.strict_parse)
        self.metrics_hook = metrics_hook

    def convert_source(self, source: str) -> str:
        """Run the whole pipeline over one file's text."""
        source, aliases = extract_aliases(source)
        parsed = self.parser.parse(source)
        chunks = assemble_chunks(parsed)

        self.metrics_hook.increment(names.CONVERSION_ALIASES_EXTRACTED, len(aliases))
        self.metrics_hook.increment(names.CONVERSION_CHUNKS_CREATED, len(chunks))
        self.metrics_hook.record_gauge(names.CONVERSION_CHUNKS_PER_FILE, len(chunks))

        return rewrite_examples(render_chunks(chunks))

    def convert_file(self, path: Path) -> Path:
        """Convert one file into the output directory. Errors propagate."""
        self.config.output_path.mkdir(parents=True, exist_ok=True)
        text = self.convert_source(path.read_text(encoding="utf-8"))
        return self._write(path, text)

    def convert_tree(self) -> ConversionReport:
        root = self.config.source_dir
        if not root.is_dir():
            raise NotADirectoryError(f"Source directory not found: {root}")

        output_path = self.config.output_path
        output_path.mkdir(parents=True, exist_ok=True)
        logger.info("Converting %s into %s", root, output_path)

        report = ConversionReport()
        written: dict[str, Path] = {}

        for path in self.discover_files():
            start = monotonic()
            try:
                source = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                self._record_failure(report, path, f"read failed: {exc}")
                continue

            try:
                text = self.convert_source(source)
            except SourceParseError as exc:
                self._record_failure(report, path, f"parse failed: {exc}")
                continue

            if path.name in written:
                logger.warning(
                    "%s overwrites output of %s (output is flat)",
                    path,
                    written[path.name],
                )
            written[path.name] = path

            target = self._write(path, text)
            report.converted.append(path)

            elapsed_ms = 1000 * (monotonic() - start)
            self.metrics_hook.record_latency(names.CONVERSION_FILE_DURATION, elapsed_ms)
            self.metrics_hook.increment(
                names.CONVERSION_FILES_TOTAL, labels={"status": "converted"}
            )
            logger.info("Converted %s -> %s", path, target)

        logger.info(
            "Finished: %d converted, %d failed",
            len(report.converted),
            len(report.failed),
        )
        return report

    def discover_files(self) -> Iterator[Path]:
        """Walk the source tree in sorted order, skipping the output directory."""
        skip = self.config.output_dir_name

        for dirpath, dirnames, filenames in os.walk(
            self.config.source_dir, onerror=_log_walk_error
        ):
            dirnames[:] = sorted(name for name in dirnames if name != skip)
            for filename in sorted(filenames):
                path = Path(dirpath) / filename
                if filename.endswith(self.config.extension) and path.is_file():
                    yield path
                else:
                    logger.debug("Skipping %s", path)

    def _write(self, path: Path, text: str) -> Path:
        target = self.config.output_path / path.name
        target.write_text(text, encoding="utf-8")
        return target

    def _record_failure(
        self, report: ConversionReport, path: Path, reason: str
    ) -> None:
        logger.error("Failed to convert %s: %s", path, reason)
        report.failed.append((path, reason))
        self.metrics_hook.increment(
            names.CONVERSION_FILES_FAILED_TOTAL, labels={"status": "failed"}
        )


def _log_walk_error(error: OSError) -> None:
    logger.warning("Failed to read directory entry: %s", error)
