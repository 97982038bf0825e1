# formgen/orchestrator.py
"""
Main orchestrator of the CSV to form pipeline.

tokenize -> profile -> detect -> generate -> analyze
"""

import logging
import time
from typing import Optional, Union

from .config import InferenceConfig, DEFAULT_CONFIG
from .csv_loader import CsvLoader, CsvParseOptions, RawTable
from .detector import TypeDetector
from .exceptions import FormGenerationError
from .generator import FormGenerator, GenerationOptions, GeneratorErrors
from .models import AnalysisResult, GenerationResult
from .profiler import ColumnProfiler
from .reporting import QualityAnalyzer

logger = logging.getLogger(__name__)

CsvInput = Union[str, bytes]

PREVIEW_MAX_ROWS = 10


class FormGenerationOrchestrator:
    """
    Coordinates every module of the inference engine.

    Holds no state between runs: each call is an independent pass over its
    input.
    """

    def __init__(self, config: Optional[InferenceConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.profiler = ColumnProfiler(self.config)
        self.detector = TypeDetector(self.config)
        self.generator = FormGenerator(self.config, self.profiler, self.detector)
        self.analyzer = QualityAnalyzer(self.config)

    def generate_form_from_csv(
        self,
        content: CsvInput,
        options: Optional[GenerationOptions] = None,
        parse_options: Optional[CsvParseOptions] = None
    ) -> GenerationResult:
        """
        Runs the whole pipeline over CSV text or uploaded bytes.

        Args:
            content: CSV text, or raw bytes whose encoding is detected
            options: Generation options
            parse_options: Tokenizer options

        Returns:
            GenerationResult; unsuccessful, without form, on parse or empty input errors
        """
        started_at = time.perf_counter()
        options = options or GenerationOptions()

        try:
            table = self._load(content, parse_options)
        except FormGenerationError as e:
            logger.warning(f"CSV rejected: {e}")
            return GenerationResult(success=False, errors=[GeneratorErrors.from_exception(e)])

        return self.generate_from_table(table, options, started_at)

    def generate_from_table(
        self,
        table: RawTable,
        options: Optional[GenerationOptions] = None,
        started_at: Optional[float] = None
    ) -> GenerationResult:
        started_at = started_at if started_at is not None else time.perf_counter()
        options = options or GenerationOptions()

        logger.info(
            f"Generating form from {table.total_columns} columns x {table.total_rows} rows "
            f"(strategy={options.detection_strategy.value})"
        )

        profiles = self.profiler.profile_table(table)
        detections = self.detector.detect_all(profiles)
        form = self.generator.build_form(profiles, detections, options, table.warnings, started_at)
        quality = self.analyzer.analyze(table, detections, profiles)
        preview = self.generator.build_preview(detections, quality) if options.include_preview else None

        return GenerationResult(
            success=True,
            form=form,
            detections=detections,
            quality=quality,
            preview=preview,
            warnings=list(table.warnings)
        )

    def analyze(self, content: CsvInput, parse_options: Optional[CsvParseOptions] = None) -> AnalysisResult:
        """Profiles and detects every column without building a form."""
        try:
            table = self._load(content, parse_options)
        except FormGenerationError as e:
            logger.warning(f"CSV rejected: {e}")
            return AnalysisResult(success=False, errors=[GeneratorErrors.from_exception(e)])

        profiles = self.profiler.profile_table(table)
        detections = self.detector.detect_all(profiles)
        quality = self.analyzer.analyze(table, detections, profiles)

        return AnalysisResult(
            success=True,
            total_rows=table.total_rows,
            delimiter=table.delimiter,
            profiles=profiles,
            detections=detections,
            quality=quality,
            warnings=list(table.warnings)
        )

    def preview_form_generation(self, content: CsvInput) -> GenerationResult:
        """
        Quick estimate over the first rows only; no form is built.
        """
        try:
            table = self._load(content, CsvParseOptions(max_rows=PREVIEW_MAX_ROWS))
        except FormGenerationError as e:
            logger.warning(f"CSV rejected: {e}")
            return GenerationResult(success=False, errors=[GeneratorErrors.from_exception(e)])

        profiles = self.profiler.profile_table(table)
        detections = self.detector.detect_all(profiles)
        quality = self.analyzer.analyze(table, detections, profiles)

        return GenerationResult(
            success=True,
            detections=detections,
            quality=quality,
            preview=self.generator.build_preview(detections, quality),
            warnings=list(table.warnings)
        )

    @staticmethod
    def _load(content: CsvInput, parse_options: Optional[CsvParseOptions]) -> RawTable:
        if isinstance(content, bytes):
            return CsvLoader.load_bytes(content, parse_options)
        return CsvLoader.load_text(content, parse_options)
