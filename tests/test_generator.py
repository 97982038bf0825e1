"""Unit tests for form generation through the pipeline orchestrator."""

from __future__ import annotations

import unittest

from backend.core.formgen import (
    CsvParseOptions,
    DetectionStrategy,
    FieldOverride,
    FieldType,
    FormGenerationOrchestrator,
    GenerationOptions,
)
from backend.core.formgen.detector.patterns import EMAIL_PATTERN
from backend.core.formgen.generator import FieldValidation

PEOPLE_CSV = "name,age\nAlice,30\nBob,25\n"


class FormGeneratorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.orchestrator = FormGenerationOrchestrator()

    def generate(self, text: str, **options):
        result = self.orchestrator.generate_form_from_csv(text, GenerationOptions(**options))
        self.assertTrue(result.success, result.errors)
        return result

    def test_one_field_per_column_in_header_order(self) -> None:
        form = self.generate(PEOPLE_CSV).form

        self.assertEqual([f.label for f in form.fields], ["name", "age"])
        self.assertEqual([f.column_index for f in form.fields], [0, 1])
        self.assertEqual([f.type for f in form.fields], [FieldType.TEXT, FieldType.NUMBER])

    def test_defaults_for_title_and_description(self) -> None:
        form = self.generate(PEOPLE_CSV).form

        self.assertEqual(form.title, "Generated Form")
        self.assertEqual(form.description, "Form generated from CSV data")

    def test_fully_populated_columns_are_required(self) -> None:
        form = self.generate("a,b\n1,x\n2,\n3,y\n").form

        self.assertTrue(form.fields[0].required)
        self.assertFalse(form.fields[1].required)

    def test_header_only_csv_yields_optional_text_fields(self) -> None:
        result = self.generate("a,b\n")

        self.assertEqual(result.form.metadata.total_fields, 2)
        for generated in result.form.fields:
            self.assertEqual(generated.type, FieldType.TEXT)
            self.assertEqual(generated.confidence, 0.0)
            self.assertFalse(generated.required)
        self.assertEqual(len(result.form.metadata.warnings), 2)

    def test_field_ids_are_unique(self) -> None:
        form = self.generate("a,b,c\n1,2,3\n").form

        ids = [f.id for f in form.fields]
        self.assertEqual(len(set(ids)), 3)
        self.assertTrue(all(field_id.startswith("field_") for field_id in ids))

    def test_generation_is_deterministic_except_ids(self) -> None:
        def shape(form):
            return [
                (f.label, f.type, f.required, f.confidence, f.options, f.validation)
                for f in form.fields
            ]

        first = self.generate(PEOPLE_CSV).form
        second = self.generate(PEOPLE_CSV).form

        self.assertEqual(shape(first), shape(second))

    def test_yes_no_field_carries_options_and_placeholder(self) -> None:
        generated = self.generate("subscribe\nYes\nNo\nYes\n").form.fields[0]

        self.assertEqual(generated.type, FieldType.YESNO)
        self.assertEqual(generated.options, ("Yes", "No"))
        self.assertEqual(generated.placeholder, "Select Yes or No")

    def test_text_placeholder_uses_lowercased_label(self) -> None:
        generated = self.generate("Full Name\nAnn\nBo\n").form.fields[0]

        self.assertEqual(generated.placeholder, "Enter full name...")

    def test_email_field_gets_pattern_and_max_length(self) -> None:
        generated = self.generate("contact\na@x.com\nb@y.org\nc@z.net\n").form.fields[0]

        self.assertEqual(generated.type, FieldType.EMAIL)
        self.assertEqual(generated.validation.pattern, EMAIL_PATTERN)
        self.assertEqual(generated.validation.max_length, 255)

    def test_integer_column_gets_unit_step(self) -> None:
        generated = self.generate(PEOPLE_CSV).form.fields[1]

        self.assertEqual(generated.validation.step, 1)
        # Observed bounds are too weak to become constraints
        self.assertIsNone(generated.validation.min)

    def test_type_properties_are_attached(self) -> None:
        long_text = "lorem ipsum " * 12
        form = self.generate(f"body,price\n{long_text},$1.00\n{long_text}x,$2.50\n").form

        self.assertEqual(form.fields[0].type, FieldType.TEXTAREA)
        self.assertEqual(form.fields[0].properties, {"textarea_rows": 4})
        self.assertEqual(form.fields[1].type, FieldType.MONEY)
        self.assertEqual(form.fields[1].properties, {"currency": "USD"})

    def test_metadata_summarizes_fields(self) -> None:
        metadata = self.generate(PEOPLE_CSV).form.metadata

        self.assertEqual(metadata.total_fields, 2)
        self.assertEqual(metadata.detected_types, {"text": 1, "number": 1})
        self.assertEqual(metadata.confidence_scores, [0.5, 1.0])
        self.assertAlmostEqual(metadata.average_confidence, 0.75)
        self.assertGreaterEqual(metadata.processing_time_ms, 0.0)

    def test_low_confidence_fields_are_recommended_for_review(self) -> None:
        metadata = self.generate(PEOPLE_CSV).form.metadata

        self.assertIn(
            'Consider reviewing field "name" - low confidence detection (50%)',
            metadata.recommendations
        )

    def test_tokenizer_warnings_are_reported(self) -> None:
        result = self.generate("a,b\n1\n")

        self.assertEqual(len(result.warnings), 1)
        self.assertIn(result.warnings[0].message, result.form.metadata.warnings)


class FieldOverrideTests(unittest.TestCase):
    def setUp(self) -> None:
        self.orchestrator = FormGenerationOrchestrator()

    def generate(self, text: str, *overrides: FieldOverride):
        return self.orchestrator.generate_form_from_csv(
            text, GenerationOptions(field_overrides=overrides)
        ).form

    def test_override_replaces_type_and_label(self) -> None:
        form = self.generate(PEOPLE_CSV, FieldOverride(0, field_type=FieldType.TEXTAREA, label="Full name"))

        generated = form.fields[0]
        self.assertEqual(generated.type, FieldType.TEXTAREA)
        self.assertEqual(generated.label, "Full name")
        self.assertEqual(generated.confidence, 1.0)
        self.assertNotIn(
            'Consider reviewing field "Full name" - low confidence detection (50%)',
            form.metadata.recommendations
        )

    def test_override_required_options_and_validation(self) -> None:
        validation = FieldValidation(min=18, max=99)
        form = self.generate(
            PEOPLE_CSV,
            FieldOverride(0, field_type=FieldType.SELECT, options=("Alice", "Bob", "Carol"), required=False),
            FieldOverride(1, validation=validation)
        )

        self.assertEqual(form.fields[0].options, ("Alice", "Bob", "Carol"))
        self.assertFalse(form.fields[0].required)
        self.assertEqual(form.fields[1].type, FieldType.NUMBER)
        self.assertEqual(form.fields[1].validation, validation)

    def test_overridden_select_uses_distinct_values(self) -> None:
        form = self.generate("city\nParis\nRome\nParis\n", FieldOverride(0, field_type=FieldType.SELECT))

        self.assertEqual(form.fields[0].options, ("Paris", "Rome"))

    def test_too_many_options_are_omitted_with_warning(self) -> None:
        rows = "\n".join(f"value{i}" for i in range(25))
        form = self.generate(f"code\n{rows}\n", FieldOverride(0, field_type=FieldType.SELECT))

        self.assertEqual(form.fields[0].options, ())
        self.assertTrue(any("25 distinct values" in w for w in form.metadata.warnings))

    def test_unknown_override_column_is_a_warning(self) -> None:
        form = self.generate(PEOPLE_CSV, FieldOverride(5, field_type=FieldType.EMAIL))

        self.assertEqual(form.metadata.total_fields, 2)
        self.assertTrue(any("column 5" in w for w in form.metadata.warnings))


class DetectionStrategyTests(unittest.TestCase):
    CSV = "contact\na@x.com\nb@y.org\nc@z.net\nunknown\n"

    def field_type(self, strategy: DetectionStrategy) -> FieldType:
        result = FormGenerationOrchestrator().generate_form_from_csv(
            self.CSV, GenerationOptions(detection_strategy=strategy)
        )
        return result.form.fields[0].type

    def test_auto_keeps_detection(self) -> None:
        self.assertEqual(self.field_type(DetectionStrategy.AUTO), FieldType.EMAIL)

    def test_aggressive_keeps_detection(self) -> None:
        self.assertEqual(self.field_type(DetectionStrategy.AGGRESSIVE), FieldType.EMAIL)

    def test_conservative_falls_back_to_text(self) -> None:
        self.assertEqual(self.field_type(DetectionStrategy.CONSERVATIVE), FieldType.TEXT)

    def test_conservative_fallback_reports_text_confidence(self) -> None:
        result = FormGenerationOrchestrator().generate_form_from_csv(
            self.CSV, GenerationOptions(detection_strategy=DetectionStrategy.CONSERVATIVE)
        )

        generated = result.form.fields[0]
        self.assertAlmostEqual(result.detections[0].confidence, 0.75)
        self.assertEqual(generated.confidence, 0.5)
        self.assertIsNone(generated.validation)
        self.assertAlmostEqual(result.form.metadata.average_confidence, 0.5)
        self.assertIn(
            'Consider reviewing field "contact" - low confidence detection (50%)',
            result.form.metadata.recommendations
        )

    def test_auto_keeps_detection_confidence(self) -> None:
        result = FormGenerationOrchestrator().generate_form_from_csv(self.CSV)

        self.assertAlmostEqual(result.form.fields[0].confidence, 0.75)


class OrchestratorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.orchestrator = FormGenerationOrchestrator()

    def test_malformed_csv_returns_failure_without_form(self) -> None:
        result = self.orchestrator.generate_form_from_csv('a,b\n"open,1\n')

        self.assertFalse(result.success)
        self.assertIsNone(result.form)
        self.assertEqual(result.errors[0].code, "CSV_PARSE_ERROR")

    def test_empty_input_returns_failure(self) -> None:
        result = self.orchestrator.generate_form_from_csv("")

        self.assertFalse(result.success)
        self.assertEqual(result.errors[0].code, "EMPTY_INPUT")

    def test_bytes_input_is_decoded(self) -> None:
        result = self.orchestrator.generate_form_from_csv(PEOPLE_CSV.encode("utf-8"))

        self.assertTrue(result.success)
        self.assertEqual(result.form.metadata.total_fields, 2)

    def test_preview_estimates_complexity(self) -> None:
        preview = self.orchestrator.generate_form_from_csv(PEOPLE_CSV).preview

        self.assertEqual(preview.estimated_fields, 2)
        self.assertAlmostEqual(preview.complexity_score, 0.4)
        self.assertFalse(preview.user_interaction_required)
        self.assertIn(
            "Some fields have low confidence detection - review recommended",
            preview.suggested_improvements
        )

    def test_preview_can_be_disabled(self) -> None:
        result = self.orchestrator.generate_form_from_csv(PEOPLE_CSV, GenerationOptions(include_preview=False))

        self.assertIsNone(result.preview)

    def test_sparse_data_requires_user_interaction(self) -> None:
        preview = self.orchestrator.generate_form_from_csv("a,b\n1,\n,\n").preview

        self.assertTrue(preview.user_interaction_required)

    def test_preview_only_run_builds_no_form(self) -> None:
        rows = "\n".join(f"{i},n{i}" for i in range(50))
        result = self.orchestrator.preview_form_generation(f"id,name\n{rows}\n")

        self.assertTrue(result.success)
        self.assertIsNone(result.form)
        self.assertEqual(result.preview.estimated_fields, 2)
        self.assertEqual(result.quality.total_cells, 20)

    def test_analyze_reports_profiles_and_detections(self) -> None:
        result = self.orchestrator.analyze("a;b\n1;x\n2;y\n", CsvParseOptions(delimiter=";"))

        self.assertTrue(result.success)
        self.assertEqual(result.total_rows, 2)
        self.assertEqual([p.column_name for p in result.profiles], ["a", "b"])
        self.assertEqual(result.detections[0].field_type, FieldType.NUMBER)

    def test_result_serializes(self) -> None:
        payload = self.orchestrator.generate_form_from_csv(PEOPLE_CSV).to_dict()

        self.assertTrue(payload["success"])
        self.assertEqual(payload["form"]["fields"][1]["type"], "number")
        self.assertEqual(payload["errors"], [])


if __name__ == "__main__":
    unittest.main()
