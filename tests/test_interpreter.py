"""Tests para el intérprete de comandos de voz."""

import pytest

from vozform.commands.feedback import FeedbackKind
from vozform.commands.interpreter import (
    CommandInterpreter,
    InterpreterMode,
    RuleKind,
    Utterance,
    strip_done,
)
from vozform.commands.registry import CommandEntry, CommandRegistry
from vozform.core.fields import FieldSpec
from vozform.core.schema import FormSchema
from vozform.core.theme import ThemeMode


class TestStripDone:

    def test_trailing(self):
        assert strip_done("John Smith done") == "John Smith"

    def test_every_occurrence(self):
        assert strip_done("John done Smith DONE") == "John Smith"

    def test_whole_word_only(self):
        assert strip_done("abandoned done") == "abandoned"


class TestUtterance:

    def test_normalization(self):
        u = Utterance.from_text("  Go To Email ")
        assert u.original == "Go To Email"
        assert u.normalized == "go to email"

    def test_none(self):
        assert Utterance.from_text(None).original == ""


# ============================================================================
# Cascada, regla por regla
# ============================================================================

class TestRelocate:
    """Paso 1: "go to <campo>"."""

    def test_go_to_email(self, interp):
        result = interp.interpret("go to email")

        assert result.rule == RuleKind.RELOCATE
        assert result.kind == FeedbackKind.SUCCESS
        assert interp.active_field == "email"
        assert "Navigated to Email Address" in result.message

    def test_case_insensitive(self, interp):
        interp.interpret("Go To ZIP code")
        assert interp.active_field == "zipCode"

    def test_field_not_found(self, interp):
        interp.interpret("go to city")
        result = interp.interpret("go to banana")

        assert result.kind == FeedbackKind.NAVIGATION_NOT_FOUND
        assert '"banana"' in result.message
        assert interp.active_field == "city"

    def test_empty_target_goes_to_first_field(self, interp):
        interp.interpret("go to city")
        result = interp.interpret("go to")

        assert result.rule == RuleKind.RELOCATE
        assert result.kind == FeedbackKind.SUCCESS
        assert interp.active_field == "fullName"

    def test_relocate_beats_synonyms(self, interp):
        # "name" es sinónimo, pero "go to" se evalúa antes
        interp.interpret("go to city name")
        assert interp.active_field == "city"


class TestSynonyms:
    """Paso 2: tabla de sinónimos."""

    def test_birthday(self, interp):
        result = interp.interpret("birthday")
        assert result.rule == RuleKind.SYNONYM
        assert interp.active_field == "birthDate"

    def test_contained_phrase(self, interp):
        interp.interpret("what is my phone")
        assert interp.active_field == "phone"

    def test_first_synonym_wins(self, interp):
        interp.interpret("my name and my city")
        assert interp.active_field == "fullName"

    def test_zip(self, interp):
        interp.interpret("zip")
        assert interp.active_field == "zipCode"

    def test_notification_commands_shadowed(self, interp):
        # "notifications" es sinónimo: navega en vez de cambiar la preferencia
        result = interp.interpret("disable notifications")

        assert result.rule == RuleKind.SYNONYM
        assert interp.active_field == "notifications"
        assert interp.store.value_of("notifications") is True

    def test_synonyms_limited_to_schema(self, clock):
        schema = FormSchema([FieldSpec(id="city", label="Town", section="contact")])
        interp = CommandInterpreter(schema=schema, clock=clock)

        assert interp.classify("email") == RuleKind.EMPTY
        interp.interpret("city")
        assert interp.active_field == "city"


class TestKeywords:
    """Paso 3: palabras clave exactas de navegación."""

    def test_first_field(self, interp):
        result = interp.interpret("first field")

        assert result.rule == RuleKind.KEYWORD
        assert interp.active_field == "fullName"
        assert result.message == "Started at Full Name. Speak your full name."

    def test_start(self, interp):
        interp.interpret("start")
        assert interp.active_field == "fullName"

    def test_next_and_previous(self, interp):
        interp.interpret("first field")
        assert interp.interpret("next field").message == "Moved to Email Address"
        interp.interpret("previous field")
        assert interp.active_field == "fullName"

    def test_previous_wraps(self, interp):
        interp.interpret("first field")
        interp.interpret("previous field")
        assert interp.active_field == "zipCode"

    def test_next_without_active_field(self, interp):
        interp.interpret("next field")
        assert interp.active_field == "fullName"


class TestTerminator:
    """Paso 4: "done" exacto."""

    @pytest.mark.parametrize("text", ["done", "Done", "do one", "do on"])
    def test_advances(self, interp, text):
        interp.interpret("go to bio")
        result = interp.interpret(text)

        assert result.rule == RuleKind.TERMINATOR
        assert interp.active_field == "skills"
        assert result.message == "Moving to next field from Personal Bio: Skills"

    def test_last_field_wraps(self, interp):
        interp.interpret("go to zip code")
        interp.interpret("done")
        assert interp.active_field == "fullName"

    def test_without_active_field(self, interp):
        result = interp.interpret("done")

        assert result.kind == FeedbackKind.NO_ACTIVE_FIELD
        assert interp.active_field is None


class TestGlobalCommands:
    """Paso 5: comandos globales por contención."""

    def test_dark_mode_does_not_touch_active_value(self, interp):
        interp.interpret("go to salary")
        result = interp.interpret("dark mode")

        assert result.rule == RuleKind.GLOBAL_COMMAND
        assert interp.theme.mode == ThemeMode.DARK
        assert interp.store.value_of("salary") == 50000
        assert interp.active_field == "salary"

    def test_toggle_theme(self, interp):
        interp.interpret("toggle theme")
        assert interp.theme.mode == ThemeMode.DARK
        interp.interpret("toggle theme")
        assert interp.theme.mode == ThemeMode.LIGHT

    def test_theme_listeners_notified(self, interp):
        seen = []
        interp.theme.subscribe(seen.append)
        interp.interpret("please switch to dark mode")
        assert seen == [ThemeMode.DARK]

    def test_last_field(self, interp):
        interp.interpret("last field")
        assert interp.active_field == "zipCode"

    def test_preferences(self, interp):
        interp.interpret("premium plan")
        interp.interpret("German")
        interp.interpret("expert")

        assert interp.store.value_of("subscription") == "premium"
        assert interp.store.value_of("language") == "german"
        assert interp.store.value_of("experience") == "expert"
        assert interp.active_field is None

    def test_preference_feedback(self, interp):
        result = interp.interpret("enterprise plan")
        assert result.message == "Subscription Plan set to Enterprise"

    def test_keyword_inside_value_is_a_command(self, interp):
        # Un valor que contiene una palabra clave se toma como comando
        interp.interpret("go to bio")
        interp.interpret("I love french food")

        assert interp.store.value_of("bio") == ""
        assert interp.store.value_of("language") == "french"

    def test_clear_field(self, interp):
        interp.interpret("go to city")
        interp.interpret("Lima")
        result = interp.interpret("clear field")

        assert result.message == "Cleared City"
        assert interp.store.value_of("city") == ""

    def test_clear_field_without_active(self, interp):
        result = interp.interpret("clear field")
        assert result.kind == FeedbackKind.NO_ACTIVE_FIELD

    def test_done_is_not_a_global_command(self, interp):
        interp.interpret("first field")
        assert interp.classify("John Smith done") == RuleKind.COMBINED_VALUE


class TestCombinedValue:
    """Paso 6: "<valor> done"."""

    def test_value_and_advance(self, interp):
        interp.interpret("first field")
        result = interp.interpret("John Smith done")

        assert result.rule == RuleKind.COMBINED_VALUE
        assert interp.store.get("personalInfo", "fullName") == "John Smith"
        assert interp.active_field == "email"
        assert result.message == 'Updated Full Name with "John Smith" and moving to Email Address'

    def test_keeps_original_case(self, interp):
        interp.interpret("go to city")
        interp.interpret("San Francisco done")
        assert interp.store.value_of("city") == "San Francisco"

    def test_without_active_field(self, interp):
        result = interp.interpret("John Smith done")

        assert result.kind == FeedbackKind.NO_ACTIVE_FIELD
        assert interp.store.value_of("fullName") == ""

    def test_no_value(self, interp):
        interp.interpret("go to city")
        result = interp.interpret("done done")

        assert result.kind == FeedbackKind.FAILURE
        assert interp.active_field == "city"
        assert interp.store.value_of("city") == ""

    def test_duplicate_skill_does_not_advance(self, interp):
        interp.interpret("go to skills")
        interp.interpret("Go")
        result = interp.interpret("Go done")

        assert result.kind == FeedbackKind.DUPLICATE_SKILL
        assert interp.store.value_of("skills") == ["Go"]
        assert interp.active_field == "skills"

    def test_on_skills_field_adds_skill(self, interp):
        interp.interpret("go to skills")
        interp.interpret("Rust done")

        assert interp.store.value_of("skills") == ["Rust"]
        assert interp.active_field == "experience"


class TestFreeText:
    """Paso 7: valor para el campo activo."""

    def test_word_containing_done_is_a_value(self, interp):
        interp.interpret("go to bio")
        result = interp.interpret("abandoned")

        assert result.rule == RuleKind.FREE_TEXT
        assert interp.store.value_of("bio") == "abandoned"
        assert interp.active_field == "bio"

    def test_sets_value_and_stays(self, interp):
        interp.interpret("go to email")
        result = interp.interpret("ada@example.com")

        assert result.rule == RuleKind.FREE_TEXT
        assert interp.store.value_of("email") == "ada@example.com"
        assert interp.active_field == "email"
        assert 'Say "done" to continue' in result.message

    def test_overwrites(self, interp):
        interp.interpret("go to city")
        interp.interpret("Lima")
        interp.interpret("Quito")
        assert interp.store.value_of("city") == "Quito"

    def test_slider_stores_raw_text(self, interp):
        interp.interpret("go to salary")
        interp.interpret("Ninety thousand")
        assert interp.store.value_of("salary") == "Ninety thousand"

    def test_skills_field_adds_to_list(self, interp):
        interp.interpret("go to skills")
        interp.interpret("Python")
        result = interp.interpret("Python")

        assert interp.store.value_of("skills") == ["Python"]
        assert result.kind == FeedbackKind.DUPLICATE_SKILL


class TestEmptyAndFallback:
    """Pasos 8 a 10."""

    def test_no_active_field(self, interp, store):
        result = interp.interpret("hello")

        assert result.rule == RuleKind.EMPTY
        assert result.kind == FeedbackKind.NO_ACTIVE_FIELD
        assert interp.store.snapshot() == store.snapshot()
        assert interp.active_field is None

    def test_empty_text_is_unrecognized(self, interp):
        result = interp.interpret("")

        assert result.rule == RuleKind.FALLBACK
        assert result.kind == FeedbackKind.COMMAND_UNRECOGNIZED

    def test_residual_rule_runs_any_command(self, interp):
        interp.interpret("go to bio")
        residual = next(r for r in interp.rules if r.kind == RuleKind.RESIDUAL)
        u = Utterance.from_text("done")

        assert residual.predicate(u)
        residual.handler(u)
        assert interp.active_field == "skills"

    def test_residual_rule_ignores_non_commands(self, interp):
        residual = next(r for r in interp.rules if r.kind == RuleKind.RESIDUAL)
        assert not residual.predicate(Utterance.from_text("hello"))

    def test_rule_order(self, interp):
        assert [r.kind for r in interp.rules] == [
            RuleKind.RELOCATE,
            RuleKind.SYNONYM,
            RuleKind.KEYWORD,
            RuleKind.TERMINATOR,
            RuleKind.GLOBAL_COMMAND,
            RuleKind.COMBINED_VALUE,
            RuleKind.FREE_TEXT,
            RuleKind.EMPTY,
            RuleKind.RESIDUAL,
            RuleKind.FALLBACK,
        ]


class TestClassify:
    """classify() no modifica el estado."""

    @pytest.mark.parametrize("text, expected", [
        ("go to city", RuleKind.RELOCATE),
        ("birthday", RuleKind.SYNONYM),
        ("start", RuleKind.KEYWORD),
        ("do on", RuleKind.TERMINATOR),
        ("light mode", RuleKind.GLOBAL_COMMAND),
        ("Paris done", RuleKind.COMBINED_VALUE),
        ("Paris", RuleKind.EMPTY),
        ("", RuleKind.FALLBACK),
    ])
    def test_without_active_field(self, interp, text, expected):
        assert interp.classify(text) == expected

    def test_free_text_with_active_field(self, interp):
        interp.interpret("go to city")
        assert interp.classify("Paris") == RuleKind.FREE_TEXT

    def test_no_side_effects(self, interp):
        interp.classify("go to city")
        interp.classify("dark mode")
        assert interp.active_field is None
        assert interp.theme.mode == ThemeMode.LIGHT


# ============================================================================
# Modo de espera de habilidad
# ============================================================================

class TestSkillMode:

    def test_add_skill(self, interp):
        result = interp.interpret("add skill")

        assert result.kind == FeedbackKind.PROMPT
        assert interp.mode == InterpreterMode.AWAITING_SKILL_ADD

        result = interp.interpret("Rust")
        assert result.rule == RuleKind.SKILL_PROMPT
        assert result.message == "Added skill: Rust"
        assert interp.store.value_of("skills") == ["Rust"]
        assert interp.mode == InterpreterMode.NORMAL

    def test_mode_consumes_exactly_one_transcript(self, interp):
        interp.interpret("add skill")
        interp.interpret("Go")
        interp.interpret("Haskell")

        assert interp.store.value_of("skills") == ["Go"]

    def test_skill_text_is_not_reclassified(self, interp):
        interp.interpret("add skill")
        interp.interpret("next field")

        assert interp.store.value_of("skills") == ["next field"]
        assert interp.active_field is None

    def test_does_not_change_active_field(self, interp):
        interp.interpret("go to city")
        interp.interpret("add skill")
        interp.interpret("Go")
        assert interp.active_field == "city"

    def test_duplicate(self, interp):
        interp.interpret("add skill")
        interp.interpret("Go")
        interp.interpret("add skill")
        result = interp.interpret("Go")

        assert result.kind == FeedbackKind.DUPLICATE_SKILL
        assert interp.store.value_of("skills") == ["Go"]

    def test_remove_skill_case_insensitive(self, interp):
        interp.interpret("add skill")
        interp.interpret("Go")
        result = interp.interpret("remove skill")
        assert result.kind == FeedbackKind.PROMPT
        assert interp.mode == InterpreterMode.AWAITING_SKILL_REMOVE

        result = interp.interpret("go")
        assert result.message == "Removed skill: go"
        assert interp.store.value_of("skills") == []

    def test_remove_missing(self, interp):
        interp.interpret("remove skill")
        result = interp.interpret("Cobol")

        assert result.kind == FeedbackKind.SKILL_NOT_FOUND
        assert interp.mode == InterpreterMode.NORMAL

    def test_mode_expires(self, interp, clock):
        interp.interpret("add skill")
        clock.advance(10.5)
        result = interp.interpret("Go")

        assert result.rule == RuleKind.EMPTY
        assert interp.mode == InterpreterMode.NORMAL
        assert interp.store.value_of("skills") == []

    def test_mode_within_timeout(self, interp, clock):
        interp.interpret("add skill")
        clock.advance(9.5)
        interp.interpret("Go")
        assert interp.store.value_of("skills") == ["Go"]

    def test_classify_reports_pending_mode(self, interp, clock):
        interp.interpret("add skill")
        assert interp.classify("dark mode") == RuleKind.SKILL_PROMPT
        clock.advance(11)
        assert interp.classify("dark mode") == RuleKind.GLOBAL_COMMAND

    def test_form_without_skills_field(self, clock):
        schema = FormSchema([FieldSpec(id="city", label="City", section="contact")])
        interp = CommandInterpreter(schema=schema, clock=clock)
        result = interp.interpret("add skill")

        assert result.kind == FeedbackKind.FAILURE
        assert interp.mode == InterpreterMode.NORMAL


# ============================================================================
# Envío y reinicio
# ============================================================================

class TestSubmitReset:

    def test_submit(self, interp):
        interp.interpret("first field")
        interp.interpret("John Smith done")
        result = interp.interpret("submit form")

        assert result.message == "Form submitted successfully!"
        assert interp.completed
        assert interp.submission.values["personalInfo"]["fullName"] == "John Smith"
        assert interp.submission.is_valid

    def test_submit_is_a_frozen_copy(self, interp):
        interp.interpret("submit form")
        interp.interpret("go to city")
        interp.interpret("Lima")
        assert interp.submission.values["contact"]["city"] == ""

    def test_validation_is_advisory(self, interp):
        interp.interpret("go to email")
        interp.interpret("ada at example")
        result = interp.interpret("complete form")

        assert result.kind == FeedbackKind.SUCCESS
        assert "Email Address" in result.message
        assert [i.field_id for i in interp.submission.issues] == ["email"]

    def test_on_submit_callback(self, schema, clock):
        received = []
        interp = CommandInterpreter(schema=schema, clock=clock, on_submit=received.append)
        interp.interpret("submit form")
        assert received == [interp.submission]

    def test_reset(self, interp, store):
        interp.interpret("first field")
        interp.interpret("John Smith done")
        interp.interpret("premium plan")
        interp.interpret("submit form")

        result = interp.interpret("reset form")

        assert result.message == "Form reset successfully"
        assert interp.store.snapshot() == store.snapshot()
        assert interp.active_field is None
        assert not interp.completed
        assert interp.submission is None

    def test_reset_clears_mode(self, interp):
        interp.interpret("add skill")
        interp.reset()
        assert interp.mode == InterpreterMode.NORMAL


# ============================================================================
# Totalidad
# ============================================================================

class TestTotality:
    """interpret() nunca lanza excepciones."""

    def test_failing_action(self, schema, clock):
        def explode(interp):
            raise RuntimeError("boom")

        registry = CommandRegistry([CommandEntry("explode", explode)])
        interp = CommandInterpreter(schema=schema, registry=registry, clock=clock)
        interp.interpret("go to city")

        result = interp.interpret("explode")

        assert result.kind == FeedbackKind.FAILURE
        assert "explode" in result.message
        assert interp.active_field == "city"

    @pytest.mark.parametrize("text", ["", "   ", "go to", "done done done", "!!!", "añadir ñandú"])
    def test_odd_inputs(self, interp, text):
        result = interp.interpret(text)
        assert result.feedback.message


class TestScenario:
    """Sesión completa de llenado."""

    def test_fill_form(self, interp):
        script = [
            "first field",
            "Ada Lovelace done",
            "ada@example.com done",
            "+44 20 7946 0958 done",
            "go to skills",
            "Math",
            "add skill",
            "Poetry",
            "advanced",
            "go to city",
            "London done",
            "submit form",
        ]
        results = [interp.interpret(line) for line in script]

        assert all(r.feedback.ok for r in results)
        values = interp.submission.flat_values()
        assert values["fullName"] == "Ada Lovelace"
        assert values["email"] == "ada@example.com"
        assert values["skills"] == ["Math", "Poetry"]
        assert values["experience"] == "advanced"
        assert values["city"] == "London"
        assert interp.active_field == "country"
