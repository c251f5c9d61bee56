import pytest

from detector_ia.services.citation_advisor import CitationAdvisor


@pytest.fixture
def advisor(lexicon):
    return CitationAdvisor(lexicon)


FORMAL_TEXT = "Mediante el análisis, asimismo, no obstante el resultado. " * 12


class TestWarnings:
    def test_quotation(self, advisor):
        warnings = advisor.check_for_citations("Dijo “hola” ayer en clase.")
        assert [(w.type, w.severity) for w in warnings] == [("quotation", "high")]

    def test_one_citation_warning_per_marker(self, advisor):
        warnings = advisor.check_for_citations("Según el autor, y de acuerdo con los datos, sube.")
        assert [w.type for w in warnings] == ["citation", "citation"]
        assert all(w.severity == "medium" for w in warnings)

    def test_long_formal_text_flags_copyright(self, advisor):
        assert len(FORMAL_TEXT) > 500
        warnings = advisor.check_for_citations(FORMAL_TEXT)
        assert [(w.type, w.severity) for w in warnings] == [("copyright", "high")]

    def test_short_formal_text_is_not_flagged(self, advisor):
        assert advisor.check_for_citations("Mediante el análisis, asimismo, no obstante.") == []


class TestFormalityAndTone:
    def test_formality_is_capped_at_one(self, advisor):
        assert advisor.formality(FORMAL_TEXT) == 1.0

    def test_empty_text(self, advisor):
        assert advisor.formality("") == 0.0

    def test_tone_labels(self, advisor):
        assert advisor.analyze_tone(FORMAL_TEXT) == "Formal/Académico"
        assert advisor.analyze_tone("Hoy fuimos al cine y luego cenamos pizza en casa") == "Informal/Conversacional"
        # one indicator in 40 words -> 0.5
        text = "mediante " + " ".join(["palabra"] * 39)
        assert advisor.analyze_tone(text) == "Moderadamente formal"


class TestFidelity:
    def test_identical_text_is_high_similarity(self, advisor):
        text = "El sol sale tarde en invierno"
        assert advisor.fidelity_ratio(text, text) == 1.0
        assert advisor.check_fidelity(text, text).startswith("Alta similitud")

    def test_half_overlap_is_good_paraphrase(self, advisor):
        assert advisor.fidelity_ratio("uno dos tres cuatro", "uno dos cinco seis") == 0.5
        assert advisor.check_fidelity("uno dos tres cuatro", "uno dos cinco seis").startswith("Buena")

    def test_disjoint_text_is_low_similarity(self, advisor):
        assert advisor.check_fidelity("uno dos", "tres cuatro").startswith("Baja similitud")

    def test_ratio_uses_larger_set(self, advisor):
        assert advisor.fidelity_ratio("uno dos", "uno dos tres cuatro") == 0.5


class TestSuggestionsAndMisuse:
    def test_templates_do_not_depend_on_text(self, advisor):
        suggestions = advisor.citation_suggestions()
        assert suggestions.apa.startswith("Apellido, A.")
        assert len(suggestions.advice) == 4

    def test_assessment_purpose(self, advisor):
        flags = advisor.detect_misuse("Texto breve.", "Para mi TAREA de historia")
        assert [f.type for f in flags] == ["academic"]

    def test_long_unattributed_text(self, advisor):
        flags = advisor.detect_misuse("x" * 1001, "blog personal")
        assert [f.type for f in flags] == ["attribution"]

    def test_attribution_marker_clears_flag(self, advisor):
        assert advisor.detect_misuse("x" * 1001 + " fuente: INE", "") == []
