import pytest

from feedback_designer.application.services import TemplateRenderer
from feedback_designer.application.services.template_renderer import format_kilohms, format_voltage
from feedback_designer.domain.feedback import FeedbackSolution
from feedback_designer.domain.regulators import TLV62578


@pytest.mark.parametrize(
    "ohms, expected",
    [(10000, "10k"), (150000, "150k"), (4700, "4.7k"), (11000.0, "11k")],
)
def test_format_kilohms(ohms, expected):
    assert format_kilohms(ohms) == expected


def test_format_voltage():
    assert format_voltage(1.2) == "1.20"
    assert format_voltage(5.0999999) == "5.10"


def test_replacements(catalog):
    solution = FeedbackSolution(r1=82000, r2=20000, achieved_voltage=5.1, score=12000.0)
    assert TemplateRenderer().replacements(solution, catalog) == {
        "{{VOUT}}": "5.10",
        "{{R1val}}": "82k",
        "{{R2val}}": "20k",
        "{{R1lcsc}}": "C4142",
        "{{R2lcsc}}": "C25765",
    }


def test_render_replaces_every_occurrence(catalog):
    solution = FeedbackSolution(r1=20000, r2=20000, achieved_voltage=1.2, score=0.0)
    text = TemplateRenderer().render("{{R1val}}/{{R2val}} {{R1val}} @ {{VOUT}}V", solution, catalog)
    assert text == "20k/20k 20k @ 1.20V"


def test_render_device_template(catalog):
    solution = FeedbackSolution(r1=20000, r2=20000, achieved_voltage=1.2, score=0.0)
    text = TemplateRenderer().render(TLV62578.template, solution, catalog)
    assert "{{" not in text
    assert '"Value" "20k"' in text
    assert '"LCSC" "C25765"' in text
    assert "VOUT = 1.20V" in text


def test_render_unknown_part_raises(catalog):
    solution = FeedbackSolution(r1=4700, r2=20000, achieved_voltage=1.0, score=0.0)
    with pytest.raises(LookupError):
        TemplateRenderer().render("{{R1lcsc}}", solution, catalog)
