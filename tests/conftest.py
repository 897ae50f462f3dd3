import pytest

from feedback_designer.application.services import FeedbackDesignService
from feedback_designer.domain.catalog import LCSC_0402_CATALOG, ResistorCatalog
from feedback_designer.domain.feedback import FeedbackSolver
from feedback_designer.domain.regulators import DeviceRegistry, register_default_devices
from feedback_designer.domain.validation import ValidationEngine, register_default_rules


@pytest.fixture
def catalog():
    return LCSC_0402_CATALOG


@pytest.fixture
def small_catalog():
    return ResistorCatalog({10000: "A", 20000: "B", 30000: "C"})


@pytest.fixture
def solver():
    return FeedbackSolver()


@pytest.fixture
def registry():
    return register_default_devices(DeviceRegistry())


@pytest.fixture
def validation_engine(registry):
    return register_default_rules(ValidationEngine(), registry)


@pytest.fixture
def design_service(registry, validation_engine, catalog):
    return FeedbackDesignService(
        registry=registry,
        validation_engine=validation_engine,
        catalog=catalog,
    )


@pytest.fixture
def score_of():
    """Independent re-computation of the weighted pair score."""

    def _score(r1, r2, voltage, target_voltage, target_resistance):
        return 1e5 * abs(target_voltage - voltage) + abs(target_resistance - (r1 + r2))

    return _score
