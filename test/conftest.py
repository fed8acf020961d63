import pytest

# Reference values from an independent double-precision evaluation of the
# Berger (1978) series (year: eccentricity, obliquity, longitude of perihelion)
_REFERENCE = {
    1950: (0.016723932997, 23.446271289398, 102.0390495176),
    2000: (0.016703660393, 23.439767717885, 102.8954929190),
    0: (0.017465719069, 23.695372979883, 68.8196686284),
    -21000: (0.018571729740, 22.650701751776, 82.2814832728),
    -100000: (0.039346583316, 23.426264560550, 327.1466626352),
    -125000: (0.039395242958, 24.035027667875, 276.1977851272),
}


def pytest_addoption(parser):
    parser.addoption("--rtol", action="store", help="Relative tolerance against reference values", default=1e-9, type=float)


@pytest.fixture(scope="session")
def rtol(request):
    """ Returns relative tolerance for reference comparisons """
    return request.config.getoption("--rtol")


@pytest.fixture(scope="session")
def reference_values():
    """ Returns reference orbital parameters keyed by year """
    return dict(_REFERENCE)


@pytest.fixture(autouse=True)
def _restore_config():
    """ Restores the global configuration after each test """
    from milankovitch import config
    warn = config.is_extrapolation_warning_enabled()
    bound = config.get_accuracy_bound()
    yield
    config._state.warn_extrapolation = warn
    config._state.accuracy_bound = bound
