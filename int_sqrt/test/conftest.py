import pytest

from int_sqrt.test import context
from int_sqrt.test.helpers.constants import ALL_WIDTHS, ALLOWED_TEST_RUNNER_WIDTHS


def pytest_addoption(parser):
    parser.addoption(
        "--width",
        action="append",
        type=str,
        help=(
            "width: make the tests only run with the specified unsigned width."
            " To run multiple widths, e.g., --width=uint8 --width=uint64"
        ),
    )


def _validate_width_name(widths):
    for width in widths:
        if width not in set(ALLOWED_TEST_RUNNER_WIDTHS):
            raise ValueError(
                f'The given --width argument "{width}" is not an available width.'
                f" The available widths: {ALLOWED_TEST_RUNNER_WIDTHS}"
            )


@pytest.fixture(autouse=True)
def run_widths(request):
    widths = request.config.getoption("--width", default=None)
    if widths:
        widths = [width.lower() for width in widths]
        _validate_width_name(widths)
        context.DEFAULT_PYTEST_WIDTHS = set(widths)
    else:
        context.DEFAULT_PYTEST_WIDTHS = ALL_WIDTHS
