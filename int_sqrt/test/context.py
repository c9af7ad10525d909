import pytest

from .helpers.constants import (
    ALL_WIDTHS,
    NATIVE_WIDTHS,
)
from .helpers.typing import WidthNames
from .helpers.widths import (
    width_targets,
    widths_up_to,
)

# Without pytest CLI arg, these are the widths to run with.
DEFAULT_PYTEST_WIDTHS = ALL_WIDTHS


def dump_skipping_message(reason: str) -> None:
    pytest.skip(f"[Skipped test] {reason}")


def single_width(fn):
    """
    Decorator that filters out the widths data.
    Most tests only focus on behavior of a single width (the ``typ``).
    """

    def entry(*args, **kw):
        if "widths" in kw:
            kw.pop("widths")
        return fn(*args, **kw)

    return entry


def expect_assertion_error(fn):
    bad = False
    try:
        fn()
        bad = True
    except AssertionError:
        pass
    if bad:
        raise AssertionError("expected an assertion error, but got none.")


def _get_run_widths(widths: WidthNames) -> list:
    # Go through the widths selected on the command line
    return [width for width in widths if width in DEFAULT_PYTEST_WIDTHS]


def _run_test_case_with_widths(fn, widths: WidthNames, kw, args):
    run_widths = _get_run_widths(widths)

    if len(run_widths) == 0:
        dump_skipping_message("none of the recognized widths are executable, skipping test.")
        return

    # Populate all widths for multi-width tests
    width_dir = {width: width_targets[width] for width in widths}

    for width in run_widths:
        fn(typ=width_targets[width], widths=width_dir, *args, **kw)


def with_widths(widths: WidthNames):
    """
    Decorator factory that returns a decorator that runs a test for the given widths.
    """

    def decorator(fn):
        def wrapper(*args, **kw):
            _run_test_case_with_widths(fn, widths, kw, args)

        return wrapper

    return decorator


def with_all_widths(fn):
    """
    A decorator for running a test with every width
    """
    return with_widths(ALL_WIDTHS)(fn)


def with_widths_up_to(bits: int):
    """
    A decorator factory for running a test with every width of at most ``bits`` bits
    """
    return with_widths(widths_up_to(bits))


with_native_widths = with_widths(NATIVE_WIDTHS)
