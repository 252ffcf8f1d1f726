import logging

import pytest

from encore.core.logger import init_logging, resolve_level


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("DEBUG", logging.DEBUG),
        (" info ", logging.INFO),
        ("error", logging.ERROR),
        ("verbose", logging.WARNING),
        (None, logging.WARNING),
    ],
)
def test_resolve_level(name: str | None, expected: int) -> None:
    assert resolve_level(name) == expected


def test_init_logging_sets_package_level() -> None:
    logger = init_logging("DEBUG")

    assert logger.name == "encore"
    assert logger.level == logging.DEBUG
    init_logging("WARNING")
    assert logger.level == logging.WARNING
