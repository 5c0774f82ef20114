import logging

from chain_sanitize import setup_logging


def test_setup_logging_sets_root_level() -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        setup_logging("debug")
        assert root.level == logging.DEBUG
        assert logging.getLogger("uvicorn.access").level == logging.WARNING
        assert logging.getLogger("chain_sanitize.normalizer").disabled is False
    finally:
        root.setLevel(previous)
