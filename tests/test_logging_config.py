import logging
import tempfile
from pathlib import Path

from logging_config import setup_logging


def test_setup_logging_replaces_handlers_and_writes_file():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging(level=logging.DEBUG)
        setup_logging(level=logging.DEBUG)
        assert len(root.handlers) == 1

        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "caster.log"
            setup_logging(level=logging.INFO, log_file=str(path))
            assert len(root.handlers) == 2

            logging.getLogger("core.scene").info("walls reset")
            for handler in root.handlers:
                handler.flush()
            text = path.read_text()
            for handler in list(root.handlers):
                handler.close()
                root.removeHandler(handler)

        assert "core.scene - INFO - walls reset" in text
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
