import logging
import pytest
from pathlib import Path


@pytest.fixture
def make_tree(tmp_path):
    """Create files and directories under tmp_path.

    Names ending with "/" become directories, everything else an empty file.
    """
    def _make(*names, root: Path = None):
        base = root or tmp_path
        for name in names:
            if name.endswith("/"):
                (base / name.rstrip("/")).mkdir()
            else:
                (base / name).write_text("")
        return base
    return _make


@pytest.fixture
def scenario_dir(make_tree):
    return make_tree("a.txt", "B.TXT", "notes.MD", "script", ".hidden", "sub/")


@pytest.fixture(autouse=True)
def reset_extgroup_logger():
    yield
    logger = logging.getLogger("extgroup")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


SCENARIO_REPORT = (
    "::\n"
    "- script\n"
    "\n"
    "md:\n"
    "- notes.MD\n"
    "\n"
    "txt:\n"
    "- B.TXT\n"
    "- a.txt\n"
    "\n"
)


@pytest.fixture
def scenario_report():
    return SCENARIO_REPORT
