"""conftest.py
Add command line parsing to pytest.
"""

import pytest
from resume_match_rag.logging import LoggerFactory
from resume_match_rag.conftest_helpers import apply_mock_llm_patch

# --------------------------------------------------------------
# SETUP TEST LOGGING
# --------------------------------------------------------------

# Integrate logger with pytest
logger = LoggerFactory().get_logger(
    name="pytest_logger",
    logger_type="pytest",
    console=True
)
current_class = None

@pytest.hookimpl(tryfirst=True)
def pytest_sessionstart(session):
    """Session start header."""
    logger.info("==== PYTEST SESSION START ====")

@pytest.hookimpl(tryfirst=True)
def pytest_runtest_logstart(nodeid, location):
    """Called at the start of each test."""
    global current_class
    class_name = location[0]
    if class_name != current_class:
        current_class = class_name
        logger.info(f"\n---- TestClass: {current_class} ----")

@pytest.hookimpl(tryfirst=True)
def pytest_runtest_logreport(report):
    """Called at the end of each test phase (setup/call/teardown)."""
    if report.when != "call":
        return  # only care about the main call, not setup/teardown

    status = report.outcome.upper()  # PASSED / FAILED / SKIPPED
    if status == "PASSED":
        logger.info(f"PASSED: {report.nodeid}")
    elif status == "FAILED":
        logger.error(f"FAILED: {report.nodeid}\n{report.longreprtext}")
    elif status == "SKIPPED":
        logger.warning(f"SKIPPED: {report.nodeid}\n{report.longreprtext}")

@pytest.hookimpl(tryfirst=True)
def pytest_sessionfinish(session, exitstatus):
    """Session finish footer."""
    logger.info(f"==== PYTEST SESSION END: exitstatus={exitstatus} ====")


# --------------------------------------------------------------
# SETUP RUN ARGUMENT PARSING
# --------------------------------------------------------------
def pytest_addoption(parser):
    """
    Register a command-line option for selecting the LLM test mode.

    Example usage:
        # Run tests with stubbed LLM / embedding responses (default)
        pytest

        # Run tests that make a small number of live provider calls
        pytest --llm-mode=basic_only

        # Run all live provider tests
        pytest --llm-mode=full
    """
    parser.addoption(
        "--llm-mode",
        action="store",
        default="mock_only",
        choices=["mock_only", "basic_only", "full"],
        help=(
            "Set the LLM test mode for pytest. Options:\n"
            "  'mock_only' (default): Use stubbed/mock responses.\n"
            "  'basic_only': Run a minimal subset of live provider tests.\n"
            "  'full': Run all live provider tests."
        ),
    )

@pytest.fixture(scope="session")
def LLM_TEST_MODE(request):
    """
    Sets LLM test mode detected in pytest_addoption to LLM_TEST_MODE
    fixture variable.

    Returns:
        str: One of 'mock_only', 'basic_only', 'full'.
    """
    return request.config.getoption("--llm-mode")


@pytest.fixture(autouse=False)
def FORCE_MOCK_LLM_RESPONSES(monkeypatch):
    """
    Always put LLMClient and EmbeddingClient into test mode.

    Usage:
      - Class-level:
        ```
        @pytest.mark.usefixtures("FORCE_MOCK_LLM_RESPONSES")
        class TestSessionService:
            ...
        ```
      - Function-level:
        ```
        def test_example(FORCE_MOCK_LLM_RESPONSES):
            ...
        ```

    This fixture applies the patch **unconditionally** and is ideal for
    files/tests that should never make live provider calls.
    """
    apply_mock_llm_patch(monkeypatch)
    yield


@pytest.fixture
def USE_MOCK_LLM_RESPONSE_SETTING(monkeypatch, LLM_TEST_MODE):
    """
    Conditionally enable mock provider responses based on `LLM_TEST_MODE`.

    Behavior:
      - Applies `apply_mock_llm_patch` unless `LLM_TEST_MODE == "full"`.
      - In "full" mode clients talk to the live providers.
    """
    if LLM_TEST_MODE != "full":
        apply_mock_llm_patch(monkeypatch)
    yield
