"""Unit tests for ColorLogger and create_logger."""

import threading

import pytest

from ft_logging import ColorLogger, Logger, RequestContext, create_logger

WHITE = "\033[37m"
GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"


class TestCreateLogger:
    """Test logger construction and its announcement line."""

    def test_create_logger_with_keys(self, log_output, last_line):
        logger = create_logger(["request_id", "user_id"])

        assert isinstance(logger, ColorLogger)
        assert isinstance(logger, Logger)
        assert logger.context_keys == ("request_id", "user_id")
        assert last_line() == "[ft_logging] Initialized with context keys: [request_id, user_id]"

    def test_create_logger_none_keys(self, log_output, last_line):
        logger = create_logger(None)

        assert logger.context_keys is None
        assert last_line() == "[ft_logging] Initialized with no context extraction"

    def test_create_logger_empty_keys(self, log_output, last_line):
        logger = create_logger([])

        assert logger.context_keys == ()
        assert last_line() == "[ft_logging] Initialized with no context extraction"

    def test_announcement_keeps_order_and_duplicates(self, log_output, last_line):
        create_logger(["trace_id", "request_id", "trace_id"])

        assert last_line() == "[ft_logging] Initialized with context keys: [trace_id, request_id, trace_id]"

    def test_keys_are_copied(self, log_output):
        """Changing the caller's list afterwards does not affect the logger."""
        keys = ["request_id"]
        logger = create_logger(keys)

        keys.append("user_id")

        assert logger.context_keys == ("request_id",)

    def test_rejects_string_keys(self, log_output):
        with pytest.raises(TypeError, match="sequence of strings"):
            create_logger("request_id")

    def test_rejects_non_string_key(self, log_output):
        with pytest.raises(TypeError, match="must be a string"):
            create_logger(["request_id", 42])


class TestSeverityOperations:
    """Test the three severity operations."""

    def test_info(self, log_output, last_line):
        logger = create_logger(None)

        logger.info({}, "[TEST] test info message")

        assert last_line() == f"{WHITE}[INFO]{RESET} [TEST] test info message"

    def test_success(self, log_output, last_line):
        logger = create_logger(None)

        logger.success({}, "operation completed")

        assert last_line() == f"{GREEN}[SUCCESS]{RESET} operation completed"

    def test_error(self, log_output, last_line):
        logger = create_logger(None)

        logger.error({}, "something went wrong")

        assert last_line() == f"{RED}[ERROR]{RESET} something went wrong"

    def test_operations_return_none(self, log_output):
        logger = create_logger(None)

        assert logger.info(None, "a") is None
        assert logger.success(None, "b") is None
        assert logger.error(None, "c") is None

    def test_one_line_per_call(self, log_output):
        logger = create_logger(["request_id"])
        log_output.seek(0)
        log_output.truncate()

        logger.info({"request_id": "r1"}, "one")
        logger.success(None, "two")
        logger.error({}, "three")

        assert len(log_output.getvalue().splitlines()) == 3

    def test_identical_calls_produce_identical_lines(self, log_output):
        logger = create_logger(["request_id"])

        logger.info({"request_id": "abc"}, "same")
        logger.info({"request_id": "abc"}, "same")

        lines = log_output.getvalue().splitlines()
        assert lines[-1] == lines[-2]


class TestContextExtraction:
    """Test context sections in logged lines."""

    def test_context_extraction(self, log_output, last_line):
        logger = create_logger(["request_id", "user_id"])

        logger.info({"request_id": "abc123", "user_id": "user-456"}, "test message")

        assert last_line() == f"{WHITE}[INFO]{RESET} test message {{request_id=abc123, user_id=user-456}}"

    def test_missing_key_omitted(self, log_output, last_line):
        logger = create_logger(["request_id", "user_id", "trace_id"])
        ctx = RequestContext().with_value("request_id", "abc123").with_value("user_id", "user-456")

        logger.info(ctx, "test message")

        line = last_line()
        assert "request_id=abc123" in line
        assert "user_id=user-456" in line
        assert "trace_id" not in line

    def test_no_keys_never_adds_section(self, log_output, last_line):
        logger = create_logger(None)

        logger.info({"request_id": "abc123"}, "no context values")

        assert "{" not in last_line()
        assert "no context values" in last_line()

    def test_no_context_values(self, log_output, last_line):
        logger = create_logger(["request_id", "user_id"])

        logger.info(RequestContext(), "no context values")

        assert last_line() == f"{WHITE}[INFO]{RESET} no context values"

    def test_none_context(self, log_output, last_line):
        """A None context is logged without a context section."""
        logger = create_logger(["request_id"])

        logger.info(None, "nil context")
        logger.success(None, "nil context")
        logger.error(None, "nil context")

        assert last_line() == f"{RED}[ERROR]{RESET} nil context"
        assert "{" not in log_output.getvalue()

    def test_message_is_not_interpreted(self, log_output, last_line):
        logger = create_logger(["request_id"])

        logger.error({"request_id": "r1"}, "value was %s and {placeholder}")

        assert last_line() == f"{RED}[ERROR]{RESET} value was %s and {{placeholder}} {{request_id=r1}}"


def test_concurrent_callers_write_whole_lines(log_output):
    """Lines from concurrent threads never interleave."""
    logger = create_logger(["worker"])

    def work(worker_id):
        for i in range(50):
            logger.info({"worker": worker_id}, f"message {i}")

    threads = [threading.Thread(target=work, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    lines = log_output.getvalue().splitlines()[1:]
    assert len(lines) == 400
    for line in lines:
        assert line.startswith(f"{WHITE}[INFO]{RESET} message ")
        assert line.endswith("}")
