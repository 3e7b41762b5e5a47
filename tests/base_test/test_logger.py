#!filepath: tests/base_test/test_logger.py
import pytest
from loguru import logger

from termline import logs
from termline.config.log_config import LogConfig
from termline.utils.errors import DecodeError
from termline.utils.logger import Logging, init_logging


@pytest.fixture
def captured():
    lines = []
    sink_id = logger.add(lambda msg: lines.append(str(msg)))
    yield lines
    logger.remove(sink_id)


def test_catch_logs_and_reraises(captured):
    @logs.catch("lookup failed")
    def boom():
        raise KeyError("x")

    with pytest.raises(KeyError):
        boom()

    output = "\n".join(captured)
    assert "[ERROR] boom: lookup failed" in output
    assert "Traceback" in output


def test_catch_expected_errors_without_traceback(captured):
    @logs.catch(reraise=(DecodeError,))
    def decode():
        raise DecodeError("tick_every", "invalid duration")

    with pytest.raises(DecodeError):
        decode()

    output = "\n".join(captured)
    assert "[ERROR] decode: tick_every: invalid duration" in output
    assert "Traceback" not in output


def test_catch_logs_time(captured):
    @logs.catch()
    def ok():
        return 42

    assert ok() == 42
    assert "[TIME] ok took" in "\n".join(captured)


def test_init_logging_levels():
    inst = init_logging(LogConfig(level="DEBUG"))
    assert isinstance(inst, Logging)
    assert inst.level == "DEBUG"
    assert inst.log_dir is None


def test_init_logging_file_sink(tmp_path):
    log_dir = tmp_path / "logs"
    inst = init_logging(LogConfig(dir=str(log_dir), to_file=True, level="INFO"))

    assert inst.log_dir == str(log_dir)
    assert log_dir.is_dir()
