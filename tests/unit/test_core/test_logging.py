"""
test_logging.py - diagnostic sink 테스트

DoD:
- 에러 + label 로그 기록
- sink 실패가 호출자로 전파되지 않음
"""

import logging
from unittest.mock import MagicMock

from src.core.logging import configure_logging, emit, report_error

# =============================================================================
# report_error 테스트
# =============================================================================

class TestReportError:
    """report_error 함수 테스트."""

    def test_logs_label_and_error(self, caplog):
        """label + 에러 repr 기록."""
        with caplog.at_level(logging.ERROR, logger="src.core.logging"):
            report_error(ValueError("bad input"), "API request failed")

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.ERROR
        assert "API request failed" in record.getMessage()
        assert "bad input" in record.getMessage()

    def test_attaches_exc_info(self, caplog):
        """traceback 첨부."""
        try:
            raise RuntimeError("with traceback")
        except RuntimeError as e:
            error = e

        with caplog.at_level(logging.ERROR, logger="src.core.logging"):
            report_error(error, "label")

        assert caplog.records[0].exc_info is not None
        assert "Traceback" in caplog.text

    def test_never_raises(self, monkeypatch):
        """logger 실패해도 예외 없음."""
        broken = MagicMock(side_effect=OSError("stream closed"))
        monkeypatch.setattr("src.core.logging.logger.error", broken)

        report_error(RuntimeError("x"), "label")

        broken.assert_called_once()


# =============================================================================
# emit 테스트
# =============================================================================

class TestEmit:
    """emit 함수 테스트."""

    def test_calls_sink(self):
        """sink에 (error, label) 전달."""
        sink = MagicMock()
        error = KeyError("k")

        emit(sink, error, "wait_until task failed")

        sink.assert_called_once_with(error, "wait_until task failed")

    def test_sink_failure_logged_not_raised(self, caplog):
        """sink 예외 → WARNING 로그만."""
        sink = MagicMock(side_effect=RuntimeError("sink down"))

        with caplog.at_level(logging.WARNING, logger="src.core.logging"):
            emit(sink, ValueError("original"), "API request failed")

        assert "Diagnostic sink failed" in caplog.text
        assert "sink down" in caplog.text


# =============================================================================
# configure_logging 테스트
# =============================================================================

class TestConfigureLogging:
    """configure_logging 함수 테스트."""

    def test_accepts_lowercase_level(self, monkeypatch):
        """소문자 레벨 이름 → 대문자로 전달."""
        basic_config = MagicMock()
        monkeypatch.setattr(logging, "basicConfig", basic_config)

        configure_logging("debug")

        _, kwargs = basic_config.call_args
        assert kwargs["level"] == "DEBUG"
