"""Tests for structured logging utilities."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from waitlist_mail.utils.logging import StructuredLogFormatter  # noqa: E402
from waitlist_mail.utils.logging import clear_request_context  # noqa: E402
from waitlist_mail.utils.logging import get_logger  # noqa: E402
from waitlist_mail.utils.logging import mask_email  # noqa: E402
from waitlist_mail.utils.logging import set_request_context  # noqa: E402


def _record(message: str = 'hello') -> logging.LogRecord:
    return logging.LogRecord(
        name='waitlist_mail.test',
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestMaskEmail:
    """Tests for mask_email function."""

    def test_masks_address(self) -> None:
        assert mask_email('john.doe@example.com') == 'jo***@***.com'

    def test_short_local_part(self) -> None:
        assert mask_email('a@b.co') == 'a***@***.co'

    def test_invalid_address(self) -> None:
        assert mask_email('') == '***'
        assert mask_email('not-an-email') == '***'


class TestStructuredLogFormatter:
    """Tests for StructuredLogFormatter."""

    def test_formats_json(self) -> None:
        data = json.loads(StructuredLogFormatter().format(_record()))
        assert data['level'] == 'INFO'
        assert data['logger'] == 'waitlist_mail.test'
        assert data['message'] == 'hello'
        assert data['source']['line'] == 10
        assert 'request_id' not in data

    def test_includes_request_context(self) -> None:
        set_request_context(req_id='req-1', corr_id='corr-1')
        try:
            data = json.loads(StructuredLogFormatter().format(_record()))
        finally:
            clear_request_context()
        assert data['request_id'] == 'req-1'
        assert data['correlation_id'] == 'corr-1'

    def test_includes_exception(self) -> None:
        try:
            raise RuntimeError('boom')
        except RuntimeError:
            record = _record()
            record.exc_info = sys.exc_info()
        data = json.loads(StructuredLogFormatter().format(record))
        assert data['exception']['type'] == 'RuntimeError'
        assert data['exception']['message'] == 'boom'


class TestContextLogger:
    """Tests for get_logger."""

    def test_adds_bound_context(self, caplog) -> None:
        logger = get_logger('waitlist_mail.test', email_id='woodmart_waitlist_in_stock')
        with caplog.at_level(logging.INFO):
            logger.info('Rendered', extra={'count': 2})
        record = caplog.records[-1]
        assert record.email_id == 'woodmart_waitlist_in_stock'
        assert record.count == 2
