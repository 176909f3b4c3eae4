"""Tests for custom exception classes."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from waitlist_mail.exceptions import (  # noqa: E402
    AppError,
    ConfigurationError,
    RenderingCollaboratorError,
    UnknownEmailError,
    ValidationError,
)


class TestAppError:
    """Tests for base AppError class."""

    def test_default_status_code(self) -> None:
        error = AppError('Something went wrong')
        assert error.status_code == 500
        assert error.message == 'Something went wrong'

    def test_custom_status_code(self) -> None:
        error = AppError('Bad request', status_code=400)
        assert error.status_code == 400

    def test_to_dict_without_detail(self) -> None:
        error = AppError('Error message')
        assert error.to_dict() == {'error': 'Error message'}

    def test_to_dict_with_detail(self) -> None:
        error = AppError('Error', detail='Additional info')
        result = error.to_dict()
        assert result['error'] == 'Error'
        assert result['detail'] == 'Additional info'


class TestValidationError:
    """Tests for ValidationError class."""

    def test_status_code_is_400(self) -> None:
        error = ValidationError('Invalid input')
        assert error.status_code == 400

    def test_includes_field_in_detail(self) -> None:
        error = ValidationError('Invalid value', field='product.id')
        assert error.field == 'product.id'
        assert error.detail == 'Field: product.id'

    def test_no_detail_without_field(self) -> None:
        error = ValidationError('Invalid value')
        assert error.detail is None
        assert error.to_dict() == {'error': 'Invalid value'}


class TestUnknownEmailError:
    """Tests for UnknownEmailError class."""

    def test_status_code_is_404(self) -> None:
        error = UnknownEmailError('newsletter')
        assert error.status_code == 404

    def test_message_includes_email_id(self) -> None:
        error = UnknownEmailError('newsletter')
        assert error.message == 'Unknown email: newsletter'
        assert error.email_id == 'newsletter'


class TestConfigurationError:
    """Tests for ConfigurationError class."""

    def test_status_code_is_500(self) -> None:
        error = ConfigurationError('WAITLIST_LANGUAGE')
        assert error.status_code == 500

    def test_message_includes_config_name(self) -> None:
        error = ConfigurationError('WAITLIST_THUMBNAIL_SIZE')
        assert 'WAITLIST_THUMBNAIL_SIZE' in error.message

    def test_stores_config_name(self) -> None:
        error = ConfigurationError('WAITLIST_TEXT_DIRECTION', detail='Expected ltr or rtl')
        assert error.config_name == 'WAITLIST_TEXT_DIRECTION'
        assert error.detail == 'Expected ltr or rtl'


class TestRenderingCollaboratorError:
    """Tests for RenderingCollaboratorError class."""

    def test_is_app_error(self) -> None:
        error = RenderingCollaboratorError('email_header')
        assert isinstance(error, AppError)
        assert error.status_code == 500

    def test_names_collaborator(self) -> None:
        error = RenderingCollaboratorError('email_footer', detail='boom')
        assert error.collaborator == 'email_footer'
        assert error.to_dict() == {
            'error': 'Rendering collaborator failed: email_footer',
            'detail': 'boom',
        }
