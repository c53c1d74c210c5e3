"""Tests for the email service, token verification and configuration."""

from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest
from jose import jwt
from sqlalchemy.orm import Session

import config
from models.progress import EmailTemplate
from models.user import User
from schemas.progress import CertificateWithLocation
from services.auth import create_access_token, resolve_user
from services.email_service import EmailService


def certificate(location=None, is_master=True) -> CertificateWithLocation:
    return CertificateWithLocation(
        id="cert-1",
        user_id=1,
        location_id=location["id"] if location else None,
        is_master=is_master,
        points_earned=90,
        certificate_url="https://certs.example.com/cert-1.pdf",
        created_at=datetime(2026, 1, 10, tzinfo=timezone.utc),
        location=location,
    )


class TestEmailService:
    """Test EmailService functionality."""

    @patch("services.email_service.SendGridAPIClient")
    def test_send_certificate_success(self, mock_sendgrid_class):
        mock_client = MagicMock()
        mock_sendgrid_class.return_value = mock_client
        mock_client.send.return_value = MagicMock(status_code=202)

        result = EmailService().send_certificate(
            to_email="user@example.com", username="explorer", certificate=certificate()
        )

        assert result is True
        mock_client.send.assert_called_once()

    @patch("services.email_service.SendGridAPIClient")
    def test_send_certificate_failure_returns_false(self, mock_sendgrid_class):
        mock_client = MagicMock()
        mock_sendgrid_class.return_value = mock_client
        mock_client.send.side_effect = Exception("SendGrid error")

        result = EmailService().send_certificate(
            to_email="user@example.com", username="explorer", certificate=certificate()
        )

        assert result is False

    def test_default_body_contains_link_and_scope(self):
        service = EmailService()
        context = {
            "app_name": "Landmark Quest",
            "username": "explorer",
            "scope_name": "Wat Arun",
            "points_earned": 30,
            "certificate_url": "https://certs.example.com/cert-1.pdf",
        }

        subject, html = service._render_certificate_email(context)

        assert "certificate" in subject.lower()
        assert "https://certs.example.com/cert-1.pdf" in html
        assert "Wat Arun" in html
        assert "explorer" in html

    @pytest.mark.integration
    def test_broken_template_falls_back_to_default(self, db_session: Session):
        db_session.add(EmailTemplate(
            name="certificate_issued", subject="Hi {unknown}", body="{unknown}"
        ))
        db_session.commit()

        subject, html = EmailService(db_session)._render_certificate_email({
            "app_name": "Landmark Quest",
            "username": "explorer",
            "scope_name": "all landmarks",
            "points_earned": 90,
            "certificate_url": "https://certs.example.com/cert-1.pdf",
        })

        assert subject == "Landmark Quest - Your certificate is ready"
        assert "all landmarks" in html


@pytest.mark.integration
class TestResolveUser:
    """Test bearer token verification."""

    def test_valid_token(self, db_session: Session, test_user: User):
        token = create_access_token(test_user)

        assert resolve_user(token, db_session).id == test_user.id

    def test_missing_token(self, db_session: Session):
        assert resolve_user(None, db_session) is None

    def test_wrong_signature(self, db_session: Session, test_user: User):
        token = jwt.encode(
            {"sub": str(test_user.id), "ver": 1, "type": "access"},
            "some-other-secret",
            algorithm="HS256",
        )

        assert resolve_user(token, db_session) is None

    def test_stale_token_version(self, db_session: Session, test_user: User):
        token = create_access_token(test_user)
        test_user.token_version += 1
        db_session.commit()

        assert resolve_user(token, db_session) is None

    def test_expired_token(self, db_session: Session, test_user: User):
        token = create_access_token(test_user, expires_minutes=-1)

        assert resolve_user(token, db_session) is None


class TestValidateConfig:
    def test_lenient_outside_production(self):
        with patch.object(config, "ENV", "development"):
            config.validate_config()

    def test_production_requires_secrets(self):
        with patch.object(config, "ENV", "production"), \
                patch.object(config, "SECRET_KEY", config._DEFAULT_SECRET_KEY), \
                patch.object(config, "SENDGRID_API_KEY", None):
            with pytest.raises(RuntimeError) as exc_info:
                config.validate_config()

        assert "SECRET_KEY" in str(exc_info.value)
        assert "SENDGRID_API_KEY" in str(exc_info.value)

    def test_production_rejects_unknown_policy(self):
        with patch.object(config, "ENV", "production"), \
                patch.object(config, "SECRET_KEY", "s3cret"), \
                patch.object(config, "SENDGRID_API_KEY", "key"), \
                patch.object(config, "MASTER_CERTIFICATE_POLICY", "eighty_percent"):
            with pytest.raises(RuntimeError) as exc_info:
                config.validate_config()

        assert "MASTER_CERTIFICATE_POLICY" in str(exc_info.value)
