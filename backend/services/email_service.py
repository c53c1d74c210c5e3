"""Email service for sending transactional emails via SendGrid."""

import logging
from typing import Optional

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import SENDGRID_API_KEY, SENDGRID_FROM_EMAIL
from models.progress import EmailTemplate
from schemas.progress import CertificateWithLocation


logger = logging.getLogger(__name__)

CERTIFICATE_TEMPLATE_NAME = "certificate_issued"


class EmailService:
    """Handles sending emails via SendGrid."""

    def __init__(self, db: Optional[Session] = None):
        self.db = db
        self.api_key = SENDGRID_API_KEY
        self.from_email = SENDGRID_FROM_EMAIL
        self.app_name = "Landmark Quest"

    def send_certificate(
        self, to_email: str, username: str, certificate: CertificateWithLocation
    ) -> bool:
        """
        Send the certificate-issued email.

        Returns True on success, False on failure.
        """
        if certificate.is_master or certificate.location is None:
            scope_name = "all landmarks"
        else:
            scope_name = certificate.location.name

        context = {
            "app_name": self.app_name,
            "username": username,
            "scope_name": scope_name,
            "points_earned": certificate.points_earned,
            "certificate_url": certificate.certificate_url or "",
        }
        subject, html_content = self._render_certificate_email(context)

        message = Mail(
            from_email=self.from_email,
            to_emails=to_email,
            subject=subject,
            html_content=html_content,
        )

        try:
            sg = SendGridAPIClient(self.api_key)
            sg.send(message)
            return True
        except Exception as e:
            # Avoid leaking provider errors to end users; log for operators.
            logger.exception("Email send failed: %s", e)
            return False

    def _render_certificate_email(self, context: dict) -> tuple[str, str]:
        """Render the stored template, falling back to the built-in body."""
        template = self._load_template(CERTIFICATE_TEMPLATE_NAME)
        if template is not None:
            try:
                return (
                    template.subject.format(**context),
                    template.body.format(**context),
                )
            except (KeyError, IndexError, ValueError):
                logger.warning(
                    "Email template %s has invalid placeholders; using default",
                    CERTIFICATE_TEMPLATE_NAME,
                )

        subject = f"{self.app_name} - Your certificate is ready"
        return subject, self._build_certificate_email_html(**context)

    def _load_template(self, name: str) -> Optional[EmailTemplate]:
        if self.db is None:
            return None
        try:
            return self.db.query(EmailTemplate).filter(EmailTemplate.name == name).first()
        except SQLAlchemyError:
            logger.exception("Failed to load email template %s", name)
            return None

    def _build_certificate_email_html(
        self,
        *,
        app_name: str,
        username: str,
        scope_name: str,
        points_earned: int,
        certificate_url: str,
    ) -> str:
        """Build HTML content for the certificate email."""
        return f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
            <h2>Congratulations, {username}!</h2>
            <p>You completed the missions at {scope_name} and earned {points_earned} points.</p>
            <p>Your certificate is ready to download.</p>
            <p style="margin: 30px 0;">
                <a href="{certificate_url}"
                   style="background-color: #2563eb; color: white; padding: 12px 24px;
                          text-decoration: none; border-radius: 4px;">
                    Download Certificate
                </a>
            </p>
            <p>The {app_name} Team</p>
        </div>
        """
