"""Project share invitations sent by email."""
import logging
import smtplib
from email.message import EmailMessage
from html import escape

from flask import current_app

from app.models import ShareRole

logger = logging.getLogger(__name__)


def project_url(project_id):
    base = current_app.config.get('APP_URL', '').rstrip('/')
    return f'{base}/dashboard/projects/{project_id}'


def render_invitation(invitation, url):
    role = ShareRole(invitation['role'])
    role_text = 'edit and view' if role == ShareRole.EDITOR else 'view'
    inviter = escape(invitation.get('inviterName') or 'A team member')
    project_name = escape(invitation['projectName'])
    message = invitation.get('message')
    message_block = f'<blockquote>{escape(message)}</blockquote>' if message else ''

    return f"""<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Project Invitation</title></head>
<body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
  <h2>You've been invited to collaborate</h2>
  <p>{inviter} has invited you to {role_text} the project <strong>{project_name}</strong>.</p>
  {message_block}
  <p><a href="{escape(url)}">Open {project_name}</a></p>
</body>
</html>"""


def build_message(invitation, sender):
    url = project_url(invitation['projectId'])
    message = EmailMessage()
    message['From'] = f'"Project Dashboard" <{sender}>'
    message['To'] = invitation['to']
    message['Subject'] = f"You've been invited to collaborate on {invitation['projectName']}"
    message.set_content(f"Open the project at {url}")
    message.add_alternative(render_invitation(invitation, url), subtype='html')
    return message


def send_share_invitation(invitation):
    """Send the invitation; returns False when it could not be delivered.

    With MAIL_MOCK enabled the email is only logged.
    """
    config = current_app.config

    if config.get('MAIL_MOCK'):
        logger.info('Mock share invitation to %s for project %s (%s)',
                    invitation['to'], invitation['projectId'], invitation['role'])
        return True

    user, password = config.get('SMTP_USER'), config.get('SMTP_PASS')
    if not user or not password:
        logger.warning('Email service not configured, skipping share invitation to %s', invitation['to'])
        return False

    message = build_message(invitation, user)
    try:
        with smtplib.SMTP(config['SMTP_HOST'], config['SMTP_PORT'], timeout=10) as smtp:
            smtp.starttls()
            smtp.login(user, password)
            smtp.send_message(message)
    except (smtplib.SMTPException, OSError):
        logger.exception('Failed to send share invitation to %s', invitation['to'])
        return False

    logger.info('Share invitation sent to %s for project %s', invitation['to'], invitation['projectId'])
    return True
