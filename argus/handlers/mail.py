from __future__ import annotations

import smtplib
import ssl
from dataclasses import dataclass, field
from email.message import EmailMessage
from typing import List, Protocol

import cv2

from argus.core.config import MailConfig
from argus.core.errors import HandlerError
from argus.core.events import FILE_EXT, MotionEvent, format_timestamp, image_name_for
from argus.utils.logger import get_logger

SUBJECT = "Motion detected"
SMTPS_PORT = 465


@dataclass
class MailMessage:
    from_addr: str
    to: List[str]
    subject: str
    body: str
    attachment_name: str
    attachment_data: bytes = field(repr=False)


class MailSender(Protocol):
    def send(self, msg: MailMessage) -> None:
        ...


def build_email(msg: MailMessage) -> EmailMessage:
    em = EmailMessage()
    em["From"] = msg.from_addr
    em["To"] = ", ".join(msg.to)
    em["Subject"] = msg.subject
    em.set_content(msg.body)
    em.add_attachment(msg.attachment_data, maintype="image", subtype="png", filename=msg.attachment_name)
    return em


class SmtpMailSender:
    def __init__(self, cfg: MailConfig, timeout: float = 30.0) -> None:
        self.host = cfg.server_host
        self.port = cfg.server_port
        self.user = cfg.server_user
        self.password = cfg.server_password
        self.timeout = timeout

    def send(self, msg: MailMessage) -> None:
        em = build_email(msg)
        context = ssl.create_default_context()
        if self.port == SMTPS_PORT:
            smtp = smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout, context=context)
        else:
            smtp = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
        with smtp:
            if self.port != SMTPS_PORT:
                smtp.ehlo()
                if smtp.has_extn("starttls"):
                    smtp.starttls(context=context)
                    smtp.ehlo()
            if self.user:
                smtp.login(self.user, self.password)
            smtp.send_message(em)


class MailHandler:
    """Mails the event frame to the configured recipient.

    The frame is always PNG-encoded from the event itself, under the same
    timestamp-derived name the archive uses, so a concurrent archive write
    is never read back half-finished.
    """

    name = "mail"

    def __init__(self, sender: MailSender, from_addr: str, to: List[str]) -> None:
        self.sender = sender
        self.from_addr = from_addr
        self.to = list(to)
        self.log = get_logger("handlers.mail")

    def build_message(self, event: MotionEvent) -> MailMessage:
        name = image_name_for(event)
        ok, buf = cv2.imencode(FILE_EXT, event.frame)
        if not ok:
            raise HandlerError(f"cannot encode motion capture {name}")
        return MailMessage(
            from_addr=self.from_addr,
            to=self.to,
            subject=SUBJECT,
            body=f"Motion detected at {format_timestamp(event)}",
            attachment_name=name,
            attachment_data=buf.tobytes(),
        )

    def handle(self, event: MotionEvent) -> None:
        try:
            msg = self.build_message(event)
            self.sender.send(msg)
        except (OSError, smtplib.SMTPException, cv2.error) as e:
            raise HandlerError(f"cannot send motion mail: {e}") from e
        self.log.info(f"Email sent with motion capture {msg.attachment_name}")
