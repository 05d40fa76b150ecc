from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from argus.core.config import ArgusConfig
from argus.core.errors import UnknownHandlerError
from argus.handlers.archive import ArchiveHandler
from argus.handlers.base import MotionHandler
from argus.handlers.console import ConsoleHandler
from argus.handlers.mail import MailHandler, SmtpMailSender
from argus.utils.logger import get_logger

log = get_logger("handlers")


def _console(cfg: ArgusConfig) -> MotionHandler:
    return ConsoleHandler()


def _archive(cfg: ArgusConfig) -> MotionHandler:
    return ArchiveHandler(data_dir=cfg.data_dir)


def _mail(cfg: ArgusConfig) -> MotionHandler:
    return MailHandler(
        sender=SmtpMailSender(cfg.mail),
        from_addr=cfg.mail.from_addr,
        to=[cfg.mail.to_addr],
    )


HANDLER_FACTORIES: Dict[str, Callable[[ArgusConfig], MotionHandler]] = {
    "console": _console,
    "archive": _archive,
    "mail": _mail,
}


def build_handlers(names: Iterable[str], cfg: ArgusConfig) -> List[MotionHandler]:
    """Instantiate handlers in declaration order.

    Every name is checked before any handler is built, so an unknown name
    leaves nothing registered.
    """
    names = list(names)
    for name in names:
        if name not in HANDLER_FACTORIES:
            raise UnknownHandlerError(name)

    handlers: List[MotionHandler] = []
    for name in names:
        handlers.append(HANDLER_FACTORIES[name](cfg))
        log.info(f"Adding motion handler: {name}")
    return handlers
