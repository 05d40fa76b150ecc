from __future__ import annotations

import pytest

from argus.core.config import ArgusConfig
from argus.core.errors import UnknownHandlerError
from argus.handlers import registry
from argus.handlers.archive import ArchiveHandler
from argus.handlers.console import ConsoleHandler
from argus.handlers.mail import MailHandler, SmtpMailSender


def test_build_handlers_in_declaration_order(tmp_path) -> None:
    cfg = ArgusConfig(data_dir=str(tmp_path))

    handlers = registry.build_handlers(["mail", "console", "archive"], cfg)

    assert [type(h) for h in handlers] == [MailHandler, ConsoleHandler, ArchiveHandler]
    assert isinstance(handlers[0].sender, SmtpMailSender)


def test_unknown_handler_registers_nothing(monkeypatch) -> None:
    built = []
    factories = {
        name: (lambda cfg, name=name: built.append(name) or ConsoleHandler())
        for name in registry.HANDLER_FACTORIES
    }
    monkeypatch.setattr(registry, "HANDLER_FACTORIES", factories)

    with pytest.raises(UnknownHandlerError) as exc_info:
        registry.build_handlers(["console", "archive", "pager"], ArgusConfig())

    assert exc_info.value.name == "pager"
    assert isinstance(exc_info.value, ValueError)
    assert built == []


def test_empty_handler_list() -> None:
    assert registry.build_handlers([], ArgusConfig()) == []
