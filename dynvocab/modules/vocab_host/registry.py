"""
#WHERE
    Used by game start-up code: configurations declared at module level are
    registered with ``declare()`` and attached once by ``start_of_day()``.

#WHAT
    VocabRegistry: start-of-day processing of static VocabConfig
    declarations, plus a single synchronize() sweep over every known host.

#INPUT
    (VocabConfig, entity-or-host) declarations.

#OUTPUT
    Attached configurations; transition counts.
"""

from __future__ import annotations

import logging
from typing import Any, List, Tuple

from dynvocab.modules.vocab_config import VocabConfig

from .host import VocabHost, host_of

log = logging.getLogger(__name__)


class VocabRegistry:
    """Attaches declared configurations exactly once, on start_of_day()."""

    def __init__(self) -> None:
        self._declarations: List[Tuple[VocabConfig, VocabHost]] = []
        self._hosts: List[VocabHost] = []
        self._is_setup = False

    @property
    def is_setup(self) -> bool:
        return self._is_setup

    @property
    def hosts(self) -> List[VocabHost]:
        return list(self._hosts)

    @property
    def declarations(self) -> List[Tuple[VocabConfig, VocabHost]]:
        return list(self._declarations)

    def add_host(self, target: Any) -> bool:
        host = host_of(target)
        if host is None:
            log.warning("add_host: %r has no VocabHost", target)
            return False
        if any(h is host for h in self._hosts):
            return False
        self._hosts.append(host)
        return True

    def declare(self, cfg: Any, *targets: Any) -> int:
        """Record *cfg* for each target.  After start of day the
        attachment happens immediately.  Returns the number recorded."""
        if not isinstance(cfg, VocabConfig):
            log.warning("declare: %r is not a VocabConfig", cfg)
            return 0
        recorded = 0
        for target in targets:
            host = host_of(target)
            if host is None:
                log.warning("declare %s: %r has no VocabHost", cfg.name, target)
                continue
            self.add_host(host)
            self._declarations.append((cfg, host))
            recorded += 1
            if self._is_setup:
                host.attach(cfg)
        return recorded

    def start_of_day(self) -> int:
        """Attach every declaration.  Runs once; later calls return 0."""
        if self._is_setup:
            return 0
        attached = sum(host.attach(cfg) for cfg, host in self._declarations)
        self._is_setup = True
        log.info("VocabRegistry ready: %d attachments across %d hosts", attached, len(self._hosts))
        return attached

    def synchronize(self) -> int:
        return sum(host.synchronize() for host in self._hosts)
