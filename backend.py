# backend.py
from __future__ import annotations

import logging
from typing import List, Optional

from catalog import SinkCatalog
from models import COMBINED_SINK_NAME, VolumeChange
from pactl_cli import PactlClient
from pactl_parse import parse_slaves
from prompts import Prompter, VOLUME_HINT


log = logging.getLogger(__name__)


class CombinedSinkBackend:
    """
    Create, adjust and remove the single combined sink.

    Every operation re-reads the live pactl state; nothing is cached between
    calls because other tools may change the server in the meantime.
    """

    SINK_NAME = COMBINED_SINK_NAME
    COMBINE_MODULE = "module-combine-sink"

    def __init__(self, prompter: Prompter, pactl: Optional[PactlClient] = None) -> None:
        self.prompter = prompter
        self.pactl = pactl if pactl is not None else PactlClient()

    def catalog(self) -> SinkCatalog:
        cat = SinkCatalog.from_text(self.pactl.list_sinks())
        log.debug("catalog has %d sinks", len(cat))
        return cat

    def combined_exists(self) -> bool:
        return self.catalog().has(self.SINK_NAME)

    def server_label(self) -> str:
        return f"pactl ({self.pactl.binary})"

    def slave_names(self, module_id: int) -> List[str]:
        return parse_slaves(self.pactl.list_modules(), module_id, anchored=True)

    def create(self) -> Optional[str]:
        """
        Ask which sinks to combine and load a combine module over them.

        Returns the slave list passed to pactl, or None when nothing was
        selected. An existing combined sink is not checked for.
        """
        cat = self.catalog()
        picked = self.prompter.select_many("Select sinks to combine", cat.descriptions())
        if not picked:
            log.info("no sinks selected, nothing to create")
            return None

        wanted = set(picked)
        slaves = [s.name for i, s in enumerate(cat) if i in wanted]
        self.pactl.load_combine_sink(self.SINK_NAME, slaves)
        return ",".join(slaves)

    def adjust_volumes(self) -> List[VolumeChange]:
        cat = self.catalog()
        module_id = cat.combined().owner_module
        slaves = self.slave_names(module_id)
        log.debug("module %s owns %s", module_id, slaves)

        self.prompter.notify(VOLUME_HINT)

        changes: List[VolumeChange] = []
        for name in slaves:
            sink = cat.by_name(name)
            new_vol = self.prompter.ask_volume(sink.description, sink.volume)
            if new_vol == sink.volume:
                continue
            self.pactl.set_sink_volume(sink.name, new_vol)
            changes.append(VolumeChange(sink_name=sink.name, old=sink.volume, new=new_vol))
        return changes

    def remove(self) -> int:
        module_id = self.catalog().combined().owner_module
        self.pactl.unload_module(module_id)
        return module_id
