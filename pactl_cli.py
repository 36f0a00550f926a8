# pactl_cli.py
from __future__ import annotations

import logging
import os
import subprocess
from typing import Iterable, Sequence

from errors import ExternalCommandFailure


log = logging.getLogger(__name__)


def _run(cmd: Sequence[str]) -> subprocess.CompletedProcess[str]:
    # pactl translates its labels; the grammar only knows the C locale ones.
    env = dict(os.environ, LC_ALL="C")
    log.debug("running %s", " ".join(cmd))
    try:
        return subprocess.run(
            list(cmd),
            capture_output=True,
            text=True,
            encoding="utf-8",
            env=env,
        )
    except OSError as e:
        raise ExternalCommandFailure(cmd, str(e)) from e
    except UnicodeDecodeError as e:
        raise ExternalCommandFailure(cmd, f"output is not valid UTF-8 text: {e}") from e


class PactlClient:
    def __init__(self, binary: str = "pactl") -> None:
        self.binary = binary or "pactl"

    def _call(self, *args: str) -> str:
        cmd = [self.binary, *args]
        p = _run(cmd)
        if p.returncode != 0:
            msg = (p.stderr or p.stdout or "").strip() or f"exit status {p.returncode}"
            log.error("%s exited with %s: %s", " ".join(cmd), p.returncode, msg)
            raise ExternalCommandFailure(cmd, msg)
        return p.stdout or ""

    def list_sinks(self) -> str:
        return self._call("list", "sinks")

    def list_modules(self) -> str:
        return self._call("list", "modules")

    def load_combine_sink(self, sink_name: str, slaves: Iterable[str]) -> str:
        slave_list = ",".join(slaves)
        log.info("loading module-combine-sink %s with slaves %s", sink_name, slave_list)
        return self._call(
            "load-module",
            "module-combine-sink",
            f"sink_name=\"{sink_name}\"",
            f"slaves={slave_list}",
        )

    def set_sink_volume(self, sink_name: str, percent: int) -> None:
        log.info("setting volume of %s to %d%%", sink_name, percent)
        self._call("set-sink-volume", sink_name, f"{int(percent)}%")

    def unload_module(self, module_id: int) -> None:
        log.info("unloading module %s", module_id)
        self._call("unload-module", str(module_id))
