"""Shared fixtures: captured pactl output and scripted collaborators."""

from typing import List, Optional, Sequence

import pytest

from errors import ExternalCommandFailure
from prompts import Prompter


SINKS_TEXT = """\
Sink #0
\tState: SUSPENDED
\tName: alsa_output.pci-0000_00_1f.3.analog-stereo
\tDescription: Built-in Audio Analog Stereo
\tDriver: module-alsa-card.c
\tSample Specification: s16le 2ch 44100Hz
\tChannel Map: front-left,front-right
\tOwner Module: 6
\tMute: no
\tVolume: front-left: 26214 /  40% / -23.88 dB,   front-right: 26214 /  40% / -23.88 dB
\t        balance 0.00
\tBase Volume: 65536 / 100% / 0.00 dB
\tMonitor Source: alsa_output.pci-0000_00_1f.3.analog-stereo.monitor
\tLatency: 0 usec, configured 0 usec
\tFlags: HARDWARE HW_MUTE_CTRL HW_VOLUME_CTRL DECIBEL_VOLUME LATENCY

Sink #1
\tState: RUNNING
\tName: bluez_sink.00_1B_66_AA_BB_CC.a2dp_sink
\tDescription: Headphones
\tDriver: module-bluez5-device.c
\tOwner Module: 27
\tMute: no
\tVolume: front-left: 45875 /  70% / -9.29 dB,   front-right: 45875 /  70% / -9.29 dB
\tBase Volume: 65536 / 100% / 0.00 dB

Sink #2
\tState: RUNNING
\tName: Combined
\tDescription: Simultaneous output to Built-in Audio Analog Stereo, Headphones
\tDriver: module-combine-sink.c
\tOwner Module: 31
\tMute: no
\tVolume: front-left: 65536 / 100% / 0.00 dB,   front-right: 65536 / 100% / 0.00 dB
\tBase Volume: 65536 / 100% / 0.00 dB
"""

MODULES_TEXT = """\
Module #6
\tName: module-alsa-card
\tArgument: device_id="0" name="pci-0000_00_1f.3"
\tUsage counter: 1

Module #27
\tName: module-bluez5-device
\tArgument: path=/org/bluez/hci0/dev_00_1B_66_AA_BB_CC
\tUsage counter: n/a

Module #31
\tName: module-combine-sink
\tArgument: sink_name="Combined" slaves=alsa_output.pci-0000_00_1f.3.analog-stereo,bluez_sink.00_1B_66_AA_BB_CC.a2dp_sink
\tUsage counter: n/a
"""


class ScriptedPrompter(Prompter):
    """Answers prompts from pre-recorded lists and remembers what it was asked."""

    def __init__(self, selections: Optional[List[int]] = None, volumes: Optional[List[int]] = None) -> None:
        self.selections = selections or []
        self.volumes = list(volumes or [])
        self.asked: List[tuple] = []
        self.messages: List[str] = []

    def choose(self, prompt: str, options: Sequence[str], default: int = 0) -> int:
        return default

    def select_many(self, prompt: str, options: Sequence[str]) -> List[int]:
        self.asked.append(("select", list(options)))
        return list(self.selections)

    def ask_volume(self, label: str, default: int) -> int:
        self.asked.append(("volume", label, default))
        return self.volumes.pop(0) if self.volumes else default

    def notify(self, message: str) -> None:
        self.messages.append(message)


class FakePactl:
    """Stands in for PactlClient; records every control command."""

    binary = "pactl"

    def __init__(self, sinks: str = SINKS_TEXT, modules: str = MODULES_TEXT) -> None:
        self.sinks = sinks
        self.modules = modules
        self.commands: List[tuple] = []
        self.fail_on_volume_for: Optional[str] = None

    def list_sinks(self) -> str:
        return self.sinks

    def list_modules(self) -> str:
        return self.modules

    def load_combine_sink(self, sink_name, slaves) -> str:
        self.commands.append(("load-module", sink_name, ",".join(slaves)))
        return "32\n"

    def set_sink_volume(self, sink_name, percent) -> None:
        if sink_name == self.fail_on_volume_for:
            raise ExternalCommandFailure(["pactl", "set-sink-volume", sink_name], "No such entity")
        self.commands.append(("set-sink-volume", sink_name, percent))

    def unload_module(self, module_id) -> None:
        self.commands.append(("unload-module", module_id))


@pytest.fixture
def sinks_text():
    return SINKS_TEXT


@pytest.fixture
def modules_text():
    return MODULES_TEXT


@pytest.fixture
def fake_pactl():
    return FakePactl()


@pytest.fixture
def scripted():
    return ScriptedPrompter
