from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from brewtap.output.console import ConsoleProtocol, RichConsole
from brewtap.tools.http import HttpClient, RealHttpClient


@dataclass(frozen=True, slots=True)
class CLIContext:
    env: Mapping[str, str]
    console: ConsoleProtocol
    http: HttpClient = field(default_factory=RealHttpClient)


def build_context() -> CLIContext:
    # Snapshot once; nothing past this point reads os.environ.
    return CLIContext(env=dict(os.environ), console=RichConsole())
