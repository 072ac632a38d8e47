"""Configuration carriers for creating a TPM context."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from tpmkit.log_record import Logger

# Legacy SHA-1 PCR bank support is disabled unless explicitly built in.
LEGACY_SHA1_PCR_ENABLED = False


class StartupMode(enum.Enum):
    """TPM startup behaviour requested during context creation."""

    CLEAR = "clear"
    STATE = "state"
    SKIP = "skip"


@dataclass
class TctiStringConfig:
    """TCTI source given as a ``name:args`` configuration string."""

    config: str = ""


@dataclass
class TpmContextConfig:
    """Everything needed to create a TPM context."""

    tcti: TctiStringConfig = field(default_factory=TctiStringConfig)
    startup: StartupMode = StartupMode.CLEAR
    log: Logger | None = None

    @classmethod
    def from_string(
        cls,
        tcti_config: str,
        startup: StartupMode = StartupMode.CLEAR,
        log: Logger | None = None,
    ) -> "TpmContextConfig":
        """Build a configuration from a TCTI string, startup mode and logger."""
        if not isinstance(tcti_config, str):
            raise TypeError("tcti_config must be a string")
        if not isinstance(startup, StartupMode):
            raise TypeError("startup must be a StartupMode")
        return cls(tcti=TctiStringConfig(tcti_config), startup=startup, log=log)