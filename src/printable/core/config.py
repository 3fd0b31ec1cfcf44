"""Configuration for the external formatter."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ENSCRIPT_BIN = "/usr/bin/enscript"
ENSCRIPT_ENV_VAR = "PRINTABLE_ENSCRIPT"


@dataclass
class PrintConfig:
    """Configuration for printing source files."""

    # Formatter executable, invoked as `<bin> -o OUTPUT CODE`.
    # Kept as given: './enscript' must not turn into a PATH lookup.
    enscript_bin: str = ENSCRIPT_BIN

    def __post_init__(self):
        self.enscript_bin = os.fspath(self.enscript_bin)
        logger.debug(f"Formatter executable: {self.enscript_bin}")

    @classmethod
    def from_env(
        cls,
        enscript_bin: str | os.PathLike | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "PrintConfig":
        """
        Build a configuration, with precedence: explicit value, then the
        ``PRINTABLE_ENSCRIPT`` environment variable, then ``/usr/bin/enscript``.
        """
        if enscript_bin is not None:
            return cls(enscript_bin=enscript_bin)

        env = os.environ if environ is None else environ
        value = env.get(ENSCRIPT_ENV_VAR, "").strip()
        if value:
            return cls(enscript_bin=os.path.expanduser(value))
        return cls()
