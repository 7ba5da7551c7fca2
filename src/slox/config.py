"""
slox Configuration
==================

Runtime settings for the runner and REPL. Configuration can come from:
- Default values (defined here)
- Environment variables (SloxConfig.from_env)
- Command-line options, applied by the CLI on top of the above
"""

from dataclasses import dataclass
import os


# Values accepted as "off" for boolean environment variables
_FALSE_VALUES = ("0", "false", "no", "off")
_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class SloxConfig:
    """
    Configuration for a slox run.

    Attributes:
        prompt: Text printed before each REPL line (default: "> ")
        echo_tokens: Print each scanned token to stdout (default: True)
        encoding: Encoding used to read script files (default: "utf-8")
    """
    prompt: str = "> "
    echo_tokens: bool = True
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> "SloxConfig":
        """
        Create SloxConfig from environment variables.

        Environment variables (all optional):
            SLOX_PROMPT: REPL prompt text
            SLOX_ECHO_TOKENS: "0"/"false"/"no"/"off" to stop printing tokens
            SLOX_ENCODING: Encoding for script files

        Returns:
            SloxConfig with values from environment variables
        """
        config = cls()

        if (prompt := os.environ.get("SLOX_PROMPT")) is not None:
            config.prompt = prompt

        if echo := os.environ.get("SLOX_ECHO_TOKENS"):
            if echo.lower() in _FALSE_VALUES:
                config.echo_tokens = False
            elif echo.lower() in _TRUE_VALUES:
                config.echo_tokens = True

        if encoding := os.environ.get("SLOX_ENCODING"):
            config.encoding = encoding

        return config
