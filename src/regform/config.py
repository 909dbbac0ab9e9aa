"""
Configuration module for regform.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class RegFormConfig:
    """Configuration settings for regform."""

    # Role used when a caller does not name one
    default_role: str = "user"

    # MCP Server settings
    mcp_transport: str = "stdio"  # stdio or sse
    mcp_host: str = "0.0.0.0"
    mcp_port: int = 8080

    # Output settings
    json_schema_version: str = "https://json-schema.org/draft/2020-12/schema"
    indent_json_output: int = 2
    verbose_output: bool = False

    @classmethod
    def from_env(cls) -> "RegFormConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            default_role=os.getenv("REGFORM_DEFAULT_ROLE", _defaults.default_role),
            mcp_transport=os.getenv("MCP_TRANSPORT", _defaults.mcp_transport),
            mcp_host=os.getenv("MCP_HOST", _defaults.mcp_host),
            mcp_port=int(os.getenv("MCP_PORT", str(_defaults.mcp_port))),
            indent_json_output=int(os.getenv("REGFORM_JSON_INDENT", str(_defaults.indent_json_output))),
            verbose_output=os.getenv("REGFORM_VERBOSE_OUTPUT", str(_defaults.verbose_output).lower()).lower() == "true",
        )


config = RegFormConfig.from_env()


def get_config() -> RegFormConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> RegFormConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
