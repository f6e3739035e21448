"""
Configuration management for the Pfam MSA frequency connector.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from dotenv import load_dotenv

from utils.settings import get_settings

# Load environment variables
load_dotenv()

DEFAULT_ACCESSION = "PF01352"

ALIGNMENT_PATH = "/family/{accession}/alignment/seed/format"
ALIGNMENT_QUERY = "format=fasta&alnType=seed&order=t&case=u&gaps=dashes&download=0"

INSTRUCTIONS_TEXT = "Enter the protein family accession number to fetch the alignments."


@dataclass
class AppConfig:
    """Main application configuration."""

    # Basic settings
    app_name: str = "Pfam MSA Frequency Connector"
    version: str = "1.0.0"

    # Pfam settings
    pfam_base_url: str = "https://pfam.xfam.org"
    alignment_path: str = ALIGNMENT_PATH
    alignment_query: str = ALIGNMENT_QUERY
    default_accession: str = DEFAULT_ACCESSION
    fetch_timeout_s: float = 30.0

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    def __post_init__(self):
        self.pfam_base_url = self.pfam_base_url.rstrip("/")
        if not self.default_accession:
            self.default_accession = DEFAULT_ACCESSION


@dataclass
class ConnectorConfig:
    """Validated config params of a single host request."""

    accession: str

    def __post_init__(self):
        if not isinstance(self.accession, str) or not self.accession:
            raise ValueError("accession must be a non-empty string")


def load_config() -> AppConfig:
    """Load application configuration from environment settings."""
    settings = get_settings()
    return AppConfig(
        pfam_base_url=settings.pfam_base_url,
        default_accession=settings.default_accession,
        fetch_timeout_s=settings.fetch_timeout_s,
    )


def validate_config(config_params: Optional[Mapping[str, Any]],
                    default_accession: str = DEFAULT_ACCESSION) -> ConnectorConfig:
    """Validate host config params, filling in missing values.

    A missing, null or empty accession is not an error: it falls back to
    ``default_accession``.
    """
    accession = (config_params or {}).get("accession") or default_accession
    # Opaque path segment: non-string values are taken as their text form
    return ConnectorConfig(accession=str(accession))


def build_config_schema(default_accession: str = DEFAULT_ACCESSION) -> Dict[str, List[Dict[str, Any]]]:
    """Describe the user-facing configuration form: one info line and one text input."""
    return {
        "configParams": [
            {
                "type": "INFO",
                "name": "instructions",
                "text": INSTRUCTIONS_TEXT,
            },
            {
                "type": "TEXTINPUT",
                "name": "accession",
                "displayName": "Accession number",
                "helpText": f"e.g. {DEFAULT_ACCESSION}",
                "placeholder": default_accession,
                "parameterControl": {"allowOverride": True},
            },
        ]
    }
