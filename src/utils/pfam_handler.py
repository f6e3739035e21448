"""
Pfam alignment retrieval for the MSA frequency connector.
"""

from typing import Optional

import requests
from loguru import logger

from utils.config import AppConfig, load_config
from utils.errors import FetchError


class PfamHandler:
    """Downloads seed alignments in FASTA format from the Pfam REST endpoint."""

    def __init__(self, config: Optional[AppConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or load_config()
        # Plain requests module unless a session is supplied
        self.http = session or requests

    def build_alignment_url(self, accession: str) -> str:
        """
        Build the seed-alignment download URL for an accession.

        The accession is inserted verbatim as a path segment; unknown or
        malformed accessions are left for the upstream API to reject.
        """
        path = self.config.alignment_path.format(accession=accession)
        return f"{self.config.pfam_base_url}{path}?{self.config.alignment_query}"

    def fetch_alignment(self, accession: str) -> str:
        """
        Fetch the raw FASTA text of a family's seed alignment.

        Args:
            accession: Pfam family accession, e.g. PF01352

        Returns:
            Response body as text

        Raises:
            FetchError: on transport failure or a non-success HTTP status
        """
        url = self.build_alignment_url(accession)
        logger.debug(f"Fetching alignment for {accession}: {url}")
        try:
            response = self.http.get(url, timeout=self.config.fetch_timeout_s)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"Failed to download alignment {accession}: {e}") from e
        return response.text
