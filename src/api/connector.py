"""
Connector entry points called by the reporting host.

get_config / get_schema / get_data / is_admin_user mirror the host contract.
get_data runs fetch -> parse -> tabulate -> project synchronously and turns any
failure into a single user-facing error.
"""

from typing import Any, Dict, List, Optional, Protocol, Sequence

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from analysis.fasta import parse_fasta
from analysis.fields import FieldRegistry, FieldRequest
from analysis.frequency import tabulate
from performance.timing import time_block
from reporting.serializer import build_rows
from utils.config import AppConfig, build_config_schema, load_config, validate_config
from utils.errors import DataResult, ErrorKind, FetchError, UnknownFieldError, UserError
from utils.pfam_handler import PfamHandler


class AlignmentSource(Protocol):
    def fetch_alignment(self, accession: str) -> str: ...


# Pydantic models
class FieldRef(BaseModel):
    name: str


class DataRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    config_params: Optional[Dict[str, Any]] = Field(default=None, alias="configParams")
    fields: List[FieldRef] = Field(default_factory=list, description="Requested fields, in output order")

    def field_request(self) -> FieldRequest:
        return FieldRequest.from_names(f.name for f in self.fields)


class SchemaRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    config_params: Optional[Dict[str, Any]] = Field(default=None, alias="configParams")


def get_config(config: Optional[AppConfig] = None) -> Dict[str, Any]:
    """User-facing configuration form."""
    config = config or load_config()
    return build_config_schema(config.default_accession)


def get_schema(request: Optional[SchemaRequest] = None) -> Dict[str, Any]:
    """Full schema of the three exposed fields; the request is not consulted."""
    return {"schema": FieldRegistry().build()}


def is_admin_user() -> bool:
    return False


def fetch_frequency_rows(accession: str, field_ids: Sequence[str], source: AlignmentSource) -> DataResult:
    """Fetch one alignment and project its frequency table onto ``field_ids``."""
    try:
        with time_block("fetch"):
            text = source.fetch_alignment(accession)
    except FetchError as e:
        return DataResult.err(ErrorKind.FETCH, str(e))
    except Exception as e:
        return DataResult.err(ErrorKind.FETCH, repr(e))
    try:
        records = parse_fasta(text)
        with time_block("tabulate", items=len(records)):
            rows = tabulate(records)
        return DataResult.ok(build_rows(rows, field_ids))
    except Exception as e:
        return DataResult.err(ErrorKind.TRANSFORM, repr(e))


def get_data(request: DataRequest,
             source: Optional[AlignmentSource] = None,
             config: Optional[AppConfig] = None) -> Dict[str, Any]:
    """
    Build the frequency table for the requested fields.

    Args:
        request: host data request (config params + requested fields)
        source: alignment fetcher, defaults to a PfamHandler built from config
        config: application config, defaults to load_config()

    Returns:
        {"schema": [...], "rows": [{"values": [...]}, ...]}

    Raises:
        UserError: on any failure resolving fields, fetching or transforming
    """
    config = config or load_config()
    connector_config = validate_config(request.config_params, config.default_accession)
    registry = FieldRegistry()
    field_request = request.field_request()

    try:
        requested = registry.for_ids(field_request.field_ids)
    except UnknownFieldError as e:
        result = DataResult.err(ErrorKind.FIELDS, str(e))
    else:
        source = source or PfamHandler(config)
        result = fetch_frequency_rows(connector_config.accession, field_request.field_ids, source)

    if not result.is_ok:
        debug_text = f"Error fetching data. Exception details: {result.debug_text}"
        logger.debug(f"[{result.error.value}] {debug_text}")
        raise UserError(debug_text=debug_text)

    logger.info(f"Served {len(result.rows)} rows for {connector_config.accession}")
    return {
        "schema": registry.build(requested),
        "rows": result.rows,
    }
