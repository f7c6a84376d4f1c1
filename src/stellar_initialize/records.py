"""Deployment record parsing and contract id resolution."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import network_identity
from .exceptions import InvalidDeploymentRecordError
from .paths import alias_from_path, get_records_dir
from .types import Profile, RecordFormat, ResolvedContract, Settings

LOG = logging.getLogger(__name__)


def parse_deployment_record(file_path: Path, profile: Profile) -> Dict[str, Any]:
    """
    Parse a persisted deployment record.

    Args:
        file_path: Path to `<alias>.json` or `<alias>.txt`
        profile: Profile describing the record format

    Returns:
        Dictionary with:
        - alias: derived from the filename
        - ids: network key -> contract id (JSON records)
        - contract_id: raw id (text records)

    Raises:
        InvalidDeploymentRecordError: If a record is not UTF-8, or a JSON
                                      record is malformed or holds non-string ids
    """
    alias = alias_from_path(file_path)

    if profile.record_format is RecordFormat.TEXT:
        try:
            contract_id = file_path.read_text(encoding="utf-8").strip()
        except UnicodeDecodeError as e:
            raise InvalidDeploymentRecordError(f"Deployment record {file_path} is not UTF-8 text") from e
        return {"alias": alias, "contract_id": contract_id}

    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidDeploymentRecordError(f"Invalid JSON in deployment record {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidDeploymentRecordError(f"Deployment record {file_path} is not a JSON object")

    ids = data.get("ids", {})
    if not isinstance(ids, dict):
        raise InvalidDeploymentRecordError(f"'ids' in deployment record {file_path} is not an object")

    for network, contract_id in ids.items():
        if not isinstance(contract_id, str):
            raise InvalidDeploymentRecordError(
                f"Contract id for '{network}' in deployment record {file_path} is not a string"
            )

    return {"alias": alias, "ids": ids}


def load_deployment_records(settings: Settings) -> List[Dict[str, Any]]:
    """
    Read every deployment record of the active profile.

    Returns:
        Parsed records sorted by path; empty if the records directory is missing
    """
    records_dir = get_records_dir(settings)
    suffix = "txt" if settings.profile.record_format is RecordFormat.TEXT else "json"

    return [
        parse_deployment_record(path, settings.profile)
        for path in sorted(records_dir.glob(f"*.{suffix}"))
    ]


def _select_contract_id(record: Dict[str, Any], key: Optional[str]) -> Optional[str]:
    if "contract_id" in record:
        return record["contract_id"] or None
    if key is None:
        return None
    return record["ids"].get(key) or None


def resolve_contracts(settings: Settings) -> List[ResolvedContract]:
    """
    Resolve the contract id of each record for the active network.

    Records without an id for the active network are skipped with a warning;
    the same records directory may hold deployments for several networks.

    Returns:
        ResolvedContract list in record order

    Raises:
        ConfigurationError: If the network setting the profile keys on is missing
        InvalidDeploymentRecordError: If a record is malformed
    """
    key = network_identity(settings)
    resolved: List[ResolvedContract] = []

    for record in load_deployment_records(settings):
        contract_id = _select_contract_id(record, key)
        if contract_id is None:
            if key is None:
                LOG.warning(f"Skipping '{record['alias']}': deployment record is empty")
            else:
                LOG.warning(f"Skipping '{record['alias']}': no contract id for network '{key}'")
            continue
        resolved.append(ResolvedContract(alias=record["alias"], contract_id=contract_id))

    return resolved
