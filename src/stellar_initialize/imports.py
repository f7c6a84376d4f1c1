"""Generation of `src/contracts/<alias>.ts` client wrappers."""

import logging
from pathlib import Path
from typing import List

from .config import is_local_network, require
from .constants import RPC_HELPER_FILENAME
from .paths import get_contracts_dir
from .records import resolve_contracts
from .types import ImportTemplate, ResolvedContract, Settings

LOG = logging.getLogger(__name__)


# Characters that cannot appear raw inside a single-quoted literal
_TS_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _ts_string(value: str) -> str:
    """Quote a value as a single-quoted TypeScript string literal."""
    escaped = "".join(
        _TS_ESCAPES.get(char, f"\\u{ord(char):04x}" if ord(char) < 0x20 else char)
        for char in value
    )
    return f"'{escaped}'"


def _networks_lookup(network: str) -> str:
    """Member access on the generated `networks` object."""
    if network.isidentifier() and network.isascii():
        return f"Client.networks.{network}"
    return f"Client.networks[{_ts_string(network)}]"


def render_import(settings: Settings, contract: ResolvedContract) -> str:
    """
    Render the wrapper module that instantiates a contract client.

    Args:
        settings: Pipeline settings
        contract: Resolved alias and contract id

    Returns:
        TypeScript source text

    Raises:
        ConfigurationError: If the setting the template needs is missing
    """
    client_class = settings.profile.client_class
    lines = [
        f"import * as Client from {_ts_string(contract.alias)};",
        "import { rpcUrl } from './util';",
        "",
        f"export default new Client.{client_class}({{",
    ]

    match settings.profile.template:
        case ImportTemplate.NETWORK:
            lines.append(f"  ...{_networks_lookup(require(settings, 'network'))},")
        case ImportTemplate.CONTRACT_ID:
            lines.append(f"  contractId: {_ts_string(contract.contract_id)},")
            lines.append(
                f"  networkPassphrase: {_ts_string(require(settings, 'network_passphrase'))},"
            )

    lines.append("  rpcUrl,")
    if is_local_network(settings):
        lines.append("  allowHttp: true,")
    lines.append("});")

    return "\n".join(lines) + "\n"


def write_import(settings: Settings, contract: ResolvedContract) -> Path:
    """
    Write `src/contracts/<alias>.ts`, replacing any previous version.

    Returns:
        Path of the written file
    """
    output_dir = get_contracts_dir(settings)
    output_dir.mkdir(parents=True, exist_ok=True)

    output_path = output_dir / f"{contract.alias}.ts"
    output_path.write_text(render_import(settings, contract))

    LOG.info(f"Created import for {contract.alias}")
    return output_path


def ensure_rpc_helper(settings: Settings) -> bool:
    """
    Create the `util.ts` helper imported by every wrapper, unless present.

    An existing helper is left untouched since projects customise it.

    Returns:
        True if the helper was created
    """
    helper_path = get_contracts_dir(settings) / RPC_HELPER_FILENAME
    if helper_path.exists():
        return False

    rpc_env = f"PUBLIC_{settings.profile.env_name('RPC_URL')}"
    passphrase_env = f"PUBLIC_{settings.profile.env_name('NETWORK_PASSPHRASE')}"

    helper_path.parent.mkdir(parents=True, exist_ok=True)
    helper_path.write_text(
        f"export const rpcUrl = import.meta.env.{rpc_env};\n"
        f"export const networkPassphrase = import.meta.env.{passphrase_env};\n"
    )

    LOG.info(f"Created {helper_path.relative_to(settings.project_root)}")
    return True


def import_all(settings: Settings) -> List[Path]:
    """
    Write wrapper modules for every contract deployed to the active network.

    Returns:
        Paths of the written import files
    """
    contracts = resolve_contracts(settings)
    written = [write_import(settings, contract) for contract in contracts]
    if written:
        ensure_rpc_helper(settings)
    return written
