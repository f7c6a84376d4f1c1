"""Configuration constants for stellar-initialize."""

# Build output of `contract build`, relative to the project root
BUILD_DIR = "target/wasm32-unknown-unknown/release"

# Stale outputs removed before every build
STALE_ARTIFACT_PATTERNS = ("*.wasm", "*.d")

PACKAGES_DIR = "packages"
CONTRACTS_DIR = "src/contracts"
RPC_HELPER_FILENAME = "util.ts"

# Package manager used to install and build generated bindings
PACKAGE_MANAGER = "npm"

STANDALONE_PASSPHRASE = "Standalone Network ; February 2017"
LOCAL_NETWORKS = ("local", "standalone")

PUBLIC_PREFIX = "PUBLIC_"

# Pipeline stages in execution order
STAGES = ("account", "build", "deploy", "bind", "import")

DEFAULT_PROFILE = "stellar"

# One entry per variant of the initialize script.
# - record_format: "json" records are written by `contract deploy --alias`,
#   "text" records hold the captured stdout of `contract deploy`
# - network_key: which setting selects the id inside a JSON record
#   ("passphrase" or "network"); None for text records
# - template: "contract-id" passes contractId/networkPassphrase explicitly,
#   "network" spreads the generated `networks` lookup
PROFILES = {
    "stellar": {
        "cli": "stellar",
        "keys_command": ["keys"],
        "env_prefix": "STELLAR",
        "records_dir": ".stellar/contract-ids",
        "record_format": "json",
        "network_key": "passphrase",
        "template": "network",
        "client_class": "Client",
        "fund_account": True,
        "install_packages": True,
    },
    "soroban": {
        "cli": "stellar",
        "keys_command": ["keys"],
        "env_prefix": "SOROBAN",
        "records_dir": ".soroban/contract-ids",
        "record_format": "json",
        "network_key": "passphrase",
        "template": "contract-id",
        "client_class": "Client",
        "fund_account": False,
        "install_packages": False,
    },
    "soroban-funded": {
        "cli": "soroban",
        "keys_command": ["keys"],
        "env_prefix": "SOROBAN",
        "records_dir": ".soroban/contract-ids",
        "record_format": "json",
        "network_key": "passphrase",
        "template": "contract-id",
        "client_class": "Client",
        "fund_account": True,
        "install_packages": False,
    },
    "soroban-network": {
        "cli": "soroban",
        "keys_command": ["keys"],
        "env_prefix": "SOROBAN",
        "records_dir": ".soroban/contract-ids",
        "record_format": "json",
        "network_key": "network",
        "template": "network",
        "client_class": "Client",
        "fund_account": True,
        "install_packages": False,
    },
    "soroban-legacy": {
        "cli": "soroban",
        "keys_command": ["config", "identity"],
        "env_prefix": "SOROBAN",
        "records_dir": ".soroban/contract-ids",
        "record_format": "text",
        "network_key": None,
        "template": "contract-id",
        "client_class": "Contract",
        "fund_account": False,
        "install_packages": False,
    },
}
