"""Configuration constants for cosmwasm-local-deploy."""

# Environment variable -> default; values are used verbatim when set.
# GAS_PRICES and CONTAINER_IMAGE defaults are derived in config.resolve_config
DEFAULTS = {
    "CONTRACT_INSTANTIATE_MESSAGE": "{}",
    "CONTRACT_NAME": "cosmos_chess",
    "CONTRACT_WASM": "../target/wasm32-unknown-unknown/release/cosmos_chess.wasm",
    "CONTRACT_DIR": "..",
    "CHAIN_ID": "testing",
    "FEE_TOKEN": "ujunox",
    "GAS": "auto",
    "GAS_ADJUSTMENT": "1.3",
    "GAS_LIMIT": "100000000",
    "STAKE_TOKEN": "ujunox",
    "CONTAINER_TAG": "14.1.0",
    "CONTAINER_NAME": "junod_local",
    "NODE_BINARY": "junod",
    "OPTIMIZER_IMAGE": "cosmwasm/rust-optimizer:0.12.11",
    "NODE_RPC_URL": "http://localhost:26657",
    "WAIT_TIMEOUT": "60",
    "POLL_INTERVAL": "1",
}

GAS_PRICE_AMOUNT = "0.1"
CONTAINER_REPOSITORY = "ghcr.io/cosmoscontracts/juno"

# Published ports of the node container: LCD API, P2P, RPC
NODE_PORTS = (1317, 26656, 26657)

# Bootstrap script inside the juno image, seeded with the test accounts
SETUP_SCRIPT = "./setup_and_run.sh"

# Well-known test accounts: (key name, HD account index, address).
# Both are recovered from TEST_MNEMONIC in TEST_KEYS_ENV_FILE inside the image.
TEST_KEYS = (
    ("test-user", None, "juno16g2rahf5846rxzp3fwlswy08fz8ccuwk03k57y"),
    ("test-user2", 2, "juno102fjg5u62qkgsux9z9fl652mw8r98kgcgjv99m"),
)
TEST_KEYS_ENV_FILE = "/opt/test-user.env"

# Pre-funded signing key of the local chain
VALIDATOR_KEY = "validator"

# Shared cargo registry volume of the optimizer image
REGISTRY_CACHE_VOLUME = "registry_cache"
BUILD_CACHE_SUFFIX = "_cache"
ARTIFACTS_DIR = "artifacts"

# Literal a JSON query prints for a missing element
NULL_SENTINEL = "null"
