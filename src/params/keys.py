"""Storage keys for the EVM module parameter subspace.

Each parameter is stored under exactly one key. Key order is part of the
storage contract: param_set_pairs() and the key table follow PARAM_KEYS.
"""

KEY_BASE_DENOM = "KeyBaseDenom"
KEY_PRIORITY_NORMALIZER = "KeyPriorityNormalizer"
KEY_BASE_FEE_PER_GAS = "KeyBaseFeePerGas"
KEY_MIN_FEE_PER_GAS = "KeyMinFeePerGas"
KEY_CHAIN_CONFIG = "KeyChainConfig"
KEY_CHAIN_ID = "KeyChainID"
KEY_WHITELISTED_CODE_HASHES_BANK_SEND = "KeyWhitelistedCodeHashesBankSend"
KEY_WHITELISTED_CW_CODE_HASHES_FOR_DELEGATE_CALL = (
    "KeyWhitelistedCwCodeHashesForDelegateCall"
)

PARAM_KEYS = (
    KEY_BASE_DENOM,
    KEY_PRIORITY_NORMALIZER,
    KEY_BASE_FEE_PER_GAS,
    KEY_MIN_FEE_PER_GAS,
    KEY_CHAIN_CONFIG,
    KEY_CHAIN_ID,
    KEY_WHITELISTED_CODE_HASHES_BANK_SEND,
    KEY_WHITELISTED_CW_CODE_HASHES_FOR_DELEGATE_CALL,
)
