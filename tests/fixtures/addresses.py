"""Standard test addresses and reference address vectors.

All addresses are 20 bytes (canonical form, not checksummed).
"""

ZERO_ADDRESS = bytes(20)
DEADBEEF_ADDRESS = bytes.fromhex("deadbeef00000000000000000000000000000000")
LOW_DEADBEEF_ADDRESS = bytes.fromhex("00000000000000000000000000000000deadbeef")

# Deployer used by the end-to-end "00" prefix search
E2E_DEPLOYER = bytes.fromhex("00" * 19 + "01")

# Account the fake client deploys plain CREATE contracts from
DEPLOYER_ADDRESS = bytes.fromhex("6ac7ea33f8831ea9dcc53393aaa88b25a785dbf0")

# EIP-1014 examples: (sender, salt, init_code, expected address)
CREATE2_VECTORS = [
    (
        ZERO_ADDRESS,
        bytes(32),
        bytes.fromhex("00"),
        "4d1a2e2bb4f88f0250f26ffff098b0b30b26bf38",
    ),
    (
        DEADBEEF_ADDRESS,
        bytes(32),
        bytes.fromhex("00"),
        "b928f69bb1d91cd65274e3c79d8986362984fda3",
    ),
    (
        DEADBEEF_ADDRESS,
        bytes.fromhex("000000000000000000000000feed000000000000000000000000000000000000"),
        bytes.fromhex("00"),
        "d04116cdd17bebe565eb2422f2497e06cc1c9833",
    ),
    (
        ZERO_ADDRESS,
        bytes(32),
        bytes.fromhex("deadbeef"),
        "70f2b2914a2a4b783faefb75f459a580616fcb5e",
    ),
    (
        LOW_DEADBEEF_ADDRESS,
        bytes.fromhex("00000000000000000000000000000000000000000000000000000000cafebabe"),
        bytes.fromhex("deadbeef"),
        "60f3f640a8508fc6a86d45df051962668e1e8ac7",
    ),
    (
        LOW_DEADBEEF_ADDRESS,
        bytes.fromhex("00000000000000000000000000000000000000000000000000000000cafebabe"),
        bytes.fromhex("deadbeef" * 11),
        "1d8bfdc5d46dc4f61d6b6115972536ebe6a8854c",
    ),
    (
        ZERO_ADDRESS,
        bytes(32),
        b"",
        "e33c0c7f7df4809055c3eba6c09cfe4baf1bd9e0",
    ),
]

# (sender, nonce, expected address) for plain CREATE
CREATE_VECTORS = [
    (DEPLOYER_ADDRESS, 0, "cd234a471b72ba2f1ccf0a70fcaba648a5eecd8d"),
    (DEPLOYER_ADDRESS, 1, "343c43a37d37dff08ae8c4a11544c718abb4fcf8"),
]
