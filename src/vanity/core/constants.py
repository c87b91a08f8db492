"""Fixed sizes and markers used by address derivation."""

ADDRESS_SIZE = 20
HASH_SIZE = 32

# Leading byte of the CREATE2 preimage (EIP-1014)
CREATE2_PREFIX = b"\xff"

ZERO_ADDRESS = b"\x00" * ADDRESS_SIZE
