# config.py

# Logging level for the weavecore package logger
# Options: None, "debug", "info", "warning", "error", "critical"
# None leaves the level unset so the application's logging config decides
LOG_LEVEL = None

# --- Wallet export (password-based encryption) ---

# Salt for the PBKDF2 key derivation
# Note: this is a fixed, non-secret value. Existing exported wallets were
# encrypted with it, so changing it makes them unreadable.
KDF_SALT = b"weavecore-wallet-export-salt"

# PBKDF2-HMAC-SHA256 iteration count
KDF_ITERATIONS = 100_000

# Derived key length in bytes (AES-256)
KDF_KEY_LENGTH = 32

# AES-CBC initialization vector length, stored in front of the ciphertext
IV_LENGTH = 16

# --- Signing ---

# RSA-PSS salt length in bytes (same as the SHA-256 digest length)
PSS_SALT_LENGTH = 32

# Parameters for newly generated wallet keys
RSA_KEY_SIZE = 4096
RSA_PUBLIC_EXPONENT = 65537
