import enum

from .Classifier import TextClassifier


@enum.unique
class CipherAlgo(TextClassifier, str, enum.Enum):
  """
  Symmetric cipher identifiers, named the way OpenSSL names them.

  Only authenticated or counter/chained modes are listed; ECB and padded SM4
  variants are left out on purpose. SM4_CBC is kept for interoperability and
  needs a separate integrity check.
  """
  # AES
  AES_128_CBC = "aes-128-cbc"
  AES_192_CBC = "aes-192-cbc"
  AES_256_CBC = "aes-256-cbc"
  AES_128_GCM = "aes-128-gcm"
  AES_192_GCM = "aes-192-gcm"
  AES_256_GCM = "aes-256-gcm"
  # ChaCha20
  CHACHA20_POLY1305 = "chacha20-poly1305"
  # SM4
  SM4_GCM = "sm4-gcm"
  SM4_CCM = "sm4-ccm"
  SM4_CTR = "sm4-ctr"
  SM4_CBC = "sm4-cbc"

CipherAlgo._register("cipher algorithm")
