"""
Exceptions for SQEP Lite
Every failure the library reports derives from SqepError so callers have a
single catch-all. I/O problems are left as plain OSError.
"""


class SqepError(Exception):
    # general container for errors
    pass


class InvalidKeyLengthError(SqepError, ValueError):
    # raised when key material is not exactly 32 bytes (or not decodable)
    pass


class DecryptionError(SqepError):
    # common parent for anything that makes unseal fail
    pass


class MalformedFrameError(DecryptionError):
    # raised on wrong magic or a frame shorter than 40 bytes
    pass


class AuthenticationFailureError(DecryptionError):
    # raised when the Poly1305 tag does not verify
    pass


class InvalidEncodingError(SqepError, ValueError):
    # raised when decrypted bytes are not valid UTF-8
    pass
