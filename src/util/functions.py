from pydantic import SecretStr

UTF16_CODEC = "utf-16-le"
UTF16_UNIT_BYTES = 2


def mask_secret(secret: str | SecretStr | None = None, mask: str = "*") -> str | None:
    if secret is None:
        return None
    # extract the secret value
    if isinstance(secret, SecretStr):
        secret = secret.get_secret_value()
    # short strings: mask all
    if len(secret) <= 4:
        return mask * len(secret)
    # medium strings: show one char on each side
    if len(secret) <= 8:
        return secret[0] + (mask * (len(secret) - 2)) + secret[-1:]
    # long strings: show 3 chars on each end with 5 masks in the middle
    return secret[:3] + (mask * 5) + secret[-3:]


def utf16_length(text: str) -> int:
    return len(text.encode(UTF16_CODEC, errors = "surrogatepass")) // UTF16_UNIT_BYTES


def utf16_slice(text: str, offset: int, length: int) -> str:
    """
    Slices the text using UTF-16 code unit offsets, as Telegram measures message entities.

    Out-of-range bounds are clamped to the text. A slice that splits a surrogate pair keeps
    the lone surrogate, matching what a UTF-16 string would hold.
    """
    start = max(offset, 0)
    end = max(offset + length, start)
    encoded = text.encode(UTF16_CODEC, errors = "surrogatepass")
    sliced = encoded[start * UTF16_UNIT_BYTES:end * UTF16_UNIT_BYTES]
    return sliced.decode(UTF16_CODEC, errors = "surrogatepass")
